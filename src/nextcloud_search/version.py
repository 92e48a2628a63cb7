from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from nextcloud_search.client import NextcloudClient

_VERSION_RE = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?")


@functools.total_ordering
class NextcloudVersion:
    """Server version packed as ``major << 24 | minor << 16 | micro << 8``.

    Anything after the micro component (build numbers, suffixes) is ignored,
    so ``"20.0.4.1"`` and ``"20.0.4"`` compare equal.
    """

    def __init__(self, version: str | int):
        if isinstance(version, int):
            self._packed = version
            self._valid = version > 0
            return

        match = _VERSION_RE.match(version or "")
        if match is None:
            self._packed = 0
            self._valid = False
            return

        parts = [int(p) if p else 0 for p in match.groups()]
        packed = 0
        for shift, part in zip((24, 16, 8), parts):
            packed |= (part & 0xFF) << shift
        self._packed = packed
        self._valid = True

    @property
    def packed(self) -> int:
        return self._packed

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def major(self) -> int:
        return (self._packed >> 24) & 0xFF

    @property
    def minor(self) -> int:
        return (self._packed >> 16) & 0xFF

    @property
    def micro(self) -> int:
        return (self._packed >> 8) & 0xFF

    def is_same_major(self, other: NextcloudVersion) -> bool:
        return self.major == other.major

    @property
    def is_sharees_on_dav_supported(self) -> bool:
        return self >= NEXTCLOUD_17

    @property
    def is_unified_search_supported(self) -> bool:
        return self >= UNIFIED_SEARCH_MIN_VERSION

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NextcloudVersion):
            return NotImplemented
        return self._packed == other._packed

    def __lt__(self, other: NextcloudVersion) -> bool:
        if not isinstance(other, NextcloudVersion):
            return NotImplemented
        return self._packed < other._packed

    def __hash__(self) -> int:
        return hash(self._packed)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.micro}"

    def __repr__(self) -> str:
        return f"NextcloudVersion({str(self)!r})"


NEXTCLOUD_16 = NextcloudVersion(0x10000000)
NEXTCLOUD_17 = NextcloudVersion(0x11000000)
NEXTCLOUD_18 = NextcloudVersion(0x12000000)
NEXTCLOUD_19 = NextcloudVersion(0x13000000)
NEXTCLOUD_20 = NextcloudVersion(0x14000000)
NEXTCLOUD_21 = NextcloudVersion(0x15000000)

UNIFIED_SEARCH_MIN_VERSION = NEXTCLOUD_20


class UnsupportedServerVersionError(Exception):
    def __init__(self, actual: NextcloudVersion, required: NextcloudVersion):
        self.actual = actual
        self.required = required
        shown = str(actual) if actual.is_valid else "unknown"
        super().__init__(f"Server version {shown} is older than required {required}")


def require_server_version(actual: NextcloudVersion, required: NextcloudVersion) -> None:
    if not actual.is_valid or actual < required:
        raise UnsupportedServerVersionError(actual, required)


async def check_server_version(
    client: NextcloudClient,
    required: NextcloudVersion = UNIFIED_SEARCH_MIN_VERSION,
) -> NextcloudVersion:
    """Fetch the server version and raise if it is below ``required``."""
    version = await client.get_server_version()
    logger.debug(f"Server version {version}, required {required}")
    require_server_version(version, required)
    return version
