from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from nextcloud_search.operations.remote_operation import RemoteOperation, RemoteOperationResult
from nextcloud_search.version import NextcloudVersion

_USER_AGENT = "nextcloud-search-client/0.1"
_DEFAULT_TIMEOUT_SECONDS = 30.0


class NextcloudClient:
    """Authenticated connection to one Nextcloud server.

    Owned by the caller and handed to operations explicitly; close it with
    ``aclose()`` or use it as an async context manager.
    """

    def __init__(
        self,
        base_url: str,
        user: str,
        password: str,
        *,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._user = user
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            auth=httpx.BasicAuth(user, password),
            headers={"User-Agent": _USER_AGENT},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user(self) -> str:
        return self._user

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._http.get(path, params=params, headers=headers)

    async def execute(self, operation: RemoteOperation) -> RemoteOperationResult:
        logger.debug(f"Executing {type(operation).__name__} against {self._base_url}")
        return await operation.run(self)

    async def get_server_version(self) -> NextcloudVersion:
        """Read the version from ``/status.php``; an unreadable status gives an invalid version."""
        resp = await self._http.get("/status.php")
        resp.raise_for_status()
        try:
            status = resp.json()
        except ValueError as ex:
            logger.warning(f"/status.php did not return JSON: {ex}")
            return NextcloudVersion("")
        if not isinstance(status, dict):
            logger.warning(f"/status.php returned {type(status).__name__}, expected an object")
            return NextcloudVersion("")
        raw = status.get("versionstring") or status.get("version") or ""
        return NextcloudVersion(str(raw))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> NextcloudClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
