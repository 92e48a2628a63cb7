from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from nextcloud_search.client import NextcloudClient

T = TypeVar("T")


@dataclass(frozen=True)
class RemoteOperationResult(Generic[T]):
    """Outcome of one remote call. Failures carry no subkind, only context."""

    is_success: bool
    result_data: T | None = None
    http_status: int | None = None
    message: str = ""
    exception: BaseException | None = None

    @classmethod
    def ok(cls, data: T, http_status: int | None = 200) -> RemoteOperationResult[T]:
        return cls(is_success=True, result_data=data, http_status=http_status, message="OK")

    @classmethod
    def failure(
        cls,
        message: str,
        http_status: int | None = None,
        exception: BaseException | None = None,
    ) -> RemoteOperationResult[T]:
        return cls(
            is_success=False,
            http_status=http_status,
            message=message,
            exception=exception,
        )


@runtime_checkable
class RemoteOperation(Protocol):
    async def run(self, client: NextcloudClient) -> RemoteOperationResult:
        """Execute against ``client``. Returns a failure result instead of raising."""
        ...
