import json
from dataclasses import dataclass
from typing import Any

OCS_API_HEADER = "OCS-APIRequest"
OCS_API_HEADER_VALUE = "true"

OCS_HEADERS = {
    OCS_API_HEADER: OCS_API_HEADER_VALUE,
    "Accept": "application/json",
}
OCS_JSON_PARAMS = {"format": "json"}

# v1 endpoints report success as 100, v2 as 200
_OK_STATUS_CODES = frozenset({100, 200})


class OcsParseError(ValueError):
    pass


@dataclass(frozen=True)
class OcsMeta:
    status: str
    statuscode: int
    message: str

    @property
    def is_ok(self) -> bool:
        return self.status == "ok" and self.statuscode in _OK_STATUS_CODES


@dataclass(frozen=True)
class ServerResponse:
    meta: OcsMeta
    data: Any


def parse_server_response(body: str) -> ServerResponse:
    """Decode an OCS JSON envelope: ``{"ocs": {"meta": {...}, "data": ...}}``."""
    try:
        document = json.loads(body)
    except (TypeError, ValueError, RecursionError) as ex:
        raise OcsParseError(f"Response is not valid JSON: {ex}") from ex

    if not isinstance(document, dict) or not isinstance(document.get("ocs"), dict):
        raise OcsParseError("Response has no 'ocs' envelope")

    ocs = document["ocs"]
    raw_meta = ocs.get("meta")
    if not isinstance(raw_meta, dict):
        raise OcsParseError("OCS envelope has no 'meta' object")

    try:
        statuscode = int(raw_meta.get("statuscode", 0))
    except (TypeError, ValueError) as ex:
        raise OcsParseError(f"Invalid OCS statuscode: {raw_meta.get('statuscode')!r}") from ex

    meta = OcsMeta(
        status=str(raw_meta.get("status", "")),
        statuscode=statuscode,
        message=str(raw_meta.get("message") or ""),
    )
    return ServerResponse(meta=meta, data=ocs.get("data"))
