from typing import Any

import httpx
from loguru import logger

from nextcloud_search.client import NextcloudClient
from nextcloud_search.operations.ocs import (
    OCS_HEADERS,
    OCS_JSON_PARAMS,
    OcsParseError,
    parse_server_response,
)
from nextcloud_search.operations.remote_operation import RemoteOperationResult
from nextcloud_search.search.models import SearchProvider, SearchProviders

PROVIDERS_PATH = "/ocs/v2.php/search/providers"


class UnifiedSearchProvidersRemoteOperation:
    """List the unified search providers the server offers (Nextcloud 20+)."""

    async def run(self, client: NextcloudClient) -> RemoteOperationResult[SearchProviders]:
        logger.debug(f"GET {PROVIDERS_PATH}")
        try:
            resp = await client.get(PROVIDERS_PATH, params=OCS_JSON_PARAMS, headers=OCS_HEADERS)
        except httpx.HTTPError as ex:
            logger.error(f"Fetching search providers failed: {ex}")
            return RemoteOperationResult.failure(f"Request failed: {ex}", exception=ex)

        if resp.status_code != 200:
            logger.error(f"Fetching search providers failed: HTTP {resp.status_code}")
            return RemoteOperationResult.failure(
                f"HTTP {resp.status_code}", http_status=resp.status_code
            )

        try:
            providers = self._parse(resp)
        except OcsParseError as ex:
            logger.error(f"Invalid search providers response: {ex}")
            return RemoteOperationResult.failure(str(ex), http_status=resp.status_code, exception=ex)

        logger.debug(f"Got {len(providers.providers)} search provider(s), etag={providers.e_tag}")
        return RemoteOperationResult.ok(providers, http_status=resp.status_code)

    def _parse(self, resp: httpx.Response) -> SearchProviders:
        e_tag = (resp.headers.get("ETag") or "").strip()
        if not e_tag:
            raise OcsParseError("Response has no ETag header")

        server_response = parse_server_response(resp.text)
        if not server_response.meta.is_ok:
            meta = server_response.meta
            raise OcsParseError(f"OCS error {meta.statuscode}: {meta.message or meta.status}")

        data = server_response.data
        if not isinstance(data, list) or not data:
            raise OcsParseError("Provider list is empty")

        return SearchProviders(
            e_tag=e_tag,
            providers=tuple(self._parse_provider(entry) for entry in data),
        )

    @staticmethod
    def _parse_provider(entry: Any) -> SearchProvider:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise OcsParseError(f"Malformed provider entry: {entry!r}")
        return SearchProvider(id=str(entry.get("id") or ""), name=entry["name"])
