import asyncio
import sys

import httpx
from dotenv import load_dotenv
from loguru import logger

from nextcloud_search.app_config import load_json_config, parse_app_config, resolve_runtime_env
from nextcloud_search.bootstrap import create_client
from nextcloud_search.logging_config import setup_logging
from nextcloud_search.search import UnifiedSearchProvidersRemoteOperation
from nextcloud_search.version import UnsupportedServerVersionError, check_server_version


async def main() -> int:
    load_dotenv()

    app = parse_app_config(load_json_config())
    setup_logging(level=app.log_level, consumers=app.log_consumers)

    try:
        client = create_client(app, resolve_runtime_env())
    except ValueError as ex:
        logger.error(str(ex))
        return 1

    async with client:
        try:
            version = await check_server_version(client)
        except UnsupportedServerVersionError as ex:
            logger.error(str(ex))
            return 1
        except httpx.HTTPError as ex:
            logger.error(f"Could not read server status: {ex}")
            return 1

        result = await client.execute(UnifiedSearchProvidersRemoteOperation())

    if not result.is_success:
        logger.error(f"Listing search providers failed: {result.message}")
        return 1

    providers = result.result_data
    print(f"Server: {client.base_url} (Nextcloud {version})")
    print(f"ETag: {providers.e_tag}")
    print(f"Providers ({len(providers.providers)}):")
    for provider in providers.providers:
        print(f"  - {provider.id}: {provider.name}")
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
