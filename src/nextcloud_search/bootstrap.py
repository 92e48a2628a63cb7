from __future__ import annotations

from nextcloud_search.app_config import AppConfig, RuntimeEnv
from nextcloud_search.client import NextcloudClient


def create_client(app: AppConfig, env: RuntimeEnv) -> NextcloudClient:
    """Build a client from config; environment values win over config.json."""
    server_url = env.server_url or app.server_url
    user = env.user or app.user

    missing = []
    if not server_url:
        missing.append("NEXTCLOUD_URL")
    if not user:
        missing.append("NEXTCLOUD_USER")
    if not env.password:
        missing.append("NEXTCLOUD_PASSWORD")
    if missing:
        raise ValueError(f"Missing required setting(s): {', '.join(missing)}")

    return NextcloudClient(
        server_url,
        user,
        env.password,
        timeout=app.timeout_seconds,
    )
