from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RuntimeEnv:
    server_url: str | None
    user: str | None
    password: str | None


@dataclass
class AppConfig:
    server_url: str | None
    user: str | None
    timeout_seconds: float
    log_level: str
    log_consumers: list | None


def load_json_config(path: Path | None = None) -> dict:
    config_path = path or Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path) as f:
            return json.load(f)
    return {}


def _blank_to_none(value: object) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def parse_app_config(config: dict) -> AppConfig:
    return AppConfig(
        server_url=_blank_to_none(config.get("ServerUrl")),
        user=_blank_to_none(config.get("User")),
        timeout_seconds=float(config.get("TimeoutSeconds", 30)),
        log_level=config.get("LogLevel", "INFO"),
        log_consumers=config.get("LogConsumers"),
    )


def resolve_runtime_env() -> RuntimeEnv:
    return RuntimeEnv(
        server_url=_blank_to_none(os.environ.get("NEXTCLOUD_URL")),
        user=_blank_to_none(os.environ.get("NEXTCLOUD_USER")),
        password=os.environ.get("NEXTCLOUD_PASSWORD") or None,
    )
