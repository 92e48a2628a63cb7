import sys
from pathlib import Path
from typing import Any, Callable

from loguru import logger

_CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"


def _add_console_sink(level: str, colorize: bool | None = None) -> str:
    logger.add(sys.stderr, level=level, colorize=colorize, format=_CONSOLE_FORMAT)
    return f"console (stderr, {level})"


def _add_file_sink(
    level: str,
    path: str = "nextcloud_search.log",
    rotation: str = "5 MB",
    retention: int = 3,
    serialize: bool = False,
) -> str:
    """File sink; ``serialize`` writes one JSON record per line instead of text."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        path,
        level=level,
        format=_FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        serialize=serialize,
    )
    kind = "json" if serialize else "text"
    return f"file ({path}, {kind}, {level})"


_SINK_FACTORIES: dict[str, Callable[..., str]] = {
    "console": _add_console_sink,
    "file": _add_file_sink,
}


def setup_logging(
    level: str = "INFO",
    consumers: list[dict[str, Any]] | None = None,
) -> list[str]:
    """Replace loguru's sinks with the ``LogConsumers`` entries from config.json.

    Each entry is ``{"type": "console" | "file", "level": ..., **options}``.
    Returns a description of each sink that was added.
    """
    logger.remove()

    if consumers is None:
        consumers = [{"type": "console"}]

    descriptions: list[str] = []
    unknown: list[str] = []
    for entry in consumers:
        sink_type = entry.get("type", "")
        add_sink = _SINK_FACTORIES.get(sink_type)
        if add_sink is None:
            unknown.append(sink_type)
            continue
        options = {k: v for k, v in entry.items() if k not in ("type", "level")}
        descriptions.append(add_sink(entry.get("level", level), **options))

    # reported once the valid sinks exist
    for sink_type in unknown:
        logger.warning(f"Unknown log consumer type: {sink_type!r}")

    return descriptions
