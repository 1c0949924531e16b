"""Root logger setup for the CLI entry point."""
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_LEVEL_ENV = "COMBATGAME_LOG_LEVEL"
_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: str | int | None = None, default: int = logging.WARNING) -> int:
    """Resolve a level from the argument, then the environment, then ``default``."""
    if isinstance(level, int):
        return level
    name = level or os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: str | int | None = None, log_file: Path | str | None = None) -> None:
    """Install a fresh set of root handlers.

    Each call replaces whatever handlers an earlier call installed.

    With ``log_file`` set, records are appended to that file only so warnings
    never interleave with the menu text on the console.
    """
    handlers: list[logging.Handler]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(path, mode="a", encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]
    logging.basicConfig(level=resolve_level(level), format=_LOG_FORMAT, handlers=handlers, force=True)
