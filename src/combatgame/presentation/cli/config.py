"""CLI configuration helpers: per-user JSON config plus environment overrides."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from combatgame.core.logging_config import LOG_LEVEL_ENV

SEED_ENV = "COMBATGAME_SEED"
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "CombatGame"
        return Path.home() / "CombatGame"
    return Path.home() / ".config" / "combat_game"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, object]:
    return {"log_level": _DEFAULT_LOG_LEVEL, "log_file": None, "seed": None}


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_log_file(value: object) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _normalize_seed(value: object) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _normalize(raw: Dict[str, object]) -> Dict[str, object]:
    return {
        "log_level": _normalize_log_level(raw.get("log_level")),
        "log_file": _normalize_log_file(raw.get("log_file")),
        "seed": _normalize_seed(raw.get("seed")),
    }


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(_normalize(config), indent=2, sort_keys=True), encoding="utf-8")


def apply_env_overrides(config: Dict[str, object]) -> Dict[str, object]:
    """Return a copy of ``config`` with environment overrides applied."""
    resolved = dict(config)
    raw_seed = os.getenv(SEED_ENV)
    if raw_seed:
        try:
            resolved["seed"] = int(raw_seed)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", SEED_ENV, raw_seed)
    raw_level = os.getenv(LOG_LEVEL_ENV)
    if raw_level:
        resolved["log_level"] = _normalize_log_level(raw_level)
    return resolved
