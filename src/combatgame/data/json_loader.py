"""Low-level JSON helpers for repositories."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> object:
    """Parse the JSON document at ``path``; any failure becomes ``DataLoadError``."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path} (line {exc.lineno}): {exc.msg}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file {path}: {exc}") from exc
    logger.debug("Loaded definitions from %s", path)
    return payload
