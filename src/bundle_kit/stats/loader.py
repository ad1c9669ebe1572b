import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_stats(path: str | Path) -> dict[str, Any]:
    """Read a webpack stats JSON file. Validation is left to the caller."""
    logger.info("Loading stats from: %s", path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        logger.error("Stats file is not a JSON object: %s", path)
        raise ValueError(f"Stats file '{path}' must contain a JSON object")
    return data
