# src/bundle_kit/config.py

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal

import yaml

from bundle_kit.templates.base import TemplateFormat

logger = logging.getLogger(__name__)

ActionName = Literal["sizes", "duplicates"]


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one report.

    Immutable. Explicit. No magic defaults from environment.
    """

    action: ActionName
    format: TemplateFormat = TemplateFormat.TEXT
    strict_resolution: bool = False  # Raise on identifier/name mismatches


def load_config(path: str | Path) -> AnalysisConfig:
    """Load an AnalysisConfig from a YAML mapping.

    Raises:
        ValueError: If the file is not a mapping or has unknown keys.
    """
    logger.info("Loading config from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config '{path}' must be a mapping")

    known = {field.name for field in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.error("Unknown config keys in %s: %s", path, unknown)
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    if "format" in data:
        data["format"] = TemplateFormat(data["format"])
    return AnalysisConfig(**data)
