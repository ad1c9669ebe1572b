# src/bundle_kit/actions/factory.py

import logging
from collections.abc import Mapping
from typing import Any

from bundle_kit.config import AnalysisConfig
from bundle_kit.observability.base import MetricsHook, NoOpMetricsHook
from bundle_kit.stats.schema import StatsDocument

from .base import Action
from .duplicates import DuplicatesAction
from .sizes import SizesAction

logger = logging.getLogger(__name__)

ACTIONS: dict[str, type[Action]] = {
    SizesAction.name: SizesAction,
    DuplicatesAction.name: DuplicatesAction,
}


def create_action(
    config: AnalysisConfig,
    stats: Mapping[str, Any] | StatsDocument,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Action:
    """Create an analysis session from config.

    Args:
        config: Analysis configuration naming the action.
        stats: Raw or validated webpack stats document.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Action implementation.

    Raises:
        ValueError: If the action is unknown.

    Example:
        >>> config = AnalysisConfig(action="sizes")
        >>> action = create_action(config, stats).validate()
        >>> report = await action.template.render("text")
    """
    try:
        action_cls = ACTIONS[config.action]
    except KeyError:
        logger.error("Unknown action: %s", config.action)
        raise ValueError(f"Unknown action: {config.action}") from None

    logger.debug("Creating %s action", config.action)
    return action_cls(
        stats=stats,
        strict_resolution=config.strict_resolution,
        metrics_hook=metrics_hook,
    )


async def render_report(
    config: AnalysisConfig,
    stats: Mapping[str, Any] | StatsDocument,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Validate `stats` and render the configured report."""
    action = create_action(config, stats, metrics_hook).validate()
    return await action.template.render(config.format)
