import json
import logging
from typing import Any
from unittest.mock import MagicMock

import pytest

from bundle_kit.actions.duplicates import DuplicatesAction
from bundle_kit.actions.factory import create_action, render_report
from bundle_kit.actions.sizes import SizesAction
from bundle_kit.config import AnalysisConfig
from bundle_kit.errors import SchemaValidationError
from bundle_kit.observability import names
from bundle_kit.templates.base import TemplateFormat


class TestCreateAction:
    def test_create_sizes_action(self, stats: dict[str, Any]) -> None:
        """The sizes action name maps to SizesAction."""
        action = create_action(AnalysisConfig(action="sizes"), stats)

        assert isinstance(action, SizesAction)

    def test_create_duplicates_action(self, stats: dict[str, Any]) -> None:
        action = create_action(AnalysisConfig(action="duplicates"), stats)

        assert isinstance(action, DuplicatesAction)

    def test_unknown_action_raises(self, stats: dict[str, Any]) -> None:
        """Unknown action names raise ValueError."""
        config = AnalysisConfig(action="versions")  # type: ignore

        with pytest.raises(ValueError, match="Unknown action"):
            create_action(config, stats)

    def test_unknown_action_is_logged(
        self, stats: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown action names are logged at error level before raising."""
        config = AnalysisConfig(action="versions")  # type: ignore

        with caplog.at_level(logging.ERROR, logger="bundle_kit.actions.factory"):
            with pytest.raises(ValueError):
                create_action(config, stats)

        assert "Unknown action: versions" in caplog.text

    def test_config_values_passed_through(self, stats: dict[str, Any]) -> None:
        """Strictness and metrics hook reach the action."""
        hook = MagicMock()
        config = AnalysisConfig(action="sizes", strict_resolution=True)

        action = create_action(config, stats, metrics_hook=hook)

        assert action.stats is stats
        assert action.strict_resolution is True
        assert action.metrics_hook is hook


class TestRenderReport:
    @pytest.mark.asyncio
    async def test_renders_configured_format(self, stats: dict[str, Any]) -> None:
        config = AnalysisConfig(action="sizes", format=TemplateFormat.JSON)

        result = json.loads(await render_report(config, stats))

        assert result["meta"]["num_modules"] == 3

    @pytest.mark.asyncio
    async def test_invalid_stats_raise(self) -> None:
        """Schema errors surface before rendering."""
        config = AnalysisConfig(action="sizes")

        with pytest.raises(SchemaValidationError):
            await render_report(config, {"modules": "nope", "assets": []})

    @pytest.mark.asyncio
    async def test_metrics_flow_through(self, stats: dict[str, Any]) -> None:
        """Flatten, grouping and render timings all reach the hook."""
        hook = MagicMock()

        await render_report(AnalysisConfig(action="sizes"), stats, metrics_hook=hook)

        recorded = [c[0][0] for c in hook.record_latency.call_args_list]
        assert recorded == [
            names.FLATTEN_DURATION,
            names.GROUPING_DURATION,
            names.RENDER_DURATION,
        ]
