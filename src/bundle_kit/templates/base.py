# src/bundle_kit/templates/base.py

import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from time import monotonic
from typing import Any, Protocol

from bundle_kit.assets.models import AssetGroup
from bundle_kit.modules.models import ResolvedModule
from bundle_kit.observability import names
from bundle_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


class TemplateFormat(str, Enum):
    """Output format of a report."""

    JSON = "json"
    TEXT = "text"
    TSV = "tsv"


class AnalysisProvider(Protocol):
    """What a template reads from an analysis session."""

    @property
    def modules(self) -> list[ResolvedModule]: ...

    @property
    def assets(self) -> dict[str, AssetGroup]: ...

    async def get_data(self) -> dict[str, Any]: ...


class Renderer(Protocol):
    async def render(self, format: TemplateFormat | str) -> str: ...


class Template(ABC):
    """Base renderer for one action's data.

    The action is passed in, never subclassed: a template only calls
    `get_data()` and the derived views of the provider.
    """

    def __init__(
        self,
        *,
        action: AnalysisProvider,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.action = action
        self.metrics_hook = metrics_hook

    async def json(self) -> str:
        data = await self.action.get_data()
        return json.dumps(data, indent=2)

    @abstractmethod
    async def text(self) -> str: ...

    @abstractmethod
    async def tsv(self) -> str: ...

    async def render(self, format: TemplateFormat | str) -> str:
        try:
            fmt = TemplateFormat(format)
        except ValueError:
            logger.error("Unknown template format: %s", format)
            raise ValueError(f"Unknown template format: {format}") from None

        start = monotonic()
        renderers = {
            TemplateFormat.JSON: self.json,
            TemplateFormat.TEXT: self.text,
            TemplateFormat.TSV: self.tsv,
        }
        output = await renderers[fmt]()

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.RENDERS_TOTAL, labels={"format": fmt.value})
        logger.debug("Rendered %s report in %.1fms", fmt.value, elapsed_ms)
        return output

    def trim(self, text: str, num: int) -> str:
        """Dedent a triple-quoted block by `num` spaces.

        Trailing whitespace and a leading empty line are dropped.
        """
        text = text.rstrip()
        text = re.sub(r"^[ ]*\s*", "", text, count=1)
        return re.sub(rf"^[ ]{{{num}}}", "", text, flags=re.MULTILINE)
