# src/bundle_kit/actions/base.py

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from bundle_kit.assets.grouping import group_assets
from bundle_kit.assets.models import AssetGroup
from bundle_kit.modules.flatten import flatten_modules
from bundle_kit.modules.models import ResolvedModule
from bundle_kit.observability.base import MetricsHook, NoOpMetricsHook
from bundle_kit.stats.schema import StatsDocument, validate_stats
from bundle_kit.templates.base import Template

logger = logging.getLogger(__name__)


class Action(ABC):
    """An analysis session over one stats document.

    Every derived view is computed on first access and kept for the lifetime
    of the session. Nothing is shared between sessions.
    """

    name: ClassVar[str]
    template_cls: ClassVar[type[Template]]

    def __init__(
        self,
        *,
        stats: Mapping[str, Any] | StatsDocument,
        strict_resolution: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.stats = stats
        self.strict_resolution = strict_resolution
        self.metrics_hook = metrics_hook

        self._document: StatsDocument | None = None
        self._modules: list[ResolvedModule] | None = None
        self._assets: dict[str, AssetGroup] | None = None
        self._data: dict[str, Any] | None = None
        self._data_task: asyncio.Future[dict[str, Any]] | None = None
        self._template: Template | None = None

    @property
    def document(self) -> StatsDocument:
        """Validated stats document. Raises SchemaValidationError."""
        if self._document is None:
            self._document = validate_stats(self.stats)
        return self._document

    def validate(self) -> "Action":
        document = self.document
        logger.info(
            "Validated stats for %s: modules=%d, assets=%d",
            self.name,
            len(document.modules),
            len(document.assets),
        )
        return self

    @property
    def modules(self) -> list[ResolvedModule]:
        """Flat list of source and synthetic modules, sorted. (Memoized)"""
        if self._modules is None:
            self._modules = flatten_modules(
                self.document.modules,
                strict_resolution=self.strict_resolution,
                metrics_hook=self.metrics_hook,
            )
        return self._modules

    @property
    def assets(self) -> dict[str, AssetGroup]:
        """Modules grouped by script asset. (Memoized)"""
        if self._assets is None:
            self._assets = group_assets(
                self.document.assets,
                self.modules,
                metrics_hook=self.metrics_hook,
            )
        return self._assets

    async def get_data(self) -> dict[str, Any]:
        """Renderer-agnostic data for this action.

        `_get_data()` runs at most once per session. Concurrent callers await
        the same in-flight computation; cancelling one caller leaves it running
        for the others.
        """
        if self._data is not None:
            return self._data

        if self._data_task is None:
            self._data_task = asyncio.ensure_future(self._build_data())

        task = self._data_task
        try:
            return await asyncio.shield(task)
        finally:
            if task.done() and (task.cancelled() or task.exception() is not None):
                self._data_task = None

    @property
    def template(self) -> Template:
        if self._template is None:
            self._template = self.template_cls(
                action=self, metrics_hook=self.metrics_hook
            )
        return self._template

    async def _build_data(self) -> dict[str, Any]:
        logger.debug("Building %s data", self.name)
        data = await self._get_data()
        self._data = data
        return data

    @abstractmethod
    async def _get_data(self) -> dict[str, Any]: ...
