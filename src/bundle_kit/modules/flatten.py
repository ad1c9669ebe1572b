# src/bundle_kit/modules/flatten.py

import logging
import warnings
from collections.abc import Iterable, Sequence
from time import monotonic
from typing import Any

from bundle_kit._sorting import sort_key
from bundle_kit.errors import ResolutionInconsistency
from bundle_kit.observability import names
from bundle_kit.observability.base import MetricsHook, NoOpMetricsHook
from bundle_kit.paths.normalize import (
    get_base_name,
    is_node_modules_path,
    normalize_webpack_path,
    resolve_full_path,
)
from bundle_kit.stats.schema import (
    ChunkId,
    ModuleShape,
    SourceModule,
    SyntheticModule,
    classify_module,
)

from .models import ResolvedModule

logger = logging.getLogger(__name__)


def flatten_modules(
    nodes: Sequence[Any],
    inherited_chunks: Iterable[ChunkId] = (),
    *,
    strict_resolution: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ResolvedModule]:
    """Flatten a nested module tree into a sorted list of leaf modules.

    Containers contribute no entry of their own; their chunk ids are passed
    down to every module they hold.

    Args:
        nodes: Raw module mappings or validated stats module models.
        inherited_chunks: Chunk ids of enclosing containers.
        strict_resolution: Raise ResolutionInconsistency instead of warning.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Modules sorted by canonical identifier.

    Raises:
        ShapeError: If a node matches none of the known module shapes.
    """
    start = monotonic()
    flat: list[ResolvedModule] = []
    _collect(nodes, tuple(inherited_chunks), flat, strict_resolution, metrics_hook)
    flat.sort(key=lambda mod: sort_key(mod.canonical_identifier))

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.FLATTEN_DURATION, elapsed_ms)
    metrics_hook.increment(names.MODULES_FLATTENED, len(flat))
    logger.debug("Flattened %d modules in %.1fms", len(flat), elapsed_ms)
    return flat


def _collect(
    nodes: Sequence[Any],
    inherited: tuple[ChunkId, ...],
    out: list[ResolvedModule],
    strict_resolution: bool,
    metrics_hook: MetricsHook,
) -> None:
    for raw in nodes:
        classified = classify_module(raw)
        node = classified.node
        # Unique, in order: own chunks then the parents'.
        chunks = tuple(dict.fromkeys([*node.chunks, *inherited]))

        if classified.shape is ModuleShape.CONTAINER:
            _collect(node.modules, chunks, out, strict_resolution, metrics_hook)
            continue

        out.append(_resolve(node, chunks, strict_resolution, metrics_hook))


def _resolve(
    node: SourceModule | SyntheticModule,
    chunks: tuple[ChunkId, ...],
    strict_resolution: bool,
    metrics_hook: MetricsHook,
) -> ResolvedModule:
    normalized_name = normalize_webpack_path(node.name)
    canonical = normalize_webpack_path(node.identifier, normalized_name)
    is_node_modules = is_node_modules_path(canonical)

    full_path = resolve_full_path(canonical, normalized_name)
    if full_path is None:
        _report_inconsistency(
            ResolutionInconsistency(canonical, normalized_name),
            strict_resolution,
            metrics_hook,
        )

    return ResolvedModule(
        identifier=node.identifier,
        name=node.name,
        canonical_identifier=canonical,
        base_name=get_base_name(canonical) if is_node_modules else None,
        chunks=chunks,
        size=node.size,
        source=node.source if isinstance(node, SourceModule) else None,
        is_node_modules=is_node_modules,
        is_synthetic=isinstance(node, SyntheticModule),
        full_path=full_path,
    )


def _report_inconsistency(
    issue: ResolutionInconsistency,
    strict_resolution: bool,
    metrics_hook: MetricsHook,
) -> None:
    metrics_hook.increment(names.RESOLUTION_INCONSISTENCIES_TOTAL)
    if strict_resolution:
        logger.error("%s", issue)
        raise issue

    logger.warning("%s", issue)
    warnings.warn(issue, stacklevel=2)
