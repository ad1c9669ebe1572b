# src/bundle_kit/modules/models.py

from dataclasses import dataclass

from bundle_kit.stats.schema import ChunkId


@dataclass(frozen=True)
class ResolvedModule:
    """A single source or synthetic module with its resolved identity.

    Immutable. Built once while flattening a stats document.
    """

    identifier: str
    name: str
    canonical_identifier: str
    base_name: str | None  # None unless `is_node_modules`
    chunks: tuple[ChunkId, ...]  # own chunks first, then inherited ones
    size: int
    source: str | None
    is_node_modules: bool
    is_synthetic: bool
    full_path: str | None = None  # None when identifier and name disagree
