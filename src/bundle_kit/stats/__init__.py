from .loader import load_stats
from .schema import (
    ChunkId,
    ClassifiedModule,
    ContainerModule,
    ModuleShape,
    SourceModule,
    StatsAsset,
    StatsDocument,
    StatsModule,
    SyntheticModule,
    classify_module,
    module_shape,
    validate_stats,
)

__all__ = [
    "ChunkId",
    "ClassifiedModule",
    "ContainerModule",
    "ModuleShape",
    "SourceModule",
    "StatsAsset",
    "StatsDocument",
    "StatsModule",
    "SyntheticModule",
    "classify_module",
    "load_stats",
    "module_shape",
    "validate_stats",
]
