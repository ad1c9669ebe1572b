# Actions
from .actions import (
    Action,
    DuplicatesAction,
    SizesAction,
    create_action,
    render_report,
)

# Assets
from .assets import AssetGroup, group_assets

# Config
from .config import AnalysisConfig, load_config

# Errors
from .errors import (
    BundleKitError,
    ResolutionInconsistency,
    SchemaValidationError,
    ShapeError,
)

# Modules
from .modules import ResolvedModule, flatten_modules

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Paths
from .paths import (
    get_base_name,
    is_node_modules_path,
    normalize_webpack_path,
)

# Stats
from .stats import StatsAsset, StatsDocument, load_stats, validate_stats

# Templates
from .templates import Template, TemplateFormat

__all__ = [
    # Actions
    "Action",
    "DuplicatesAction",
    "SizesAction",
    "create_action",
    "render_report",
    # Assets
    "AssetGroup",
    "group_assets",
    # Config
    "AnalysisConfig",
    "load_config",
    # Errors
    "BundleKitError",
    "ResolutionInconsistency",
    "SchemaValidationError",
    "ShapeError",
    # Modules
    "ResolvedModule",
    "flatten_modules",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Paths
    "get_base_name",
    "is_node_modules_path",
    "normalize_webpack_path",
    # Stats
    "StatsAsset",
    "StatsDocument",
    "load_stats",
    "validate_stats",
    # Templates
    "Template",
    "TemplateFormat",
]
