from .grouping import group_assets, is_script_asset
from .models import AssetGroup

__all__ = [
    "AssetGroup",
    "group_assets",
    "is_script_asset",
]
