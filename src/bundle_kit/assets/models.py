from dataclasses import dataclass

from bundle_kit.modules.models import ResolvedModule
from bundle_kit.stats.schema import StatsAsset


@dataclass(frozen=True)
class AssetGroup:
    """An output asset and the modules built into it, each listed once."""

    asset: StatsAsset
    modules: tuple[ResolvedModule, ...]
