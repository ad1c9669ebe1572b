# src/bundle_kit/assets/grouping.py

import logging
import re
from collections.abc import Sequence
from time import monotonic

from bundle_kit._sorting import sort_key
from bundle_kit.modules.models import ResolvedModule
from bundle_kit.observability import names
from bundle_kit.observability.base import MetricsHook, NoOpMetricsHook
from bundle_kit.stats.schema import StatsAsset

from .models import AssetGroup

logger = logging.getLogger(__name__)

SCRIPT_ASSET_RE = re.compile(r"\.m?js$")


def is_script_asset(name: str) -> bool:
    return SCRIPT_ASSET_RE.search(name) is not None


def group_assets(
    assets: Sequence[StatsAsset],
    modules: Sequence[ResolvedModule],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, AssetGroup]:
    """Group modules under the script assets that share a chunk with them.

    Modules are joined to assets through chunk ids, compared as strings.
    Non-script assets are left out. Script assets without any module still
    get an empty group.

    Args:
        assets: Assets from the stats document.
        modules: Flattened modules, in the order they should be listed.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Asset name to group, keys in sorted order.
    """
    start = monotonic()
    script_assets = [asset for asset in assets if is_script_asset(asset.name)]

    chunks_to_assets: dict[str, set[str]] = {}
    # Keyed by id() so a module is added once per asset, in first-seen order.
    mods_by_asset: dict[str, dict[int, ResolvedModule]] = {}

    for asset in script_assets:
        mods_by_asset[asset.name] = {}
        for chunk in asset.chunks:
            chunks_to_assets.setdefault(str(chunk), set()).add(asset.name)

    for mod in modules:
        for chunk in mod.chunks:
            for asset_name in chunks_to_assets.get(str(chunk), ()):
                mods_by_asset[asset_name].setdefault(id(mod), mod)

    by_name = {asset.name: asset for asset in script_assets}
    groups = {
        name: AssetGroup(
            asset=by_name[name],
            modules=tuple(mods_by_asset[name].values()),
        )
        for name in sorted(mods_by_asset, key=sort_key)
    }

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.GROUPING_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.ASSETS_GROUPED, len(groups))
    logger.debug(
        "Grouped %d modules into %d assets in %.1fms",
        len(modules),
        len(groups),
        elapsed_ms,
    )
    return groups
