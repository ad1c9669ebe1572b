# src/bundle_kit/actions/sizes.py

from typing import Any

from bundle_kit.modules.models import ResolvedModule
from bundle_kit.templates.sizes import SizesTemplate

from .base import Action


class SizesAction(Action):
    """Modules per script asset, with their sizes."""

    name = "sizes"
    template_cls = SizesTemplate

    async def _get_data(self) -> dict[str, Any]:
        assets: dict[str, Any] = {}
        for asset_name, group in self.assets.items():
            assets[asset_name] = {
                "meta": {
                    "num_modules": len(group.modules),
                    "size": sum(mod.size for mod in group.modules),
                    "asset_size": group.asset.size,
                },
                "files": [_file_entry(mod) for mod in group.modules],
            }

        return {
            "meta": {
                "num_assets": len(assets),
                "num_modules": len(self.modules),
                "size": sum(mod.size for mod in self.modules),
            },
            "assets": assets,
        }


def _file_entry(mod: ResolvedModule) -> dict[str, Any]:
    return {
        "identifier": mod.canonical_identifier,
        "base_name": mod.base_name,
        "size": mod.size,
        "is_node_modules": mod.is_node_modules,
        "is_synthetic": mod.is_synthetic,
    }
