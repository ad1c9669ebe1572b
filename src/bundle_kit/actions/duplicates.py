# src/bundle_kit/actions/duplicates.py

from collections.abc import Iterable
from typing import Any

from bundle_kit._sorting import sort_key
from bundle_kit.modules.models import ResolvedModule
from bundle_kit.templates.duplicates import DuplicatesTemplate

from .base import Action


def find_duplicates(
    modules: Iterable[ResolvedModule],
) -> dict[str, list[ResolvedModule]]:
    """Dependency files sharing a base name at more than one location.

    Returns:
        Base name to its distinct sources, keys sorted, sources in input order.
    """
    by_base_name: dict[str, dict[str, ResolvedModule]] = {}
    for mod in modules:
        if not mod.base_name:
            continue
        sources = by_base_name.setdefault(mod.base_name, {})
        sources.setdefault(mod.canonical_identifier, mod)

    return {
        base_name: list(sources.values())
        for base_name, sources in sorted(
            by_base_name.items(), key=lambda item: sort_key(item[0])
        )
        if len(sources) > 1
    }


class DuplicatesAction(Action):
    """Dependency files bundled more than once within the same asset."""

    name = "duplicates"
    template_cls = DuplicatesTemplate

    async def _get_data(self) -> dict[str, Any]:
        totals = _empty_meta()
        assets: dict[str, Any] = {}

        for asset_name, group in self.assets.items():
            duplicates = find_duplicates(group.modules)
            if not duplicates:
                continue

            meta = _empty_meta()
            files: dict[str, Any] = {}
            for base_name, sources in duplicates.items():
                files[base_name] = {
                    "meta": {
                        "num_sources": len(sources),
                        "size": sum(src.size for src in sources),
                    },
                    "sources": [
                        {"identifier": src.canonical_identifier, "size": src.size}
                        for src in sources
                    ],
                }
                meta["num_files"] += 1
                meta["num_extra_sources"] += len(sources) - 1
                meta["extra_size"] += sum(src.size for src in sources[1:])

            for key, value in meta.items():
                totals[key] += value
            assets[asset_name] = {"meta": meta, "files": files}

        return {"meta": totals, "assets": assets}


def _empty_meta() -> dict[str, int]:
    return {"num_files": 0, "num_extra_sources": 0, "extra_size": 0}
