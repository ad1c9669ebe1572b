# src/bundle_kit/templates/sizes.py

from .base import Template


class SizesTemplate(Template):
    async def text(self) -> str:
        data = await self.action.get_data()
        meta = data["meta"]

        lines = [
            self.trim(
                f"""
                bundle-kit --action=sizes
                =========================

                ## Summary
                * Assets:       {meta['num_assets']}
                * Modules:      {meta['num_modules']}
                * Size:         {meta['size']}
                """,
                16,
            )
        ]

        for asset_name, asset in data["assets"].items():
            asset_meta = asset["meta"]
            lines.append("")
            lines.append(f"## `{asset_name}`")
            lines.append(f"* Modules:      {asset_meta['num_modules']}")
            lines.append(
                f"* Size:         {asset_meta['size']}"
                f" (asset: {asset_meta['asset_size']})"
            )
            if asset["files"]:
                lines.append("* Files:")
            for file in asset["files"]:
                lines.append(f"    * {file['identifier']} ({file['size']})")

        return "\n".join(lines)

    async def tsv(self) -> str:
        data = await self.action.get_data()

        rows = ["Asset\tFull Name\tShort Name\tSize"]
        for asset_name, asset in data["assets"].items():
            for file in asset["files"]:
                rows.append(
                    "\t".join(
                        [
                            asset_name,
                            file["identifier"],
                            file["base_name"] or "",
                            str(file["size"]),
                        ]
                    )
                )
        return "\n".join(rows)
