# src/bundle_kit/templates/duplicates.py

from .base import Template


class DuplicatesTemplate(Template):
    async def text(self) -> str:
        data = await self.action.get_data()
        meta = data["meta"]

        lines = [
            self.trim(
                f"""
                bundle-kit --action=duplicates
                ==============================

                ## Summary
                * Extra Files (unique):         {meta['num_files']}
                * Extra Sources (non-unique):   {meta['num_extra_sources']}
                * Extra Bytes (non-unique):     {meta['extra_size']}
                """,
                16,
            )
        ]

        for asset_name, asset in data["assets"].items():
            lines.append("")
            lines.append(f"## `{asset_name}`")
            for base_name, file in asset["files"].items():
                file_meta = file["meta"]
                lines.append(
                    f"* {base_name}"
                    f" (sources: {file_meta['num_sources']}, size: {file_meta['size']})"
                )
                for src in file["sources"]:
                    lines.append(f"    * {src['identifier']} ({src['size']})")

        return "\n".join(lines)

    async def tsv(self) -> str:
        data = await self.action.get_data()

        rows = ["Asset\tBase Name\tSources\tFull Name\tSize"]
        for asset_name, asset in data["assets"].items():
            for base_name, file in asset["files"].items():
                for src in file["sources"]:
                    rows.append(
                        "\t".join(
                            [
                                asset_name,
                                base_name,
                                str(file["meta"]["num_sources"]),
                                src["identifier"],
                                str(src["size"]),
                            ]
                        )
                    )
        return "\n".join(rows)
