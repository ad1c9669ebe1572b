import json
from pathlib import Path
from typing import Any

import pytest

from bundle_kit.errors import SchemaValidationError, ShapeError
from bundle_kit.stats.loader import load_stats
from bundle_kit.stats.schema import (
    ContainerModule,
    ModuleShape,
    SourceModule,
    StatsDocument,
    SyntheticModule,
    classify_module,
    module_shape,
    validate_stats,
)


class TestModuleShape:
    def test_container_checked_first(self) -> None:
        """A node with modules is a container even if it has a source."""
        node = {
            "identifier": "concat",
            "name": "concat",
            "size": 1,
            "source": "x",
            "chunks": [],
            "modules": [],
        }

        assert module_shape(node) == ModuleShape.CONTAINER.value

    def test_source_before_synthetic(self) -> None:
        node = {"identifier": "a", "name": "a", "size": 1, "source": "", "chunks": []}

        assert module_shape(node) == ModuleShape.SOURCE.value

    def test_null_source_is_synthetic(self) -> None:
        """A null source falls through to the synthetic shape."""
        node = {"identifier": "a", "name": "a", "size": 1, "source": None, "chunks": []}

        assert module_shape(node) == ModuleShape.SYNTHETIC.value

    def test_unknown_shape(self) -> None:
        assert module_shape({"chunks": [0]}) is None
        assert module_shape("not a module") is None

    def test_validated_models(self) -> None:
        node = SyntheticModule(identifier="a", name="a", size=1, chunks=[])

        assert module_shape(node) == ModuleShape.SYNTHETIC.value


class TestClassifyModule:
    def test_raw_source_module(self) -> None:
        result = classify_module(
            {"identifier": "a", "name": "a", "size": 1, "source": "x", "chunks": [0]}
        )

        assert result.shape is ModuleShape.SOURCE
        assert isinstance(result.node, SourceModule)

    def test_raw_container_validates_children(self) -> None:
        result = classify_module(
            {
                "chunks": [0],
                "modules": [
                    {"identifier": "a", "name": "a", "size": 1, "chunks": []},
                ],
            }
        )

        assert result.shape is ModuleShape.CONTAINER
        assert isinstance(result.node, ContainerModule)
        assert isinstance(result.node.modules[0], SyntheticModule)

    def test_validated_node_is_reused(self) -> None:
        """Already validated models are classified without copying."""
        node = SourceModule(identifier="a", name="a", size=1, source="x", chunks=[])

        assert classify_module(node).node is node

    def test_unknown_shape_raises_with_node(self) -> None:
        node = {"chunks": [0], "foo": "bar"}

        with pytest.raises(ShapeError, match="Cannot match to known module type") as exc:
            classify_module(node)

        assert exc.value.node is node

    def test_incomplete_shape_raises(self) -> None:
        """A node missing required fields for its shape raises ShapeError."""
        # Looks synthetic but has no chunks.
        with pytest.raises(ShapeError):
            classify_module({"identifier": "a", "name": "a", "size": 1})


class TestValidateStats:
    def test_returns_typed_document(self, stats: dict[str, Any]) -> None:
        document = validate_stats(stats)

        assert isinstance(document, StatsDocument)
        assert [asset.name for asset in document.assets][:2] == [
            "main.js",
            "vendor.mjs",
        ]
        assert isinstance(document.modules[0], SourceModule)
        assert isinstance(document.modules[1], ContainerModule)

    def test_chunk_ids_keep_their_type(self, stats: dict[str, Any]) -> None:
        """Integer and string chunk ids are not coerced."""
        document = validate_stats(stats)

        assert document.assets[1].chunks == ["1", 2]

    def test_extra_fields_are_ignored(self, stats: dict[str, Any]) -> None:
        stats["hash"] = "abc123"
        stats["assets"][0]["emitted"] = True

        assert validate_stats(stats).assets[0].name == "main.js"

    def test_document_passes_through(self, stats: dict[str, Any]) -> None:
        document = validate_stats(stats)

        assert validate_stats(document) is document

    def test_aggregates_all_errors(self) -> None:
        """Every validation error is reported in one exception."""
        bad = {
            "assets": [{"name": 1, "chunks": "0", "size": 10}],
            "modules": [{"chunks": [0], "foo": "bar"}],
        }

        with pytest.raises(SchemaValidationError) as exc:
            validate_stats(bad)

        assert len(exc.value.errors) >= 3
        assert str(exc.value).startswith("Invalid webpack stats object.")
        assert any("Cannot match to known module type" in e for e in exc.value.errors)

    def test_missing_top_level_fields(self) -> None:
        with pytest.raises(SchemaValidationError) as exc:
            validate_stats({})

        assert sorted(exc.value.errors) == [
            "assets: Field required",
            "modules: Field required",
        ]


class TestLoadStats:
    def test_loads_json_object(self, tmp_path: Path, stats: dict[str, Any]) -> None:
        path = tmp_path / "stats.json"
        path.write_text(json.dumps(stats))

        assert load_stats(path) == stats

    def test_rejects_non_object(self, tmp_path: Path) -> None:
        """A JSON array at the top level is rejected."""
        path = tmp_path / "stats.json"
        path.write_text("[]")

        with pytest.raises(ValueError, match="must contain a JSON object"):
            load_stats(str(path))
