# src/bundle_kit/stats/schema.py

"""Pydantic models of the webpack stats document.

Module nodes come in three shapes with no explicit tag field. `module_shape`
tells them apart by which fields are present, in a fixed priority order:
container, then source, then synthetic.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, Discriminator, Tag, ValidationError

from bundle_kit.errors import SchemaValidationError, ShapeError

logger = logging.getLogger(__name__)

ChunkId = int | str


class ModuleShape(str, Enum):
    """Shape of a module node in the stats document."""

    CONTAINER = "container"
    SOURCE = "source"
    SYNTHETIC = "synthetic"


class StatsAsset(BaseModel):
    name: str
    chunks: list[ChunkId]
    size: int

    class Config:
        frozen = True


class SourceModule(BaseModel):
    identifier: str
    name: str
    size: int
    source: str
    chunks: list[ChunkId]

    class Config:
        frozen = True


class SyntheticModule(BaseModel):
    """A module without source text, e.g. a context module matching a pattern."""

    identifier: str
    name: str
    size: int
    chunks: list[ChunkId]

    class Config:
        frozen = True


class ContainerModule(BaseModel):
    """A grouping of nested modules, e.g. a concatenated module."""

    chunks: list[ChunkId]
    modules: list["StatsModule"]

    class Config:
        frozen = True


_SHAPE_MODELS: dict[ModuleShape, type[BaseModel]] = {
    ModuleShape.CONTAINER: ContainerModule,
    ModuleShape.SOURCE: SourceModule,
    ModuleShape.SYNTHETIC: SyntheticModule,
}


def module_shape(node: Any) -> str | None:
    """Tag of the shape `node` claims to have, or None if it has none."""
    for shape, model in _SHAPE_MODELS.items():
        if isinstance(node, model):
            return shape.value

    if not isinstance(node, Mapping):
        return None
    if node.get("modules") is not None:
        return ModuleShape.CONTAINER.value
    if node.get("source") is not None:
        return ModuleShape.SOURCE.value
    if all(node.get(key) is not None for key in ("identifier", "name", "size")):
        return ModuleShape.SYNTHETIC.value
    return None


StatsModule = Annotated[
    Union[
        Annotated[ContainerModule, Tag(ModuleShape.CONTAINER.value)],
        Annotated[SourceModule, Tag(ModuleShape.SOURCE.value)],
        Annotated[SyntheticModule, Tag(ModuleShape.SYNTHETIC.value)],
    ],
    Discriminator(
        module_shape,
        custom_error_type="module_shape",
        custom_error_message="Cannot match to known module type",
    ),
]

ContainerModule.model_rebuild()


class StatsDocument(BaseModel):
    modules: list[StatsModule]
    assets: list[StatsAsset]

    class Config:
        frozen = True


@dataclass(frozen=True)
class ClassifiedModule:
    shape: ModuleShape
    node: ContainerModule | SourceModule | SyntheticModule


def classify_module(node: Any) -> ClassifiedModule:
    """Classify a raw or validated module node in a single pass.

    Raises:
        ShapeError: If the node matches none of the known shapes.
    """
    tag = module_shape(node)
    if tag is None:
        raise ShapeError(node)

    shape = ModuleShape(tag)
    model = _SHAPE_MODELS[shape]
    if isinstance(node, model):
        return ClassifiedModule(shape=shape, node=node)

    try:
        parsed = model.model_validate(node)
    except ValidationError as exc:
        raise ShapeError(node) from exc
    return ClassifiedModule(shape=shape, node=parsed)  # type: ignore[arg-type]


def validate_stats(stats: Mapping[str, Any] | StatsDocument) -> StatsDocument:
    """Validate a stats document against the expected structure.

    Raises:
        SchemaValidationError: With every violation found, not just the first.
    """
    if isinstance(stats, StatsDocument):
        return stats

    try:
        document = StatsDocument.model_validate(stats)
    except ValidationError as exc:
        errors = [_format_error(err) for err in exc.errors()]
        logger.error("Stats validation failed with %d errors", len(errors))
        raise SchemaValidationError(errors) from exc

    logger.debug(
        "Validated stats: modules=%d, assets=%d",
        len(document.modules),
        len(document.assets),
    )
    return document


def _format_error(error: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc or '<root>'}: {error.get('msg', 'invalid')}"
