# src/bundle_kit/errors.py

import json
from typing import Any


class BundleKitError(Exception):
    """Base class for analysis failures."""


class SchemaValidationError(BundleKitError):
    """Stats document does not match the expected structure.

    Carries every field-level violation, not just the first one.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"Invalid webpack stats object. (Errors: {', '.join(self.errors)})"
        )


class ShapeError(BundleKitError):
    """A module node matches none of the known module shapes."""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Cannot match to known module type: {_dump(node)}")


class ResolutionInconsistency(UserWarning):
    """Normalized identifier and name cannot be reconciled into a full path.

    Reported as a warning by default. Raise it with ``strict_resolution=True``
    or turn it into an error through the ``warnings`` filters.
    """

    def __init__(self, identifier: str, name: str) -> None:
        self.identifier = identifier
        self.name = name
        super().__init__(
            f"Cannot resolve full path: identifier={identifier!r}, name={name!r}"
        )


def _dump(node: Any) -> str:
    if hasattr(node, "model_dump"):
        node = node.model_dump()
    try:
        return json.dumps(node, default=str)
    except (TypeError, ValueError):
        return repr(node)
