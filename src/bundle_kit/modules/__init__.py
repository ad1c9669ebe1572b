from .flatten import flatten_modules
from .models import ResolvedModule

__all__ = [
    "ResolvedModule",
    "flatten_modules",
]
