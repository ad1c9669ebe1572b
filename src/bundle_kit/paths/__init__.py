from .normalize import (
    get_base_name,
    is_node_modules_path,
    node_modules_parts,
    normalize_webpack_path,
    remove_prepath,
    resolve_full_path,
    to_posix_path,
)

__all__ = [
    "get_base_name",
    "is_node_modules_path",
    "node_modules_parts",
    "normalize_webpack_path",
    "remove_prepath",
    "resolve_full_path",
    "to_posix_path",
]
