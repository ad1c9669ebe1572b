# src/bundle_kit/paths/normalize.py

"""Webpack module path normalization.

Pure string functions. All of them are total over string input: odd paths
degrade to a best-effort value instead of raising.

Forms of a dependency module name seen across webpack versions:
- v1, v2: "/PATH/TO/ROOT/~/pkg/index.js"
- v3: "/PATH/TO/ROOT/node_modules/pkg/index.js"
- v4: "./node_modules/pkg/index.js"
"""

import os
import posixpath
import re

# Only meaningful on strings from `to_posix_path()`.
_NODE_MODULES_RE = re.compile(r"(^|/)(node_modules|~)(/|$)")

# Leading relative segments: `./`, `../../`, `.\`, ...
_PREPATH_RE = re.compile(r"^(\.+(/|\\)+)+")


def to_posix_path(path: str) -> str:
    return path.replace("\\", "/")


def node_modules_parts(path: str) -> list[str]:
    """Split a path on every `node_modules` (or legacy `~`) segment.

    Captured separators are kept in the result, so any match yields more
    than one part.
    """
    return _NODE_MODULES_RE.split(to_posix_path(path))


def remove_prepath(path: str) -> str:
    return _PREPATH_RE.sub("", path)


def normalize_webpack_path(identifier: str, name: str | None = None) -> str:
    """Unwind loader prefixes and queries from a webpack module path.

    Everything up to the last `!` or `?` is dropped (`REMOVE!KEEP`,
    `REMOVE?KEEP`). When `name` is given it is used to cut trailing noise off
    the identifier, e.g.:

    - identifier: "css /PATH/node_modules/cache-loader/dist/cjs.js!STUFF
      !/PATH/node_modules/font-awesome/css/font-awesome.css 0"
    - name: "node_modules/font-awesome/css/font-awesome.css"
    """
    prefix_end = max(identifier.rfind("!"), identifier.rfind("?"))

    candidate = identifier
    if prefix_end > -1:
        candidate = candidate[prefix_end + 1 :]

    if name:
        name = (
            remove_prepath(name)
            .replace("/~/", "/node_modules/", 1)
            .replace("\\~\\", "\\node_modules\\", 1)
        )

        # Truncate the candidate if the name ends earlier.
        name_idx = candidate.rfind(name)
        if name_idx > -1 and len(candidate) != name_idx + len(name):
            candidate = candidate[: name_idx + len(name)]

    return candidate


def is_node_modules_path(path: str) -> bool:
    return len(node_modules_parts(path)) > 1


def get_base_name(path: str) -> str:
    """Package-relative name of a `node_modules` path.

    Assumes `is_node_modules_path(path)` already holds. Windows separators
    are switched to forward slashes.
    """
    last_part = node_modules_parts(path)[-1]
    if not last_part:
        return ""

    candidate = os.path.normpath(os.path.relpath(last_part, "."))
    if candidate == ".":
        return ""

    # Synthetic context modules can end with `/` because they come from a
    # regular expression, e.g. `/PATH/node_modules/moment/locale sync /es/`.
    if path.endswith("/"):
        candidate += "/"

    return to_posix_path(candidate)


def resolve_full_path(identifier: str, name: str) -> str | None:
    """Full path of a module from its normalized identifier and name.

    Returns None when the name is neither a prefix nor a suffix of the
    identifier.
    """
    posix_identifier = to_posix_path(identifier)
    posix_name = remove_prepath(to_posix_path(name))

    if posix_identifier.startswith(posix_name) or posix_identifier.endswith(
        posix_name
    ):
        return posixpath.normpath(posix_name)

    return None
