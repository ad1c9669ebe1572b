# src/bundle_kit/_sorting.py

"""Internal sort key shared by module and asset ordering.

Strings collate with the Unicode Collation Algorithm root order: punctuation
before letters, lowercase before uppercase. Raw code points break ties so
the order is total and never depends on the process locale.
"""

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def sort_key(value: str) -> tuple[tuple[int, ...], str]:
    return (_collator().sort_key(value), value)
