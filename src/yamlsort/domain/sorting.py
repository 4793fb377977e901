"""Sort engine: order a sequence of mappings by one of their string keys."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from pyuca import Collator

Collate = Callable[[str, str], int]


@functools.cache
def _collator() -> Collator:
    # Loads the DUCET table once per process.
    return Collator()


def unicode_collate(a: str, b: str) -> int:
    """Three-way compare under the Unicode Collation Algorithm.

    Case and accents only break ties: ``apple < banana < Cherry`` and
    ``éclair < fig``.
    """
    key_a = _collator().sort_key(a)
    key_b = _collator().sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def compare_by_key(a: Any, b: Any, sort_key: str, collate: Collate = unicode_collate) -> int:
    """Three-way compare two elements on *sort_key*.

    Only string values are comparable.  An element that is not a mapping,
    lacks the key, or holds a non-string value compares equal to anything.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        return 0
    left = a.get(sort_key)
    right = b.get(sort_key)
    if isinstance(left, str) and isinstance(right, str):
        return collate(left, right)
    return 0


def sort_sequence(
    sequence: list[Any],
    sort_key: str,
    *,
    collate: Collate | None = None,
) -> list[Any]:
    """Return a new list with *sequence* stably ordered by *sort_key*.

    Args:
        sequence: Elements to order; neither the list nor its elements
            are modified.
        sort_key: Property whose string value determines the order.
        collate: String comparison.  Defaults to :func:`unicode_collate`,
            which does not depend on the process locale.
    """
    cmp = collate or unicode_collate
    return sorted(
        sequence,
        key=functools.cmp_to_key(lambda a, b: compare_by_key(a, b, sort_key, cmp)),
    )
