"""Path patterns: parse rule paths and walk the tree to the arrays they name.

A rule path is a ``.``-delimited list of segments:

- ``name``    -> :class:`Key`: descend into the mapping property ``name``
  (sequences met on the way are traversed element by element).
- ``*``       -> :class:`Wildcard`: every property of a mapping.
- ``name[]``  -> :class:`ArrayDescend`: every element of the sequence
  property ``name``.

Traversal never mutates its input.  A container is rebuilt only on the
way back up from a change; unresolved paths return the node unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from yamlsort.domain.sorting import Collate, sort_sequence

PATH_DELIMITER = "."
WILDCARD = "*"
ARRAY_SUFFIX = "[]"


@dataclass(frozen=True)
class Key:
    """Literal property name."""

    name: str


@dataclass(frozen=True)
class Wildcard:
    """``*``: every property of a mapping."""


@dataclass(frozen=True)
class ArrayDescend:
    """``name[]``: every element of the sequence under ``name``."""

    name: str


PathSegment = Key | Wildcard | ArrayDescend


def parse_segment(raw: str) -> PathSegment:
    """Classify a single path segment."""
    if raw == WILDCARD:
        return Wildcard()
    if raw.endswith(ARRAY_SUFFIX):
        return ArrayDescend(raw[: -len(ARRAY_SUFFIX)])
    return Key(raw)


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Split *path* on ``.`` and classify every segment.

    Raises:
        ValueError: if the path or any of its segments is empty.
    """
    if not path:
        raise ValueError("Rule path must not be empty")
    parts = path.split(PATH_DELIMITER)
    if any(not part for part in parts):
        raise ValueError(f"Rule path {path!r} contains an empty segment")
    return tuple(parse_segment(part) for part in parts)


_MISSING = object()


def key_text(key: Any) -> str:
    """Mapping key as it is written in a rule path (``200``, ``true``, ``null``)."""
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return key if isinstance(key, str) else str(key)


def resolve_key(node: dict[Any, Any], name: str) -> Any:
    """The key of *node* that a path segment *name* refers to.

    Integer, boolean and other non-string keys match by their text, so
    ``responses.200`` reaches ``{200: ...}``.  Returns ``_MISSING`` when
    nothing matches.
    """
    if name in node:
        return name
    for key in node:
        if not isinstance(key, str) and key_text(key) == name:
            return key
    return _MISSING


def _segment_name(segment: PathSegment) -> str:
    """Property name a terminal segment refers to."""
    match segment:
        case Key(name):
            return name
        case ArrayDescend(name):
            # A trailing ``name[]`` names the literal key ``name[]``.
            return name + ARRAY_SUFFIX
        case Wildcard():
            return WILDCARD


def _sort_terminal(
    node: Any,
    segment: PathSegment,
    sort_key: str,
    collate: Collate | None,
) -> Any:
    if not isinstance(node, dict):
        return node

    if isinstance(segment, Wildcard):
        result = dict(node)
        for prop, value in node.items():
            if isinstance(value, list):
                result[prop] = sort_sequence(value, sort_key, collate=collate)
        return result

    key = resolve_key(node, _segment_name(segment))
    if key is _MISSING or not isinstance(node[key], list):
        return node
    result = dict(node)
    result[key] = sort_sequence(node[key], sort_key, collate=collate)
    return result


def traverse_and_sort(
    node: Any,
    segments: tuple[PathSegment, ...],
    sort_key: str,
    *,
    collate: Collate | None = None,
) -> Any:
    """Sort every sequence *segments* resolves to inside *node*.

    Returns a new tree sharing unchanged subtrees with *node*; returns
    *node* itself when the path cannot be resolved.
    """
    if not isinstance(node, (dict, list)) or not segments:
        return node

    if len(segments) == 1:
        return _sort_terminal(node, segments[0], sort_key, collate)

    current, rest = segments[0], segments[1:]

    match current:
        case Wildcard():
            if isinstance(node, dict):
                return {
                    prop: traverse_and_sort(value, rest, sort_key, collate=collate)
                    for prop, value in node.items()
                }
            # Sequences do not consume the wildcard.
            return [
                traverse_and_sort(item, segments, sort_key, collate=collate) for item in node
            ]

        case ArrayDescend(name):
            if not isinstance(node, dict):
                return node
            key = resolve_key(node, name)
            if key is _MISSING or not isinstance(node[key], list):
                return node
            result = dict(node)
            result[key] = [
                traverse_and_sort(item, rest, sort_key, collate=collate) for item in node[key]
            ]
            return result

        case Key(name):
            if isinstance(node, list):
                return [
                    traverse_and_sort(item, segments, sort_key, collate=collate) for item in node
                ]
            key = resolve_key(node, name)
            if key is _MISSING:
                return node
            result = dict(node)
            result[key] = traverse_and_sort(node[key], rest, sort_key, collate=collate)
            return result

    return node
