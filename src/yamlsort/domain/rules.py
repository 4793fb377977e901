"""Sort rules and the rule application pass.

A :class:`SortRule` pairs a path pattern with the key used to order the
arrays it resolves to.  :func:`apply_rules` folds an ordered rule set
over a tree and then revisits every nested container, so each rule can
match at any depth.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from yamlsort.domain.paths import PathSegment, parse_path, traverse_and_sort
from yamlsort.domain.sorting import Collate


class SortRule(BaseModel):
    """One ``{path, sortKey}`` entry of the ``arrays`` configuration."""

    model_config = {"frozen": True, "populate_by_name": True}

    path: str
    sort_key: str = Field(alias="sortKey", min_length=1)

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        parse_path(value)
        return value

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return parse_path(self.path)


def apply_rule(tree: Any, rule: SortRule, *, collate: Collate | None = None) -> Any:
    """Apply a single rule at the root of *tree*."""
    return traverse_and_sort(tree, rule.segments, rule.sort_key, collate=collate)


def apply_rules(
    tree: Any,
    rules: Sequence[SortRule],
    *,
    collate: Collate | None = None,
) -> Any:
    """Return a new tree with every rule applied in declaration order.

    Each rule sees the result of the rules before it.  The whole rule
    set is then re-applied to every nested mapping and sequence value.
    Scalars and an empty rule set leave the tree untouched.
    """
    if not isinstance(tree, (dict, list)) or not rules:
        return tree

    if isinstance(tree, list):
        return [apply_rules(item, rules, collate=collate) for item in tree]

    result: Any = tree
    for rule in rules:
        result = apply_rule(result, rule, collate=collate)

    if not isinstance(result, dict):
        return result
    return {
        key: apply_rules(value, rules, collate=collate)
        if isinstance(value, (dict, list))
        else value
        for key, value in result.items()
    }
