"""yamlsort: sort arrays in YAML documents by key, keeping comments in place."""

from __future__ import annotations

from yamlsort.domain.reconcile import AnchorMatch
from yamlsort.domain.rules import SortRule, apply_rules
from yamlsort.services.result import ServiceError, ServiceResult
from yamlsort.services.sort import SortService

__version__: str = "0.1.0"
__all__: list[str] = [
    "AnchorMatch",
    "ServiceError",
    "ServiceResult",
    "SortRule",
    "SortService",
    "apply_rules",
]
