"""SortService: check and fix array ordering in YAML documents.

Pipeline for one document::

    text -> parse -> apply_rules -> serialize -> reconcile comments -> text

A document needs fixing when serializing the reordered tree gives
different text than serializing the tree as parsed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from yamlsort.domain.comments import scan_comments
from yamlsort.domain.reconcile import AnchorMatch, reconcile_comments
from yamlsort.domain.rules import SortRule, apply_rules
from yamlsort.infrastructure.files import (
    DEFAULT_EXTENSIONS,
    find_yaml_files,
    is_lint_target,
    read_document,
    write_document,
)
from yamlsort.infrastructure.yaml_io import (
    DocumentParseError,
    DumpStyle,
    parse_document,
    serialize_document,
)
from yamlsort.services.result import ServiceResult

if TYPE_CHECKING:
    from yamlsort.config.settings import SortSettings
    from yamlsort.domain.sorting import Collate

logger = logging.getLogger(__name__)
events = structlog.get_logger(__name__)

UNSORTED_MESSAGE = "YAML arrays should be sorted by specified keys"


@dataclass(frozen=True)
class _Outcome:
    changed: bool
    sorted_text: str


class SortService:
    """Check and fix YAML documents against an ordered rule set.

    Holds configuration only; every call is independent.
    """

    def __init__(
        self,
        rules: Sequence[SortRule],
        *,
        anchor_match: AnchorMatch = AnchorMatch.EVERY,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        style: DumpStyle | None = None,
        collate: Collate | None = None,
    ) -> None:
        self._rules = tuple(rules)
        self._anchor_match = anchor_match
        self._extensions = tuple(extensions)
        self._style = style
        self._collate = collate

    @classmethod
    def from_settings(cls, settings: SortSettings) -> SortService:
        """Build a service from merged CLI, env and file settings."""
        return cls(
            settings.arrays,
            anchor_match=settings.anchor_match,
            extensions=settings.extensions,
            style=settings.format.dump_style(),
        )

    # ── text API ──────────────────────────────────────────────────────

    def check(self, text: str) -> ServiceResult:
        """Report whether *text* would change when its arrays are sorted."""
        try:
            outcome = self._process(text)
        except DocumentParseError as exc:
            return _parse_error("check", exc)

        data: dict[str, Any] = {"changed": outcome.changed}
        if outcome.changed:
            data["message"] = UNSORTED_MESSAGE
        return ServiceResult(ok=True, op="check", data=data)

    def fix(self, text: str) -> ServiceResult:
        """Return *text* with its arrays sorted and its comments reattached.

        Unchanged documents come back verbatim.  Comments whose anchor
        line cannot be found after reordering are dropped and reported
        as warnings.
        """
        try:
            outcome = self._process(text)
        except DocumentParseError as exc:
            return _parse_error("fix", exc)

        comments = scan_comments(text)
        if not outcome.changed:
            return ServiceResult(
                ok=True,
                op="fix",
                data={
                    "changed": False,
                    "text": text,
                    "comments_total": len(comments),
                    "comments_dropped": 0,
                },
            )

        merged = reconcile_comments(
            text.replace("\r\n", "\n"),
            outcome.sorted_text,
            comments,
            anchor_match=self._anchor_match,
        )
        warnings = [
            f"Comment on line {c.line + 1} could not be reattached: {c.text}"
            for c in merged.dropped
        ]
        return ServiceResult(
            ok=True,
            op="fix",
            data={
                "changed": True,
                "text": merged.text,
                "comments_total": len(comments),
                "comments_dropped": len(merged.dropped),
            },
            warnings=warnings,
        )

    # ── file API ──────────────────────────────────────────────────────

    def check_file(self, path: Path) -> ServiceResult:
        """Check a file on disk; non-YAML files are skipped."""
        if not is_lint_target(path, self._extensions):
            return _skipped("check", path)
        try:
            text = read_document(path)
        except OSError as exc:
            return _io_error("check", path, exc)

        result = self.check(text)
        return _with_path(result, path)

    def fix_file(self, path: Path, *, write: bool = True) -> ServiceResult:
        """Fix a file on disk, rewriting it only when the order changed."""
        if not is_lint_target(path, self._extensions):
            return _skipped("fix", path)
        try:
            text = read_document(path)
        except OSError as exc:
            return _io_error("fix", path, exc)

        result = self.fix(text)
        if result.ok and result.data["changed"] and write:
            try:
                write_document(path, result.data["text"])
            except OSError as exc:
                return _io_error("fix", path, exc)
            logger.info("Sorted arrays in %s", path)
        return _with_path(result, path)

    def check_paths(self, paths: Iterable[Path]) -> ServiceResult:
        """Check every lint target under *paths* and summarize."""
        return self._run_paths("check", paths, self.check_file)

    def fix_paths(self, paths: Iterable[Path]) -> ServiceResult:
        """Fix every lint target under *paths* in place and summarize."""
        return self._run_paths("fix", paths, self.fix_file)

    # ── internals ─────────────────────────────────────────────────────

    def _run_paths(
        self,
        op: str,
        paths: Iterable[Path],
        handler: Callable[[Path], ServiceResult],
    ) -> ServiceResult:
        files: list[dict[str, Any]] = []
        warnings: list[str] = []
        for path in find_yaml_files(paths, self._extensions):
            with structlog.contextvars.bound_contextvars(path=str(path)):
                result = handler(path)
            entry: dict[str, Any] = {
                "path": str(path),
                "changed": bool(result.data.get("changed")),
                "skipped": bool(result.data.get("skipped")),
            }
            if result.error is not None:
                entry["error"] = result.error.message
            events.debug("file_processed", op=op, **entry)
            files.append(entry)
            warnings.extend(f"{path}: {w}" for w in result.warnings)

        data = {
            "files": files,
            "checked": sum(1 for f in files if not f["skipped"] and "error" not in f),
            "changed_count": sum(1 for f in files if f["changed"]),
            "error_count": sum(1 for f in files if "error" in f),
        }
        if data["error_count"]:
            return ServiceResult.failure(
                op,
                "FILES_FAILED",
                f"{data['error_count']} file(s) could not be processed",
                data=data,
                warnings=warnings,
                files=[f for f in files if "error" in f],
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _process(self, text: str) -> _Outcome:
        tree = parse_document(text)
        if not isinstance(tree, (dict, list)):
            return _Outcome(changed=False, sorted_text="")

        reordered = apply_rules(tree, self._rules, collate=self._collate)
        original_text = serialize_document(tree, self._style)
        sorted_text = serialize_document(reordered, self._style)
        changed = original_text != sorted_text
        logger.debug("Applied %d rule(s), changed=%s", len(self._rules), changed)
        return _Outcome(changed=changed, sorted_text=sorted_text)


def _parse_error(op: str, exc: DocumentParseError) -> ServiceResult:
    logger.debug("YAML parse failed", exc_info=True)
    return ServiceResult.failure(op, "PARSE_ERROR", f"Error processing YAML: {exc}")


def _io_error(op: str, path: Path, exc: OSError) -> ServiceResult:
    message = f"Cannot access {path}: {exc.strerror or exc}"
    return ServiceResult.failure(op, "IO_ERROR", message, path=str(path))


def _skipped(op: str, path: Path) -> ServiceResult:
    return ServiceResult(
        ok=True, op=op, data={"path": str(path), "changed": False, "skipped": True}
    )


def _with_path(result: ServiceResult, path: Path) -> ServiceResult:
    if not result.ok:
        error = result.error
        assert error is not None
        detail = {**error.detail, "path": str(path)}
        return result.model_copy(update={"error": error.model_copy(update={"detail": detail})})
    return result.model_copy(update={"data": {"path": str(path), **result.data}})
