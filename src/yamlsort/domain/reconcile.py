"""Reconciler: put comments back after the document was re-serialized.

Matching is textual: each comment is tied to the first content line that
follows it in the original text (its *anchor*), and is re-emitted right
before every output line whose text equals that anchor.  A comment whose
anchor text no longer appears in the output is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from yamlsort.domain.comments import Comment, split_lines

logger = logging.getLogger(__name__)


class AnchorMatch(StrEnum):
    """How often an anchor's comments are emitted when its text recurs.

    - EVERY -> "every" : before every output line equal to the anchor
    - FIRST -> "first" : before the first such line only
    """

    EVERY = "every"
    FIRST = "first"


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of :func:`reconcile_comments`."""

    text: str
    placed: list[Comment] = field(default_factory=list)
    dropped: list[Comment] = field(default_factory=list)


def find_anchor(lines: list[str], start: int, comment_lines: set[int]) -> str | None:
    """Text of the first non-blank, non-comment line at or after *start*."""
    for index in range(start, len(lines)):
        line = lines[index]
        if index in comment_lines or not line.strip():
            continue
        return line
    return None


def build_anchor_map(original: str, comments: Iterable[Comment]) -> dict[str, list[Comment]]:
    """Group *comments* by the text of their anchor line in *original*.

    Each group is ordered by original line.  Comments with no content
    line after them are left out.
    """
    lines = split_lines(original)
    comments = list(comments)
    comment_lines = {c.line for c in comments if not c.inline}

    anchors: dict[str, list[Comment]] = {}
    for comment in comments:
        anchor = find_anchor(lines, comment.line, comment_lines)
        if anchor is None:
            logger.debug("No anchor line for comment on line %d", comment.line + 1)
            continue
        anchors.setdefault(anchor, []).append(comment)

    for group in anchors.values():
        group.sort(key=lambda c: c.line)
    return anchors


def reconcile_comments(
    original: str,
    reordered: str,
    comments: Iterable[Comment],
    *,
    anchor_match: AnchorMatch = AnchorMatch.EVERY,
) -> Reconciliation:
    """Re-insert *comments* from *original* into *reordered*.

    Args:
        original: Source text the comments were scanned from.
        reordered: Freshly serialized text without comments.
        comments: Comments found in *original*.
        anchor_match: Tie-break for anchor text that occurs more than once.

    Returns:
        The merged text with the comments that were placed and dropped.
    """
    comments = list(comments)
    anchors = build_anchor_map(original, comments)
    emitted: set[str] = set()
    placed: dict[Comment, None] = {}

    out: list[str] = []
    for line in split_lines(reordered):
        group = anchors.get(line)
        if group is not None and not (anchor_match is AnchorMatch.FIRST and line in emitted):
            emitted.add(line)
            for comment in group:
                out.append(comment.render())
                placed.setdefault(comment)
        out.append(line)

    dropped = [c for c in comments if c not in placed]
    for comment in dropped:
        logger.debug("Dropped comment from line %d: %s", comment.line + 1, comment.text)
    return Reconciliation(text="\n".join(out), placed=list(placed), dropped=dropped)
