"""Tests for comment reconciliation after reordering."""

from __future__ import annotations

from yamlsort.domain.comments import Comment, scan_comments
from yamlsort.domain.reconcile import AnchorMatch, build_anchor_map, reconcile_comments

ORIGINAL = """\
items:
  # beta
  - name: b
  # alpha
  # (first letter)
  - name: a
"""

REORDERED = """\
items:
  - name: a
  - name: b
"""


class TestBuildAnchorMap:
    def test_groups_by_following_content_line(self) -> None:
        anchors = build_anchor_map(ORIGINAL, scan_comments(ORIGINAL))
        assert [c.text for c in anchors["  - name: b"]] == ["# beta"]
        assert [c.text for c in anchors["  - name: a"]] == ["# alpha", "# (first letter)"]

    def test_blank_lines_are_skipped(self) -> None:
        original = "# header\n\nitems: []\n"
        anchors = build_anchor_map(original, scan_comments(original))
        assert list(anchors) == ["items: []"]

    def test_trailing_comment_without_anchor_is_left_out(self) -> None:
        original = "a: 1\n# dangling\n"
        assert build_anchor_map(original, scan_comments(original)) == {}

    def test_inline_comment_anchors_own_line(self) -> None:
        original = "a: 1  # why\n"
        anchors = build_anchor_map(original, scan_comments(original))
        assert list(anchors) == ["a: 1  # why"]

    def test_identical_anchor_text_accumulates(self) -> None:
        original = "a:\n  # one\n  - x\nb:\n  # two\n  - x\n"
        anchors = build_anchor_map(original, scan_comments(original))
        assert [c.text for c in anchors["  - x"]] == ["# one", "# two"]


class TestReconcileComments:
    def test_comments_follow_moved_lines(self) -> None:
        merged = reconcile_comments(ORIGINAL, REORDERED, scan_comments(ORIGINAL))
        assert merged.text == (
            "items:\n"
            "  # alpha\n"
            "  # (first letter)\n"
            "  - name: a\n"
            "  # beta\n"
            "  - name: b\n"
        )
        assert merged.dropped == []
        assert len(merged.placed) == 3

    def test_order_follows_original_lines(self) -> None:
        comments = list(reversed(scan_comments(ORIGINAL)))
        merged = reconcile_comments(ORIGINAL, REORDERED, comments)
        assert merged.text.index("# alpha") < merged.text.index("# (first letter)")

    def test_changed_line_text_drops_comment(self) -> None:
        reordered = "items:\n- name: a\n- name: b\n"
        merged = reconcile_comments(ORIGINAL, reordered, scan_comments(ORIGINAL))
        assert merged.text == reordered
        assert [c.text for c in merged.dropped] == ["# beta", "# alpha", "# (first letter)"]

    def test_lines_without_anchor_pass_through(self) -> None:
        merged = reconcile_comments("a: 1\n", "a: 1\nb: 2\n", [])
        assert merged.text == "a: 1\nb: 2\n"

    def test_repeated_anchor_every(self) -> None:
        original = "a:\n  # note\n  - x\nb:\n  - x\n"
        reordered = original.replace("  # note\n", "")
        merged = reconcile_comments(original, reordered, scan_comments(original))
        assert merged.text == "a:\n  # note\n  - x\nb:\n  # note\n  - x\n"

    def test_repeated_anchor_first(self) -> None:
        original = "a:\n  # note\n  - x\nb:\n  - x\n"
        merged = reconcile_comments(
            original,
            original.replace("  # note\n", ""),
            scan_comments(original),
            anchor_match=AnchorMatch.FIRST,
        )
        assert merged.text == original

    def test_anchor_match_values(self) -> None:
        assert AnchorMatch("every") is AnchorMatch.EVERY
        assert AnchorMatch("first") is AnchorMatch.FIRST

    def test_explicit_comment_tokens(self) -> None:
        original = "list:\n# top\n- id: b\n- id: a\n"
        comments = [Comment(line=1, column=0, text="# top")]
        merged = reconcile_comments(original, "list:\n- id: a\n- id: b\n", comments)
        assert merged.text == "list:\n- id: a\n# top\n- id: b\n"
