"""Comment scanning for YAML source text.

The tree model drops comments, so they are collected from the raw text
before reordering and put back afterwards by
:mod:`yamlsort.domain.reconcile`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

COMMENT_MARKER = "#"

# Header of a literal/folded block scalar: ``key: |``, ``- >-``, ``key: |2+``
_BLOCK_SCALAR_HEADER = re.compile(r"(^|[:\-]\s+|^\s*-\s+)[|>][-+0-9]*\s*$")


@dataclass(frozen=True)
class Comment:
    """A ``#`` comment found in the source text.

    Attributes:
        line: 0-based index of the line the comment starts on.
        column: Offset of the ``#`` within that line.
        text: Comment text from the ``#`` to the end of the line.
        inline: True when content precedes the comment on its line.
    """

    line: int
    column: int
    text: str
    inline: bool = False

    def render(self) -> str:
        """The comment as a standalone line at its original indentation."""
        if self.inline:
            return self.text
        return " " * self.column + self.text


def split_lines(text: str) -> list[str]:
    """Split *text* into lines, treating ``\\r\\n`` as ``\\n``."""
    return text.replace("\r\n", "\n").split("\n")


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def find_comment_start(line: str) -> int | None:
    """Return the offset of the comment on *line*, or None.

    A ``#`` opens a comment at the start of the line or after whitespace,
    and only outside single- or double-quoted scalars.
    """
    quote: str | None = None
    i = 0
    while i < len(line):
        ch = line[i]
        if quote == '"':
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                quote = None
        elif quote == "'":
            if ch == "'":
                # '' is an escaped quote inside a single-quoted scalar
                if i + 1 < len(line) and line[i + 1] == "'":
                    i += 2
                    continue
                quote = None
        elif ch == COMMENT_MARKER and (i == 0 or line[i - 1] in " \t"):
            return i
        elif ch in "\"'" and (i == 0 or line[i - 1] in " \t:-[{,"):
            quote = ch
        i += 1
    return None


def scan_comments(text: str) -> list[Comment]:
    """Collect every comment in *text*, in source order.

    Lines inside literal (``|``) and folded (``>``) block scalars are
    content, never comments.  Quoted scalars spanning several lines are
    not tracked.
    """
    comments: list[Comment] = []
    block_parent: int | None = None

    for index, line in enumerate(split_lines(text)):
        if block_parent is not None:
            if not line.strip() or _indent(line) > block_parent:
                continue
            block_parent = None

        start = find_comment_start(line)
        content = line if start is None else line[:start]
        if start is not None:
            comments.append(
                Comment(
                    line=index,
                    column=start,
                    text=line[start:].rstrip(),
                    inline=bool(content.strip()),
                )
            )
        if _BLOCK_SCALAR_HEADER.search(content.rstrip()):
            block_parent = _indent(line)
    return comments
