"""Rich console and theme used by the human-readable renderers.

Renderers print into a buffered :class:`~rich.console.Console` and hand
back the text, so ``format_result()`` stays a pure ``-> str`` function.
Colour codes are only emitted when Rich sees a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

YAMLSORT_THEME = Theme(
    {
        "ys.ok": "bold green",
        "ys.error": "bold red",
        "ys.warning": "bold yellow",
        "ys.op": "bold cyan",
        "ys.key": "dim",
        "ys.path": "bold",
        "ys.unsorted": "yellow",
        "ys.fixed": "green",
        "ys.skipped": "dim",
    }
)

# Per-file status label -> theme style.
_STATUS_STYLES: dict[str, str] = {
    "unsorted": "ys.unsorted",
    "fixed": "ys.fixed",
    "error": "ys.error",
    "skipped": "ys.skipped",
    "ok": "ys.skipped",
}

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Buffered console for one render pass.

    Args:
        no_color: Strip ANSI styling regardless of the terminal.
        width: Wrap width; defaults to :data:`DEFAULT_WIDTH` so paths are
            not folded in narrow pipes.
    """
    return Console(
        file=StringIO(),
        theme=YAMLSORT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Theme style for a per-file status label (``""`` when unknown)."""
    return _STATUS_STYLES.get(status, "")
