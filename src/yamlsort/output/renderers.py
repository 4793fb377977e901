"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from yamlsort.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from yamlsort.services.result import ServiceResult

# Label printed for a file whose arrays were (or would be) reordered.
_CHANGED_LABEL = {"check": "unsorted", "fix": "fixed"}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One changed path per line, or a single ``ERROR:`` line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    files = result.data.get("files", [])
    return "\n".join(f["path"] for f in files if f.get("changed"))


# ── Helpers ───────────────────────────────────────────────────────────


def _file_status(entry: dict[str, Any], op: str) -> str | None:
    if "error" in entry:
        return "error"
    if entry.get("changed"):
        return _CHANGED_LABEL.get(op, "changed")
    if entry.get("skipped"):
        return "skipped"
    return None


def _file_lines(
    console: Console, files: list[dict[str, Any]], op: str, *, verbose: bool
) -> None:
    """One line per file; untouched files only when *verbose*."""
    for entry in files:
        status = _file_status(entry, op)
        if status is None:
            if not verbose:
                continue
            status = "ok"
        elif status == "skipped" and not verbose:
            continue

        line = Text.assemble(
            (f"{status:<9}", style_for_status(status)),
            (entry["path"], "ys.path"),
        )
        if status == "error":
            line.append(f"  {entry['error']}")
        console.print(line)


def _summary(console: Console, result: ServiceResult) -> None:
    d = result.data
    word = _CHANGED_LABEL.get(result.op, "changed")
    console.print(
        f"\n{d.get('checked', 0)} checked, {d.get('changed_count', 0)} {word}, "
        f"{d.get('error_count', 0)} errors"
    )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "ys.error"), (f"  {result.op}", "ys.op"), f"  {msg}")
    )

    files = result.data.get("files")
    if files:
        _file_lines(console, files, result.op, verbose=verbose)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a check summary: one line per unsorted file."""
    files = result.data.get("files", [])
    if not result.data.get("changed_count"):
        console.print(Text.assemble(("OK", "ys.ok"), "  All arrays sorted."))
        if verbose:
            _file_lines(console, files, "check", verbose=True)
        return
    _file_lines(console, files, "check", verbose=verbose)
    _summary(console, result)


def _render_fix(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a fix summary: one line per rewritten file."""
    console.print(Text.assemble(("OK", "ys.ok"), ("  fix", "ys.op")))
    _file_lines(console, result.data.get("files", []), "fix", verbose=verbose)
    _summary(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    console.print(Text.assemble(("OK", "ys.ok"), (f"  {result.op}", "ys.op")))
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text.assemble((f"  {key}: ", "ys.key"), str(value)))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "fix": _render_fix,
}
