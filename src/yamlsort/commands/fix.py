"""Command: sort configured YAML arrays in place."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yamlsort.commands._base import YamlsortCommand

if TYPE_CHECKING:
    from yamlsort.commands._context import AppContext

STDIN_PATH = "-"


@click.command(
    cls=YamlsortCommand,
    examples="""\
  yamlsort fix config.yaml
  yamlsort fix deploy/
  yamlsort fix --stdout config.yaml > sorted.yaml
  cat config.yaml | yamlsort fix --stdout -""",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, allow_dash=True))
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the fixed document instead of rewriting the file (single path or '-').",
)
@click.pass_obj
def fix(app: AppContext, paths: tuple[str, ...], to_stdout: bool) -> None:
    """Sort configured YAML arrays, keeping comments next to their lines."""
    svc = app.service

    if not to_stdout:
        if STDIN_PATH in paths:
            raise click.UsageError("Reading from stdin requires --stdout.")
        app.emit(svc.fix_paths(Path(p) for p in paths))
        return

    if len(paths) != 1:
        raise click.UsageError("--stdout takes exactly one path.")
    if paths[0] == STDIN_PATH:
        result = svc.fix(click.get_text_stream("stdin").read())
    else:
        result = svc.fix_file(Path(paths[0]), write=False)

    if result.ok and result.data.get("skipped"):
        raise click.UsageError(f"Not a YAML lint target: {paths[0]}")
    app.emit_document(result)
