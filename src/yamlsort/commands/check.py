"""Command: report YAML files whose arrays are not sorted."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yamlsort.commands._base import YamlsortCommand

if TYPE_CHECKING:
    from yamlsort.commands._context import AppContext


@click.command(
    cls=YamlsortCommand,
    examples="""\
  yamlsort check config.yaml
  yamlsort check deploy/ values.yml
  yamlsort --json check .""",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.pass_obj
def check(app: AppContext, paths: tuple[Path, ...]) -> None:
    """Check that configured YAML arrays are sorted.

    Exits with status 1 when any file needs sorting.
    """
    result = app.service.check_paths(paths)
    app.emit(result)
    if result.data.get("changed_count"):
        raise SystemExit(1)
