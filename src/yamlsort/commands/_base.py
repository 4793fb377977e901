"""Click command class carrying usage examples.

``yamlsort <command> --examples`` prints the examples and exits, so the
``--help`` text can stay short.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def examples_option(examples: str) -> click.Option:
    """Eager ``--examples`` flag that prints *examples* and exits."""

    def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(textwrap.dedent(examples).strip("\n"), "  "))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show,
        help="Show usage examples and exit.",
    )


class YamlsortCommand(click.Command):
    """Command accepting an ``examples=`` keyword in ``@click.command``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))
