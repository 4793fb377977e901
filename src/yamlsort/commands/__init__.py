"""Subcommand modules for yamlsort.

Provides register_commands() which uses deferred imports to keep
``yamlsort --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from yamlsort.commands.check import check
    from yamlsort.commands.fix import fix

    cli.add_command(check)
    cli.add_command(fix)
