"""``yamlsort`` entry point: global options, settings and subcommands."""

from __future__ import annotations

import click

from yamlsort import __version__
from yamlsort.commands import register_commands
from yamlsort.commands._context import AppContext
from yamlsort.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from yamlsort.config.settings import SortSettings

_EPILOG = (
    f"Rules are read from {CONFIG_FILENAME}, found by walking up from the "
    f"current directory, or from the file named by --config or ${CONFIG_ENV_VAR}."
)


@click.group(
    invoke_without_command=True,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="yamlsort")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Only print affected paths.")
@click.option("-v", "--verbose", is_flag=True, help="List every file and log at DEBUG.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Use this file instead of discovering {CONFIG_FILENAME}.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """yamlsort: sort YAML arrays by key while keeping comments."""
    settings = SortSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
