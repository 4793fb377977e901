"""AppContext: per-invocation state shared by the yamlsort commands.

The root group builds it from :class:`SortSettings` and stores it as
``ctx.obj``; commands receive it through ``@click.pass_obj``.  Results
go out through :meth:`AppContext.emit` (summaries) or
:meth:`AppContext.emit_document` (a fixed document on stdout).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yamlsort.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from yamlsort.config.settings import SortSettings
    from yamlsort.services.result import ServiceResult
    from yamlsort.services.sort import SortService


class AppContext:
    """Settings, the lazily built service, and output routing."""

    def __init__(self, settings: SortSettings) -> None:
        from yamlsort.config.logging import configure_logging

        self.settings = settings
        self._service: SortService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> SortService:
        if self._service is None:
            from yamlsort.services.sort import SortService

            self._service = SortService.from_settings(self.settings)
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def _warn(self, result: ServiceResult) -> None:
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit 1 when it failed.

        Successful output goes to stdout with warnings on stderr (in JSON
        mode the warnings are part of the payload).  Failures go to stderr.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        if output:
            click.echo(output)
        if not settings.json_output:
            self._warn(result)

    def emit_document(self, result: ServiceResult) -> None:
        """Write the fixed text of a single-document ``fix`` to stdout.

        stdout carries only the document, byte for byte; warnings go to
        stderr and failures are routed through :meth:`emit`.
        """
        if not result.ok:
            self.emit(result)
            return
        self._warn(result)
        click.echo(result.data["text"], nl=False)
