"""structlog setup for the yamlsort CLI.

Both structlog loggers and plain ``logging.getLogger(__name__)`` loggers
end up on one stderr handler, so stdout stays reserved for results and
fixed documents.  ``--log-json`` switches the renderer to JSON lines;
``-v`` lowers the ``yamlsort`` logger to DEBUG.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "yamlsort"


def _shared_processors() -> list[structlog.types.Processor]:
    # Also run on stdlib records via ``foreign_pre_chain``; merging
    # contextvars there is what attaches the bound file path to them.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to stderr.

    Args:
        verbose: DEBUG output for ``yamlsort.*`` loggers; WARNING otherwise.
        log_json: Emit JSON lines instead of the console format.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    # Reconfiguring (one CliRunner invocation per test) must not stack handlers.
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
