"""SortSettings: CLI flags, environment and ``yamlsort.toml`` merged.

Highest priority first:

1. keyword arguments (the CLI flags Click parsed)
2. ``YAMLSORT_*`` environment variables
3. the TOML file from :func:`~yamlsort.config.discovery.find_config`
4. field defaults
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from yamlsort.config.discovery import find_config, read_config_file
from yamlsort.config.models import FormatConfig
from yamlsort.domain.reconcile import AnchorMatch
from yamlsort.domain.rules import SortRule
from yamlsort.infrastructure.files import DEFAULT_EXTENSIONS

# TOML contents for the SortSettings being built by ``from_cli``.
_file_values: ContextVar[dict[str, Any]] = ContextVar("yamlsort_file_values", default={})


class SortSettings(BaseSettings):
    """Frozen settings object handed to :class:`~yamlsort.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        arrays: Ordered sort rules (``[[arrays]]`` tables).
        extensions: File suffixes treated as lint targets.
        anchor_match: Tie-break for repeated comment anchor lines.
        format: Layout used when re-serializing documents.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "YAMLSORT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # CLI-only flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # yamlsort.toml keys
    arrays: list[SortRule] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    anchor_match: AnchorMatch = AnchorMatch.EVERY
    format: FormatConfig = Field(default_factory=FormatConfig)

    @field_validator("extensions")
    @classmethod
    def _dotted(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        file_settings = InitSettingsSource(settings_cls, init_kwargs=_file_values.get())
        return init_settings, env_settings, file_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> SortSettings:
        """Build settings for one CLI invocation.

        Uses *config_path* when given, otherwise discovers
        ``yamlsort.toml`` from *cwd*.

        Raises:
            click.ClickException: if *config_path* does not exist, the file
                is not valid TOML, or a value fails validation.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(cwd)

        values = read_config_file(toml_path) if toml_path else {}
        token = _file_values.set(values)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration ({source}): {exc}") from exc
        finally:
            _file_values.reset(token)
