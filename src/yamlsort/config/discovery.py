"""Locate and read ``yamlsort.toml``.

Lookup order: the file named by ``$YAMLSORT_CONFIG``, then the nearest
``yamlsort.toml`` in the start directory or any of its parents.  The
``--config`` flag bypasses discovery entirely (see
:meth:`yamlsort.config.settings.SortSettings.from_cli`).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click


CONFIG_FILENAME = "yamlsort.toml"
CONFIG_ENV_VAR = "YAMLSORT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file that applies to *start* (default: cwd).

    A ``$YAMLSORT_CONFIG`` pointing at a missing file disables discovery
    and yields None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: if the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
