"""Shared pytest fixtures and test helpers for yamlsort tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from yamlsort.domain.rules import SortRule

CONFIG_TOML = """\
[[arrays]]
path = "items"
sortKey = "name"

[[arrays]]
path = "groups[].members"
sortKey = "id"
"""

UNSORTED_YAML = """\
# inventory
items:
  # beta entry
  - name: b
    qty: 2
  # alpha entry
  - name: a
    qty: 1
"""

SORTED_YAML = """\
# inventory
items:
  # alpha entry
  - name: a
    qty: 1
  # beta entry
  - name: b
    qty: 2
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules() -> list[SortRule]:
    return [
        SortRule(path="items", sortKey="name"),
        SortRule(path="groups[].members", sortKey="id"),
    ]


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory holding a yamlsort.toml, used as CWD."""
    monkeypatch.delenv("YAMLSORT_CONFIG", raising=False)
    (tmp_path / "yamlsort.toml").write_text(CONFIG_TOML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def unsorted_yaml() -> str:
    return UNSORTED_YAML


@pytest.fixture
def sorted_yaml() -> str:
    return SORTED_YAML
