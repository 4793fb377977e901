"""Filesystem operations: lint-target gating, discovery, read/write."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

DEFAULT_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml")

# Directories to skip when walking a directory argument.
_SKIP_DIRS = frozenset({".git", ".hg", ".svn", ".venv", "node_modules", "__pycache__"})


def is_lint_target(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """True when *path* ends with one of *extensions*."""
    return path.name.endswith(tuple(extensions))


def find_yaml_files(
    paths: Iterable[Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Expand *paths* into the files to process.

    Files named explicitly are returned as given, whatever their suffix,
    so the caller can report them as skipped.  Directories are walked
    recursively for lint targets, skipping VCS and tool directories.
    """
    extensions = tuple(extensions)
    results: list[Path] = []
    for path in paths:
        if not path.is_dir():
            results.append(path)
            continue
        found = [
            candidate
            for candidate in path.rglob("*")
            if candidate.is_file()
            and is_lint_target(candidate, extensions)
            and not any(part in _SKIP_DIRS for part in candidate.relative_to(path).parts)
        ]
        results.extend(sorted(found))
    return results


def read_document(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_document(path: Path, text: str) -> None:
    """Replace the contents of *path* with *text*."""
    path.write_text(text, encoding="utf-8")
