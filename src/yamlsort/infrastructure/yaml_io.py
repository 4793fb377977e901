"""YAML document adapter: text to plain tree and back via ruamel.yaml.

The tree handed to the domain layer is made of plain ``dict`` and
``list`` containers; comments and other round-trip metadata are left
behind in the parser.  Scalars keep their ruamel types so quoting
survives a re-serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError


class DocumentParseError(Exception):
    """Raised when the text is not a valid YAML document."""


@dataclass(frozen=True)
class DumpStyle:
    """Emitter layout for :func:`serialize_document`."""

    mapping_indent: int = 2
    sequence_indent: int = 4
    sequence_offset: int = 2
    width: int = 4096


def _new_yaml(style: DumpStyle | None = None) -> YAML:
    """Create a fresh round-trip YAML instance.

    ruamel.yaml's YAML object is stateful; a failed load or dump must not
    leak into the next document.
    """
    style = style or DumpStyle()
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    y.width = style.width
    y.indent(
        mapping=style.mapping_indent,
        sequence=style.sequence_indent,
        offset=style.sequence_offset,
    )
    return y


def to_plain(node: Any) -> Any:
    """Copy ruamel containers into plain ``dict``/``list`` recursively."""
    if isinstance(node, dict):
        return {key: to_plain(value) for key, value in node.items()}
    if isinstance(node, list):
        return [to_plain(item) for item in node]
    return node


def parse_document(text: str) -> Any:
    """Parse *text* into a plain tree.

    Returns None for an empty document.

    Raises:
        DocumentParseError: if *text* is not valid YAML.
    """
    try:
        data = _new_yaml().load(text)
    except YAMLError as exc:
        raise DocumentParseError(str(exc)) from exc
    return to_plain(data)


def serialize_document(tree: Any, style: DumpStyle | None = None) -> str:
    """Serialize *tree* in block style, keeping mapping key order."""
    buf = StringIO()
    _new_yaml(style).dump(tree, buf)
    return buf.getvalue()
