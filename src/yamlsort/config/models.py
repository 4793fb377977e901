"""Pydantic models for the nested tables of ``yamlsort.toml``.

Defaults live here, so a config file only needs the keys it changes.
Top-level keys are fields of :class:`~yamlsort.config.settings.SortSettings`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from yamlsort.infrastructure.yaml_io import DumpStyle


class FormatConfig(BaseModel):
    """[format] section: layout of re-serialized documents."""

    model_config = {"frozen": True}

    mapping_indent: int = Field(default=2, ge=1)
    sequence_indent: int = Field(default=4, ge=1)
    sequence_offset: int = Field(default=2, ge=0)
    width: int = Field(default=4096, ge=20)

    def dump_style(self) -> DumpStyle:
        return DumpStyle(
            mapping_indent=self.mapping_indent,
            sequence_indent=self.sequence_indent,
            sequence_offset=self.sequence_offset,
            width=self.width,
        )
