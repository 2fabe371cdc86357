"""Incremental assembly of the overrides passed to ``generate_fields``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class OptionsBuilder:
    """Immutable accumulator of per-field overrides.

    ``with_overrides`` returns a new builder; later keys replace earlier ones
    per top-level field, nested override mappings included (no deep merge).
    The schema is kept for reference and is not used to validate keys.
    """

    schema: Any
    overrides: Mapping[str, Any] = field(default_factory=dict)

    def with_overrides(self, field_options: Mapping[str, Any]) -> "OptionsBuilder":
        return OptionsBuilder(self.schema, {**self.overrides, **field_options})

    def build(self) -> dict[str, Any]:
        return dict(self.overrides)


def create_options(schema: Any) -> OptionsBuilder:
    """Start an empty :class:`OptionsBuilder` for ``schema``."""
    return OptionsBuilder(schema)


__all__ = ["OptionsBuilder", "create_options"]
