from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class Category(str, enum.Enum):
    """Closed set of field categories the form generator understands."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    OBJECT = "object"


@dataclass(frozen=True)
class SchemaField:
    name: str
    category: Category | None
    declaration: Any
    nested: Any = None
    members: tuple[Any, ...] = ()

    @property
    def is_nested(self) -> bool:
        return self.category is Category.OBJECT


__all__ = ["Category", "SchemaField"]
