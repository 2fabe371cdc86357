"""Per-category finalizers for merged field options.

Each handler receives the defaults-plus-overrides mapping and returns the
field descriptor. They currently return a copy of their input unchanged and
never look at the raw declaration.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from formgen.schema import Category


FieldHandler = Callable[[Mapping[str, Any]], dict[str, Any]]


def handle_string(options: Mapping[str, Any]) -> dict[str, Any]:
    return dict(options)


def handle_number(options: Mapping[str, Any]) -> dict[str, Any]:
    return dict(options)


def handle_boolean(options: Mapping[str, Any]) -> dict[str, Any]:
    return dict(options)


def handle_enum(options: Mapping[str, Any]) -> dict[str, Any]:
    return dict(options)


# every primitive category needs an entry; OBJECT is expanded by the walker
HANDLERS: dict[Category, FieldHandler] = {
    Category.STRING: handle_string,
    Category.NUMBER: handle_number,
    Category.BOOLEAN: handle_boolean,
    Category.ENUM: handle_enum,
}


__all__ = [
    "HANDLERS",
    "FieldHandler",
    "handle_boolean",
    "handle_enum",
    "handle_number",
    "handle_string",
]
