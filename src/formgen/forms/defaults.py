"""Baseline presentation metadata for a single field."""

from __future__ import annotations

from typing import Any

from formgen.schema import Category, describe_field


def capitalize(field_name: str) -> str:
    """Uppercase the first character only (``subStreet`` -> ``SubStreet``)."""
    return field_name[:1].upper() + field_name[1:]


def resolve_defaults(
    field_name: str,
    declaration: Any,
    *,
    include_choices: bool = False,
) -> dict[str, Any]:
    """Return the default options for ``field_name`` before any override.

    ``declaration`` may be a type annotation, an SQLAlchemy column or an
    already introspected :class:`~formgen.schema.SchemaField`. With
    ``include_choices`` enum fields also get an ``options`` list holding the
    enum member values.
    """

    field = describe_field(field_name, declaration)
    options: dict[str, Any] = {
        "id": field_name,
        "name": field_name,
        "label": capitalize(field_name),
        "tag": "input",
    }

    if field.category is Category.STRING:
        options["type"] = "text"
    elif field.category is Category.NUMBER:
        options["type"] = "number"
        options["inputMode"] = "numeric"
    elif field.category is Category.BOOLEAN:
        options["type"] = "checkbox"
    elif field.category is Category.ENUM:
        options.update({"type": "select", "renderAs": "select", "tag": "select"})
        if include_choices:
            options["options"] = list(field.members)

    return options


__all__ = ["capitalize", "resolve_defaults"]
