# forms/generator.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from formgen.errors import UnsupportedTypeError
from formgen.schema import iter_fields, describe_field

from .defaults import resolve_defaults
from .handlers import HANDLERS

logger = logging.getLogger(__name__)

FieldDescriptor = dict[str, Any]
FormFields = list[dict[str, Any]]


def handle_field_type(
    field_name: str,
    declaration: Any,
    field_options: Mapping[str, Any] | None = None,
    *,
    include_choices: bool = False,
) -> FieldDescriptor:
    """Build the descriptor for one primitive field.

    Defaults from :func:`resolve_defaults` are shallow-merged with
    ``field_options`` (override keys win, including ``tag``, ``type`` and
    ``label``) and handed to the handler registered for the field's category.

    Raises
    ------
    UnsupportedTypeError
        If the declaration is not a string, number, boolean or enum. Nested
        objects are only accepted by :func:`generate_fields`.
    """
    field = describe_field(field_name, declaration)
    handler = HANDLERS.get(field.category)
    if handler is None:
        logger.debug("No handler for field %r (category=%s)", field_name, field.category)
        raise UnsupportedTypeError(field_name, field.declaration)

    defaults = resolve_defaults(field_name, field, include_choices=include_choices)
    options = {**defaults, **(field_options or {})}
    return handler(options)


def generate_fields(
    schema: Any,
    options: Mapping[str, Any] | None = None,
    *,
    include_choices: bool = False,
) -> FormFields:
    """Generate the ordered list of form field descriptors for ``schema``.

    Nested object fields become ``{field_name: [...]}`` entries built by
    recursing into the nested schema with ``options[field_name]``. Overrides
    for names absent from the schema are ignored.

    Any :class:`UnsupportedTypeError` aborts the whole call.
    """
    options = options or {}
    result: FormFields = []
    logger.debug("Generating fields for %r", schema)

    for field in iter_fields(schema):
        if field.is_nested:
            logger.debug("Entering nested group %r", field.name)
            nested = generate_fields(
                field.nested,
                options.get(field.name) or {},
                include_choices=include_choices,
            )
            result.append({field.name: nested})
            continue

        element = handle_field_type(
            field.name,
            field,
            options.get(field.name),
            include_choices=include_choices,
        )
        result.append(element)

    return result


__all__ = ["FieldDescriptor", "FormFields", "generate_fields", "handle_field_type"]
