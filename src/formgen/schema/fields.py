"""Introspection of schema objects into ordered :class:`SchemaField` records.

Three kinds of schema are understood:

* pydantic models (classes or instances), in ``model_fields`` order;
* SQLAlchemy declarative models, in table column order;
* plain mappings of field name to a type annotation, where a nested mapping
  declares a nested object.
"""

from __future__ import annotations

import enum
import types
from collections.abc import Mapping
from decimal import Decimal
from typing import Annotated, Any, Iterator, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from formgen.errors import UnsupportedTypeError

from .category import Category, SchemaField
from .columns import field_from_column, is_column, is_declarative_model, iter_column_fields


NUMBER_TYPES = (int, float, Decimal)


def _unwrap_optional(annotation: Any) -> Any:
    """Strip ``Annotated`` metadata and a single ``| None``."""
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap_optional(args[0])
    return annotation


def _is_model_class(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def categorize(annotation: Any) -> Category | None:
    """Return the :class:`Category` of a Python type annotation.

    ``None`` means the annotation has no form representation (lists, dicts,
    ``Any``, datetimes, unions of several types, ...).
    """

    annotation = _unwrap_optional(annotation)
    origin = get_origin(annotation)
    if origin is Literal:
        return Category.ENUM
    if origin is not None or not isinstance(annotation, type):
        return None
    # str-mixin enums are also str, and bool is also int
    if issubclass(annotation, enum.Enum):
        return Category.ENUM
    if issubclass(annotation, BaseModel):
        return Category.OBJECT
    if issubclass(annotation, bool):
        return Category.BOOLEAN
    if issubclass(annotation, NUMBER_TYPES):
        return Category.NUMBER
    if issubclass(annotation, str):
        return Category.STRING
    return None


def enum_members(annotation: Any) -> tuple[Any, ...]:
    """Return the allowed values of a ``Literal`` or ``Enum`` annotation."""

    annotation = _unwrap_optional(annotation)
    if get_origin(annotation) is Literal:
        return get_args(annotation)
    if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
        return tuple(member.value for member in annotation)
    return ()


def describe_field(name: str, declaration: Any) -> SchemaField:
    """Normalise any supported declaration kind into a :class:`SchemaField`."""

    if isinstance(declaration, SchemaField):
        return declaration
    if is_column(declaration):
        return field_from_column(declaration, name)
    if isinstance(declaration, Mapping):
        return SchemaField(name, Category.OBJECT, declaration, nested=declaration)

    category = categorize(declaration)
    if category is Category.OBJECT:
        return SchemaField(name, category, declaration, nested=_unwrap_optional(declaration))
    if category is Category.ENUM:
        return SchemaField(name, category, declaration, members=enum_members(declaration))
    return SchemaField(name, category, declaration)


def iter_fields(schema: Any) -> Iterator[SchemaField]:
    """Yield the fields of ``schema`` in declaration order."""

    if isinstance(schema, BaseModel):
        schema = type(schema)

    if _is_model_class(schema):
        for name, info in schema.model_fields.items():
            yield describe_field(name, info.annotation)
    elif is_declarative_model(schema):
        yield from iter_column_fields(schema)
    elif isinstance(schema, Mapping):
        for name, declaration in schema.items():
            yield describe_field(name, declaration)
    else:
        raise UnsupportedTypeError(None, schema)


__all__ = ["categorize", "describe_field", "enum_members", "iter_fields"]
