# schema/columns.py
from __future__ import annotations

from typing import Any, Iterator

from sqlalchemy import inspect
from sqlalchemy.sql.schema import Column as SAColumn
from sqlalchemy.sql import sqltypes as T  # canonical type classes

from .category import Category, SchemaField


NUMBER_TYPES = (T.Integer, T.BigInteger, T.SmallInteger, T.Numeric, T.Float, T.REAL, T.DECIMAL)
STRING_TYPES = (T.Text, T.String, T.Unicode)


def _is_enum_type(t) -> bool:
    # work across dialects / emulated types
    return isinstance(t, T.Enum) or getattr(t, "enum_class", None) is not None or getattr(t, "enums", None) is not None


def is_column(obj: Any) -> bool:
    return isinstance(obj, SAColumn)


def is_declarative_model(obj: Any) -> bool:
    """True for SQLAlchemy declarative classes (anything with a ``__table__``)."""
    return isinstance(obj, type) and getattr(obj, "__table__", None) is not None


def category_from_column(col: SAColumn) -> Category | None:
    """Map a column's SQL type onto a form field category.

    Resolution order matters: ``Enum`` is a ``String`` subclass in SQLAlchemy,
    so enum detection runs first.

    | SQLAlchemy Type                  | Category |
    |----------------------------------|----------|
    | Enum (native or emulated)        | enum     |
    | Boolean                          | boolean  |
    | Integer / Numeric / Float family | number   |
    | String / Text / Unicode          | string   |
    | Other (DateTime, JSON, ...)      | None     |
    """
    t = col.type
    if _is_enum_type(t):
        return Category.ENUM
    if isinstance(t, T.Boolean):
        return Category.BOOLEAN
    if isinstance(t, NUMBER_TYPES):
        return Category.NUMBER
    if isinstance(t, STRING_TYPES):
        return Category.STRING
    return None


def column_members(col: SAColumn) -> tuple[Any, ...]:
    t = col.type
    if getattr(t, "enum_class", None):
        return tuple(e.value for e in t.enum_class)
    if getattr(t, "enums", None):
        return tuple(t.enums)
    return ()


def field_from_column(col: SAColumn, name: str | None = None) -> SchemaField:
    category = category_from_column(col)
    return SchemaField(
        name=name or col.name,
        category=category,
        declaration=col,
        members=column_members(col) if category is Category.ENUM else (),
    )


def iter_column_fields(model: Any) -> Iterator[SchemaField]:
    """Yield one field per mapped column attribute, in mapper order.

    Fields are named after the attribute key, so ``type_ = mapped_column("type")``
    yields ``type_``: the name the ORM object and its pydantic twins expose.
    """
    for prop in inspect(model).column_attrs:
        yield field_from_column(prop.columns[0], prop.key)


__all__ = [
    "category_from_column",
    "column_members",
    "field_from_column",
    "is_column",
    "is_declarative_model",
    "iter_column_fields",
]
