"""Schema introspection: categories and ordered field records."""

from .category import Category, SchemaField
from .fields import categorize, describe_field, enum_members, iter_fields

__all__ = [
    "Category",
    "SchemaField",
    "categorize",
    "describe_field",
    "enum_members",
    "iter_fields",
]
