import enum
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional

import pytest
from pydantic import BaseModel

from formgen.errors import UnsupportedTypeError
from formgen.schema import Category, SchemaField, categorize, describe_field, enum_members, iter_fields


class Role(str, enum.Enum):
    admin = "admin"
    viewer = "viewer"


class Flag(enum.IntEnum):
    off = 0
    on = 1


class Address(BaseModel):
    street: str


class Person(BaseModel):
    name: str
    address: Address
    role: Role = Role.viewer
    nickname: Optional[str] = None


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (str, Category.STRING),
        (int, Category.NUMBER),
        (float, Category.NUMBER),
        (Decimal, Category.NUMBER),
        (bool, Category.BOOLEAN),
        (Role, Category.ENUM),
        (Flag, Category.ENUM),
        (Literal["a", "b"], Category.ENUM),
        (Address, Category.OBJECT),
        (Optional[int], Category.NUMBER),
        (bool | None, Category.BOOLEAN),
        (list[str], None),
        (dict[str, int], None),
        (Any, None),
        (datetime, None),
        (int | str, None),
        (Annotated[int, "meta"], Category.NUMBER),
        (Annotated[Optional[str], "meta"], Category.STRING),
        (Optional[Annotated[Role, "meta"]], Category.ENUM),
    ],
)
def test_categorize(annotation, expected):
    assert categorize(annotation) is expected


def test_enum_members():
    assert enum_members(Role) == ("admin", "viewer")
    assert enum_members(Literal[1, 2, 3]) == (1, 2, 3)
    assert enum_members(Optional[Role]) == ("admin", "viewer")
    assert enum_members(str) == ()


def test_describe_field_for_nested_model_keeps_model_class():
    field = describe_field("address", Optional[Address])

    assert field.is_nested
    assert field.nested is Address


def test_describe_field_passes_through_schema_fields():
    field = SchemaField("age", Category.NUMBER, int)

    assert describe_field("age", field) is field


def test_describe_field_marks_unsupported_declarations():
    field = describe_field("tags", list[str])

    assert field.category is None
    assert field.declaration == list[str]


def test_iter_fields_pydantic_order():
    fields = list(iter_fields(Person))

    assert [f.name for f in fields] == ["name", "address", "role", "nickname"]
    assert [f.category for f in fields] == [
        Category.STRING,
        Category.OBJECT,
        Category.ENUM,
        Category.STRING,
    ]
    assert fields[2].members == ("admin", "viewer")


def test_iter_fields_mapping():
    schema = {"title": str, "meta": {"views": int}}

    fields = list(iter_fields(schema))

    assert fields[0] == SchemaField("title", Category.STRING, str)
    assert fields[1].is_nested
    assert fields[1].nested == {"views": int}


def test_iter_fields_rejects_unknown_schema_kinds():
    with pytest.raises(UnsupportedTypeError, match="not a schema"):
        list(iter_fields("not a schema"))


def test_annotated_declarations_in_mapping_schema():
    schema = {"age": Annotated[int, "meta"], "role": Annotated[Role, "meta"]}

    fields = list(iter_fields(schema))

    assert [f.category for f in fields] == [Category.NUMBER, Category.ENUM]
    assert fields[1].members == ("admin", "viewer")
