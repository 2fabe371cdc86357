"""Exceptions raised by the form generator."""

from __future__ import annotations

from typing import Any


class UnsupportedTypeError(TypeError):
    """Raised when a field's declared type has no form representation.

    The error is never recovered inside :mod:`formgen`; it aborts the whole
    :func:`~formgen.forms.generator.generate_fields` call.
    """

    def __init__(self, field_name: str | None, declaration: Any) -> None:
        self.field_name = field_name
        self.declaration = declaration
        if field_name is None:
            message = f"Unsupported type: {declaration!r} is not a schema"
        else:
            message = f"Unsupported type for field {field_name!r}: {declaration!r}"
        super().__init__(message)


__all__ = ["UnsupportedTypeError"]
