"""Generate form field descriptors from data-shape schemas.

The top-level module re-exports the public API: :func:`generate_fields`
walks a schema, :func:`handle_field_type` builds a single descriptor and
:func:`create_options` assembles overrides incrementally.
"""

import logging

from .errors import UnsupportedTypeError
from .forms import create_options, generate_fields, handle_field_type, resolve_defaults
from .schema import Category

# library: stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Category",
    "UnsupportedTypeError",
    "create_options",
    "generate_fields",
    "handle_field_type",
    "resolve_defaults",
]
