from .defaults import capitalize, resolve_defaults
from .generator import generate_fields, handle_field_type
from .handlers import HANDLERS
from .options import OptionsBuilder, create_options

__all__ = [
    "HANDLERS",
    "OptionsBuilder",
    "capitalize",
    "create_options",
    "generate_fields",
    "handle_field_type",
    "resolve_defaults",
]
