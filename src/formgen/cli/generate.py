"""``formgen generate``: print the form fields of an importable schema."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import import_module
from pathlib import Path
from typing import Any

from formgen.config import Settings
from formgen.errors import UnsupportedTypeError
from formgen.forms import generate_fields

logger = logging.getLogger(__name__)


def load_schema(target: str) -> Any:
    """Import ``package.module:attr`` (dotted attributes allowed)."""

    module_path, _, attr_path = target.partition(":")
    if not module_path or not attr_path:
        raise ValueError(f"Expected MODULE:ATTR, got {target!r}")

    obj: Any = import_module(module_path)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


def load_options(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    with Path(path).open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a JSON object")
    return data


def register_arguments(parser):
    parser.add_argument("schema", help="Schema to expand, as MODULE:ATTR")
    parser.add_argument("--options", help="JSON file with per-field overrides")
    # None means "use the persisted default"
    parser.add_argument(
        "--include-choices",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add enum member values as 'options' on select fields",
    )
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")


def dispatch(args, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    include_choices = settings.include_choices if args.include_choices is None else args.include_choices
    indent = settings.indent if args.indent is None else args.indent

    try:
        schema = load_schema(args.schema)
        options = load_options(args.options)
    except (ImportError, AttributeError, OSError, ValueError) as exc:
        logger.error("Could not load input: %s", exc)
        return 1

    try:
        fields = generate_fields(schema, options, include_choices=include_choices)
    except UnsupportedTypeError as exc:
        logger.error("%s", exc)
        return 1

    logger.debug("Generated %d top-level entries for %s", len(fields), args.schema)
    json.dump(fields, sys.stdout, indent=indent, default=str)
    sys.stdout.write("\n")
    return 0
