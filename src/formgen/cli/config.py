"""``formgen config``: inspect and change the persisted CLI settings."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from formgen.config import config_path, load_settings, update_settings

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
GENERATE_DEFAULTS = ["include_choices", "indent"]


def register_subcommands(subparsers):
    """Attach ``show``, ``set-level`` and ``set`` to the ``config`` command."""

    subparsers.add_parser("show", help="Print the settings file location and contents")

    set_level_parser = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    set_parser = subparsers.add_parser("set", help="Persist a default for 'formgen generate'")
    set_parser.add_argument("key", choices=GENERATE_DEFAULTS)
    set_parser.add_argument("value", help="New value, e.g. 'true' or '4'")


def dispatch(args) -> int:
    if args.subcommand == "show":
        settings = load_settings()
        print(config_path())
        print(json.dumps(settings.model_dump(), indent=2, sort_keys=True))
        return 0

    if args.subcommand == "set-level":
        changes = {"log_level": args.level}
    elif args.subcommand == "set":
        changes = {args.key: args.value}
    else:
        logger.error("No handler for subcommand: %s", args.subcommand)
        return 1

    try:
        settings = update_settings(**changes)
    except ValidationError as exc:
        logger.error("Invalid setting %s: %s", changes, exc.errors()[0]["msg"])
        return 1

    logger.info("Saved %s to %s", changes, config_path())
    logging.getLogger("formgen").setLevel(settings.log_level)
    return 0
