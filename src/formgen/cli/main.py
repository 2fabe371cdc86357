# formgen/cli/main.py
import argparse
import sys

from formgen.cli import config as config_cli, generate
from formgen.config import load_settings
from formgen.log import configure_logging


def main(argv=None):

    parser = argparse.ArgumentParser(prog="formgen", description="Form field generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate form fields for a schema")
    generate.register_arguments(generate_parser)

    config_parser = subparsers.add_parser("config", help="Persisted settings")
    config_subparsers = config_parser.add_subparsers(dest="subcommand", required=True)
    config_cli.register_subcommands(config_subparsers)

    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    if args.command == "generate":
        status = generate.dispatch(args, settings)
    else:
        status = config_cli.dispatch(args)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
