import argparse
import importlib
import os
import sys
from typing import List, Optional

from formtree.constants import VERSION
from formtree.errors import FormTreeError
from formtree.logging import LOG_LEVELS, start_logging

from .command import CLIENT_NAME, CommandArgs, install_commands_parsers


def auto_import_commands() -> None:
    prefix = f"{'.'.join(__name__.split('.')[:-1])}.commands."
    for module_name in os.listdir(os.path.dirname(__file__) + "/commands"):
        if module_name[-3:] != ".py" or module_name == "__init__.py":
            continue
        importlib.import_module(f"{prefix}{module_name[:-3]}")


def create_main_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        CLIENT_NAME,
        description="Command-line utility compiling JSON schemas into field trees."
        " It shows the compiled tree, round-trips values through it and routes error lists to its fields.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=VERSION,
        help="Get version",
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        type=str,
        help="Optional, path to the form options in YAML or JSON format.",
        default=[],
        nargs=1,
        required=False,
    )
    parser.add_argument(
        "--loglevel",
        action="store",
        type=str,
        choices=LOG_LEVELS,
        help="Optional, logging level, overrides the level from '--config'.",
        default=None,
        required=False,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    auto_import_commands()
    parser = create_main_argument_parser()
    install_commands_parsers(parser)

    namespace = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not hasattr(namespace, "command"):
        parser.print_help()
        sys.exit(1)

    try:
        args = CommandArgs(namespace, parser)
        start_logging(CLIENT_NAME, args.config.loglevel)
        command = args.command(namespace)
        command.run(args)
    except FormTreeError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
