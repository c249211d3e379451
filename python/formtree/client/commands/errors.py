import argparse
from typing import Tuple, Type

from formtree.client.command import Command, CommandArgs, register_command
from formtree.errors import DataParsingError
from formtree.form import Form
from formtree.logging import get_logger
from formtree.parsing import parse_file
from formtree.tree import build_pointer, enumerate_fields

logger = get_logger(__name__)


@register_command
class ErrorsCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.schema_file: str = namespace.schema_file
        self.errors_file: str = namespace.errors_file

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        errors = subparser.add_parser("errors", help="Routes a list of errors to the fields of the tree.")
        errors.add_argument(
            "schema_file",
            type=str,
            help="File with the schema in YAML or JSON format.",
        )
        errors.add_argument(
            "errors_file",
            type=str,
            help="File with a list of error objects in YAML or JSON format.",
        )
        return errors, ErrorsCommand

    def run(self, args: CommandArgs) -> None:
        errors = parse_file(self.errors_file)
        if not isinstance(errors, list):
            raise DataParsingError(f"expected a list of errors, got '{type(errors).__name__}'", self.errors_file)

        form = Form(parse_file(self.schema_file), args.config).render()
        form.set_errors(errors)
        fields = [node for node in enumerate_fields(form.root) if node.error is not None]
        for node in fields:
            print(f"{build_pointer(node) or '/'}: {node.error}")
        logger.notice(f"{len(errors)} error(s) routed to {len(fields)} field(s)")
