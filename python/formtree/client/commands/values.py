import argparse
from typing import Tuple, Type

from formtree.client.command import Command, CommandArgs, register_command
from formtree.form import Form
from formtree.logging import get_logger
from formtree.parsing import DataFormat, parse_file
from formtree.tree import ValueOptions

logger = get_logger(__name__)


@register_command
class ValuesCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.schema_file: str = namespace.schema_file
        self.data_file: str = namespace.data_file
        self.keep_nulls: bool = namespace.keep_nulls
        self.format: DataFormat = namespace.format

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        values = subparser.add_parser("values", help="Sets a value into the field tree and prints the value read back.")
        values.set_defaults(keep_nulls=False, format=DataFormat.JSON)
        values.add_argument(
            "--keep-nulls",
            help="Keep mapping entries with null values in the output.",
            action="store_true",
            dest="keep_nulls",
        )

        formats = values.add_mutually_exclusive_group()
        formats.add_argument(
            "--json",
            help="Print the value in JSON format, default.",
            const=DataFormat.JSON,
            action="store_const",
            dest="format",
        )
        formats.add_argument(
            "--yaml",
            help="Print the value in YAML format.",
            const=DataFormat.YAML,
            action="store_const",
            dest="format",
        )

        values.add_argument(
            "schema_file",
            type=str,
            help="File with the schema in YAML or JSON format.",
        )
        values.add_argument(
            "data_file",
            type=str,
            help="File with the value in YAML or JSON format.",
        )
        return values, ValuesCommand

    def run(self, args: CommandArgs) -> None:
        form = Form(parse_file(self.schema_file), args.config).render()
        form.set_value(parse_file(self.data_file))

        options = form.value_options
        if self.keep_nulls:
            options = ValueOptions(keep_null_values=True, ignore_missing_value=options.ignore_missing_value)
        print(self.format.dict_dump(form.get_value(options), indent=4))
        logger.notice(f"value of '{self.data_file}' read back from '{self.schema_file}'")
