import argparse
from typing import List, Optional, Tuple, Type

from formtree.client.command import Command, CommandArgs, register_command
from formtree.form import Form
from formtree.logging import get_logger
from formtree.parsing import parse_file
from formtree.tree import Node, NodeKind, build_pointer
from formtree.tree.nodes import ArrayItem, ArrayList, ObjectGroup

logger = get_logger(__name__)


def _outline(node: Node, depth: int = 0, active: bool = True) -> List[str]:
    line = f"{'  ' * depth}{node.kind.name.lower()} {node.full_name or '-'} {build_pointer(node) or '/'}"
    lines = [line if active else f"{line} (inactive)"]

    if node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        for name, child in node.all_children.items():
            lines.extend(_outline(child, depth + 1, name in node.active_children))
    elif node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        for item in node.items:
            lines.extend(_outline(item, depth + 1))
    elif node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        lines.extend(_outline(node.inner_field, depth + 1))
    return lines


@register_command
class TreeCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.schema_file: str = namespace.schema_file
        self.data_file: Optional[str] = namespace.data_file

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        tree = subparser.add_parser("tree", help="Prints the outline of the field tree compiled from a schema.")
        tree.add_argument(
            "-d",
            "--data",
            type=str,
            help="Optional, file with a value in YAML or JSON format, set into the tree before printing.",
            dest="data_file",
            default=None,
        )
        tree.add_argument(
            "schema_file",
            type=str,
            help="File with the schema in YAML or JSON format.",
        )
        return tree, TreeCommand

    def run(self, args: CommandArgs) -> None:
        form = Form(parse_file(self.schema_file), args.config).render()
        if self.data_file:
            form.set_value(parse_file(self.data_file))

        lines = _outline(form.root)
        print("\n".join(lines))
        logger.notice(f"'{self.schema_file}' compiled into {len(lines)} node(s)")
