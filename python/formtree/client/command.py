import argparse
from abc import ABC, abstractmethod
from typing import List, Tuple, Type, TypeVar

from formtree.config import FormConfig, load_config

T = TypeVar("T", bound=Type["Command"])

CLIENT_NAME = "formtreectl"

_registered_commands: List[Type["Command"]] = []


def register_command(cls: T) -> T:
    _registered_commands.append(cls)
    return cls


def install_commands_parsers(parser: argparse.ArgumentParser) -> None:
    subparsers = parser.add_subparsers(help="command type")
    for command in _registered_commands:
        subparser, typ = command.register_args_subparser(subparsers)
        subparser.set_defaults(command=typ, subparser=subparser)


def determine_config(namespace: argparse.Namespace) -> FormConfig:
    # 1) options from the '--config' file, defaults otherwise
    config = load_config(namespace.config[0]) if len(namespace.config) > 0 else FormConfig()
    # 2) '--loglevel' argument wins over the file
    if namespace.loglevel:
        config.loglevel = namespace.loglevel
    return config


class CommandArgs:
    def __init__(self, namespace: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        self.namespace = namespace
        self.parser = parser
        self.subparser: argparse.ArgumentParser = namespace.subparser
        self.command: Type["Command"] = namespace.command

        self.config: FormConfig = determine_config(namespace)


class Command(ABC):
    @staticmethod
    @abstractmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        raise NotImplementedError()

    @abstractmethod
    def __init__(self, namespace: argparse.Namespace) -> None:  # pylint: disable=[unused-argument]
        super().__init__()

    @abstractmethod
    def run(self, args: CommandArgs) -> None:
        raise NotImplementedError()
