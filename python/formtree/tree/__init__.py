from .arrays import insert_item, item_actions, move_down, move_up, remove_item
from .compiler import compile_schema
from .dependencies import ActivationDiff, ensure_dependencies
from .error_router import clear_errors, set_errors
from .events import ChangeDispatcher
from .nodes import ArrayItem, ArrayList, CompileContext, LeafField, Node, NodeKind, ObjectGroup
from .pointer import build_pointer, enumerate_fields, get_value_by_json_pointer, resolve_pointer
from .rendering import detach, render
from .values import ValueOptions, get_value, is_hierarchical_empty, set_value

__all__ = [
    "ActivationDiff",
    "ArrayItem",
    "ArrayList",
    "ChangeDispatcher",
    "CompileContext",
    "LeafField",
    "Node",
    "NodeKind",
    "ObjectGroup",
    "ValueOptions",
    "build_pointer",
    "clear_errors",
    "compile_schema",
    "detach",
    "enumerate_fields",
    "ensure_dependencies",
    "get_value",
    "get_value_by_json_pointer",
    "insert_item",
    "is_hierarchical_empty",
    "item_actions",
    "move_down",
    "move_up",
    "remove_item",
    "render",
    "resolve_pointer",
    "set_errors",
    "set_value",
]
