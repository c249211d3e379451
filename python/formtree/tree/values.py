from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from formtree.errors import NotRenderedError

from .arrays import insert_item, remove_item
from .nodes import ArrayItem, ArrayList, LeafField, Node, NodeKind, ObjectGroup


@dataclass(frozen=True)
class ValueOptions:
    """
    ---
    keep_null_values: Keep mapping entries with null values. Null values are dropped by default, but sometimes
        they have to be kept to notify other parties about a change from non-null to null.
    ignore_missing_value: Do not set fields whose names are missing in the incoming mapping.
    """

    keep_null_values: bool = False
    ignore_missing_value: bool = True


DEFAULT_OPTIONS = ValueOptions()


def is_hierarchical_empty(value: Any) -> bool:
    """
    Examples regarded as empty:
        None, [], {}
        [None, [], {}]
        {"a": None, "b": [None, {"c": [None, {}]}]}
    """

    if value is None:
        return True
    if isinstance(value, dict):
        return all(is_hierarchical_empty(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return all(is_hierarchical_empty(v) for v in value)
    return False


def _ensure_rendered(node: Node) -> None:
    node.ensure_attached()
    if not node.rendered:
        raise NotRenderedError(f"values of '{node.full_name}' are not accessible before rendering", node.full_name)


def _get_leaf_value(field: LeafField) -> Any:
    assert field.editor is not None
    value = field.editor.get_value()
    # both None and "" pass the 'required' constraint, report them the same way
    if value is None or (isinstance(value, str) and value == ""):
        value = None
    return field.deserialize(value) if field.deserialize else value


def _get_object_value(group: ObjectGroup, options: ValueOptions) -> Dict[str, Any]:
    values = [
        (name, get_value(child, options))
        for name, child in group.active_children.items()
        if not child.schema.get("showOnly")
    ]
    if not options.keep_null_values:
        values = [(name, value) for name, value in values if value is not None]
    return dict(values)


def get_value(node: Node, options: Optional[ValueOptions] = None) -> Any:
    if options is None:
        options = DEFAULT_OPTIONS
    _ensure_rendered(node)

    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafField)
        return _get_leaf_value(node)
    if node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        return _get_object_value(node, options)
    if node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        # positions are meaningful in arrays, null items are never dropped
        return [get_value(item, options) for item in node.items]
    if node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        return get_value(node.inner_field, options)
    raise AssertionError(f"unknown node kind '{node.kind}', never happens")


def set_value(node: Node, value: Any, options: Optional[ValueOptions] = None) -> None:
    if options is None:
        options = DEFAULT_OPTIONS
    _ensure_rendered(node)

    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafField) and node.editor is not None
        node.editor.set_value(node.serialize(value) if node.serialize else value)

    elif node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        if value is None:
            value = {}
        # every declared child is set, setting a value may change what becomes active
        for name, child in node.all_children.items():
            if options.ignore_missing_value and name not in value:
                continue
            set_value(child, value.get(name), options)
        node.context.dispatcher.reevaluate(node)

    elif node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        # item identity is rebuilt on every call, in-place patching is not supported
        for item in list(node.items):
            remove_item(node, item)
        elements: List[Any] = value or []
        for element in elements:
            set_value(insert_item(node), element, options)

    elif node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        set_value(node.inner_field, value, options)
