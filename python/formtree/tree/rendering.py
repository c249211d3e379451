from __future__ import annotations

import weakref
from typing import Any

from formtree.logging import get_logger

from .nodes import ArrayItem, ArrayList, LeafField, Node, NodeKind, ObjectGroup

logger = get_logger(__name__)


def is_in_array(node: Node) -> bool:
    parent = node.parent
    while parent is not None:
        if parent.kind is NodeKind.ITEM:
            return True
        parent = parent.parent
    return False


def _render_leaf(field: LeafField) -> None:
    if field.editor is not None:
        field.editor.remove()

    # fields inside of array items have no label, their title is used as a placeholder
    placeholder = field.schema["title"] if is_in_array(field) else None
    editor = field.context.registry.create(field.editor_kind, field.schema, field.full_name, placeholder)

    ref = weakref.ref(field)

    def on_editor_change(_editor: Any) -> None:
        node = ref()
        if node is not None and not node.detached:
            node.context.dispatcher.dispatch(node)

    editor.on_change(on_editor_change)
    field.editor = editor


def render(node: Node) -> Node:
    """Attach editors to every leaf of the subtree, values can be accessed afterwards."""

    node.ensure_attached()

    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafField)
        _render_leaf(node)
    elif node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        for child in node.all_children.values():
            render(child)
    elif node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        for item in node.items:
            render(item)
    elif node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        render(node.inner_field)

    node.rendered = True
    if node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        # editors provide initial values now, conditions may evaluate differently
        node.context.dispatcher.reevaluate(node)
    return node


def detach(node: Node) -> None:
    """Release the subtree: editors are removed and no back-references remain."""

    if node.kind is NodeKind.LEAF:
        assert isinstance(node, LeafField)
        if node.editor is not None:
            node.editor.remove()
            node.editor = None
    elif node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        for child in node.all_children.values():
            detach(child)
        node.all_children = {}
        node.active_children = {}
    elif node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        for item in node.items:
            detach(item)
        node.items = []
    elif node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        detach(node.inner_field)

    node.release_parent()
    node.clear_listeners()
    node.detached = True
    node.rendered = False
    logger.debug(f"detached '{node.full_name}'")
