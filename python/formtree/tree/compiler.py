from __future__ import annotations

from typing import Any, Dict, Optional

from formtree.constants import ITEM_PREFIX_SUFFIX
from formtree.editors.registry import infer_editor_kind
from formtree.errors import SchemaError

from .nodes import ArrayItem, ArrayList, CompileContext, LeafField, Node, ObjectGroup, Schema


def _normalize_required(schema: Schema, error_path: str) -> Dict[str, Schema]:
    """Copy the properties, pushing the object's 'required' list down into each property schema."""

    properties: Dict[str, Schema] = dict(schema.get("properties") or {})
    for prop in schema.get("required") or []:
        if prop not in properties:
            raise SchemaError(f"required property '{prop}' is not declared in 'properties'", error_path)
        prop_schema = dict(properties[prop])
        prop_schema.setdefault("required", True)
        properties[prop] = prop_schema
    return properties


def _check_available_if(properties: Dict[str, Schema], error_path: str) -> None:
    for name, prop in properties.items():
        if "availableIf" not in prop:
            continue
        condition: Any = prop["availableIf"]
        path = f"{error_path}/{name}"
        if not isinstance(condition, dict) or len(condition) != 1:
            raise SchemaError("'availableIf' must be a mapping with exactly one entry", path)
        key = next(iter(condition))
        if key not in properties:
            raise SchemaError(f"'availableIf' references unknown sibling '{key}'", path)
        if key == name:
            raise SchemaError("'availableIf' cannot reference the field itself", path)


def _check_options(schema: Schema, error_path: str) -> None:
    labels = schema.get("optionLabels")
    if labels is not None and len(labels) != len(schema.get("enum") or []):
        raise SchemaError("'optionLabels' must label every value of 'enum'", error_path)


def _check_hooks(schema: Schema, error_path: str) -> None:
    for hook in ("serialize", "deserialize"):
        if hook in schema:
            if not callable(schema[hook]):
                raise SchemaError(f"'{hook}' must be callable", error_path)
            if schema.get("editor") is None and schema["type"] in ("object", "array"):
                raise SchemaError(f"'{hook}' is supported on fields only", error_path)


def _compile_leaf(
    schema: Schema, context: CompileContext, name: str, prefix: str, parent: Optional[Node], error_path: str
) -> LeafField:
    _check_options(schema, error_path)
    kind = infer_editor_kind(schema, context.native_date_input)
    if kind not in context.registry:
        raise SchemaError(f"unknown editor '{kind}'", error_path)
    return LeafField(schema, context, kind, name, prefix, parent)


def compile_schema(
    schema: Schema,
    context: CompileContext,
    name: str = "",
    prefix: str = "",
    parent: Optional[Node] = None,
    error_path: str = "",
) -> Node:
    if not isinstance(schema, dict):
        raise SchemaError(f"expected a mapping, found '{type(schema).__name__}'", error_path or "/")
    if not schema.get("type"):
        raise SchemaError("missing required property 'type' in schema", error_path or "/")
    _check_hooks(schema, error_path or "/")

    # object and array schemas with an explicit editor are edited as a whole by a single field
    if schema.get("editor"):
        return _compile_leaf(schema, context, name, prefix, parent, error_path or "/")

    if schema["type"] == "object":
        properties = _normalize_required(schema, error_path or "/")
        _check_available_if(properties, error_path)
        group = ObjectGroup({**schema, "properties": properties}, context, name, prefix, parent)
        for prop_name, prop_schema in properties.items():
            group.all_children[prop_name] = compile_schema(
                prop_schema, context, prop_name, group.full_name, group, f"{error_path}/{prop_name}"
            )
        # members which are initially unavailable are left out right away
        context.dispatcher.reevaluate(group)
        return group

    if schema["type"] == "array":
        items = schema.get("items")
        if not isinstance(items, dict) or items.get("type") != "object":
            raise SchemaError("only object schemas are supported as array 'items'", error_path or "/")
        return ArrayList(schema, context, name, prefix, parent)

    return _compile_leaf(schema, context, name, prefix, parent, error_path or "/")


def build_item(array: ArrayList, index: int) -> ArrayItem:
    prefix = f"{array.full_name}{ITEM_PREFIX_SUFFIX}"
    item = ArrayItem(array.item_schema, array.context, index, prefix, array)
    # the inner field has no name, its full name equals to the item's prefix
    item.inner_field = compile_schema(array.item_schema, array.context, "", prefix, item)
    return item
