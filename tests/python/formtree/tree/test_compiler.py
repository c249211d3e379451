import pytest
from pytest import raises

from formtree.errors import SchemaError
from formtree.tree import ArrayList, LeafField, NodeKind, ObjectGroup, compile_schema
from formtree.tree.nodes import get_full_name, prettify


@pytest.mark.parametrize(
    "name,title",
    [("htmlAttr", "Html Attr"), ("HTTPError", "HTTP Error"), ("firstName", "First Name"), ("age", "Age"), ("", "")],
)
def test_prettify(name: str, title: str) -> None:
    assert prettify(name) == title


@pytest.mark.parametrize(
    "prefix,name,full_name",
    [("", "", ""), ("", "x", "x"), ("people-n", "", "people-n"), ("people-n", "name", "people-n-name")],
)
def test_full_name(prefix: str, name: str, full_name: str) -> None:
    assert get_full_name(prefix, name) == full_name


def test_compile_object(context) -> None:
    root = compile_schema(
        {
            "type": "object",
            "properties": {
                "firstName": {"type": "string", "title": "Given name"},
                "lastName": {"type": "string"},
                "address": {"type": "object", "properties": {"city": {"type": "string"}}},
                "tags": {"type": "array", "items": {"type": "object", "properties": {}}},
            },
            "required": ["lastName"],
        },
        context,
    )

    assert isinstance(root, ObjectGroup)
    assert root.kind is NodeKind.OBJECT
    assert root.parent is None
    assert list(root.all_children) == ["firstName", "lastName", "address", "tags"]
    assert list(root.active_children) == ["firstName", "lastName", "address", "tags"]

    first = root.all_children["firstName"]
    assert first.schema["title"] == "Given name"
    assert first.schema["description"] == ""
    assert first.parent is root

    last = root.all_children["lastName"]
    assert last.schema["title"] == "Last Name"
    assert last.schema["required"] is True
    assert "required" not in first.schema

    city = root.all_children["address"].all_children["city"]
    assert city.full_name == "address-city"
    assert isinstance(root.all_children["tags"], ArrayList)
    assert root.all_children["tags"].items == []


@pytest.mark.parametrize(
    "schema,kind,editor_kind",
    [
        ({"type": "string"}, NodeKind.LEAF, "Text"),
        ({"type": "boolean"}, NodeKind.LEAF, "Checkbox"),
        ({"type": "string", "enum": ["a", "b"]}, NodeKind.LEAF, "Select"),
        ({"type": "object", "editor": "HiddenJson"}, NodeKind.LEAF, "HiddenJson"),
        ({"type": "array", "editor": "Checkboxes", "enum": ["a"]}, NodeKind.LEAF, "Checkboxes"),
        ({"type": "array", "items": {"type": "object"}}, NodeKind.ARRAY, None),
        ({"type": "object"}, NodeKind.OBJECT, None),
    ],
)
def test_compile_priority(context, schema, kind: NodeKind, editor_kind) -> None:
    node = compile_schema(schema, context, "x")
    assert node.kind is kind
    if editor_kind is not None:
        assert isinstance(node, LeafField)
        assert node.editor_kind == editor_kind
        assert node.editor is None


def test_native_date_input(context) -> None:
    schema = {"type": "string", "format": "date"}
    assert compile_schema(schema, context).editor_kind == "Text"

    context.native_date_input = False
    assert compile_schema(schema, context).editor_kind == "DatePicker"


@pytest.mark.parametrize(
    "schema,path",
    [
        ({"properties": {}}, "/"),
        ({"type": "object", "properties": {"a": {"title": "no type"}}}, "/a"),
        ({"type": "array", "items": {"type": "string"}}, "/"),
        ({"type": "array"}, "/"),
        ({"type": "object", "properties": {}, "required": ["missing"]}, "/"),
        ({"type": "string", "enum": ["a", "b"], "optionLabels": ["A"]}, "/"),
        ({"type": "string", "editor": "NoSuchEditor"}, "/"),
        ({"type": "object", "serialize": str}, "/"),
        ({"type": "string", "serialize": "upper"}, "/"),
        (
            {"type": "object", "properties": {"a": {"type": "string", "availableIf": {"b": 1}}}},
            "/a",
        ),
        (
            {"type": "object", "properties": {"a": {"type": "string", "availableIf": {"a": 1}}}},
            "/a",
        ),
        (
            {
                "type": "object",
                "properties": {
                    "a": {"type": "string"},
                    "b": {"type": "string"},
                    "c": {"type": "string", "availableIf": {"a": 1, "b": 2}},
                },
            },
            "/c",
        ),
    ],
)
def test_compile_invalid(context, schema, path: str) -> None:
    with raises(SchemaError) as error:
        compile_schema(schema, context)
    assert error.value.where() == path


def test_compile_does_not_modify_schema(context) -> None:
    schema = {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]}
    compile_schema(schema, context)
    assert schema == {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]}


def test_initially_unavailable(context) -> None:
    root = compile_schema(
        {
            "type": "object",
            "properties": {
                "flag": {"type": "boolean"},
                "details": {"type": "string", "availableIf": {"flag": True}},
            },
        },
        context,
    )
    assert list(root.active_children) == ["flag"]
