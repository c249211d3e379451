import pytest
from pytest import raises

from formtree.editors import BaseEditor, EditorRegistry, default_registry, infer_editor_kind
from formtree.editors.attributes import build_input_attributes
from formtree.editors.text import TextEditor
from formtree.errors import SchemaError
from formtree.form import Form


@pytest.mark.parametrize(
    "schema,native,kind",
    [
        ({"type": "string"}, True, "Text"),
        ({"type": "string", "editor": "TextArea", "enum": ["a"]}, True, "TextArea"),
        ({"type": "boolean", "enum": [True]}, True, "Select"),
        ({"type": "boolean"}, True, "Checkbox"),
        ({"type": ["boolean", "null"]}, True, "Checkbox"),
        ({"type": "string", "format": "date"}, True, "Text"),
        ({"type": "string", "format": "date"}, False, "DatePicker"),
        ({"type": "string", "format": "email"}, False, "Text"),
    ],
)
def test_infer_editor_kind(schema, native: bool, kind: str) -> None:
    assert infer_editor_kind(schema, native) == kind


def test_default_registry() -> None:
    registry = default_registry()
    assert registry.kinds() == [
        "Text",
        "TextArea",
        "Password",
        "Hidden",
        "HiddenJson",
        "Checkbox",
        "Select",
        "Checkboxes",
        "Radio",
        "ReadOnlyText",
        "ReadOnlyHtml",
        "DatePicker",
        "MultiImages",
        "Image",
    ]


def test_create() -> None:
    editor = default_registry().create("Password", {"type": "string", "required": True}, "secret")
    assert editor.input_attributes["type"] == "password"
    assert editor.input_attributes["name"] == "secret"
    assert editor.input_attributes["required"] is True


def test_unknown_kind() -> None:
    with raises(SchemaError):
        EditorRegistry().create("Text", {"type": "string"}, "name")


class UpperEditor(BaseEditor):
    input_type = None

    def get_value(self):
        return self._value.upper() if self._value else None


def test_custom_editor() -> None:
    registry = default_registry()
    registry.register("Upper", UpperEditor)
    form = Form(
        {"type": "object", "properties": {"code": {"type": "string", "editor": "Upper"}}}, registry=registry
    ).render()

    form.set_value({"code": "abc"})
    assert form.get_value() == {"code": "ABC"}
    assert "type" not in form.field("/code").editor.input_attributes


def test_input_attributes() -> None:
    attributes = build_input_attributes(
        {"type": "integer", "minimum": 10, "maximum": 100, "multipleOf": 5, "required": True, "readOnly": True},
        "count",
        placeholder="Count",
        input_type="text",
    )
    assert attributes.pop("id").startswith("id")
    assert attributes == {
        "name": "count",
        "required": True,
        "readonly": True,
        "type": "number",
        "step": 5,
        "min": 10,
        "max": 100,
        "placeholder": "Count",
    }


@pytest.mark.parametrize(
    "schema,input_type",
    [
        ({"type": "string", "format": "email"}, "email"),
        ({"type": "string", "format": "date"}, "date"),
        ({"type": "string", "format": "uri"}, "url"),
        ({"type": "number"}, "number"),
        ({"type": "string"}, "text"),
        ({"type": "string", "inputAttributes": {"type": "tel"}}, "tel"),
    ],
)
def test_input_type(schema, input_type: str) -> None:
    assert build_input_attributes(schema, "x", input_type=TextEditor.input_type)["type"] == input_type


def test_input_attributes_not_text() -> None:
    attributes = build_input_attributes({"type": "string", "maxLength": 5, "required": False}, "x", input_type=None)
    assert set(attributes) == {"id", "name"}


def test_step_requires_aligned_minimum() -> None:
    attributes = build_input_attributes({"type": "number", "minimum": 1, "multipleOf": 5}, "x", input_type="text")
    assert "step" not in attributes


def test_unique_ids() -> None:
    first = build_input_attributes({"type": "string"}, "x")
    second = build_input_attributes({"type": "string"}, "x")
    assert first["id"] != second["id"]
