from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from formtree.constants import EDITOR_CHECKBOX, EDITOR_DATE_PICKER, EDITOR_SELECT, EDITOR_TEXT
from formtree.errors import SchemaError
from formtree.logging import get_logger
from formtree.utils import has_data_type

from .attributes import build_input_attributes
from .base import Editor
from .images import ImageEditor, MultiImagesEditor
from .select import CheckboxesEditor, RadioEditor, SelectEditor
from .text import (
    CheckboxEditor,
    DatePickerEditor,
    HiddenEditor,
    HiddenJsonEditor,
    PasswordEditor,
    ReadOnlyHtmlEditor,
    ReadOnlyTextEditor,
    TextAreaEditor,
    TextEditor,
)

logger = get_logger(__name__)

EditorFactory = Callable[..., Editor]


def infer_editor_kind(schema: Dict[str, Any], native_date_input: bool = True) -> str:
    if schema.get("editor"):
        return schema["editor"]
    if schema.get("enum"):
        return EDITOR_SELECT
    if has_data_type(schema.get("type"), "boolean"):
        return EDITOR_CHECKBOX
    if not native_date_input and schema.get("format") == "date":
        return EDITOR_DATE_PICKER
    return EDITOR_TEXT


class EditorRegistry:
    """
    Mapping of editor kinds to factories.

    A factory is called as 'factory(schema, input_attributes)'. Its 'input_type' attribute,
    when present, tells which html input element the editor stands for, the input attributes
    are computed accordingly.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, EditorFactory] = {}

    def register(self, kind: str, factory: EditorFactory) -> None:
        if kind in self._factories:
            logger.debug(f"editor kind '{kind}' re-registered")
        self._factories[kind] = factory

    def __contains__(self, kind: str) -> bool:
        return kind in self._factories

    def kinds(self) -> List[str]:
        return list(self._factories)

    def create(self, kind: str, schema: Dict[str, Any], name: str, placeholder: Optional[str] = None) -> Editor:
        factory = self._factories.get(kind)
        if factory is None:
            raise SchemaError(f"unknown editor '{kind}'", name or "/")

        input_type = getattr(factory, "input_type", None)
        attributes = build_input_attributes(schema, name, placeholder, input_type)
        return factory(schema, attributes)


def default_registry() -> EditorRegistry:
    registry = EditorRegistry()
    for kind, factory in (
        ("Text", TextEditor),
        ("TextArea", TextAreaEditor),
        ("Password", PasswordEditor),
        ("Hidden", HiddenEditor),
        ("HiddenJson", HiddenJsonEditor),
        ("Checkbox", CheckboxEditor),
        ("Select", SelectEditor),
        ("Checkboxes", CheckboxesEditor),
        ("Radio", RadioEditor),
        ("ReadOnlyText", ReadOnlyTextEditor),
        ("ReadOnlyHtml", ReadOnlyHtmlEditor),
        ("DatePicker", DatePickerEditor),
        ("MultiImages", MultiImagesEditor),
        ("Image", ImageEditor),
    ):
        registry.register(kind, factory)
    return registry
