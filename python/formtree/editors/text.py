from __future__ import annotations

import html
import re
from typing import Any, Dict, Optional

from formtree.utils import has_data_type

from .base import BaseEditor

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TextEditor(BaseEditor):
    """
    Single line text input.

    The value is kept as text, as an input element would keep it. Numbers are parsed back
    for 'number' and 'integer' typed fields; invalid numbers are left as strings, so that
    the validation can catch them.
    """

    def __init__(self, schema: Dict[str, Any], input_attributes: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(schema, input_attributes)
        self._value = ""

    def get_value(self) -> Any:
        value = self._value
        if value is None or value == "":
            return None

        if has_data_type(self.data_type, "number") and _NUMBER_RE.match(value):
            return int(value) if _INTEGER_RE.match(value) else float(value)
        if has_data_type(self.data_type, "integer") and _INTEGER_RE.match(value):
            return int(value)
        return value

    def set_value(self, value: Any) -> None:
        self._value = _to_text(value)


class TextAreaEditor(TextEditor):
    input_type = None


class PasswordEditor(TextEditor):
    input_type = "password"


class HiddenEditor(TextEditor):
    input_type = "hidden"
    hidden = True


class DatePickerEditor(TextEditor):
    """Text input with a date picker attached, dates are kept as 'yyyy-mm-dd' text."""

    date_format = "%Y-%m-%d"

    def set_value(self, value: Any) -> None:
        if hasattr(value, "strftime"):
            value = value.strftime(self.date_format)
        super().set_value(value)


class CheckboxEditor(BaseEditor):
    input_type = "checkbox"

    def __init__(self, schema: Dict[str, Any], input_attributes: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(schema, input_attributes)
        self._value = False

    def set_value(self, value: Any) -> None:
        self._value = bool(value)


class HiddenJsonEditor(BaseEditor):
    """Keeps any JSON value as it is, nothing is displayed."""

    input_type = None
    hidden = True


class ReadOnlyTextEditor(BaseEditor):
    input_type = None

    def display(self) -> str:
        return html.escape(_to_text(self._value))


class ReadOnlyHtmlEditor(ReadOnlyTextEditor):
    def display(self) -> str:
        # the value is trusted html
        return _to_text(self._value)
