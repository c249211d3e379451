from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from formtree.errors import InvalidValueError
from formtree.utils import has_data_type

from .base import BaseEditor

Option = Dict[str, Any]
OptionsSource = Union[List[Any], Dict[Any, Any]]


def normalize_options(options: OptionsSource) -> List[Option]:
    """
    Options are given either as a list of strings, a list of {"val", "label"} dicts
    (possibly nested in {"group", "options"} dicts), or a mapping of values to labels.
    """

    if isinstance(options, dict):
        return [{"val": val, "label": label} for val, label in options.items()]

    normalized: List[Option] = []
    for option in options:
        if isinstance(option, str):
            normalized.append({"val": option, "label": option})
        elif isinstance(option, dict) and option.get("group") is not None:
            normalized.append({"group": option["group"], "options": normalize_options(option["options"])})
        elif isinstance(option, dict):
            normalized.append(option)
        else:
            raise TypeError(f"unsupported option '{option}'")
    return normalized


def flatten_options(options: List[Option]) -> List[Option]:
    flat: List[Option] = []
    for option in options:
        if option.get("group") is not None:
            flat.extend(flatten_options(option["options"]))
        else:
            flat.append(option)
    return flat


def options_from_schema(schema: Dict[str, Any]) -> List[Option]:
    values = list(schema.get("enum") or [])
    labels = list(schema.get("optionLabels") or values)
    if has_data_type(schema.get("type"), "null"):
        values.insert(0, None)
        labels.insert(0, "")
    return [{"val": val, "label": label} for val, label in zip(values, labels)]


def _same_value(a: Any, b: Any) -> bool:
    # strict comparison, True must not match 1
    return type(a) is type(b) and a == b  # pylint: disable=unidiomatic-typecheck


class SelectEditor(BaseEditor):
    """
    Single selection out of the options given by 'enum' and 'optionLabels'.

    When no value is set, the first option is selected, as a select element does.
    """

    input_type = None
    multiple = False

    def __init__(
        self,
        schema: Dict[str, Any],
        input_attributes: Optional[Dict[str, Any]] = None,
        options: Optional[OptionsSource] = None,
    ) -> None:
        super().__init__(schema, input_attributes)
        self.options = normalize_options(options if options is not None else options_from_schema(schema))
        self.option_values = [option.get("val") for option in flatten_options(self.options)]
        self._value = self._initial_value()

    def _initial_value(self) -> Any:
        return self.option_values[0] if self.option_values else None

    def ensure_valid_values(self, values: Any) -> None:
        for val in values if isinstance(values, list) else [values]:
            if not any(_same_value(val, option) for option in self.option_values):
                raise InvalidValueError(f"'{val}' is not one of the options {self.option_values}", self.input_name or "")

    def get_value(self) -> Any:
        if self.multiple:
            return list(self._value)
        return self._value

    def set_value(self, value: Any) -> None:
        if self.multiple and not isinstance(value, list):
            value = [] if value is None else [value]

        self.ensure_valid_values(value)
        self._value = list(value) if self.multiple else value


class CheckboxesEditor(SelectEditor):
    """Multiple selection, rendered as a list of checkboxes."""

    multiple = True

    def _initial_value(self) -> Any:
        return []


class RadioEditor(SelectEditor):
    """Single selection, rendered as a list of radio buttons, nothing is checked initially."""

    def _initial_value(self) -> Any:
        return None

    def set_value(self, value: Any) -> None:
        # an unchecked radio group is the only way to get None without a None option
        if value is None:
            self._value = None
            return
        super().set_value(value)
