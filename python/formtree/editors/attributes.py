from __future__ import annotations

import itertools
from typing import Any, Dict, Iterator, Optional

from formtree.utils import has_data_type

_ids: Iterator[int] = itertools.count(1)


def unique_id(prefix: str = "id") -> str:
    # names of array items change when items move, ids must not
    return f"{prefix}{next(_ids)}"


def _text_input_type(schema: Dict[str, Any]) -> str:
    data_type = schema.get("type")
    fmt = schema.get("format")
    if has_data_type(data_type, "integer") or has_data_type(data_type, "number"):
        return "number"
    if fmt == "email":
        return "email"
    if fmt == "date":
        return "date"
    if fmt == "uri":
        return "url"
    return "text"


def build_input_attributes(
    schema: Dict[str, Any],
    name: str,
    placeholder: Optional[str] = None,
    input_type: Optional[str] = None,
) -> Dict[str, Any]:
    """Attributes of the input element, the schema's 'inputAttributes' are applied last and win."""

    attributes: Dict[str, Any] = {}
    if schema.get("required") is True:
        attributes["required"] = True
    if schema.get("readOnly"):
        attributes["readonly"] = True

    if input_type is not None:
        attributes["type"] = input_type
        if input_type == "text":
            attributes["type"] = _text_input_type(schema)

            if "maxLength" in schema:
                attributes["maxlength"] = schema["maxLength"]
            if "pattern" in schema:
                attributes["pattern"] = schema["pattern"]
            multiple_of = schema.get("multipleOf")
            if multiple_of and "minimum" in schema and schema["minimum"] % multiple_of == 0:
                attributes["step"] = multiple_of
            # min and max apply to number as well as to date inputs
            if "minimum" in schema:
                attributes["min"] = schema["minimum"]
            if "maximum" in schema:
                attributes["max"] = schema["maximum"]

    if placeholder:
        attributes["placeholder"] = placeholder

    return {"id": unique_id(), "name": name, **attributes, **(schema.get("inputAttributes") or {})}
