from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

from .constants import LOGGING_LEVEL_DEFAULT, MESSAGE_ATTR_NAME, POINTER_ATTR_NAME
from .errors import DataParsingError
from .logging import LOG_LEVELS
from .parsing import parse_file


@dataclass
class FormConfig:
    """
    Options of a form instance.

    ---
    pointer_attr_name: Name of the attribute carrying the JSON pointer in error objects.
    message_attr_name: Name of the attribute carrying the message in error objects.
    keep_null_values: Keep mapping entries whose value is null when reading values.
    ignore_missing_value: Skip fields missing from the incoming mapping when setting values.
    native_date_input: Whether the presentation layer has a native date input.
    loglevel: Logging level used by the command-line utility.
    """

    pointer_attr_name: str = POINTER_ATTR_NAME
    message_attr_name: str = MESSAGE_ATTR_NAME
    keep_null_values: bool = False
    ignore_missing_value: bool = True
    native_date_input: bool = True
    loglevel: str = LOGGING_LEVEL_DEFAULT

    @classmethod
    def from_dict(cls, source: Dict[str, Any], object_path: str = "") -> "FormConfig":
        if not isinstance(source, dict):
            raise DataParsingError(f"expected a mapping, got '{type(source).__name__}'", object_path or "/")

        known = {f.name: f for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in source.items():
            # both 'keep-null-values' and 'keep_null_values' are accepted
            attr = str(key).replace("-", "_")
            path = f"{object_path}/{key}"
            if attr not in known:
                raise DataParsingError(f"unknown configuration option '{key}'", path)

            expected = bool if known[attr].type in ("bool", bool) else str
            # bool is an instance of int, compare types directly
            if type(value) is not expected:  # pylint: disable=unidiomatic-typecheck
                raise DataParsingError(f"expected {expected.__name__}, found {type(value).__name__}", path)
            kwargs[attr] = value

        config = cls(**kwargs)
        if config.loglevel not in LOG_LEVELS:
            raise DataParsingError(
                f"'{config.loglevel}' is not one of the logging levels {LOG_LEVELS}", f"{object_path}/loglevel"
            )
        return config


def load_config(path: str) -> FormConfig:
    data = parse_file(path)
    if data is None:
        return FormConfig()
    return FormConfig.from_dict(data)
