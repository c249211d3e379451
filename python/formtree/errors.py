from __future__ import annotations


class FormTreeError(Exception):
    """Base exception class for all errors raised by the field tree."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__(msg)
        self._msg = f"[{error_path}] {msg}" if error_path else msg
        self._error_path = error_path

    def where(self) -> str:
        return self._error_path

    def __str__(self) -> str:
        return self._msg


class SchemaError(FormTreeError):
    """Malformed or incomplete schema, fatal at compile time."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"schema error: {msg}"
        super().__init__(msg, error_path)


class PointerError(FormTreeError):
    """A JSON pointer that does not address any node of the tree."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"pointer error: {msg}"
        super().__init__(msg, error_path)


class NotRenderedError(FormTreeError):
    """Value access on a node that has no editor attached yet."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"not rendered: {msg}"
        super().__init__(msg, error_path)


class DetachedNodeError(NotRenderedError):
    """Operation on a node that was already removed from its tree."""


class InvalidValueError(FormTreeError):
    """A selection editor was asked to accept a value outside of its options."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"invalid value: {msg}"
        super().__init__(msg, error_path)


class DataParsingError(FormTreeError):
    """Exception class for document and configuration parsing errors."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"parsing error: {msg}"
        super().__init__(msg, error_path)
