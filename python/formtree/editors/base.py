from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from typing_extensions import Protocol

EditorListener = Callable[[Any], None]


class Editor(Protocol):
    """Capability every editor has to provide, the field tree adds no behaviour beyond it."""

    hidden: bool

    def get_value(self) -> Any: ...

    def set_value(self, value: Any) -> None: ...

    def on_change(self, listener: EditorListener) -> None: ...

    def remove(self) -> None: ...


class BaseEditor:
    """
    Headless editor keeping its value in memory.

    Programmatic 'set_value()' never notifies listeners, 'input()' simulates a user
    changing the value and does.
    """

    # type of the html input element, None when the editor is not an input element
    input_type: Optional[str] = "text"
    hidden: bool = False

    def __init__(self, schema: Dict[str, Any], input_attributes: Optional[Dict[str, Any]] = None) -> None:
        self.schema = schema
        self.data_type = schema.get("type")
        self.input_attributes: Dict[str, Any] = input_attributes or {}
        self.input_id = self.input_attributes.get("id")
        self.input_name = self.input_attributes.get("name")
        self._listeners: List[EditorListener] = []
        self._value: Any = None
        self.removed = False

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    def on_change(self, listener: EditorListener) -> None:
        self._listeners.append(listener)

    def trigger_change(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def input(self, value: Any) -> None:
        self.set_value(value)
        self.trigger_change()

    def remove(self) -> None:
        self._listeners.clear()
        self.removed = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.input_name!r}, value={self._value!r})"
