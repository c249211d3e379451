from __future__ import annotations

import re
import weakref
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from formtree.constants import NAME_SEPARATOR
from formtree.errors import DetachedNodeError

if TYPE_CHECKING:
    from formtree.editors.base import Editor
    from formtree.editors.registry import EditorRegistry
    from formtree.tree.events import ChangeDispatcher

Schema = Dict[str, Any]
ChangeListener = Callable[["Node"], None]


class NodeKind(Enum):
    LEAF = auto()
    OBJECT = auto()
    ARRAY = auto()
    ITEM = auto()


@dataclass
class CompileContext:
    registry: EditorRegistry
    dispatcher: ChangeDispatcher
    native_date_input: bool = True


def prettify(name: str) -> str:
    """
    Convert a camelCased name for display.

    'htmlAttr' => 'Html Attr'
    'HTTPError' => 'HTTP Error'
    """

    name = re.sub(r"([^A-Z])([A-Z])", r"\1 \2", name or "")
    name = re.sub(r"([A-Z])([A-Z])(?![A-Z]|$)", r"\1 \2", name)
    return name[:1].upper() + name[1:]


def get_full_name(prefix: str, name: str) -> str:
    if not prefix:
        return name or ""
    if not name:
        return prefix or ""
    return f"{prefix}{NAME_SEPARATOR}{name}"


class Node:
    kind: NodeKind

    def __init__(
        self,
        schema: Schema,
        context: CompileContext,
        name: str = "",
        prefix: str = "",
        parent: Optional[Node] = None,
    ) -> None:
        self.name = name
        self.prefix = prefix
        self.full_name = get_full_name(prefix, name)
        self.schema: Schema = {"title": prettify(name), "description": "", **schema}
        self.context = context

        self._parent: Optional[weakref.ReferenceType[Node]] = weakref.ref(parent) if parent is not None else None
        self._listeners: List[ChangeListener] = []

        self.error: Optional[str] = None
        self.rendered = False
        self.detached = False

    @property
    def parent(self) -> Optional[Node]:
        if self._parent is None:
            return None
        return self._parent()

    def release_parent(self) -> None:
        self._parent = None

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    def emit_change(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def ensure_attached(self) -> None:
        if self.detached:
            raise DetachedNodeError(f"node '{self.full_name}' was removed from its tree", self.full_name)

    def set_error(self, msg: Optional[str] = None) -> None:
        if msg is not None and not isinstance(msg, str):
            raise TypeError(f"node '{self.full_name}': unexpected error message type '{type(msg).__name__}'")
        self.ensure_attached()
        self.error = msg or None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r})"


class LeafField(Node):
    kind = NodeKind.LEAF

    def __init__(
        self,
        schema: Schema,
        context: CompileContext,
        editor_kind: str,
        name: str = "",
        prefix: str = "",
        parent: Optional[Node] = None,
    ) -> None:
        super().__init__(schema, context, name, prefix, parent)
        self.editor_kind = editor_kind
        self.editor: Optional[Editor] = None
        self.serialize: Optional[Callable[[Any], Any]] = self.schema.get("serialize")
        self.deserialize: Optional[Callable[[Any], Any]] = self.schema.get("deserialize")


class ObjectGroup(Node):
    kind = NodeKind.OBJECT

    def __init__(
        self,
        schema: Schema,
        context: CompileContext,
        name: str = "",
        prefix: str = "",
        parent: Optional[Node] = None,
    ) -> None:
        super().__init__(schema, context, name, prefix, parent)
        # all_children: every property declared in the schema, in declaration order
        # active_children: the properties passing their 'availableIf' conditions
        self.all_children: Dict[str, Node] = {}
        self.active_children: Dict[str, Node] = {}


class ArrayList(Node):
    kind = NodeKind.ARRAY

    def __init__(
        self,
        schema: Schema,
        context: CompileContext,
        name: str = "",
        prefix: str = "",
        parent: Optional[Node] = None,
    ) -> None:
        super().__init__(schema, context, name, prefix, parent)
        self.item_schema: Schema = self.schema["items"]
        self.items: List[ArrayItem] = []
        self._structure_listeners: List[Callable[[ArrayList], None]] = []

    def subscribe_structure(self, listener: Callable[[ArrayList], None]) -> None:
        self._structure_listeners.append(listener)

    def unsubscribe_structure(self, listener: Callable[[ArrayList], None]) -> None:
        self._structure_listeners.remove(listener)

    def emit_structure_change(self) -> None:
        for listener in list(self._structure_listeners):
            listener(self)


class ArrayItem(Node):
    kind = NodeKind.ITEM

    def __init__(
        self,
        schema: Schema,
        context: CompileContext,
        index: int,
        prefix: str = "",
        parent: Optional[ArrayList] = None,
    ) -> None:
        # an item has no name, its full name equals to its prefix
        super().__init__(schema, context, "", prefix, parent)
        self.index = index
        self.inner_field: Node

    def set_error(self, msg: Optional[str] = None) -> None:
        # items share their JSON pointers with their inner field, errors are always attached there
        if msg:
            raise ValueError(f"item '{self.full_name}' cannot hold an error, set it on its inner field")
