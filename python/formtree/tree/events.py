from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterator, Optional, Set

from formtree.logging import get_logger

from .dependencies import ActivationDiff, ensure_dependencies
from .nodes import Node, NodeKind, ObjectGroup

logger = get_logger(__name__)


class ChangeDispatcher:
    """
    Synchronous dispatcher of change notifications, one per tree.

    A change of a leaf bubbles up through the parents. Every object group on the way
    re-evaluates the availability of its children before it notifies its own listeners.
    Changes raised while another change is being dispatched are queued and processed
    afterwards, within the same call.
    """

    def __init__(self) -> None:
        self._queue: Deque[Node] = deque()
        self._dispatching = False
        self._evaluating: Set[int] = set()

    def dispatch(self, node: Node) -> None:
        self._queue.append(node)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._queue:
                self._bubble(self._queue.popleft())
        finally:
            self._dispatching = False
            self._queue.clear()

    def _bubble(self, node: Node) -> None:
        if node.detached:
            logger.debug(f"dropping change of detached node '{node.full_name}'")
            return

        child = node
        child.emit_change()
        parent = child.parent
        while parent is not None:
            if parent.kind is NodeKind.OBJECT:
                assert isinstance(parent, ObjectGroup)
                ensure_dependencies(parent, child)
            parent.emit_change()
            child, parent = parent, parent.parent

    def reevaluate(self, group: ObjectGroup) -> Optional[ActivationDiff]:
        return ensure_dependencies(group)

    @contextmanager
    def evaluating(self, group: ObjectGroup) -> Iterator[bool]:
        """Yield False when the group is already being evaluated, True otherwise."""

        key = id(group)
        if key in self._evaluating:
            yield False
            return

        self._evaluating.add(key)
        try:
            yield True
        finally:
            self._evaluating.discard(key)
