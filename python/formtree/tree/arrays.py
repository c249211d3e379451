from __future__ import annotations

from typing import Dict, Optional

from formtree.logging import get_logger

from .compiler import build_item
from .nodes import ArrayItem, ArrayList
from .rendering import detach, render

logger = get_logger(__name__)


def _reindex(array: ArrayList) -> None:
    for i, item in enumerate(array.items):
        item.index = i


def _index_of(array: ArrayList, item: ArrayItem) -> int:
    for i, it in enumerate(array.items):
        if it is item:
            return i
    raise ValueError(f"item '{item.full_name}' is not an item of '{array.full_name}'")


def insert_item(array: ArrayList, index: Optional[int] = None) -> ArrayItem:
    array.ensure_attached()
    if index is None:
        index = len(array.items)
    if not 0 <= index <= len(array.items):
        raise IndexError(f"cannot insert at {index}, '{array.full_name}' has {len(array.items)} items")

    item = build_item(array, index)
    if array.rendered:
        render(item)

    array.items.insert(index, item)
    _reindex(array)
    logger.debug(f"inserted item at {index} into '{array.full_name}'")
    array.emit_structure_change()
    return item


def remove_item(array: ArrayList, item: ArrayItem) -> None:
    array.ensure_attached()
    index = _index_of(array, item)

    del array.items[index]
    detach(item)
    _reindex(array)
    logger.debug(f"removed item at {index} from '{array.full_name}'")
    array.emit_structure_change()


def move_up(array: ArrayList, item: ArrayItem) -> None:
    array.ensure_attached()
    index = _index_of(array, item)
    if index == 0:
        return

    array.items[index - 1], array.items[index] = array.items[index], array.items[index - 1]
    _reindex(array)
    array.emit_structure_change()


def move_down(array: ArrayList, item: ArrayItem) -> None:
    array.ensure_attached()
    index = _index_of(array, item)
    # with a single item, it is both the first and the last one
    if index >= len(array.items) - 1:
        return

    array.items[index + 1], array.items[index] = array.items[index], array.items[index + 1]
    _reindex(array)
    array.emit_structure_change()


def item_actions(item: ArrayItem) -> Dict[str, bool]:
    """Which of the move operations currently have any effect on the item."""

    item.ensure_attached()
    array = item.parent
    assert isinstance(array, ArrayList)
    count = len(array.items)
    return {
        "move_up": item.index > 0,
        "move_down": item.index < count - 1,
    }
