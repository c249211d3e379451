from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from formtree.logging import get_logger
from formtree.utils import has_data_type

from .nodes import Node, ObjectGroup
from .values import get_value

logger = get_logger(__name__)


@dataclass(frozen=True)
class ActivationDiff:
    """Ordered outcome of one re-evaluation, applied by the presentation layer."""

    active: Tuple[str, ...]
    added: Tuple[str, ...]
    removed: Tuple[str, ...]

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


def get_condition(node: Node) -> Optional[Tuple[str, Any]]:
    condition = node.schema.get("availableIf")
    if not condition:
        return None
    # only single-entry mappings are valid, the first entry wins
    return next(iter(condition.items()))


def has_dependents(group: ObjectGroup, name: str) -> bool:
    for child in group.all_children.values():
        condition = get_condition(child)
        if condition is not None and condition[0] == name:
            return True
    return False


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def _deep_equal(a: Any, b: Any) -> bool:
    # bool is an instance of int, but True is not 1 here
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b  # pylint: disable=unidiomatic-typecheck
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    return a == b


def _current_value(node: Optional[Node]) -> Any:
    # siblings which are not active or have no editors yet are undefined
    if node is None or node.detached or not node.rendered:
        return None
    return get_value(node)


def is_available(child: Node, active: Mapping[str, Node]) -> bool:
    condition = get_condition(child)
    if condition is None:
        return True

    key, test = condition
    # the value is read just before the comparison, so that chained conditions
    # see the availability already decided in this pass
    value = _current_value(active.get(key))

    if isinstance(test, re.Pattern):
        return test.search(_stringify(value)) is not None
    if has_data_type(child.schema.get("type"), "array"):
        return isinstance(value, (list, tuple)) and any(_deep_equal(v, test) for v in value)
    return _deep_equal(value, test)


def ensure_dependencies(group: ObjectGroup, changed: Optional[Node] = None) -> Optional[ActivationDiff]:
    """
    Recompute the active children of the group.

    When 'changed' is given and no child depends on it, nothing is evaluated and None is returned.
    A re-evaluation requested while the same group is being evaluated is suppressed as well.
    """

    if changed is not None and not has_dependents(group, changed.name):
        return None

    with group.context.dispatcher.evaluating(group) as allowed:
        if not allowed:
            logger.debug(f"suppressed nested re-evaluation of '{group.full_name}'")
            return None

        previous = list(group.active_children)
        active: Dict[str, Node] = {}
        for name, child in group.all_children.items():
            if is_available(child, active):
                active[name] = child
        group.active_children = active

    diff = ActivationDiff(
        active=tuple(active),
        added=tuple(name for name in active if name not in previous),
        removed=tuple(name for name in previous if name not in active),
    )
    if diff.changed:
        logger.debug(f"'{group.full_name}' availability changed, added {diff.added}, removed {diff.removed}")
    return diff
