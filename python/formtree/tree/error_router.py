from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template

from formtree.constants import MESSAGE_ATTR_NAME, POINTER_ATTR_NAME
from formtree.errors import PointerError
from formtree.logging import get_logger

from .nodes import Node
from .pointer import enumerate_fields, resolve_pointer

logger = get_logger(__name__)

ERRORS_TEMPLATE_SOURCE = """<ul>
{% for error in errors %}
 <li>{{ error }}</li>
{% endfor %}
</ul>"""


def template_from_str(template: str) -> Template:
    env = Environment(trim_blocks=True, lstrip_blocks=True, autoescape=True, undefined=StrictUndefined)
    return env.from_string(template)


ERRORS_TEMPLATE = template_from_str(ERRORS_TEMPLATE_SOURCE)


def combine_messages(messages: List[str], template: Optional[Template] = None) -> str:
    if len(messages) == 1:
        return messages[0]
    return (template or ERRORS_TEMPLATE).render(errors=messages)


def group_errors(
    errors: Iterable[Mapping[str, Any]],
    pointer_attr: str = POINTER_ATTR_NAME,
    message_attr: str = MESSAGE_ATTR_NAME,
) -> Dict[str, List[str]]:
    """Group messages by their pointers, keeping the order in which the pointers first appeared."""

    groups: Dict[str, List[str]] = {}
    for error in errors:
        if pointer_attr not in error:
            raise PointerError(f"error object {dict(error)} has no '{pointer_attr}' attribute")
        pointer = error[pointer_attr]
        # both '' and '/' point to the root
        pointer = "/" if pointer == "" else pointer
        message = error.get(message_attr)
        if message is not None and not isinstance(message, str):
            raise TypeError(f"error at '{pointer}': unexpected message type '{type(message).__name__}'")
        groups.setdefault(pointer, []).append(message)
    return groups


def clear_errors(root: Node) -> None:
    for node in enumerate_fields(root):
        node.set_error(None)


def set_errors(
    root: Node,
    errors: Optional[Iterable[Mapping[str, Any]]],
    pointer_attr: str = POINTER_ATTR_NAME,
    message_attr: str = MESSAGE_ATTR_NAME,
    template: Optional[Template] = None,
) -> None:
    clear_errors(root)
    if not errors:
        return

    groups = group_errors(errors, pointer_attr, message_attr)
    # messages are checked while grouping and pointers resolved before attaching,
    # a bad error object must not leave errors half applied
    targets = [(resolve_pointer(root, pointer), messages) for pointer, messages in groups.items()]
    for node, messages in targets:
        node.set_error(combine_messages(messages, template))
    logger.debug(f"attached errors to {len(targets)} field(s) of '{root.full_name}'")
