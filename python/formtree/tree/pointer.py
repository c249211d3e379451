"""
JSON pointer addressing of field trees, based on RFC 6901: https://www.rfc-editor.org/rfc/rfc6901.

Pointers address the full schema tree regardless of the current availability of fields.
A pointer to an array element resolves to the inner field of the item, never to the item itself.
"""

from typing import Any, Iterator, List, Optional
from urllib.parse import unquote

from formtree.errors import PointerError

from .nodes import ArrayItem, ArrayList, Node, NodeKind, ObjectGroup


class _FieldPtr:
    @staticmethod
    def _decode_token(token: str) -> str:
        """Resolve escaped characters ~ and /, then percent-encoded ones."""
        # the order of the replace statements is important, do not change without
        # consulting the RFC
        return unquote(token.replace("~1", "/").replace("~0", "~"))

    @staticmethod
    def _encode_token(token: str) -> str:
        return token.replace("~", "~0").replace("/", "~1")

    def __init__(self, ptr: str) -> None:
        self.ptr = ptr
        if ptr in ("", "/"):
            # pointer to the root
            self.tokens: List[str] = []

        else:
            if ptr[0] != "/":
                raise PointerError(
                    f"JSON pointer '{ptr}' invalid: the first character MUST be '/' or the pointer must be empty"
                )

            ptr = ptr[1:]
            self.tokens = [_FieldPtr._decode_token(tok) for tok in ptr.split("/")]

    def resolve(self, root: Node) -> Node:
        if root.kind is NodeKind.ITEM:
            raise PointerError("the root of a resolution cannot be an array item", self.ptr)

        current = root
        current_ptr = ""
        for token in self.tokens:
            if current.kind is NodeKind.OBJECT:
                assert isinstance(current, ObjectGroup)
                if token not in current.all_children:
                    raise PointerError(f"object at '{current_ptr or '/'}' has no field '{token}'", self.ptr)
                current = current.all_children[token]

            elif current.kind is NodeKind.ARRAY:
                assert isinstance(current, ArrayList)
                if not (token.isascii() and token.isdigit()):
                    raise PointerError(
                        f"list at '{current_ptr or '/'}' requires numbers as keys, got '{token}'", self.ptr
                    )
                index = int(token)
                if index >= len(current.items):
                    raise PointerError(f"list at '{current_ptr or '/'}' has no item {index}", self.ptr)
                # entering the item does not consume a token
                current = current.items[index].inner_field

            else:
                raise PointerError(
                    f"field at '{current_ptr or '/'}' is not a container, cannot point into it", self.ptr
                )

            current_ptr += f"/{_FieldPtr._encode_token(token)}"

        return current


def resolve_pointer(root: Node, ptr: str) -> Node:
    return _FieldPtr(ptr).resolve(root)


def build_pointer(node: Node) -> str:
    """Return the pointer which resolves to the node from the root of its tree."""

    tokens: List[str] = []
    current: Optional[Node] = node
    while current is not None:
        parent = current.parent
        if parent is None:
            break
        if parent.kind is NodeKind.ITEM:
            assert isinstance(parent, ArrayItem)
            tokens.append(str(parent.index))
            current = parent.parent
        elif parent.kind is NodeKind.ARRAY:
            assert isinstance(current, ArrayItem)
            tokens.append(str(current.index))
            current = parent
        else:
            tokens.append(_FieldPtr._encode_token(current.name))  # noqa: SLF001
            current = parent
    return "".join(f"/{token}" for token in reversed(tokens))


def enumerate_fields(node: Node) -> Iterator[Node]:
    """Pre-order walk over the node and all of its descendants, array items included."""

    yield node
    if node.kind is NodeKind.OBJECT:
        assert isinstance(node, ObjectGroup)
        for child in node.all_children.values():
            yield from enumerate_fields(child)
    elif node.kind is NodeKind.ARRAY:
        assert isinstance(node, ArrayList)
        for item in node.items:
            yield from enumerate_fields(item)
    elif node.kind is NodeKind.ITEM:
        assert isinstance(node, ArrayItem)
        yield from enumerate_fields(node.inner_field)


def get_value_by_json_pointer(value: Any, ptr: str) -> Any:
    """Resolve the pointer against a plain JSON value, None is returned when any step is missing."""

    if not ptr:
        return value

    current = value
    for token in _FieldPtr(ptr).tokens:
        if isinstance(current, dict):
            current = current.get(token)
        elif isinstance(current, list) and token.isdigit() and int(token) < len(current):
            current = current[int(token)]
        else:
            return None
    return current
