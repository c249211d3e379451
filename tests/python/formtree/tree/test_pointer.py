import pytest
from pytest import raises

from formtree.errors import PointerError
from formtree.form import Form
from formtree.tree import build_pointer, enumerate_fields, get_value_by_json_pointer, insert_item, resolve_pointer

SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "a/b": {"type": "string"},
        "~x": {"type": "string"},
        "a b": {"type": "string"},
        "people": {
            "type": "array",
            "items": {"type": "object", "properties": {"name": {"type": "string"}}},
        },
    },
}


@pytest.fixture
def form() -> Form:
    form = Form(SCHEMA).render()
    people = form.root.all_children["people"]
    insert_item(people)
    insert_item(people)
    return form


def test_resolve_root(form: Form) -> None:
    assert resolve_pointer(form.root, "") is form.root
    assert resolve_pointer(form.root, "/") is form.root


def test_resolve(form: Form) -> None:
    root = form.root
    people = root.all_children["people"]

    assert resolve_pointer(root, "/name") is root.all_children["name"]
    assert resolve_pointer(root, "/people") is people
    assert resolve_pointer(root, "/people/1") is people.items[1].inner_field
    assert resolve_pointer(root, "/people/1/name") is people.items[1].inner_field.all_children["name"]


@pytest.mark.parametrize("ptr,name", [("/a~1b", "a/b"), ("/~0x", "~x"), ("/a%20b", "a b")])
def test_resolve_escaped(form: Form, ptr: str, name: str) -> None:
    assert resolve_pointer(form.root, ptr) is form.root.all_children[name]


@pytest.mark.parametrize(
    "ptr",
    [
        "name",
        "/missing",
        "/people/x",
        "/people/2",
        "/people/-1",
        "/name/foo",
        "/people/0/missing",
        # non-ascii digits
        "/people/\u00b2",
        "/people/\u0661",
    ],
)
def test_resolve_invalid(form: Form, ptr: str) -> None:
    with raises(PointerError):
        resolve_pointer(form.root, ptr)


def test_resolve_from_item(form: Form) -> None:
    item = form.root.all_children["people"].items[0]
    with raises(PointerError):
        resolve_pointer(item, "/name")

    # any other node may serve as a root
    inner = item.inner_field
    assert resolve_pointer(inner, "/name") is inner.all_children["name"]


def test_resolve_ignores_availability() -> None:
    form = Form(
        {
            "type": "object",
            "properties": {
                "flag": {"type": "boolean"},
                "details": {"type": "string", "availableIf": {"flag": True}},
            },
        }
    ).render()
    assert "details" not in form.root.active_children
    assert resolve_pointer(form.root, "/details") is form.root.all_children["details"]


def test_build_pointer(form: Form) -> None:
    root = form.root
    people = root.all_children["people"]

    assert build_pointer(root) == ""
    assert build_pointer(root.all_children["a/b"]) == "/a~1b"
    assert build_pointer(people) == "/people"
    assert build_pointer(people.items[1]) == "/people/1"
    assert build_pointer(people.items[1].inner_field) == "/people/1"
    assert build_pointer(people.items[1].inner_field.all_children["name"]) == "/people/1/name"

    for node in enumerate_fields(root):
        if node.kind.name != "ITEM":
            assert resolve_pointer(root, build_pointer(node) or "/") is node


def test_enumerate_fields(form: Form) -> None:
    root = form.root
    people = root.all_children["people"]
    item = people.items[0]

    nodes = list(enumerate_fields(root))
    assert nodes[:6] == [
        root,
        root.all_children["name"],
        root.all_children["a/b"],
        root.all_children["~x"],
        root.all_children["a b"],
        people,
    ]
    assert nodes[6:9] == [item, item.inner_field, item.inner_field.all_children["name"]]
    assert len(nodes) == 12
    # restartable
    assert list(enumerate_fields(root)) == nodes


def test_get_value_by_json_pointer() -> None:
    value = {"a": [{"b": 1}, {"b": 2}], "c~d": {"e/f": 3}}

    assert get_value_by_json_pointer(value, "") is value
    assert get_value_by_json_pointer(value, "/a/1/b") == 2
    assert get_value_by_json_pointer(value, "/c~0d/e~1f") == 3
    assert get_value_by_json_pointer(value, "/a/3/b") is None
    assert get_value_by_json_pointer(value, "/x/y") is None
    assert get_value_by_json_pointer(value, "/a/1/b/c") is None

    with raises(PointerError):
        get_value_by_json_pointer(value, "a")
