import pytest

from formtree.editors.registry import default_registry
from formtree.form import Form
from formtree.tree import ChangeDispatcher, CompileContext


@pytest.fixture
def context() -> CompileContext:
    return CompileContext(default_registry(), ChangeDispatcher())


PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer", "availableIf": {"name": "bob"}},
    },
}


@pytest.fixture
def person_form() -> Form:
    return Form(PERSON_SCHEMA).render()


LIST_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "people": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "nick": {"type": "string"},
                },
            },
        },
    },
}


@pytest.fixture
def list_form() -> Form:
    return Form(LIST_SCHEMA).render()
