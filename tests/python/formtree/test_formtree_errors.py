import pytest

from formtree.errors import (
    DataParsingError,
    DetachedNodeError,
    FormTreeError,
    InvalidValueError,
    NotRenderedError,
    PointerError,
    SchemaError,
)


def test_error_without_path() -> None:
    with pytest.raises(FormTreeError) as error:
        raise FormTreeError("this is testing error")

    assert str(error.value) == "this is testing error"
    assert error.value.where() == ""


@pytest.mark.parametrize(
    "cls,prefix",
    [
        (SchemaError, "schema error"),
        (PointerError, "pointer error"),
        (NotRenderedError, "not rendered"),
        (DetachedNodeError, "not rendered"),
        (InvalidValueError, "invalid value"),
        (DataParsingError, "parsing error"),
    ],
)
def test_error_with_path(cls, prefix: str) -> None:
    with pytest.raises(FormTreeError) as error:
        raise cls("this is testing error", "/error")

    assert str(error.value) == f"[/error] {prefix}: this is testing error"
    assert error.value.where() == "/error"


def test_detached_is_not_rendered() -> None:
    with pytest.raises(NotRenderedError):
        raise DetachedNodeError("gone", "people-n")
