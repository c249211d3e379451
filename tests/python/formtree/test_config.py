import pytest

from formtree.config import FormConfig, load_config
from formtree.errors import DataParsingError


def test_defaults() -> None:
    config = FormConfig.from_dict({})
    assert config == FormConfig()
    assert config.pointer_attr_name == "dataPath"
    assert config.message_attr_name == "message"
    assert config.keep_null_values is False
    assert config.ignore_missing_value is True
    assert config.loglevel == "notice"


def test_dashed_keys() -> None:
    config = FormConfig.from_dict({"keep-null-values": True, "pointer-attr-name": "instancePath"})
    assert config.keep_null_values is True
    assert config.pointer_attr_name == "instancePath"


@pytest.mark.parametrize(
    "source,path",
    [
        ({"unknown": 1}, "/unknown"),
        ({"keep-null-values": "yes"}, "/keep-null-values"),
        ({"native_date_input": 1}, "/native_date_input"),
        ({"message-attr-name": False}, "/message-attr-name"),
        ({"loglevel": "loud"}, "/loglevel"),
    ],
)
def test_invalid(source, path: str) -> None:
    with pytest.raises(DataParsingError) as error:
        FormConfig.from_dict(source)
    assert error.value.where() == path


def test_not_a_mapping() -> None:
    with pytest.raises(DataParsingError):
        FormConfig.from_dict(["keep-null-values"])  # type: ignore


def test_load_config(tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("keep-null-values: true\nloglevel: debug\n")

    config = load_config(str(config_file))
    assert config.keep_null_values is True
    assert config.loglevel == "debug"


def test_load_empty_config(tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_config(str(config_file)) == FormConfig()
