from typing import Any


def has_data_type(data_type: Any, expected: str) -> bool:
    """JSON-schema 'type' is either a single type name or a list of them."""
    return data_type == expected or (isinstance(data_type, list) and expected in data_type)
