"""Header parameter helpers."""

from typing import Iterable


def quote_param(key: str, value: str) -> str:
    """
    Format a header parameter as key="value".

    Args:
        key: Parameter name
        value: Parameter value

    Returns:
        Quoted parameter, ready to be appended to Field values

    Raises:
        ValueError: If key is empty or value contains a double quote

    Examples:
        >>> quote_param("boundary", "B1")
        'boundary="B1"'
    """
    if not key or not key.strip():
        raise ValueError("Parameter key is empty")
    if '"' in value:
        raise ValueError(f"Parameter value cannot contain a double quote: {value}")

    return f'{key}="{value}"'


def has_param(values: Iterable[str], key: str) -> bool:
    """Check whether any of the field values carries the ``key`` parameter."""
    token = key + "="
    return any(token in value for value in values)
