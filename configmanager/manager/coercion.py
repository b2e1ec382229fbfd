import re
from enum import Enum
from typing import Any

from ..exceptions import CoercionError


class ValueType(str, Enum):
    """Types a configuration value can be read as."""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"


INTEGER_RANGE = (-(2**31), 2**31 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)
TRUE_VALUE = "true"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Python types accepted in place of a ValueType
_TYPE_ALIASES = {
    str: ValueType.STRING,
    int: ValueType.LONG,
    float: ValueType.DOUBLE,
    bool: ValueType.BOOLEAN,
}


def resolve_value_type(value_type: Any) -> ValueType | None:
    """Resolve a ValueType, its name, or a Python type. Returns None if unsupported."""
    if isinstance(value_type, ValueType):
        return value_type
    if isinstance(value_type, type):
        return _TYPE_ALIASES.get(value_type)
    if isinstance(value_type, str):
        try:
            return ValueType(value_type.lower())
        except ValueError:
            return None
    return None


def coerce(value: str, value_type: ValueType) -> Any:
    """Convert a stored string to the requested type.

    Raises:
        CoercionError: If the value cannot be parsed or is out of range
    """
    if value_type == ValueType.STRING:
        return value
    if value_type == ValueType.INTEGER:
        return _parse_integer(value, INTEGER_RANGE, value_type)
    if value_type == ValueType.LONG:
        return _parse_integer(value, LONG_RANGE, value_type)
    if value_type in (ValueType.FLOAT, ValueType.DOUBLE):
        if "_" in value:
            raise CoercionError(f"Cannot parse {value!r} as {value_type.value}")
        try:
            return float(value)
        except ValueError as e:
            raise CoercionError(f"Cannot parse {value!r} as {value_type.value}") from e
    if value_type == ValueType.BOOLEAN:
        return value.lower() == TRUE_VALUE

    raise CoercionError(f"Unsupported type: {value_type!r}")


def _parse_integer(value: str, bounds: tuple[int, int], value_type: ValueType) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise CoercionError(f"Cannot parse {value!r} as {value_type.value}")

    number = int(value)
    low, high = bounds
    if number < low or number > high:
        raise CoercionError(f"{value!r} is out of range for {value_type.value}")
    return number
