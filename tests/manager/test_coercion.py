import pytest

from configmanager import CoercionError, ValueType, coerce
from configmanager.manager import resolve_value_type


@pytest.mark.unit
@pytest.mark.parametrize("value, value_type, expected", [
    ("text", ValueType.STRING, "text"),
    ("42", ValueType.INTEGER, 42),
    ("-7", ValueType.INTEGER, -7),
    ("+7", ValueType.INTEGER, 7),
    ("2147483647", ValueType.INTEGER, 2147483647),
    ("9223372036854775807", ValueType.LONG, 9223372036854775807),
    ("1.5", ValueType.FLOAT, 1.5),
    ("1e3", ValueType.DOUBLE, 1000.0),
    ("true", ValueType.BOOLEAN, True),
    ("TRUE", ValueType.BOOLEAN, True),
    ("True", ValueType.BOOLEAN, True),
    ("1", ValueType.BOOLEAN, False),
    ("yes", ValueType.BOOLEAN, False),
    (" true", ValueType.BOOLEAN, False),
    ("false", ValueType.BOOLEAN, False),
    ("anything", ValueType.BOOLEAN, False),
])
def test_coerce(value, value_type, expected):
    assert coerce(value, value_type) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value, value_type", [
    ("not_a_number", ValueType.INTEGER),
    ("1.5", ValueType.INTEGER),
    ("", ValueType.LONG),
    ("2147483648", ValueType.INTEGER),
    ("9223372036854775808", ValueType.LONG),
    ("abc", ValueType.DOUBLE),
    ("1_000", ValueType.DOUBLE),
    ("1_0.5", ValueType.FLOAT),
])
def test_coerce_failures(value, value_type):
    with pytest.raises(CoercionError):
        coerce(value, value_type)


@pytest.mark.unit
@pytest.mark.parametrize("value_type, expected", [
    (ValueType.INTEGER, ValueType.INTEGER),
    ("integer", ValueType.INTEGER),
    ("Boolean", ValueType.BOOLEAN),
    (str, ValueType.STRING),
    (int, ValueType.LONG),
    (float, ValueType.DOUBLE),
    (bool, ValueType.BOOLEAN),
    (list, None),
    ("complex", None),
    (3, None),
])
def test_resolve_value_type(value_type, expected):
    assert resolve_value_type(value_type) is expected
