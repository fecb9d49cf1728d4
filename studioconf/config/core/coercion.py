"""
Value coercion for configuration items.

External payloads carry untyped values. Each ValueType maps to a coercer that
turns such a value into the shape the item stores. Only BOOLEAN and INT get
dedicated handling; every other type is kept as text.
"""

from datetime import date, datetime
from typing import Any, Callable, Dict, Tuple

from studioconf.core.enums import ValueType
from studioconf.core.exceptions import CoercionError

Coercer = Callable[[Any], Any]


def to_text(value: Any) -> str:
    """Textual form of a value, with booleans rendered as ``true``/``false``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def normalize_boolean(value: Any) -> bool:
    """True iff the textual form of ``value`` equals "true", ignoring case."""
    return to_text(value).lower() == "true"


def coerce_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip()
        if text == "true":
            return True
        if text == "false":
            return False
    raise CoercionError(ValueType.BOOLEAN.value, value)


def coerce_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise CoercionError(ValueType.INT.value, value)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return coerce_int(float(text))
        except ValueError:
            raise CoercionError(ValueType.INT.value, value) from None
    raise CoercionError(ValueType.INT.value, value)


def coerce_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        raise CoercionError("text", value)
    return to_text(value)


_COERCERS: Dict[ValueType, Coercer] = {
    ValueType.BOOLEAN: coerce_boolean,
    ValueType.INT: coerce_int,
}

# Shapes a stored value may take for each type. Text-coerced types also keep
# their native Python shape when written through a setter.
_SHAPES: Dict[ValueType, Tuple[type, ...]] = {
    ValueType.STRING: (str,),
    ValueType.INT: (int,),
    ValueType.DOUBLE: (str, float, int),
    ValueType.FLOAT: (str, float, int),
    ValueType.BOOLEAN: (bool,),
    ValueType.DATE: (str, date),
}


def register_coercer(value_type: ValueType, coercer: Coercer):
    """Install ``coercer`` for ``value_type``, replacing any previous one."""
    _COERCERS[value_type] = coercer


def get_coercer(value_type: ValueType) -> Coercer:
    return _COERCERS.get(value_type, coerce_text)


def coerce(value_type: ValueType, value: Any) -> Any:
    """
    Coerce an untyped external value to ``value_type``.

    Raises:
        CoercionError: If the value cannot be interpreted as that type
    """
    if value is None:
        raise CoercionError(value_type.value, value, reason="null values are not applied")
    try:
        return get_coercer(value_type)(value)
    except CoercionError:
        raise
    except (ValueError, TypeError) as e:
        raise CoercionError(value_type.value, value, reason=str(e)) from e


def matches_type(value_type: ValueType, value: Any) -> bool:
    """Whether ``value`` has a shape an item of ``value_type`` may hold."""
    if isinstance(value, bool):
        return value_type is ValueType.BOOLEAN
    return isinstance(value, _SHAPES[value_type])


def shape_name(value: Any) -> str:
    return type(value).__name__
