"""
Configuration item: one named, typed setting.
"""

from typing import Any, Dict

from studioconf.core.enums import ValueType
from .coercion import matches_type

_CURRENT = object()


class ConfigurationItem:
    """
    A single named setting with a declared type, a default and a current value.

    Name, label, note, type and default are fixed at construction. Only the
    current value changes, and ``set_value`` writes it without checking the
    declared type; shape checks belong to the registry.
    """

    def __init__(self, name: str, label: str, value_type: ValueType, default_value: Any, note: str = ""):
        self._name = name
        self._label = label
        self._type = value_type
        self._default_value = default_value
        self._note = note
        self._value = default_value

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def note(self) -> str:
        return self._note

    @property
    def type(self) -> ValueType:
        return self._type

    @property
    def default_value(self) -> Any:
        return self._default_value

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any):
        self._value = value

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any):
        self._value = value

    def get_type(self) -> ValueType:
        return self._type

    def get_name(self) -> str:
        return self._name

    def reset(self):
        """Restore the default value."""
        self._value = self._default_value

    def matches_type(self, value: Any = _CURRENT) -> bool:
        """Whether ``value`` (the current value when omitted) fits the declared type."""
        return matches_type(self._type, self._value if value is _CURRENT else value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the item to a dictionary."""
        return {
            'name': self._name,
            'label': self._label,
            'note': self._note,
            'type': self._type.value,
            'default_value': self._default_value,
            'value': self._value,
        }

    def __repr__(self):
        return f"ConfigurationItem(name={self._name!r}, type={self._type.name}, value={self._value!r})"
