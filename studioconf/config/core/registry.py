"""
Configuration registry for typed settings.

This module provides an ordered registry of configuration items with bulk
import from an untyped payload and bulk merge into an untyped output map.
"""

import threading
from typing import Any, Dict, Iterator, List, MutableMapping, Optional

from studioconf.core.enums import ValueType
from studioconf.core.exceptions import (
    CoercionError, DuplicateSettingError, SettingNotFoundError, SettingTypeError
)
from studioconf.logger import get_studioconf_logger
from .coercion import coerce, normalize_boolean, shape_name
from .item import ConfigurationItem
from .source import as_field_source
from .validator import ShapeValidator, ValidationResult


class ConfigurationRegistry:
    """
    Ordered collection of configuration items.

    Items are kept in registration order, which is the order every bulk
    operation walks them in. The registry lock is held for the duration of
    each bulk operation; callers that read several settings and need them to
    be consistent with each other can hold ``lock`` themselves.
    """

    def __init__(self, items: Optional[List[ConfigurationItem]] = None):
        self.logger = get_studioconf_logger("studioconf.config").bind(component=type(self).__name__)
        self.lock = threading.RLock()
        self._items: Dict[str, ConfigurationItem] = {}
        self._validator = ShapeValidator()

        for item in items or []:
            self.register(item)

        self.logger.info("ConfigurationRegistry initialized", settings=len(self._items))

    def register(self, item: ConfigurationItem) -> ConfigurationItem:
        """
        Add an item to the registry.

        Raises:
            DuplicateSettingError: If an item with the same name exists
        """
        with self.lock:
            if item.name in self._items:
                raise DuplicateSettingError(item.name)
            self._items[item.name] = item
            self.logger.debug("Setting registered", setting=item.name, value_type=item.type.value)
            return item

    def get_item(self, name: str) -> ConfigurationItem:
        """
        Get the item registered under ``name``.

        Raises:
            SettingNotFoundError: If no such setting exists
        """
        try:
            return self._items[name]
        except KeyError:
            raise SettingNotFoundError(name) from None

    def names(self) -> List[str]:
        return list(self._items)

    def __getitem__(self, name: str) -> ConfigurationItem:
        return self.get_item(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[ConfigurationItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def apply_external(self, payload: Any) -> List[str]:
        """
        Update current values from an untyped payload.

        Every item whose name appears in ``payload`` gets the field value
        coerced to its type. Items absent from the payload keep their current
        value and unknown fields are ignored. A field that cannot be coerced
        is logged and skipped without affecting the other items.

        Args:
            payload: A mapping, a FieldSource, or any object with has/get

        Returns:
            Names of the settings that were updated, in registry order
        """
        source = as_field_source(payload)
        applied = []

        with self.lock:
            for item in self._items.values():
                if not source.has(item.name):
                    continue
                try:
                    item.set_value(coerce(item.type, source.get(item.name)))
                except CoercionError as e:
                    self.logger.warning(
                        "Setting not applied",
                        setting=item.name,
                        value_type=item.type.value,
                        error=e.reason,
                    )
                    continue
                applied.append(item.name)

        self.logger.debug("External settings applied", settings=applied)
        return applied

    def merge_defaults(self, output: MutableMapping[str, Any]):
        """
        Merge current values into ``output`` in place.

        Missing names are inserted with the item's current value. Existing
        entries for BOOLEAN items are normalized to ``True`` when their text
        equals "true" ignoring case and ``False`` otherwise. Other existing
        entries are left untouched.
        """
        inserted = []
        normalized = []

        with self.lock:
            for item in self._items.values():
                name = item.name
                if name not in output:
                    output[name] = item.get_value()
                    inserted.append(name)
                    continue

                if item.type is ValueType.BOOLEAN:
                    output[name] = normalize_boolean(output[name])
                    normalized.append(name)

        self.logger.debug("Settings merged", inserted=inserted, normalized=normalized)

    def get_typed(self, name: str) -> Any:
        """
        Current value of ``name``, checked against its declared type.

        Raises:
            SettingTypeError: If the stored value has the wrong shape
        """
        item = self.get_item(name)
        value = item.get_value()
        if not item.matches_type(value):
            raise SettingTypeError(name, item.type.value, shape_name(value))
        return value

    def set_typed(self, name: str, value: Any):
        """
        Write ``value`` to ``name`` after checking it against the declared type.

        Raises:
            SettingTypeError: If the value has the wrong shape
        """
        item = self.get_item(name)
        if not item.matches_type(value):
            raise SettingTypeError(name, item.type.value, shape_name(value))
        item.set_value(value)

    def to_dict(self) -> Dict[str, Any]:
        """Current values keyed by setting name."""
        with self.lock:
            return {name: item.get_value() for name, item in self._items.items()}

    def describe(self) -> List[Dict[str, Any]]:
        """Name, label, note, type, default and current value of every item."""
        with self.lock:
            return [item.to_dict() for item in self._items.values()]

    def reset_to_defaults(self):
        """Restore every item to its default value."""
        with self.lock:
            for item in self._items.values():
                item.reset()
        self.logger.info("Settings reset to defaults")

    def validate(self) -> ValidationResult:
        """Check every current value against its declared type."""
        with self.lock:
            return self._validator.validate(self._items.values())
