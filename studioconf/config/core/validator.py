"""
Configuration shape validation.

Checks that each item's current value has the shape its declared type
requires. Value legality (ranges, formats) is out of scope.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from studioconf.core.exceptions import ValidationError
from studioconf.logger import get_studioconf_logger
from .coercion import shape_name
from .item import ConfigurationItem


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ValidationError):
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self):
        self.logger = get_studioconf_logger("studioconf.config").bind(component=type(self).__name__)

    @abstractmethod
    def validate(self, items: Iterable[ConfigurationItem]) -> ValidationResult:
        """Validate configuration items."""
        pass


class ShapeValidator(ConfigValidator):
    """Reports items whose current value does not fit their declared type."""

    def validate(self, items: Iterable[ConfigurationItem]) -> ValidationResult:
        result = ValidationResult()

        for item in items:
            if not item.matches_type(item.get_value()):
                result.add_error(ValidationError(
                    item.name,
                    message=f"expected {item.type.value}, got {shape_name(item.get_value())}"
                ))

        if not result:
            self.logger.warning("Ill-typed settings found", settings=[e.field for e in result.errors])
        return result
