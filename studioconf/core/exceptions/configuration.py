"""
Setting-specific exceptions for the studioconf package.
"""

from .base import ConfigurationError, NotFoundError


class CoercionError(ConfigurationError, ValueError):
    """Raised when an external field cannot be coerced to a setting's value type."""

    def __init__(self, value_type: str, value=None, reason: str = None):
        self.value_type = value_type
        super().__init__(
            config_value=value,
            reason=reason or f"cannot be interpreted as {value_type}"
        )


class SettingTypeError(ConfigurationError, TypeError):
    """Raised when a setting holds, or is given, a value of the wrong shape."""

    def __init__(self, name: str, expected: str, actual: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            config_key=name,
            reason=f"expected a {expected} value, got {actual}"
        )


class SettingNotFoundError(NotFoundError, KeyError):
    """Raised when looking up a setting name that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Setting", name)


class DuplicateSettingError(ConfigurationError):
    """Raised when a setting name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(config_key=name, reason="setting is already registered")


class PayloadError(ConfigurationError):
    """Raised when an input payload is not a mapping of named fields."""

    def __init__(self, reason: str):
        super().__init__(reason=reason)
