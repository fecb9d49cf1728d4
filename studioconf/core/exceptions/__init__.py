"""
Core exceptions for the studioconf package.

This module provides all exception classes used throughout the package,
with a clear inheritance hierarchy rooted in StudioConfError.
"""

# Base exceptions
from .base import (
    StudioConfError,
    ValidationError,
    ConfigurationError,
    NotFoundError
)

# Setting exceptions
from .configuration import (
    CoercionError,
    SettingTypeError,
    SettingNotFoundError,
    DuplicateSettingError,
    PayloadError
)

__all__ = [
    # Base exceptions
    'StudioConfError',
    'ValidationError',
    'ConfigurationError',
    'NotFoundError',

    # Setting exceptions
    'CoercionError',
    'SettingTypeError',
    'SettingNotFoundError',
    'DuplicateSettingError',
    'PayloadError'
]
