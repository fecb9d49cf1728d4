"""
Setting value type enum for the studioconf package.
"""

from enum import Enum


class ValueType(Enum):
    """Declared type of a configuration item."""
    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
