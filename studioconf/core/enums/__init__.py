"""
Core enums for the studioconf package.
"""

from .value_type import ValueType

__all__ = [
    'ValueType'
]
