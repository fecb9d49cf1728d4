"""
Core configuration components.

This module provides the building blocks of the settings registry:
- ConfigurationItem: one named, typed setting
- ConfigurationRegistry: ordered items with bulk import and merge
- FieldSource: untyped input payload abstraction
- Coercion helpers and the shape validator
"""

from .item import ConfigurationItem
from .registry import ConfigurationRegistry
from .source import FieldSource, MappingFieldSource, as_field_source, load_payload, load_payload_file
from .coercion import coerce, register_coercer, get_coercer, normalize_boolean, to_text
from .validator import ConfigValidator, ShapeValidator, ValidationResult

__all__ = [
    # Items and registry
    'ConfigurationItem',
    'ConfigurationRegistry',

    # Payload sources
    'FieldSource',
    'MappingFieldSource',
    'as_field_source',
    'load_payload',
    'load_payload_file',

    # Coercion
    'coerce',
    'register_coercer',
    'get_coercer',
    'normalize_boolean',
    'to_text',

    # Validators
    'ConfigValidator',
    'ShapeValidator',
    'ValidationResult'
]
