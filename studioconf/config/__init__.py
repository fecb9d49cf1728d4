"""
Configuration management for the studioconf package.

This module provides:
- The core item/registry/payload infrastructure
- The system settings registry and its process-wide instance
- Logging configuration
"""

import threading
from typing import Optional

from .core import (
    ConfigurationItem, ConfigurationRegistry, FieldSource, MappingFieldSource,
    as_field_source, load_payload, load_payload_file,
    coerce, register_coercer, get_coercer, normalize_boolean, to_text,
    ConfigValidator, ShapeValidator, ValidationResult
)

from .system import (
    SystemConfiguration, SETTING_DEFINITIONS, get_default_items,
    LoggingConfig, LogFormat,
    get_default_logging_config, get_production_logging_config, get_debug_logging_config
)

_system_configuration: Optional[SystemConfiguration] = None
_system_configuration_lock = threading.Lock()


def get_system_configuration() -> SystemConfiguration:
    """Get or create the process-wide system configuration."""
    global _system_configuration
    if _system_configuration is None:
        with _system_configuration_lock:
            if _system_configuration is None:
                _system_configuration = SystemConfiguration()
    return _system_configuration


def reset_system_configuration():
    """Drop the process-wide system configuration; the next get builds a fresh one."""
    global _system_configuration
    with _system_configuration_lock:
        _system_configuration = None


__all__ = [
    # Core infrastructure
    'ConfigurationItem',
    'ConfigurationRegistry',
    'FieldSource',
    'MappingFieldSource',
    'as_field_source',
    'load_payload',
    'load_payload_file',
    'coerce',
    'register_coercer',
    'get_coercer',
    'normalize_boolean',
    'to_text',
    'ConfigValidator',
    'ShapeValidator',
    'ValidationResult',

    # System domain
    'SystemConfiguration',
    'SETTING_DEFINITIONS',
    'get_default_items',
    'LoggingConfig',
    'LogFormat',
    'get_default_logging_config',
    'get_production_logging_config',
    'get_debug_logging_config',

    # Convenience functions
    'get_system_configuration',
    'reset_system_configuration'
]
