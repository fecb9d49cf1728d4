"""
System configuration domain.

This module provides the system settings registry and the logging
configuration.
"""

from .configuration import SystemConfiguration
from .defaults import SETTING_DEFINITIONS, get_default_items
from .logging_config import (
    LoggingConfig, LogFormat,
    get_default_logging_config, get_production_logging_config, get_debug_logging_config
)

__all__ = [
    # Settings
    'SystemConfiguration',
    'SETTING_DEFINITIONS',
    'get_default_items',

    # Logging configuration
    'LoggingConfig',
    'LogFormat',
    'get_default_logging_config',
    'get_production_logging_config',
    'get_debug_logging_config'
]
