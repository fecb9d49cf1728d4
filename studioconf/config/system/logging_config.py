"""
System logging configuration.

This module provides the logging settings applied by ``init_logger`` when the
package is imported.
"""

from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum


class LogFormat(Enum):
    """Log format types."""
    TEXT = "text"
    JSON = "json"


@dataclass
class LoggingConfig:
    """
    Logging configuration for the studioconf package.

    Controls the root level, the renderer (console text or JSON) and
    per-logger overrides.
    """

    global_level: str = "INFO"
    format_type: LogFormat = LogFormat.TEXT

    # Component-specific log levels
    component_levels: Dict[str, str] = None

    def __post_init__(self):
        """Initialize default values after creation."""
        if self.component_levels is None:
            self.component_levels = {
                'studioconf.config': 'WARNING',
            }

    @property
    def json_logs(self) -> bool:
        return self.format_type is LogFormat.JSON

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'global_level': self.global_level,
            'format_type': self.format_type.value,
            'component_levels': dict(self.component_levels),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LoggingConfig':
        """Create configuration from dictionary."""
        config = cls()

        config.global_level = data.get('global_level', config.global_level)
        if 'format_type' in data:
            config.format_type = LogFormat(data['format_type'])
        if 'component_levels' in data:
            config.component_levels = dict(data['component_levels'])

        return config


def get_default_logging_config() -> LoggingConfig:
    """Get default logging configuration."""
    return LoggingConfig()


def get_debug_logging_config() -> LoggingConfig:
    """Get logging configuration with every studioconf logger at DEBUG."""
    return LoggingConfig(
        global_level="DEBUG",
        component_levels={'studioconf.config': 'DEBUG'}
    )


def get_production_logging_config() -> LoggingConfig:
    """Get JSON logging configuration for production deployments."""
    return LoggingConfig(
        global_level="WARNING",
        format_type=LogFormat.JSON
    )
