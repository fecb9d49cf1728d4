"""
Shared pytest configuration and fixtures for the studioconf tests.
"""

import pytest

from studioconf.config import (
    ConfigurationItem, ConfigurationRegistry, SystemConfiguration, reset_system_configuration
)
from studioconf.core.enums import ValueType


@pytest.fixture(scope="session")
def base_payload():
    """
    Provides a request body touching every kind of system setting.
    Session scope means this fixture is created once per test session.
    """
    return {
        'useRestAPI': 'false',
        'sqlSeparator': ',',
        'jobIdWait': '45',
        'mavenRepositoryUser': 'deploy',
    }


@pytest.fixture
def system_config():
    """Create a fresh SystemConfiguration for testing."""
    return SystemConfiguration()


@pytest.fixture
def mixed_registry():
    """Create a registry with one item per value type."""
    return ConfigurationRegistry([
        ConfigurationItem('enabled', 'Enabled', ValueType.BOOLEAN, False),
        ConfigurationItem('retries', 'Retries', ValueType.INT, 3),
        ConfigurationItem('title', 'Title', ValueType.STRING, 'untitled'),
        ConfigurationItem('ratio', 'Ratio', ValueType.DOUBLE, 0.5),
        ConfigurationItem('scale', 'Scale', ValueType.FLOAT, 1.0),
        ConfigurationItem('since', 'Since', ValueType.DATE, '1970-01-01'),
    ])


@pytest.fixture(autouse=True)
def _fresh_process_configuration():
    """Drop the process-wide configuration around every test."""
    reset_system_configuration()
    yield
    reset_system_configuration()


# Pytest marks for categorizing tests
pytestmark = pytest.mark.unit
