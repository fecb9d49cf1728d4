"""
System configuration.

The registry of system-wide settings with one typed property per setting.
"""

from typing import Tuple

from ..core.registry import ConfigurationRegistry
from .defaults import (
    get_default_items, USE_REST_API, SQL_SEPARATOR, JOB_ID_WAIT, MAVEN_SETTINGS,
    MAVEN_REPOSITORY, MAVEN_REPOSITORY_USER, MAVEN_REPOSITORY_PASSWORD
)


class SystemConfiguration(ConfigurationRegistry):
    """
    Registry holding the system settings.

    Properties read the current value checked against the setting's type and
    raise SettingTypeError when an ill-typed value was written through the
    raw ``set_value`` of an item. Assigning a property checks the new value
    the same way.
    """

    def __init__(self):
        super().__init__(get_default_items())

    @property
    def use_rest_api(self) -> bool:
        return self.get_typed(USE_REST_API)

    @use_rest_api.setter
    def use_rest_api(self, value: bool):
        self.set_typed(USE_REST_API, value)

    @property
    def sql_separator(self) -> str:
        return self.get_typed(SQL_SEPARATOR)

    @sql_separator.setter
    def sql_separator(self, value: str):
        self.set_typed(SQL_SEPARATOR, value)

    @property
    def job_id_wait(self) -> int:
        return self.get_typed(JOB_ID_WAIT)

    @job_id_wait.setter
    def job_id_wait(self, value: int):
        self.set_typed(JOB_ID_WAIT, value)

    @property
    def maven_settings(self) -> str:
        return self.get_typed(MAVEN_SETTINGS)

    @maven_settings.setter
    def maven_settings(self, value: str):
        self.set_typed(MAVEN_SETTINGS, value)

    @property
    def maven_repository(self) -> str:
        return self.get_typed(MAVEN_REPOSITORY)

    @maven_repository.setter
    def maven_repository(self, value: str):
        self.set_typed(MAVEN_REPOSITORY, value)

    @property
    def maven_repository_user(self) -> str:
        return self.get_typed(MAVEN_REPOSITORY_USER)

    @maven_repository_user.setter
    def maven_repository_user(self, value: str):
        self.set_typed(MAVEN_REPOSITORY_USER, value)

    @property
    def maven_repository_password(self) -> str:
        return self.get_typed(MAVEN_REPOSITORY_PASSWORD)

    @maven_repository_password.setter
    def maven_repository_password(self, value: str):
        self.set_typed(MAVEN_REPOSITORY_PASSWORD, value)

    def get_maven_credentials(self) -> Tuple[str, str]:
        """(user, password) for the Maven repository, read under the lock."""
        with self.lock:
            return self.maven_repository_user, self.maven_repository_password
