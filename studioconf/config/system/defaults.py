"""
Compiled-in system setting definitions.

Each entry lists name, label, value type, default and note, in the order the
settings are registered.
"""

from typing import List

from studioconf.core.enums import ValueType
from ..core.item import ConfigurationItem

USE_REST_API = "useRestAPI"
SQL_SEPARATOR = "sqlSeparator"
JOB_ID_WAIT = "jobIdWait"
MAVEN_SETTINGS = "mavenSettings"
MAVEN_REPOSITORY = "mavenRepository"
MAVEN_REPOSITORY_USER = "mavenRepositoryUser"
MAVEN_REPOSITORY_PASSWORD = "mavenRepositoryPassword"

DEFAULT_MAVEN_REPOSITORY = "https://maven.aliyun.com/nexus/content/repositories/central"

SETTING_DEFINITIONS = [
    (USE_REST_API, "Use RestAPI", ValueType.BOOLEAN, True,
     "Whether to use the Flink RestAPI when operating Flink jobs"),
    (SQL_SEPARATOR, "FlinkSQL statement separator", ValueType.STRING, ";\n",
     "Separator between Flink SQL statements"),
    (JOB_ID_WAIT, "Max wait for Job ID (seconds)", ValueType.INT, 30,
     "Maximum time in seconds to wait for the Job ID when submitting Application or PerJob jobs"),
    (MAVEN_SETTINGS, "Maven settings file path", ValueType.STRING, "",
     "Maven Settings File Path"),
    (MAVEN_REPOSITORY, "Maven Central Repository", ValueType.STRING, DEFAULT_MAVEN_REPOSITORY,
     "Maven private server address"),
    (MAVEN_REPOSITORY_USER, "Maven Central Repository Auth User", ValueType.STRING, "",
     "Maven private server authentication username"),
    (MAVEN_REPOSITORY_PASSWORD, "Maven Central Repository Auth Password", ValueType.STRING, "",
     "Maven private server authentication password"),
]


def get_default_items() -> List[ConfigurationItem]:
    """Build fresh items for every system setting."""
    return [
        ConfigurationItem(name, label, value_type, default, note)
        for name, label, value_type, default, note in SETTING_DEFINITIONS
    ]
