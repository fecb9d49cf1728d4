"""
Tests for the system settings registry.
"""

import threading

import pytest

from studioconf.config import SystemConfiguration, get_system_configuration, reset_system_configuration
from studioconf.config.system.defaults import DEFAULT_MAVEN_REPOSITORY
from studioconf.core.enums import ValueType
from studioconf.core.exceptions import SettingTypeError


EXPECTED_DEFAULTS = {
    'useRestAPI': True,
    'sqlSeparator': ';\n',
    'jobIdWait': 30,
    'mavenSettings': '',
    'mavenRepository': DEFAULT_MAVEN_REPOSITORY,
    'mavenRepositoryUser': '',
    'mavenRepositoryPassword': '',
}


def test_catalog_and_defaults(system_config):
    assert system_config.to_dict() == EXPECTED_DEFAULTS
    assert system_config.names() == list(EXPECTED_DEFAULTS)
    assert system_config['useRestAPI'].get_type() is ValueType.BOOLEAN
    assert system_config['jobIdWait'].get_type() is ValueType.INT
    assert system_config.validate()


def test_typed_getters_read_defaults(system_config):
    assert system_config.use_rest_api is True
    assert system_config.sql_separator == ';\n'
    assert system_config.job_id_wait == 30
    assert system_config.maven_settings == ''
    assert system_config.maven_repository == DEFAULT_MAVEN_REPOSITORY
    assert system_config.get_maven_credentials() == ('', '')


def test_typed_setters(system_config):
    system_config.use_rest_api = False
    system_config.sql_separator = ';'
    system_config.job_id_wait = 120
    system_config.maven_settings = '/etc/maven/settings.xml'
    system_config.maven_repository = 'https://repo.example.com/maven2'
    system_config.maven_repository_user = 'deploy'
    system_config.maven_repository_password = 's3cret'

    assert system_config.use_rest_api is False
    assert system_config.sql_separator == ';'
    assert system_config.job_id_wait == 120
    assert system_config.maven_settings == '/etc/maven/settings.xml'
    assert system_config.maven_repository == 'https://repo.example.com/maven2'
    assert system_config.get_maven_credentials() == ('deploy', 's3cret')
    assert system_config['jobIdWait'].get_value() == 120


@pytest.mark.parametrize("attribute, value", [
    ('use_rest_api', 'true'),
    ('job_id_wait', '45'),
    ('job_id_wait', True),
    ('sql_separator', 1),
])
def test_typed_setters_reject_wrong_shape(system_config, attribute, value):
    with pytest.raises(SettingTypeError):
        setattr(system_config, attribute, value)


def test_typed_getter_fails_after_raw_ill_typed_write(system_config):
    system_config['jobIdWait'].set_value('45')

    with pytest.raises(TypeError):
        system_config.job_id_wait


def test_selective_import(system_config):
    system_config.apply_external({'sqlSeparator': ','})

    expected = dict(EXPECTED_DEFAULTS, sqlSeparator=',')
    assert system_config.to_dict() == expected


def test_int_coercion_from_text(system_config):
    system_config.apply_external({'jobIdWait': '45'})

    assert system_config.job_id_wait == 45
    assert isinstance(system_config['jobIdWait'].get_value(), int)


def test_unknown_key_safety(system_config):
    system_config.apply_external({'doesNotExist': True})

    assert system_config.to_dict() == EXPECTED_DEFAULTS


def test_request_body_import(system_config, base_payload):
    applied = system_config.apply_external(base_payload)

    assert applied == ['useRestAPI', 'sqlSeparator', 'jobIdWait', 'mavenRepositoryUser']
    assert system_config.use_rest_api is False
    assert system_config.sql_separator == ','
    assert system_config.job_id_wait == 45
    assert system_config.maven_repository_user == 'deploy'


def test_merge_into_properties_bag(system_config):
    properties = {'useRestAPI': 'FALSE', 'sqlSeparator': '|'}

    system_config.merge_defaults(properties)

    assert properties['useRestAPI'] is False
    assert properties['sqlSeparator'] == '|'
    assert properties['jobIdWait'] == 30
    assert properties['mavenRepository'] == DEFAULT_MAVEN_REPOSITORY


def test_instances_do_not_share_items():
    first = SystemConfiguration()
    second = SystemConfiguration()

    first.job_id_wait = 5

    assert second.job_id_wait == 30
    assert first['jobIdWait'] is not second['jobIdWait']


class TestProcessConfiguration:

    def test_single_instance(self):
        assert get_system_configuration() is get_system_configuration()

    def test_state_is_shared(self):
        get_system_configuration().apply_external({'jobIdWait': 10})

        assert get_system_configuration().job_id_wait == 10

    def test_reset_builds_fresh_instance(self):
        first = get_system_configuration()
        first.job_id_wait = 10

        reset_system_configuration()

        second = get_system_configuration()
        assert second is not first
        assert second.job_id_wait == 30

    def test_concurrent_first_use_creates_one_instance(self):
        seen = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            seen.append(get_system_configuration())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in seen}) == 1
