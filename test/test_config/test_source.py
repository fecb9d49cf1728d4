import os
import tempfile
import unittest

from studioconf.config import (
    MappingFieldSource, SystemConfiguration, as_field_source, load_payload, load_payload_file
)
from studioconf.core.exceptions import PayloadError


class TestPayloadSources(unittest.TestCase):
    """
    Test adapting and parsing untyped input payloads.
    """

    def test_mapping_source(self):
        """Test has/get over a mapping."""
        source = MappingFieldSource({'jobIdWait': '45'})

        self.assertTrue(source.has('jobIdWait'))
        self.assertFalse(source.has('sqlSeparator'))
        self.assertEqual(source.get('jobIdWait'), '45')

    def test_as_field_source(self):
        """Test adaptation of supported payload shapes."""
        source = MappingFieldSource({})
        self.assertIs(as_field_source(source), source)
        self.assertIsInstance(as_field_source({'a': 1}), MappingFieldSource)

        with self.assertRaises(PayloadError):
            as_field_source(42)

    def test_load_json_payload(self):
        """Test JSON request bodies parse into a source."""
        source = load_payload('{"jobIdWait": "45", "useRestAPI": false}')

        self.assertEqual(source.get('jobIdWait'), '45')
        self.assertIs(source.get('useRestAPI'), False)

    def test_load_yaml_payload(self):
        """Test YAML documents parse into a source."""
        source = load_payload("sqlSeparator: ','\njobIdWait: 60\n")

        self.assertEqual(source.get('sqlSeparator'), ',')
        self.assertEqual(source.get('jobIdWait'), 60)

    def test_empty_payload(self):
        """Test an empty document yields no fields."""
        source = load_payload('')
        self.assertFalse(source.has('jobIdWait'))

    def test_invalid_payloads(self):
        """Test non-mapping and malformed documents are rejected."""
        with self.assertRaises(PayloadError):
            load_payload('- a\n- b\n')
        with self.assertRaises(PayloadError):
            load_payload('{"jobIdWait": [')

    def test_payload_file_applied_to_registry(self):
        """Test a payload read from disk feeds apply_external."""

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'body.json')
            with open(path, 'w') as f:
                f.write('{"useRestAPI": "false", "mavenRepositoryUser": "deploy"}')

            config = SystemConfiguration()
            config.apply_external(load_payload_file(path))

        self.assertFalse(config.use_rest_api)
        self.assertEqual(config.maven_repository_user, 'deploy')


if __name__ == '__main__':
    unittest.main()
