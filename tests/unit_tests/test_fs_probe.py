"""
Unit tests for filesystem probes.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from fs_probe import file_exists, read_package_json


class TestFileExists(unittest.TestCase):
    """Test file_exists."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_existing_file(self):
        path = os.path.join(self.tmp, "package.json")
        with open(path, "w") as f:
            f.write("{}")
        self.assertTrue(file_exists(path))

    def test_existing_directory(self):
        self.assertTrue(file_exists(self.tmp))

    def test_missing_file(self):
        self.assertFalse(file_exists(os.path.join(self.tmp, "missing.json")))

    @patch("fs_probe.os.path.exists", side_effect=OSError("permission denied"))
    def test_os_error_is_false(self, mock_exists):
        """Test OS errors degrade to False instead of raising."""
        self.assertFalse(file_exists("/restricted/package.json"))
        mock_exists.assert_called_once()


class TestReadPackageJson(unittest.TestCase):
    """Test read_package_json."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name
        self.path = os.path.join(self.tmp, "package.json")

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, content, mode="w"):
        with open(self.path, mode) as f:
            f.write(content)

    def test_valid_manifest(self):
        manifest = {"name": "app", "dependencies": {"react-scripts": "1.0.0"}}
        self._write(json.dumps(manifest))
        self.assertEqual(read_package_json(self.path), manifest)

    def test_missing_manifest(self):
        self.assertIsNone(read_package_json(self.path))

    def test_malformed_manifest(self):
        self._write('{"name": "app",')
        self.assertIsNone(read_package_json(self.path))

    def test_non_object_manifest(self):
        self._write('["react-scripts"]')
        self.assertIsNone(read_package_json(self.path))

    def test_invalid_encoding(self):
        self._write(b'{"name": "\xff\xfe"}', mode="wb")
        self.assertIsNone(read_package_json(self.path))

    def test_directory_instead_of_file(self):
        os.mkdir(self.path)
        self.assertIsNone(read_package_json(self.path))


if __name__ == "__main__":
    unittest.main()
