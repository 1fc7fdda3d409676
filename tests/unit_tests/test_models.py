"""
Unit tests for data models.
"""

import unittest

from models import ResolvedPaths


class TestResolvedPaths(unittest.TestCase):
    """Test ResolvedPaths data model."""

    def test_to_dict(self):
        """Test conversion to a JSON friendly dict."""
        resolved = ResolvedPaths(
            runner_command="npm test --",
            config_path="jest.config.js",
            package_json_path=None,
            platform="posix",
        )
        self.assertEqual(
            resolved.to_dict(),
            {
                "runner_command": "npm test --",
                "config_path": "jest.config.js",
                "package_json_path": None,
                "platform": "posix",
            },
        )


if __name__ == "__main__":
    unittest.main()
