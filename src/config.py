"""
Configuration management for the Jest path resolver.
"""

import json
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PATH_TO_JEST = "node_modules/.bin/jest"

# Editor settings are namespaced ("jest.pathToJest"); bare keys are accepted too.
SETTINGS_PREFIX = "jest."


def _setting(data: Mapping, key: str, default: str = "") -> str:
    value = data.get(SETTINGS_PREFIX + key, data.get(key))
    if value is None:
        return default
    return str(value)


@dataclass(frozen=True)
class ResolverSettings:
    """Read-only settings consumed by the path resolver."""

    root_path: str
    path_to_jest: str = ""
    path_to_config: str = ""

    @classmethod
    def from_args(cls, args) -> "ResolverSettings":
        """
        Create settings from command-line arguments.

        Args:
            args: Parsed argparse arguments

        Returns:
            ResolverSettings instance
        """
        return cls(
            root_path=os.path.abspath(args.root_path),
            path_to_jest=args.path_to_jest or "",
            path_to_config=args.path_to_config or "",
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping, root_path: Optional[str] = None
    ) -> "ResolverSettings":
        """
        Create settings from an editor settings mapping.

        Args:
            data: Mapping with rootPath/pathToJest/pathToConfig keys,
                optionally prefixed with "jest."
            root_path: Workspace directory; a relative rootPath in data is
                resolved against it

        Returns:
            ResolverSettings instance
        """
        workspace = root_path or os.getcwd()
        configured_root = _setting(data, "rootPath")
        if configured_root:
            workspace = os.path.join(workspace, configured_root)

        return cls(
            root_path=os.path.abspath(workspace),
            path_to_jest=_setting(data, "pathToJest"),
            path_to_config=_setting(data, "pathToConfig"),
        )

    @classmethod
    def from_settings_file(
        cls, settings_file: str, root_path: Optional[str] = None
    ) -> "ResolverSettings":
        """
        Load settings from a JSON file such as .vscode/settings.json.

        Raises:
            ValueError: If the file does not hold a JSON object
            OSError: If the file cannot be read
        """
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(
                f"Settings file {settings_file} must contain a JSON object"
            )
        return cls.from_mapping(data, root_path=root_path)

    def validate(self) -> "ResolverSettings":
        """
        Check that the settings point at a usable project.

        Raises:
            ValueError: If root_path is empty or not a directory
        """
        if not self.root_path:
            raise ValueError("root_path must not be empty")
        if not os.path.isdir(self.root_path):
            raise ValueError(f"root_path is not a directory: {self.root_path}")
        return self
