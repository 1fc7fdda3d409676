"""
Host platform handling for the Jest path resolver.
"""

import ntpath
import posixpath
import sys
from enum import Enum


class Platform(Enum):
    """Path and executable conventions of the host operating system."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> "Platform":
        """Identify the platform the interpreter is running on."""
        return cls.WINDOWS if sys.platform == "win32" else cls.POSIX

    @property
    def path(self):
        """Path flavor module (ntpath or posixpath) for this platform."""
        return ntpath if self is Platform.WINDOWS else posixpath

    @property
    def executable_suffix(self) -> str:
        return ".cmd" if self is Platform.WINDOWS else ""

    @property
    def npm_command(self) -> str:
        return "npm" + self.executable_suffix

    def normalize(self, path: str) -> str:
        """Normalize a path to this platform's separator convention."""
        return self.path.normpath(path)
