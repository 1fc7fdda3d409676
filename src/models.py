"""
Data models for the Jest path resolver.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass
class ResolvedPaths:
    """Everything the editor integration needs to launch Jest."""

    runner_command: str
    config_path: str  # "" when no config file is configured
    package_json_path: Optional[str]  # None when Jest is not installed
    platform: str  # "posix" or "windows"

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON output."""
        return asdict(self)
