"""
Jest path resolution helpers for editor integrations.
"""

from config import DEFAULT_PATH_TO_JEST, ResolverSettings
from log_utils import setup_logging
from models import ResolvedPaths
from platforms import Platform
from resolver import (
    escape_regexp,
    resolve_all,
    resolve_config_path,
    resolve_package_metadata_path,
    resolve_runner_command,
)

__all__ = [
    "DEFAULT_PATH_TO_JEST",
    "ResolverSettings",
    "setup_logging",
    "ResolvedPaths",
    "Platform",
    "escape_regexp",
    "resolve_all",
    "resolve_config_path",
    "resolve_package_metadata_path",
    "resolve_runner_command",
]
