"""
Path resolution for launching Jest from an editor integration.

Locates the runner command, the Jest config file and the installed Jest
package.json for a project, taking the host platform and projects generated
by create-react-app style scaffolds into account. Every function re-reads
the filesystem on each call and none of them raise for missing or broken
files.
"""

import logging
import os
import re
from typing import Mapping, Optional

from config import DEFAULT_PATH_TO_JEST, ResolverSettings
from fs_probe import file_exists, read_package_json
from models import ResolvedPaths
from platforms import Platform

logger = logging.getLogger(__name__)

# Generators whose projects run Jest through their own "npm test" script
SCAFFOLD_PACKAGES = ("react-scripts", "react-native-scripts", "react-scripts-ts")

# Relative to the node_modules directory, in priority order
JEST_PACKAGE_CANDIDATES = (
    ("jest", "package.json"),
    ("jest-cli", "package.json"),
    ("react-scripts", "node_modules", "jest", "package.json"),
)

QUOTE_CHARS = "'\"`"

_NODE_MODULES_SEGMENT = re.compile(
    r"(?:^|[\\/])node_modules(?=[\\/]|$)", re.IGNORECASE
)
_REGEXP_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")


def has_node_executable(
    root_path: str, executable: str, platform: Optional[Platform] = None
) -> bool:
    """Check for an installed binary under <root>/node_modules/.bin."""
    platform = platform or Platform.current()
    binary = os.path.join(
        root_path, "node_modules", ".bin", executable + platform.executable_suffix
    )
    return file_exists(binary)


def is_scaffolded_project(root_path: str, platform: Optional[Platform] = None) -> bool:
    """
    Detect a project generated by create-react-app or one of its variants.

    The project's package.json dependencies are checked first. When the
    manifest is missing, unreadable or has no dependency mapping, the
    generators' executables in node_modules/.bin are looked for instead.

    Args:
        root_path: Project root directory
        platform: Platform used for the executable suffix (defaults to host)

    Returns:
        True if any known scaffold package is declared or installed
    """
    platform = platform or Platform.current()
    manifest = read_package_json(os.path.join(root_path, "package.json"))
    dependencies = manifest.get("dependencies") if manifest else None

    if isinstance(dependencies, Mapping):
        return any(name in dependencies for name in SCAFFOLD_PACKAGES)

    logger.debug(f"No dependency map in {root_path}, looking for scaffold binaries")
    return any(
        has_node_executable(root_path, name, platform) for name in SCAFFOLD_PACKAGES
    )


def _is_default_runner_path(path: str, root_path: str, platform: Platform) -> bool:
    relative = platform.normalize(DEFAULT_PATH_TO_JEST)
    absolute = platform.normalize(
        platform.path.join(root_path, DEFAULT_PATH_TO_JEST)
    )
    return path in (relative, absolute)


def resolve_runner_command(
    settings: ResolverSettings, platform: Optional[Platform] = None
) -> str:
    """
    Work out the shell command that launches Jest.

    Scaffolded projects using the default binary are run through their
    "npm test" script. On Windows the .cmd shim is used for anything else.

    Args:
        settings: Resolver settings
        platform: Target platform (defaults to host)

    Returns:
        Command string, never empty
    """
    platform = platform or Platform.current()
    configured = settings.path_to_jest
    if not configured.strip():
        configured = DEFAULT_PATH_TO_JEST
    path = platform.normalize(configured)

    if _is_default_runner_path(path, settings.root_path, platform):
        if is_scaffolded_project(settings.root_path, platform):
            logger.debug(
                f"Scaffolded project at {settings.root_path}, using npm test script"
            )
            return f"{platform.npm_command} test --"

    if platform is Platform.WINDOWS and not path.lower().endswith(".cmd"):
        return path + platform.executable_suffix

    return path


def resolve_config_path(
    settings: ResolverSettings, platform: Optional[Platform] = None
) -> str:
    """Return the normalized Jest config path, or "" when none is set."""
    if not settings.path_to_config:
        return ""
    platform = platform or Platform.current()
    return platform.normalize(settings.path_to_config)


def strip_surrounding_quotes(text: str) -> str:
    """Drop one leading and one trailing quote character, independently."""
    if text and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text


def node_modules_dir(settings: ResolverSettings) -> str:
    """
    Find the node_modules directory Jest is installed into.

    When path_to_jest points inside a node_modules directory (for example
    "packages/app/node_modules/.bin/jest --ci"), that directory is used,
    otherwise <root>/node_modules. The result is a host path so it can be
    probed on disk whatever platform the output is formatted for.
    """
    tokens = settings.path_to_jest.split()
    if tokens:
        command = strip_surrounding_quotes(tokens[0])
        match = _NODE_MODULES_SEGMENT.search(command)
        if match:
            # An absolute command replaces root_path here instead of being
            # appended to it.
            return os.path.join(settings.root_path, command[: match.end()])
        logger.debug(f"No node_modules segment in {command!r}, using default")

    return os.path.join(settings.root_path, "node_modules")


def resolve_package_metadata_path(
    settings: ResolverSettings, platform: Optional[Platform] = None
) -> Optional[str]:
    """
    Locate the package.json of the installed Jest package.

    Args:
        settings: Resolver settings
        platform: Platform the returned path is formatted for (defaults to host)

    Returns:
        Path of the first existing candidate, or None if Jest is not installed
    """
    platform = platform or Platform.current()
    base = node_modules_dir(settings)

    for parts in JEST_PACKAGE_CANDIDATES:
        candidate = os.path.normpath(os.path.join(base, *parts))
        if file_exists(candidate):
            return platform.normalize(candidate)

    logger.debug(f"No Jest package.json found under {base}")
    return None


def escape_regexp(text: str) -> str:
    """Escape regular expression metacharacters so text matches literally."""
    return _REGEXP_SPECIAL.sub(lambda m: "\\" + m.group(0), text)


def resolve_all(
    settings: ResolverSettings, platform: Optional[Platform] = None
) -> ResolvedPaths:
    """Resolve the runner command, config path and Jest package.json together."""
    platform = platform or Platform.current()
    return ResolvedPaths(
        runner_command=resolve_runner_command(settings, platform),
        config_path=resolve_config_path(settings, platform),
        package_json_path=resolve_package_metadata_path(settings, platform),
        platform=platform.value,
    )
