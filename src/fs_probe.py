"""
Filesystem probes that report failures as values instead of raising.
"""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """Return True if something exists at path; never raises."""
    try:
        return os.path.exists(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Existence check failed for {path}: {e}")
        return False


def read_package_json(path: str) -> Optional[dict]:
    """
    Read and parse a package.json manifest.

    Args:
        path: Path to the manifest file

    Returns:
        The parsed JSON object, or None if the file is missing, unreadable,
        malformed, or does not contain a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug(f"No manifest at {path}")
        return None
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.debug(f"Cannot read manifest {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug(f"Manifest {path} is not a JSON object")
        return None
    return data
