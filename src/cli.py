"""Console entry point for the Jest path resolver CLI."""

from __future__ import annotations

import argparse
import json
import logging
import os
from typing import List

from config import DEFAULT_PATH_TO_JEST, ResolverSettings
from log_utils import setup_logging
from platforms import Platform
from resolver import escape_regexp, resolve_all

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_SETTINGS = 2


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Resolve the Jest runner command, config file and package.json"
    )
    parser.add_argument(
        "--root-path",
        default=os.getcwd(),
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "--path-to-jest",
        default=DEFAULT_PATH_TO_JEST,
        help=f"Configured Jest command or path (default: {DEFAULT_PATH_TO_JEST})",
    )
    parser.add_argument("--path-to-config", default="", help="Jest config file")
    parser.add_argument(
        "--settings-file",
        help=(
            "Editor settings JSON (e.g. .vscode/settings.json); its jest.* "
            "entries replace the path options"
        ),
    )
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="Resolve for this platform instead of the host",
    )
    parser.add_argument(
        "--escape",
        metavar="TEXT",
        help="Print TEXT with regular expression metacharacters escaped and exit",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def load_settings(args: argparse.Namespace) -> ResolverSettings:
    """Build validated settings from CLI arguments or a settings file."""
    if args.settings_file:
        settings = ResolverSettings.from_settings_file(
            args.settings_file, root_path=os.path.abspath(args.root_path)
        )
    else:
        settings = ResolverSettings.from_args(args)
    return settings.validate()


def main(argv: List[str] | None = None) -> int:
    """CLI main for console_scripts entry point."""
    parser = build_parser()
    args = parser.parse_args(args=argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    if args.escape is not None:
        print(escape_regexp(args.escape))
        return EXIT_OK

    try:
        settings = load_settings(args)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_INVALID_SETTINGS

    platform = Platform(args.platform) if args.platform else Platform.current()
    logger.debug(f"Resolving paths for {settings.root_path} ({platform.value})")
    resolved = resolve_all(settings, platform)

    if args.json:
        print(json.dumps(resolved.to_dict(), indent=2))
    else:
        for key, value in resolved.to_dict().items():
            print(f"{key}: {'' if value is None else value}")

    return EXIT_OK
