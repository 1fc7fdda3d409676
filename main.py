#!/usr/bin/env python3
"""
Jest Path Resolver

Prints the command, config file and Jest package.json an editor
integration should use for a project:

  python3 main.py --root-path ~/src/my-app
  python3 main.py --root-path ~/src/my-app --settings-file .vscode/settings.json --json

This script supports running directly from a source checkout that uses a
src/ layout. For regular use, prefer installing the project and using the
provided `jest-paths` console script.
"""

import os
import sys

# Add src/ to path to import modules directly
REPO_ROOT = os.path.dirname(os.path.abspath(__file__))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from cli import main

if __name__ == "__main__":
    sys.exit(main())
