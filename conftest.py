"""
Pytest configuration shared by all test suites.

Puts src/ on sys.path so the flat modules (resolver, config, ...) import
the same way they do when installed.
"""

import os
import sys

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
