"""
CLI entry point for tilematrix.

Usage:
    python -m tilematrix <command> [options]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
