"""
Main entry point for running the package directly:
    python -m abstract_factory
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
