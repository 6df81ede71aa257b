"""Main entry point for the pathtrace package when run as a module.

This module enables running pathtrace directly using 'python -m pathtrace'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
