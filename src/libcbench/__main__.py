"""Entry point for running libcbench as a module.

Allows the package to be run as:
    python -m libcbench
"""

import sys

from libcbench.cli import main

if __name__ == "__main__":
    sys.exit(main())
