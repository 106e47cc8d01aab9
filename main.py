#!/usr/bin/env python3
"""Convenience entry point for libcbench.

Allows running from a checkout:
    uv run main.py baseline.json experiment.json

For installed usage, prefer:
    libcbench baseline.json experiment.json
    python -m libcbench baseline.json experiment.json
"""

import sys
from libcbench.cli import main

if __name__ == "__main__":
    sys.exit(main())
