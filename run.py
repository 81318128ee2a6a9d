#!/usr/bin/env python3
"""
run.py - Main entry point for the four-in-a-row engine
"""

import os
import sys

# Add the project root to Python path so the package imports from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from four_in_a_row.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
