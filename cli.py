#!/usr/bin/env python3
"""
Product Desk CLI.

Entry script for running from a source checkout without installing.
Starts the interactive menu by default.

Usage:
    python cli.py --help
    python cli.py                       # Interactive menu
    python cli.py --debug               # Menu with DEBUG logging on the console
    python cli.py products list -e jane@example.com
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from productdesk.cli.app import app

if __name__ == "__main__":
    app()
