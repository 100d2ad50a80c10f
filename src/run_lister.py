#!/usr/bin/env python3
"""
Entry point for the Xtream channel lister.

This script provides an entry point to run the lister without installing it.
"""

import sys
import os

# Add the src directory to the Python path to enable relative imports
current_dir = os.path.dirname(__file__)
sys.path.insert(0, current_dir)

from xtream_channel_lister.main import main


if __name__ == "__main__":
    sys.exit(main())
