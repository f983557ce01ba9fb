#!/usr/bin/env python
"""
Main entry point for the presenter_kit CLI.
"""

import sys
import os


# Ensure the current directory is in the path for module imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from presenter_kit.presentation.cli import main

if __name__ == "__main__":
    main()
