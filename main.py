#!/usr/bin/env python3
"""Entry point for PyInstaller builds.

PyInstaller runs this file directly, so it imports the package absolutely
instead of relying on jobhunter/main.py's relative imports.
"""

import os
import sys

# Add the project root to the path to enable absolute imports
if getattr(sys, 'frozen', False):
    # Running as compiled binary
    base_path = sys._MEIPASS
else:
    # Running in development
    base_path = os.path.dirname(os.path.abspath(__file__))

sys.path.insert(0, base_path)

from jobhunter.main import main

if __name__ == "__main__":
    main()
