"""Launcher for Guess the Flag.  See ``main.py`` for options."""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
