"""
Main entry point for Agenda.

Interactive console menu over a fixed-capacity contact store.

Usage:
    >>> python main.py

Environment (optionally from .env):
    AGENDA_CAPACITY   default capacity offered at startup (10)
    AGENDA_AUDIT      1 to report every add/remove, 0 to disable (1)
    AGENDA_LOG_LEVEL  logging level (WARNING)

File: main.py
Author: Aidan Allchin
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import sys

from agenda.menu import main


if __name__ == "__main__":
    sys.exit(main())
