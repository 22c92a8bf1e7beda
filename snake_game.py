#!/usr/bin/env python3
"""
Terminal Snake Game
A classic Snake game implemented using Python's curses library.

Controls:
- Arrow keys or WASD to move
- Esc to quit

Run ``python snake_game.py --help`` for the available options.
"""

import sys

from snake_console.terminal.app import main


if __name__ == "__main__":
    sys.exit(main())
