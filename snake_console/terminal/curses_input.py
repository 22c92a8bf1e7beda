"""
Keyboard input for the curses front-end.
"""

import curses
from collections import deque
from typing import Optional

from ..core.game_engine import InputHandler
from ..core.models import Direction

KEY_ESCAPE = 27

DIRECTION_KEYS = {
    curses.KEY_UP: Direction.UP,
    ord('w'): Direction.UP,
    ord('W'): Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    ord('s'): Direction.DOWN,
    ord('S'): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord('a'): Direction.LEFT,
    ord('A'): Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord('d'): Direction.RIGHT,
    ord('D'): Direction.RIGHT,
}


class CursesInputHandler(InputHandler):
    """Collects key presses between ticks and turns them into game events"""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.key_queue = deque()
        self.current_direction: Optional[Direction] = None
        self.exit_requested = False

        stdscr.keypad(True)
        stdscr.nodelay(True)

    def process_input(self):
        # Read everything the terminal has buffered
        while True:
            key = self.stdscr.getch()
            if key == -1:
                break
            self.key_queue.append(key)

        while self.key_queue:
            key = self.key_queue.popleft()
            if key == KEY_ESCAPE:
                self.exit_requested = True
            elif key in DIRECTION_KEYS:
                self.current_direction = DIRECTION_KEYS[key]

    def get_direction(self) -> Optional[Direction]:
        direction = self.current_direction
        self.current_direction = None
        return direction

    def should_exit(self) -> bool:
        return self.exit_requested

    def wait_for_key(self):
        self.stdscr.nodelay(False)
        try:
            self.stdscr.getch()
        finally:
            self.stdscr.nodelay(True)
