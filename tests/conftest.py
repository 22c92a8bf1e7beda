"""
Shared fakes for the engine and curses front-end tests.
"""

import random
from collections import deque

import pytest

from snake_console.core.game_engine import GameRenderer, InputHandler

EXIT = "exit"


class FakeRenderer(GameRenderer):
    def __init__(self):
        self.frames = []
        self.game_over_scores = []
        self.clears = 0

    def draw_game(self, snake_body, food_position, score):
        self.frames.append((list(snake_body), food_position, score))

    def draw_game_over(self, score):
        self.game_over_scores.append(score)

    def clear(self):
        self.clears += 1


class FakeInputHandler(InputHandler):
    """Replays one batch of events per process_input() call"""

    def __init__(self, batches=None):
        self.batches = deque(batches or [])
        self.direction = None
        self.exit_requested = False
        self.keys_waited = 0

    def process_input(self):
        batch = self.batches.popleft() if self.batches else []
        for event in batch:
            if event == EXIT:
                self.exit_requested = True
            else:
                self.direction = event

    def get_direction(self):
        direction = self.direction
        self.direction = None
        return direction

    def should_exit(self):
        return self.exit_requested

    def wait_for_key(self):
        self.keys_waited += 1


class FakeScreen:
    """Minimal stand-in for a curses window"""

    def __init__(self, keys=None, size=(40, 80)):
        self.keys = deque(keys or [])
        self.size = size
        self.cells = {}
        self.calls = []
        self.nodelay_mode = None
        self.keypad_mode = None
        self.refreshes = 0

    def getch(self):
        self.calls.append(('getch', self.nodelay_mode))
        return self.keys.popleft() if self.keys else -1

    def nodelay(self, flag):
        self.nodelay_mode = flag

    def keypad(self, flag):
        self.keypad_mode = flag

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text):
        for offset, char in enumerate(text):
            self.cells[(y, x + offset)] = char

    def attron(self, attr):
        pass

    def attroff(self, attr):
        pass

    def clear(self):
        self.cells = {}

    def refresh(self):
        self.refreshes += 1

    def row(self, y):
        """Text of a screen row, up to the last written cell"""
        xs = [x for (row, x) in self.cells if row == y]
        if not xs:
            return ""
        return "".join(self.cells.get((y, x), " ") for x in range(max(xs) + 1))


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def rng():
    return random.Random(1234)
