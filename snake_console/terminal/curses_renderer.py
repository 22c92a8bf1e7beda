"""
Curses renderer: redraws the whole field on every frame.

Screen layout (rows):
    0                 top border
    1 .. height       playfield rows framed by side borders
    height + 1        bottom border
    height + 2        score
    height + 3        controls hint
    height + 4        game over message
"""

import curses
from typing import List, Optional

from ..core.game_engine import GameRenderer
from ..core.models import GameSettings, Point

HEAD_SYMBOL = '@'
BODY_SYMBOL = 'O'
FOOD_SYMBOL = '*'
CONTROLS_HINT = "Arrow Keys/WASD: Move | Esc: Quit"
GAME_OVER_MESSAGE = "GAME OVER! Final Score: {score} | Press any key to exit"

SNAKE_COLOR = 1
FOOD_COLOR = 2
SCORE_COLOR = 3
BORDER_COLOR = 4


class CursesRenderer(GameRenderer):
    def __init__(self, stdscr, settings: GameSettings, use_colors: Optional[bool] = None):
        self.stdscr = stdscr
        self.settings = settings
        # Field cells are offset by the border
        self.start_y = 1
        self.start_x = 1

        if use_colors is None:
            use_colors = curses.has_colors()
        self.use_colors = use_colors
        if self.use_colors:
            self.init_colors()

    @property
    def required_size(self):
        """Terminal (rows, cols) needed to show the field and the text lines"""
        rows = self.settings.height + 5
        cols = max(self.settings.width + 2, len(GAME_OVER_MESSAGE.format(score=99999)) + 1)
        return rows, cols

    def init_colors(self):
        curses.start_color()
        curses.init_pair(SNAKE_COLOR, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(FOOD_COLOR, curses.COLOR_RED, curses.COLOR_BLACK)
        curses.init_pair(SCORE_COLOR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
        curses.init_pair(BORDER_COLOR, curses.COLOR_WHITE, curses.COLOR_BLACK)

    def _put(self, y: int, x: int, text: str, color: int = 0):
        if self.use_colors and color:
            self.stdscr.attron(curses.color_pair(color))
        self.stdscr.addstr(y, x, text)
        if self.use_colors and color:
            self.stdscr.attroff(curses.color_pair(color))

    def _in_field(self, point: Point) -> bool:
        return 0 <= point.x < self.settings.width and 0 <= point.y < self.settings.height

    def draw_border(self):
        """Draw game border"""
        width, height = self.settings.width, self.settings.height
        top = self.start_y - 1
        bottom = self.start_y + height
        left = self.start_x - 1
        right = self.start_x + width

        self._put(top, left, '┌' + '─' * width + '┐', BORDER_COLOR)
        for y in range(self.start_y, bottom):
            self._put(y, left, '│', BORDER_COLOR)
            self._put(y, right, '│', BORDER_COLOR)
        self._put(bottom, left, '└' + '─' * width + '┘', BORDER_COLOR)

    def draw_snake(self, snake_body: List[Point]):
        # Draw the tail first so the head stays visible when segments overlap
        for i in range(len(snake_body) - 1, -1, -1):
            segment = snake_body[i]
            if not self._in_field(segment):
                continue
            symbol = HEAD_SYMBOL if i == 0 else BODY_SYMBOL
            self._put(self.start_y + segment.y, self.start_x + segment.x, symbol, SNAKE_COLOR)

    def draw_food(self, food_position: Point):
        if self._in_field(food_position):
            self._put(self.start_y + food_position.y, self.start_x + food_position.x, FOOD_SYMBOL, FOOD_COLOR)

    def draw_ui(self, score: int):
        """Draw score and controls below the field"""
        base = self.start_y + self.settings.height + 1
        self._put(base, 0, f"Score: {score}", SCORE_COLOR)
        self._put(base + 1, 0, CONTROLS_HINT)

    def draw_game(self, snake_body: List[Point], food_position: Point, score: int):
        self.clear()
        self.draw_border()
        self.draw_food(food_position)
        self.draw_snake(snake_body)
        self.draw_ui(score)
        self.stdscr.refresh()

    def draw_game_over(self, score: int):
        y = self.start_y + self.settings.height + 3
        self.stdscr.attron(curses.A_BOLD)
        self.stdscr.addstr(y, 0, GAME_OVER_MESSAGE.format(score=score))
        self.stdscr.attroff(curses.A_BOLD)
        self.stdscr.refresh()

    def clear(self):
        self.stdscr.clear()

    def show_message(self, lines: List[str]):
        """Show plain text lines from the top-left corner"""
        self.clear()
        for y, line in enumerate(lines):
            self.stdscr.addstr(y, 0, line)
        self.stdscr.refresh()
