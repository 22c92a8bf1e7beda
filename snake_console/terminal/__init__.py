from .curses_input import CursesInputHandler
from .curses_renderer import CursesRenderer

__all__ = ['CursesInputHandler', 'CursesRenderer']
