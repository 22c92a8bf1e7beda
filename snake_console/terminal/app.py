"""
Terminal Snake Game
Command line entry point: parses options, sets up curses and runs one game.

Controls:
- Arrow keys or WASD to move
- Esc to quit
"""

import argparse
import curses
import locale
import logging
import os
import random
import sys
from typing import List, Optional

from ..core.game_engine import SnakeGameEngine
from ..core.models import GameSettings, GrowthMode
from .curses_input import CursesInputHandler
from .curses_renderer import CursesRenderer

logger = logging.getLogger(__name__)


class TerminalTooSmallError(Exception):
    pass


def build_parser() -> argparse.ArgumentParser:
    defaults = GameSettings()
    parser = argparse.ArgumentParser(
        prog="snake-console",
        description="Classic Snake in the terminal",
    )
    parser.add_argument("--width", type=int, help=f"Field width (default: {defaults.width})")
    parser.add_argument("--height", type=int, help=f"Field height (default: {defaults.height})")
    parser.add_argument(
        "--length", type=int, dest="initial_snake_length",
        help=f"Initial snake length (default: {defaults.initial_snake_length})",
    )
    parser.add_argument(
        "--speed", type=int, dest="tick_interval",
        help=f"Tick interval in milliseconds (default: {defaults.tick_interval})",
    )
    parser.add_argument(
        "--start", type=int, nargs=2, metavar=("X", "Y"), dest="initial_position",
        help="Initial head position (default: %d %d)" % (defaults.initial_position.x, defaults.initial_position.y),
    )
    parser.add_argument(
        "--growth", choices=[mode.value for mode in GrowthMode], dest="growth_mode",
        help=f"How the snake grows after eating (default: {defaults.growth_mode.value})",
    )
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument("--log-file", help="Write a debug log to this file")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file (default: INFO)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    """Build settings from the options that were given on the command line.

    Options that are not settings (seed, logging) are dropped by from_dict.
    """
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return GameSettings.from_dict(overrides)


def setup_logging(log_file: Optional[str], level: str = "INFO"):
    # Anything written to stderr would end up on top of the curses screen
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def set_cursor_visibility(visible: bool) -> bool:
    try:
        curses.curs_set(1 if visible else 0)
        return True
    except curses.error:
        logger.debug("Terminal does not support changing cursor visibility")
        return False


def run_game(stdscr, settings: GameSettings, seed: Optional[int] = None) -> int:
    """Play one game inside an initialised curses screen"""
    set_cursor_visibility(False)
    try:
        renderer = CursesRenderer(stdscr, settings)
        input_handler = CursesInputHandler(stdscr)

        height, width = stdscr.getmaxyx()
        min_height, min_width = renderer.required_size
        if height < min_height or width < min_width:
            message = f"Terminal too small! Minimum size: {min_width}x{min_height}"
            renderer.show_message([message, "Press any key to exit..."])
            input_handler.wait_for_key()
            raise TerminalTooSmallError(message)

        engine = SnakeGameEngine(settings, renderer, input_handler, rng=random.Random(seed))
        return engine.run()
    finally:
        set_cursor_visibility(True)


def wait_for_acknowledgment():
    try:
        input("\nPress Enter to exit...")
    except EOFError:
        print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(args.log_file, args.log_level)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        logger.warning("Could not apply the system locale, box drawing may look wrong")
    # Make Esc register without the default one second delay
    os.environ.setdefault("ESCDELAY", "25")

    try:
        score = curses.wrapper(run_game, settings, args.seed)
    except TerminalTooSmallError as e:
        print(e)
        return 1
    except KeyboardInterrupt:
        print("Game interrupted by user.")
        return 130
    except Exception as e:
        logger.exception("Game loop failed")
        print(f"An error occurred: {e}")
        wait_for_acknowledgment()
        return 0

    print(f"Game over! Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
