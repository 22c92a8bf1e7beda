"""
Snake game engine
Core game logic without ties to a particular platform. The terminal
front-end plugs in through the GameRenderer and InputHandler interfaces.
"""

import logging
import random
import time
from enum import Enum
from dataclasses import dataclass, asdict
from typing import List, Optional, Dict, Any, Callable
from abc import ABC, abstractmethod

from .collision import CollisionDetector, CollisionRules
from .factory import GameObjectFactory
from .food import Food
from .models import Direction, GameSettings, GrowthMode, Point
from .snake import Snake

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(Enum):
    EXIT = "exit"
    WALL = "wall"
    SELF = "self"
    FIELD_FULL = "field_full"  # no free cell left for food


@dataclass
class GameSession:
    """Statistics for a single game"""
    start_time: float
    end_time: float = 0
    ticks: int = 0
    foods_eaten: int = 0
    max_length: int = 0

    def duration(self) -> float:
        return (self.end_time or time.time()) - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class GameRenderer(ABC):
    """Abstract renderer interface (terminal, tests, ...)"""

    @abstractmethod
    def draw_game(self, snake_body: List[Point], food_position: Point, score: int):
        pass

    @abstractmethod
    def draw_game_over(self, score: int):
        pass

    @abstractmethod
    def clear(self):
        pass


class InputHandler(ABC):
    """Abstract keyboard input interface"""

    @abstractmethod
    def process_input(self):
        """Drain and classify every key pressed since the last call"""
        pass

    @abstractmethod
    def get_direction(self) -> Optional[Direction]:
        """Latest requested direction, cleared once read"""
        pass

    @abstractmethod
    def should_exit(self) -> bool:
        pass

    @abstractmethod
    def wait_for_key(self):
        """Block until the player presses any key"""
        pass


class SnakeGameEngine:
    """Main game engine; owns the snake, the food and the score"""

    def __init__(
        self,
        settings: GameSettings,
        renderer: GameRenderer,
        input_handler: InputHandler,
        collision_detector: Optional[CollisionRules] = None,
        factory: Optional[GameObjectFactory] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings
        self.renderer = renderer
        self.input_handler = input_handler
        self.collision_detector = collision_detector or CollisionDetector()
        self.factory = factory or GameObjectFactory(rng)
        self.sleep = sleep

        self.snake: Optional[Snake] = None
        self.food: Optional[Food] = None
        self.score = 0
        self.state = GameState.GAME_OVER
        self.game_over_reason: Optional[GameOverReason] = None
        self.current_session: Optional[GameSession] = None

    @property
    def is_running(self) -> bool:
        return self.state == GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def initialize(self):
        """Reset the game to its initial state"""
        settings = self.settings
        self.snake = self.factory.create_snake(settings)
        self.food = self.factory.create_food(settings.width, settings.height)
        self.score = 0
        self.game_over_reason = None
        self.place_food()
        self.state = GameState.RUNNING

        self.current_session = GameSession(start_time=time.time(), max_length=len(self.snake))
        logger.info(
            "Game started: field %dx%d, snake %s, food at %s",
            settings.width, settings.height, self.snake, self.food.position,
        )

    def place_food(self) -> bool:
        """Respawn the food until it lands on a cell the snake does not occupy"""
        width, height = self.settings.width, self.settings.height
        occupied = {
            segment for segment in self.snake
            if not self.collision_detector.check_wall_collision(segment, width, height)
        }
        if len(occupied) >= width * height:
            return False

        while self.collision_detector.check_snake_collision(self.food.position, self.snake):
            self.food.respawn(width, height)
        return True

    def end_game(self, reason: GameOverReason):
        self.state = GameState.GAME_OVER
        self.game_over_reason = reason
        session = self.current_session
        if session:
            session.end_time = time.time()
            logger.info(
                "Game over (%s): score=%d, length=%d, max length=%d, foods=%d, ticks=%d, %.1fs",
                reason.value, self.score, len(self.snake), session.max_length,
                session.foods_eaten, session.ticks, session.duration(),
            )
        else:
            logger.info("Game over (%s): score=%d, length=%d", reason.value, self.score, len(self.snake))

    def grow(self, dropped_tail: Optional[Point]):
        if self.settings.growth_mode == GrowthMode.INSERT and dropped_tail is not None:
            self.snake.grow_tail(dropped_tail)
        else:
            # Reference behaviour: the head advances a second time
            self.snake.move(grow=True)

    def tick(self) -> bool:
        """
        Run one step of the game loop.

        Returns True while the game keeps running.
        """
        if not self.is_running:
            return False

        self.input_handler.process_input()
        if self.input_handler.should_exit():
            self.end_game(GameOverReason.EXIT)
            return False

        direction = self.input_handler.get_direction()
        if direction is not None:
            self.snake.set_next_direction(direction)

        dropped_tail = self.snake.move(grow=False)
        if self.current_session:
            self.current_session.ticks += 1

        if self.snake.head == self.food.position:
            self.score += self.settings.food_score_value
            self.grow(dropped_tail)
            if self.current_session:
                self.current_session.foods_eaten += 1
                self.current_session.max_length = max(self.current_session.max_length, len(self.snake))
            logger.debug("Food eaten at %s, score %d", self.food.position, self.score)
            field_full = not self.place_food()
        else:
            field_full = False

        head = self.snake.head
        if self.collision_detector.check_wall_collision(head, self.settings.width, self.settings.height):
            self.end_game(GameOverReason.WALL)
        elif self.snake.check_self_collision():
            self.end_game(GameOverReason.SELF)
        elif field_full:
            self.end_game(GameOverReason.FIELD_FULL)

        self.renderer.draw_game(self.snake.body, self.food.position, self.score)
        return self.is_running

    def run(self) -> int:
        """Play a full game and return the final score"""
        if not self.is_running:
            self.initialize()

        while self.tick():
            self.sleep(self.settings.tick_seconds)

        self.renderer.draw_game_over(self.score)
        self.input_handler.wait_for_key()
        return self.score

    def get_game_state_data(self) -> Dict[str, Any]:
        """Snapshot of the game for logging and front-ends"""
        return {
            'snake': self.snake.body if self.snake else [],
            'food': self.food.position if self.food else None,
            'score': self.score,
            'state': self.state.value,
            'game_over_reason': self.game_over_reason.value if self.game_over_reason else None,
            'field_width': self.settings.width,
            'field_height': self.settings.height,
            'session': self.current_session.to_dict() if self.current_session else None,
        }


__all__ = [
    'SnakeGameEngine', 'GameRenderer', 'InputHandler',
    'GameState', 'GameOverReason', 'GameSession',
]
