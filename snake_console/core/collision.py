"""
Collision checks. Plain functions plus the interface the engine depends on.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from .models import Point


def check_wall_collision(pos: Point, width: int, height: int) -> bool:
    return pos.x < 0 or pos.x >= width or pos.y < 0 or pos.y >= height


def check_snake_collision(pos: Point, snake: Iterable[Point]) -> bool:
    """True if pos lies on any segment of the snake"""
    return any(segment == pos for segment in snake)


class CollisionRules(ABC):
    """Abstract collision interface"""

    @abstractmethod
    def check_wall_collision(self, pos: Point, width: int, height: int) -> bool:
        pass

    @abstractmethod
    def check_snake_collision(self, pos: Point, snake: Iterable[Point]) -> bool:
        pass


class CollisionDetector(CollisionRules):
    """Default collision rules used by the engine"""

    def check_wall_collision(self, pos: Point, width: int, height: int) -> bool:
        return check_wall_collision(pos, width, height)

    def check_snake_collision(self, pos: Point, snake: Iterable[Point]) -> bool:
        return check_snake_collision(pos, snake)
