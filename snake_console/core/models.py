"""
Value types shared by the game engine: directions, grid points and settings.
"""

from enum import Enum
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GrowthMode(Enum):
    """How the snake grows after eating"""
    DOUBLE_ADVANCE = "double"  # a second move without dropping the tail
    INSERT = "insert"  # keep the tail of the current move


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, direction: Direction):
        dx, dy = direction.value
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class GameSettings:
    width: int = 20
    height: int = 15
    initial_snake_length: int = 3
    food_score_value: int = 10
    tick_interval: int = 100  # milliseconds
    initial_position: Point = Point(5, 5)
    growth_mode: GrowthMode = GrowthMode.DOUBLE_ADVANCE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}")
        if self.initial_snake_length < 1:
            raise ValueError(f"Initial snake length must be at least 1, got {self.initial_snake_length}")
        if self.initial_snake_length >= self.width * self.height:
            raise ValueError("Initial snake leaves no room for food")
        if self.food_score_value < 0:
            raise ValueError(f"Food score value must not be negative, got {self.food_score_value}")
        if self.tick_interval < 0:
            raise ValueError(f"Tick interval must not be negative, got {self.tick_interval}")

        head = self.initial_position
        if not (0 <= head.x < self.width and 0 <= head.y < self.height):
            raise ValueError(f"Initial position {head} is outside the {self.width}x{self.height} field")
        # The body extends to the left of the head
        if head.x - (self.initial_snake_length - 1) < 0:
            raise ValueError(
                f"Snake of length {self.initial_snake_length} does not fit left of {head}"
            )

    @property
    def tick_seconds(self) -> float:
        return self.tick_interval / 1000.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['initial_position'] = (self.initial_position.x, self.initial_position.y)
        data['growth_mode'] = self.growth_mode.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        known_fields = {field.name for field in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        position = filtered_data.get('initial_position')
        if position is not None and not isinstance(position, Point):
            x, y = position
            filtered_data['initial_position'] = Point(int(x), int(y))

        growth_mode = filtered_data.get('growth_mode')
        if growth_mode is not None and not isinstance(growth_mode, GrowthMode):
            filtered_data['growth_mode'] = GrowthMode(growth_mode)

        return cls(**filtered_data)
