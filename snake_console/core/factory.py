"""
Builds the game objects for a new round from the settings.
"""

import random
from typing import Optional

from .food import Food
from .models import Direction, GameSettings
from .snake import Snake


class GameObjectFactory:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def create_snake(self, settings: GameSettings) -> Snake:
        return Snake(settings.initial_position, settings.initial_snake_length, Direction.RIGHT)

    def create_food(self, width: int, height: int) -> Food:
        return Food(width, height, self.rng)
