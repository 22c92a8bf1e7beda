"""
Food entity with random placement on the field.
"""

import random
from typing import Optional

from .models import Point


class Food:
    """
    A single piece of food.

    The food does not know about the snake: callers that need a free cell
    keep calling respawn() until the position is not occupied.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.position = Point(0, 0)
        self.respawn(width, height)

    def respawn(self, width: int, height: int) -> Point:
        """Move the food to a random cell inside width x height"""
        self.width = width
        self.height = height
        self.position = Point(self.rng.randrange(width), self.rng.randrange(height))
        return self.position

    def __repr__(self):
        return f"<Food at {self.position}>"
