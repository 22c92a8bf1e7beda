from .models import Direction, GameSettings, GrowthMode, Point
from .snake import Snake
from .food import Food
from .collision import CollisionDetector, CollisionRules, check_snake_collision, check_wall_collision
from .factory import GameObjectFactory
from .game_engine import (
    GameOverReason,
    GameRenderer,
    GameSession,
    GameState,
    InputHandler,
    SnakeGameEngine,
)

__all__ = [
    'Direction', 'GameSettings', 'GrowthMode', 'Point',
    'Snake', 'Food',
    'CollisionDetector', 'CollisionRules', 'check_snake_collision', 'check_wall_collision',
    'GameObjectFactory',
    'SnakeGameEngine', 'GameRenderer', 'InputHandler',
    'GameState', 'GameOverReason', 'GameSession',
]
