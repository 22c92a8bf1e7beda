"""
Tests for the value types: Direction, Point and GameSettings.
"""

import pytest

from snake_console.core.models import Direction, GameSettings, GrowthMode, Point


class TestDirection:
    def test_unit_vectors(self):
        assert Point(5, 5) + Direction.UP == Point(5, 4)
        assert Point(5, 5) + Direction.DOWN == Point(5, 6)
        assert Point(5, 5) + Direction.LEFT == Point(4, 5)
        assert Point(5, 5) + Direction.RIGHT == Point(6, 5)

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_only_cardinal_members(self):
        assert [d.name for d in Direction] == ["UP", "DOWN", "LEFT", "RIGHT"]


class TestPoint:
    def test_equality_by_value(self):
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(4, 3)

    def test_hashable(self):
        assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2

    def test_immutable(self):
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5


class TestGameSettings:
    def test_defaults(self):
        settings = GameSettings()
        assert settings.width == 20
        assert settings.height == 15
        assert settings.initial_snake_length == 3
        assert settings.food_score_value == 10
        assert settings.tick_interval == 100
        assert settings.initial_position == Point(5, 5)
        assert settings.growth_mode is GrowthMode.DOUBLE_ADVANCE
        assert settings.tick_seconds == pytest.approx(0.1)

    def test_constructor_overrides(self):
        settings = GameSettings(width=30, height=10, tick_interval=50)
        assert (settings.width, settings.height, settings.tick_interval) == (30, 10, 50)

    @pytest.mark.parametrize("kwargs, message", [
        ({"width": 0}, "Field size"),
        ({"height": -1}, "Field size"),
        ({"initial_snake_length": 0}, "at least 1"),
        ({"food_score_value": -10}, "score value"),
        ({"tick_interval": -1}, "Tick interval"),
        ({"initial_position": Point(20, 5)}, "outside"),
        ({"initial_position": Point(5, -1)}, "outside"),
        ({"initial_snake_length": 7}, "does not fit"),
        ({"width": 3, "height": 1, "initial_snake_length": 3,
          "initial_position": Point(2, 0)}, "no room"),
    ])
    def test_invalid_values(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GameSettings(**kwargs)

    def test_from_dict_ignores_unknown_keys(self):
        settings = GameSettings.from_dict({"width": 25, "seed": 7, "log_file": None})
        assert settings.width == 25

    def test_from_dict_converts_plain_values(self):
        settings = GameSettings.from_dict({"initial_position": [3, 4], "growth_mode": "insert"})
        assert settings.initial_position == Point(3, 4)
        assert settings.growth_mode is GrowthMode.INSERT

    def test_to_dict_uses_plain_values(self):
        data = GameSettings().to_dict()
        assert data["initial_position"] == (5, 5)
        assert data["growth_mode"] == "double"
        assert GameSettings.from_dict(data) == GameSettings()
