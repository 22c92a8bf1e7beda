"""
Snake entity: body segments, direction state and movement.
"""

from collections import deque
from typing import Iterator, List, Optional

from .models import Direction, Point


class Snake:
    """
    The player-controlled snake.

    Attributes:
        positions: deque of points from the head at index 0 to the tail at the end
        direction: direction applied on the next move
        next_direction: pending direction requested by input, or None
    """

    def __init__(self, head: Point, length: int = 3, direction: Direction = Direction.RIGHT):
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}")

        # Segments trail behind the head, opposite to the direction of travel
        trail = direction.opposite
        segments = [head]
        for _ in range(length - 1):
            segments.append(segments[-1] + trail)

        self.positions = deque(segments)
        self.direction = direction
        self.next_direction: Optional[Direction] = None

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Point:
        return self.positions[-1]

    @property
    def body(self) -> List[Point]:
        """Snapshot of all segments, head first."""
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.positions)

    def set_next_direction(self, direction: Direction) -> bool:
        """Queue a turn unless it reverses the snake into its own neck"""
        if direction == self.direction.opposite:
            return False
        self.next_direction = direction
        return True

    def move(self, grow: bool = False) -> Optional[Point]:
        """
        Advance one cell in the current direction.

        The pending direction, if any, is applied first. Without growth the
        tail segment is dropped and returned so the caller can restore it.
        """
        if self.next_direction is not None:
            self.direction = self.next_direction
            self.next_direction = None

        self.positions.appendleft(self.head + self.direction)

        if not grow and len(self.positions) > 1:
            return self.positions.pop()
        return None

    def grow_tail(self, segment: Point):
        """Re-attach a segment at the tail end"""
        self.positions.append(segment)

    def check_self_collision(self) -> bool:
        head = self.head
        return any(segment == head for segment in list(self.positions)[1:])

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction.name}>"
