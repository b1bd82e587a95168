"""
Ping Pong game entities: ball and paddles
"""

import math
from enum import Enum
from typing import Protocol

from pingpong.core.geometry import Rect, Vector2D, clamp


class Direction(Enum):
    """Paddle direction command, valued by the sign of the resulting vertical velocity"""

    UP = -1
    DOWN = 1
    NONE = 0


class Side(Enum):
    """Side of the field a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


class AngleSource(Protocol):
    """Random source used to draw serve angles (numpy Generator compatible)"""

    def uniform(self, low: float, high: float) -> float: ...


class Ball:
    """Game ball"""

    def __init__(self, x: float, y: float, radius: float, speed: float = 0.0):
        self.center = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.radius = radius
        self.speed = speed

    def set_speed(self, speed: float) -> None:
        """
        Sets the serve speed.

        The current velocity is left untouched: the new speed is only used by
        the next respawn.
        """
        self.speed = speed

    def respawn(self, cx: float, cy: float, rng: AngleSource, min_cos: float = 0.0) -> None:
        """
        Places the ball at (cx, cy) and serves it in a uniformly random direction.

        Args:
            cx: X coordinate of the new center
            cy: Y coordinate of the new center
            rng: Random source drawing the serve angle in [0, 2*pi)
            min_cos: When positive, angles whose |cos| is below this value are
                redrawn so the serve is not almost vertical
        """
        self.center = Vector2D(cx, cy)
        angle = float(rng.uniform(0.0, 2 * math.pi))
        while min_cos > 0 and abs(math.cos(angle)) < min_cos:
            angle = float(rng.uniform(0.0, 2 * math.pi))
        self.velocity = Vector2D(self.speed * math.cos(angle), self.speed * math.sin(angle))

    def advance(self, dt: float) -> None:
        """Moves the ball along its velocity"""
        self.center = self.center + self.velocity * dt

    def reverse_x(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def reverse_y(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y


class Paddle:
    """Player paddle, only moving vertically"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        speed: float,
        side: Side,
    ):
        self.position = Vector2D(x, y)
        self.width = width
        self.height = height
        self.speed = speed
        self.side = side
        self.direction = Direction.NONE
        self.vy = 0.0

    def set_speed(self, speed: float) -> None:
        """Changes the speed and re-derives the velocity from the current direction"""
        self.speed = speed
        self.vy = self.direction.value * self.speed

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction
        self.vy = direction.value * self.speed

    def advance(self, dt: float, field_height: float) -> None:
        """Moves the paddle, stopping at the top and bottom edges of the field"""
        new_y = self.position.y + self.vy * dt
        self.position.y = clamp(new_y, 0.0, max(0.0, field_height - self.height))

    def reset(self, center_y: float) -> None:
        """Centers the paddle vertically on center_y"""
        self.position.y = center_y - self.height / 2

    def get_rect(self) -> Rect:
        """Returns the collision rectangle"""
        return Rect(self.position.x, self.position.y, self.width, self.height)
