"""
Geometry helpers for the Ping Pong simulation: vectors, rectangles and
circle/rectangle intersection
"""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Rect(NamedTuple):
    """Axis-aligned rectangle given by its top-left corner and its size"""

    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def center_x(self) -> float:
        return self.min_x + self.width / 2


def clamp(value: float, low: float, high: float) -> float:
    """Clamps a value into [low, high] (low must not exceed high)"""
    return max(low, min(high, value))


def circle_intersects_rect(cx: float, cy: float, radius: float, rect: Rect) -> bool:
    """
    Detects overlap between a circle and a rectangle.

    The comparison is strict: a circle that only touches the rectangle is not
    considered colliding, so a ball pushed exactly against a paddle face does
    not hit it again on the next tick.
    """
    x, y, width, height = rect

    # Closest point on the rectangle to the circle center
    closest_x = clamp(cx, x, x + width)
    closest_y = clamp(cy, y, y + height)

    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy < radius * radius
