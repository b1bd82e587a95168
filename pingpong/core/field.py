"""
Playfield dimensions and the scale factor derived from them
"""

from pingpong.core.geometry import Vector2D


class Field:
    """
    Current playfield size together with the reference (base) size.

    Entity sizes, paddle speed and paddle offsets are expressed in base units
    and multiplied by the factors below when the field is resized.
    """

    def __init__(
        self,
        base_width: float,
        base_height: float,
        width: float | None = None,
        height: float | None = None,
    ):
        self.base_width = base_width
        self.base_height = base_height
        self.width = width if width is not None else base_width
        self.height = height if height is not None else base_height

    @property
    def scale(self) -> float:
        """Uniform scale factor: min(width / base_width, height / base_height)"""
        return min(self.width_ratio, self.height_ratio)

    @property
    def width_ratio(self) -> float:
        return self.width / self.base_width

    @property
    def height_ratio(self) -> float:
        return self.height / self.base_height

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.width / 2, self.height / 2)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def size(self) -> tuple[float, float]:
        return (self.width, self.height)
