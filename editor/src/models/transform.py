"""Geometry value types shared by the frame editor."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair across the two coordinate spaces:
    - Image space (pixels of the underlying raster)
    - Display space (pixels of the rendered, possibly scaled image)
    Never mix the two without a scale transform.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y) ** 0.5


@dataclass(frozen=True)
class ScaleFactors:
    """Display units per image unit along each axis."""
    scale_x: float
    scale_y: float


@dataclass(frozen=True)
class FrameDimensions:
    """True (unrotated) frame size in image pixels."""
    width: float
    height: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in image space.

    For a rotated frame this is the tightest box containing the rotated
    rectangle, so width/height are NOT the frame's own width/height.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
