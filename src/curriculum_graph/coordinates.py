"""Coordinate primitives shared by the layout engine and the renderers."""

from __future__ import annotations

from dataclasses import dataclass

# Caller-side floors for the drawing surface
MIN_WIDTH = 800.0
MIN_HEIGHT = 600.0


@dataclass(frozen=True)
class Point:
    """Immutable 2D point.

    Example:
        >>> Point(1, 2) + Point(3, 4)
        Point(x=4, y=6)
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def midpoint(self, other: Point) -> Point:
        """Point halfway between this point and *other*."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class Margins:
    """Padding between the viewport border and the outermost node centers."""

    left: float = 50.0
    right: float = 50.0
    top: float = 50.0
    bottom: float = 50.0


@dataclass(frozen=True)
class Viewport:
    """Size of the drawing surface in user units.

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """

    width: float = MIN_WIDTH
    height: float = MIN_HEIGHT

    def clamped(
        self,
        min_width: float = MIN_WIDTH,
        min_height: float = MIN_HEIGHT,
    ) -> Viewport:
        """Return a viewport no smaller than the given floors.

        Example:
            >>> Viewport(0, -5).clamped()
            Viewport(width=800.0, height=600.0)
        """
        return Viewport(max(self.width, min_width), max(self.height, min_height))
