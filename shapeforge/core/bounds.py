from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .. import config

Point = Tuple[float, float]


@dataclass
class Rect:
    """
    A mutable axis-aligned rectangle in model coordinates (y grows
    downward). Used as the live bounding box of a figure.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def start_point(self) -> Point:
        return (self.x, self.y)

    @property
    def end_point(self) -> Point:
        return (self.x + self.width, self.y + self.height)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def copy(self) -> "Rect":
        return Rect(self.x, self.y, self.width, self.height)

    def grown(self, h: float, v: float) -> "Rect":
        """Returns a copy extended by `h` left and right, `v` top and bottom."""
        return Rect(
            self.x - h, self.y - v, self.width + 2 * h, self.height + 2 * v
        )

    def contains_point(self, point: Point) -> bool:
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


@dataclass(frozen=True)
class BoundsSnapshot:
    """
    An immutable copy of a bounding box, used as undo payload. It shares
    no state with the figure it was taken from.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of(cls, rect: Rect) -> "BoundsSnapshot":
        return cls(rect.x, rect.y, rect.width, rect.height)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def rect_from_points(anchor: Point, lead: Point) -> Rect:
    """
    Builds the rectangle spanned by two corner points in any order. Width
    and height never drop below `config.MIN_EXTENT`, so a zero-extent drag
    still yields a usable box.
    """
    return Rect(
        min(anchor[0], lead[0]),
        min(anchor[1], lead[1]),
        max(config.MIN_EXTENT, abs(lead[0] - anchor[0])),
        max(config.MIN_EXTENT, abs(lead[1] - anchor[1])),
    )
