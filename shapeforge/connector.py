from __future__ import annotations
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .core.bounds import Rect
    from .core.figure import Figure

Point = Tuple[float, float]


class ChopConnector:
    """
    Attaches a connecting line to the stroke-grown boundary of a figure.
    Connectors are created on request and owned by whoever asked for
    them; the figure keeps no reference.
    """

    def __init__(self, owner: "Figure"):
        self.owner = owner

    def get_anchor(self) -> Point:
        """The point the connection aims at when nothing else is known."""
        return self.owner.get_bounds().center

    def get_bounds(self) -> "Rect":
        return self.owner.get_bounds()

    def contains(self, point: Point) -> bool:
        return self.owner.contains(point)

    def chop(self, from_point: Point) -> Point:
        return self.owner.chop(from_point)

    def find_start(self, toward: Point) -> Point:
        """Where a line leaving the figure toward `toward` starts."""
        return self.chop(toward)

    def find_end(self, toward: Point) -> Point:
        """Where a line arriving from `toward` ends."""
        return self.chop(toward)

    def __repr__(self) -> str:
        return f"ChopConnector({self.owner!r})"


def connect(start: ChopConnector, end: ChopConnector) -> Tuple[Point, Point]:
    """
    The end points of a straight connection between two figures: each
    end is chopped toward the other figure's anchor.
    """
    return (
        start.find_start(end.get_anchor()),
        end.find_end(start.get_anchor()),
    )
