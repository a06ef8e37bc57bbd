"""
Table-driven outlines for oriented figures.

A shape family maps every Orientation to a function that places the
family's vertices on a bounding box. The triangle family below is
registered on import; other families register their own table with
`register_shape_family` and need no changes here.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple
from ..attributes import Orientation
from ..bounds import Rect
from .outline import Outline

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
VertexRule = Callable[[Rect], List[Point]]


@dataclass(frozen=True)
class ShapeFamily:
    """
    A named orientation -> vertex-placement table. The table must have an
    entry for Orientation.NORTH, which also serves values that are not in
    the table.
    """

    name: str
    table: Dict[Orientation, VertexRule] = field(default_factory=dict)

    def __post_init__(self):
        if Orientation.NORTH not in self.table:
            raise ValueError(
                f"Shape family '{self.name}' has no NORTH entry"
            )

    def outline(self, box: Rect, orientation: Any) -> Outline:
        if isinstance(orientation, Orientation):
            rule = self.table.get(orientation)
        else:
            logger.warning(
                f"Shape family '{self.name}': unknown orientation "
                f"{orientation!r}, using NORTH"
            )
            rule = None
        if rule is None:
            rule = self.table[Orientation.NORTH]
        return Outline.from_points(rule(box), close=True)


_families: Dict[str, ShapeFamily] = {}


def register_shape_family(family: ShapeFamily) -> ShapeFamily:
    if family.name in _families:
        logger.debug(f"Replacing shape family '{family.name}'")
    _families[family.name] = family
    return family


def get_shape_family(name: str) -> ShapeFamily:
    try:
        return _families[name]
    except KeyError:
        raise KeyError(f"Unknown shape family '{name}'") from None


def shape_family_names() -> List[str]:
    return sorted(_families)


# Named positions on a bounding box, y growing downward.
def _top_left(r: Rect) -> Point:
    return (r.x, r.y)


def _top_mid(r: Rect) -> Point:
    return (r.x + r.width / 2.0, r.y)


def _top_right(r: Rect) -> Point:
    return (r.x + r.width, r.y)


def _mid_left(r: Rect) -> Point:
    return (r.x, r.y + r.height / 2.0)


def _mid_right(r: Rect) -> Point:
    return (r.x + r.width, r.y + r.height / 2.0)


def _bottom_left(r: Rect) -> Point:
    return (r.x, r.y + r.height)


def _bottom_mid(r: Rect) -> Point:
    return (r.x + r.width / 2.0, r.y + r.height)


def _bottom_right(r: Rect) -> Point:
    return (r.x + r.width, r.y + r.height)


def _vertices(*roles: Callable[[Rect], Point]) -> VertexRule:
    def place(r: Rect) -> List[Point]:
        return [role(r) for role in roles]

    return place


# Each rule yields (left, right, top) in that order.
TRIANGLE = register_shape_family(
    ShapeFamily(
        "triangle",
        {
            Orientation.NORTH: _vertices(
                _top_mid, _bottom_right, _bottom_left
            ),
            Orientation.NORTH_EAST: _vertices(
                _top_left, _top_right, _bottom_right
            ),
            Orientation.EAST: _vertices(_top_left, _mid_right, _bottom_left),
            Orientation.SOUTH_EAST: _vertices(
                _top_right, _bottom_right, _bottom_left
            ),
            Orientation.SOUTH: _vertices(_bottom_mid, _top_left, _top_right),
            Orientation.SOUTH_WEST: _vertices(
                _bottom_right, _bottom_left, _top_left
            ),
            Orientation.WEST: _vertices(_mid_left, _top_right, _bottom_right),
            Orientation.NORTH_WEST: _vertices(
                _bottom_left, _top_left, _top_right
            ),
        },
    )
)


def outline(box: Rect, orientation: Any, family: str = "triangle") -> Outline:
    """
    Derives the closed outline of `family` inside `box`. Unrecognized
    orientation values produce the NORTH outline.
    """
    return get_shape_family(family).outline(box, orientation)
