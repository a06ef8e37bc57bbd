from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING
from ..bounds import Rect
from .primitives import (
    Point,
    find_closest_on_line_segment,
    is_point_in_polygon,
    polygon_edges,
    signed_area,
)

if TYPE_CHECKING:
    from ..matrix import Matrix


@dataclass(frozen=True)
class Outline:
    """
    An immutable polygonal boundary: an ordered vertex sequence plus a
    flag telling whether the last vertex connects back to the first.

    Outlines are derived data. Figures recompute them from their bounds
    and attributes on every query and never store them.
    """

    points: Tuple[Point, ...] = ()
    closed: bool = True

    @classmethod
    def from_points(
        cls, points: Iterable[Iterable[float]], close: bool = True
    ) -> "Outline":
        pts = tuple((float(p[0]), float(p[1])) for p in map(tuple, points))
        return cls(pts, close)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def segments(self) -> List[Tuple[Point, Point]]:
        if self.closed:
            return polygon_edges(self.points)
        return list(zip(self.points, self.points[1:]))

    def area(self) -> float:
        """Signed area, see `primitives.signed_area`. 0 for open paths."""
        if not self.closed or len(self.points) < 3:
            return 0.0
        return signed_area(self.points)

    def centroid(self) -> Optional[Point]:
        """
        The area centroid. Degenerate outlines fall back to the mean of
        their vertices; empty outlines have no centroid.
        """
        if not self.points:
            return None
        area = self.area()
        if abs(area) < 1e-12:
            n = len(self.points)
            return (
                sum(p[0] for p in self.points) / n,
                sum(p[1] for p in self.points) / n,
            )
        cx = cy = 0.0
        for (x1, y1), (x2, y2) in polygon_edges(self.points):
            cross = x1 * y2 - x2 * y1
            cx += (x1 + x2) * cross
            cy += (y1 + y2) * cross
        return (cx / (6.0 * area), cy / (6.0 * area))

    def rect(self) -> Tuple[float, float, float, float]:
        """Returns (min_x, min_y, max_x, max_y), all zero when empty."""
        if not self.points:
            return 0.0, 0.0, 0.0, 0.0
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return min(xs), min(ys), max(xs), max(ys)

    def bounds(self) -> Rect:
        min_x, min_y, max_x, max_y = self.rect()
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def contains(self, point: Point) -> bool:
        """Even-odd containment. Open and empty outlines contain nothing."""
        if not self.closed:
            return False
        return is_point_in_polygon(point, self.points)

    def closest_point(self, point: Point) -> Optional[Point]:
        """The point on the outline's edges nearest `point`."""
        if not self.points:
            return None
        if len(self.points) == 1:
            return self.points[0]
        best: Optional[Point] = None
        best_dist_sq = float("inf")
        for p1, p2 in self.segments():
            _, closest, dist_sq = find_closest_on_line_segment(
                p1, p2, point[0], point[1]
            )
            if dist_sq < best_dist_sq:
                best_dist_sq = dist_sq
                best = closest
        return best

    def transform(self, matrix: "Matrix") -> "Outline":
        return Outline(tuple(matrix.transform_points(self.points)), self.closed)
