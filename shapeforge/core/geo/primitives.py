from typing import List, Optional, Sequence, Tuple

Point = Tuple[float, float]


def signed_area(vertices: Sequence[Point]) -> float:
    """
    Shoelace area of a closed polygon. Positive for counter-clockwise
    winding in a y-up system (clockwise on a y-down canvas).
    """
    area = 0.0
    n = len(vertices)
    for i in range(n):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0


def is_point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """
    Even-odd ray casting test. Independent of winding order. Points
    exactly on an edge may land either way.
    """
    n = len(polygon)
    if n < 3:
        return False
    x, y = point
    inside = False
    x1, y1 = polygon[n - 1]
    for i in range(n):
        x2, y2 = polygon[i]
        if (y1 > y) != (y2 > y):
            x_cross = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
            if x < x_cross:
                inside = not inside
        x1, y1 = x2, y2
    return inside


def line_segment_intersection(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> Optional[Point]:
    """
    Returns the intersection point of segments p1-p2 and p3-p4, or None
    if they do not cross. Collinear overlaps count as no intersection.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4
    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < 1e-12:
        return None
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    eps = 1e-9
    if -eps <= t <= 1 + eps and -eps <= u <= 1 + eps:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


def find_closest_on_line_segment(
    p1: Point, p2: Point, x: float, y: float
) -> Tuple[float, Point, float]:
    """Finds the closest point on a 2D line segment.

    Returns:
        A tuple containing:
        - The parameter `t` (from 0.0 to 1.0) along the segment.
        - The (x, y) coordinates of the closest point.
        - The squared distance from the input point to the closest point.
    """
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    len_sq = dx * dx + dy * dy
    if len_sq < 1e-12:  # Treat as a single point
        t = 0.0
    else:
        t = ((x - p1[0]) * dx + (y - p1[1]) * dy) / len_sq
        t = max(0.0, min(1.0, t))

    closest_x = p1[0] + t * dx
    closest_y = p1[1] + t * dy
    dist_sq = (x - closest_x) ** 2 + (y - closest_y) ** 2
    return t, (closest_x, closest_y), dist_sq


def polygon_edges(vertices: Sequence[Point]) -> List[Tuple[Point, Point]]:
    """The edges of a closed polygon, including the closing edge."""
    n = len(vertices)
    if n < 2:
        return []
    return [(vertices[i], vertices[(i + 1) % n]) for i in range(n)]
