import math
import logging
from typing import List, Optional
from .outline import Outline
from .primitives import Point, line_segment_intersection

logger = logging.getLogger(__name__)


def ray_crossings(outline: Outline, start: Point, end: Point) -> List[Point]:
    """All points where the segment start-end crosses an outline edge."""
    crossings = []
    for p1, p2 in outline.segments():
        hit = line_segment_intersection(p1, p2, start, end)
        if hit is not None:
            crossings.append(hit)
    return crossings


def chop(outline: Outline, point: Point) -> Optional[Point]:
    """
    Finds where a line coming from `point` toward the center of the
    outline's bounding box first meets the outline.

    When `point` lies inside the outline no edge separates it from the
    center; the outline point nearest to `point` is returned instead.
    Returns None for an empty outline.
    """
    if outline.is_empty():
        return None

    center = outline.bounds().center
    crossings = ray_crossings(outline, center, point)
    if crossings:
        return min(crossings, key=lambda c: math.dist(c, point))

    logger.debug(f"No edge between {point} and {center}, using nearest.")
    return outline.closest_point(point)
