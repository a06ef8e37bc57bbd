import math
import logging
from typing import List, Optional, Tuple
from ... import config
from ..attributes import StrokeJoin
from .outline import Outline
from .primitives import Point, signed_area

logger = logging.getLogger(__name__)


def _solve_2x2_system(
    a1: float, b1: float, c1: float, a2: float, b2: float, c2: float
) -> Optional[Tuple[float, float]]:
    """
    Solves a 2x2 system of linear equations:
    a1*x + b1*y = c1
    a2*x + b2*y = c2
    """
    det = a1 * b2 - a2 * b1
    if abs(det) < 1e-9:
        return None  # No unique solution (lines are parallel)
    x = (c1 * b2 - c2 * b1) / det
    y = (a1 * c2 - a2 * c1) / det
    return x, y


def _offset_lines_meet(
    a_in: Point, n_in: Point, a_out: Point, n_out: Point
) -> Optional[Point]:
    """Where the offset edge through a_in meets the one through a_out."""
    c1 = n_in[0] * a_in[0] + n_in[1] * a_in[1]
    c2 = n_out[0] * a_out[0] + n_out[1] * a_out[1]
    return _solve_2x2_system(n_in[0], n_in[1], c1, n_out[0], n_out[1], c2)


def _round_join(
    center: Point,
    radius: float,
    start: Point,
    end: Point,
    travel: Point,
) -> List[Point]:
    """
    Approximates the arc from `start` to `end` around `center` with line
    segments, always sweeping the outer side of the corner.
    """
    a0 = math.atan2(start[1] - center[1], start[0] - center[0])
    a1 = math.atan2(end[1] - center[1], end[0] - center[0])
    sweep = a1 - a0
    while sweep > math.pi:
        sweep -= 2 * math.pi
    while sweep < -math.pi:
        sweep += 2 * math.pi

    # A U-turn is ambiguous; the arc has to bulge in the travel direction.
    if abs(abs(sweep) - math.pi) < 1e-6:
        mid = a0 + sweep / 2.0
        if math.cos(mid) * travel[0] + math.sin(mid) * travel[1] < 0:
            sweep = sweep - 2 * math.pi if sweep > 0 else sweep + 2 * math.pi

    max_step = math.radians(config.ROUND_JOIN_MAX_STEP_DEG)
    steps = max(1, int(math.ceil(abs(sweep) / max_step)))
    points = []
    for k in range(steps + 1):
        angle = a0 + sweep * k / steps
        points.append(
            (
                center[0] + radius * math.cos(angle),
                center[1] + radius * math.sin(angle),
            )
        )
    return points


def offset_outline(
    outline: Outline,
    distance: float,
    join: StrokeJoin = StrokeJoin.MITER,
    miter_limit: float = 10.0,
) -> Outline:
    """
    Grows (positive distance) or shrinks (negative distance) the area of a
    closed outline, independent of its winding order.

    Corners where the offset adds material are joined according to `join`.
    A miter is used while the ratio of miter length to |distance| stays
    within `miter_limit`, otherwise the corner is beveled. Corners where
    the offset removes material always use the intersection of the two
    offset edges.

    Args:
        outline: The closed outline to offset.
        distance: The offset distance.
        join: The join style for outer corners.
        miter_limit: Largest allowed miter length, in multiples of
                     |distance|.

    Returns:
        The offset outline. A distance of 0 returns `outline` itself. Open
        outlines, degenerate input, and shrinks that invert or collapse
        the polygon produce an empty outline.
    """
    if distance == 0:
        return outline

    if not outline.closed:
        logger.debug("Outline is not closed, nothing to offset.")
        return Outline((), outline.closed)

    vertices = list(outline.points)
    if (
        len(vertices) > 1
        and math.isclose(vertices[0][0], vertices[-1][0])
        and math.isclose(vertices[0][1], vertices[-1][1])
    ):
        vertices.pop()

    if len(vertices) < 3:
        logger.debug("Outline has < 3 vertices, nothing to offset.")
        return Outline()

    original_area = signed_area(vertices)
    if abs(original_area) < 1e-12:
        logger.debug("Outline has no area, nothing to offset.")
        return Outline()

    # Flip the right-hand normal for the other winding so that positive
    # distances always point away from the interior.
    side = 1.0 if original_area > 0 else -1.0

    new_vertices: List[Point] = []
    count = len(vertices)
    for j in range(count):
        p_prev = vertices[j - 1]
        p_curr = vertices[j]
        p_next = vertices[(j + 1) % count]

        v_in = (p_curr[0] - p_prev[0], p_curr[1] - p_prev[1])
        v_out = (p_next[0] - p_curr[0], p_next[1] - p_curr[1])
        mag_in = math.hypot(*v_in)
        mag_out = math.hypot(*v_out)
        if mag_in < 1e-9 or mag_out < 1e-9:
            continue

        d_in = (v_in[0] / mag_in, v_in[1] / mag_in)
        d_out = (v_out[0] / mag_out, v_out[1] / mag_out)
        n_in = (side * d_in[1], -side * d_in[0])
        n_out = (side * d_out[1], -side * d_out[0])

        a_in = (p_curr[0] + distance * n_in[0], p_curr[1] + distance * n_in[1])
        a_out = (
            p_curr[0] + distance * n_out[0],
            p_curr[1] + distance * n_out[1],
        )

        cross = d_in[0] * d_out[1] - d_in[1] * d_out[0]
        dot = max(-1.0, min(1.0, d_in[0] * d_out[0] + d_in[1] * d_out[1]))

        if abs(cross) < 1e-12 and dot > 0:
            # Straight continuation, both offset edges are the same line.
            new_vertices.append(a_in)
            continue

        is_outer = cross * side * distance > 0 or (
            abs(cross) < 1e-12 and dot < 0
        )

        if not is_outer:
            meet = _offset_lines_meet(a_in, n_in, a_out, n_out)
            new_vertices.append(meet if meet else a_out)
            continue

        if join is StrokeJoin.ROUND:
            new_vertices.extend(
                _round_join(p_curr, abs(distance), a_in, a_out, d_in)
            )
            continue

        if join is StrokeJoin.MITER:
            cos_half = math.sqrt(max(0.0, (1.0 + dot) / 2.0))
            if cos_half > 1e-12 and 1.0 / cos_half <= miter_limit:
                meet = _offset_lines_meet(a_in, n_in, a_out, n_out)
                if meet:
                    new_vertices.append(meet)
                    continue
            if config.DEBUG_GEOMETRY:
                logger.debug(
                    f"Miter at {p_curr} exceeds limit {miter_limit}, "
                    "beveling."
                )

        new_vertices.append(a_in)
        new_vertices.append(a_out)

    if len(new_vertices) < 3:
        logger.debug("Offset left fewer than 3 vertices, discarding.")
        return Outline()

    new_area = signed_area(new_vertices)
    if abs(new_area) < 1e-9:
        logger.debug("Offset outline is degenerate, discarding.")
        return Outline()

    if math.copysign(1, new_area) != math.copysign(1, original_area):
        logger.debug("Offset inverted the winding order, discarding.")
        return Outline()

    # A shrink past the inner radius mirrors a convex polygon through its
    # center, which keeps the winding but reverses every edge.
    if distance < 0 and len(new_vertices) == count:
        for j in range(count):
            old_edge = (
                vertices[(j + 1) % count][0] - vertices[j][0],
                vertices[(j + 1) % count][1] - vertices[j][1],
            )
            new_edge = (
                new_vertices[(j + 1) % count][0] - new_vertices[j][0],
                new_vertices[(j + 1) % count][1] - new_vertices[j][1],
            )
            if old_edge[0] * new_edge[0] + old_edge[1] * new_edge[1] < 0:
                logger.debug("Shrinking inverted the outline, discarding.")
                return Outline()

    if config.DEBUG_GEOMETRY:
        logger.debug(
            f"Offset by {distance} produced {len(new_vertices)} vertices"
        )
    return Outline.from_points(new_vertices, close=True)
