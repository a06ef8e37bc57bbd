"""
Offset distances for the different uses of a figure outline.

Each helper reads the stroke attributes of an AttributeStore and returns
how far the base outline has to be grown (positive) or shrunk (negative)
before it is filled, stroked, or hit-tested. `factor` is the view scale
denominator; it only matters for strokes whose width is given in pixels.
"""

from ..attributes import (
    AttributeStore,
    FILL_UNDER_STROKE,
    IS_STROKE_PIXEL_VALUE,
    STROKE_COLOR,
    STROKE_INNER_WIDTH_FACTOR,
    STROKE_JOIN,
    STROKE_MITER_LIMIT,
    STROKE_PLACEMENT,
    STROKE_TYPE,
    STROKE_WIDTH,
    FillUnderStroke,
    StrokeJoin,
    StrokePlacement,
    StrokeType,
)
from .offset import offset_outline
from .outline import Outline


def stroke_total_width(attrs: AttributeStore, factor: float = 1.0) -> float:
    """
    The full width covered by the stroke, including the gap and second
    line of a DOUBLE stroke.
    """
    width = attrs.get(STROKE_WIDTH)
    if attrs.get(IS_STROKE_PIXEL_VALUE):
        width *= factor
    if attrs.get(STROKE_TYPE) is StrokeType.DOUBLE:
        width *= 1.0 + attrs.get(STROKE_INNER_WIDTH_FACTOR)
    return width


def fill_growth(attrs: AttributeStore, factor: float = 1.0) -> float:
    width = stroke_total_width(attrs, factor)
    placement = attrs.get(STROKE_PLACEMENT)
    under = attrs.get(FILL_UNDER_STROKE)

    if under is FillUnderStroke.FULL:
        if placement is StrokePlacement.INSIDE:
            return 0.0
        if placement is StrokePlacement.OUTSIDE:
            return width
        return width / 2.0

    if under is FillUnderStroke.NONE:
        if placement is StrokePlacement.INSIDE:
            return -width
        if placement is StrokePlacement.OUTSIDE:
            return 0.0
        return -width / 2.0

    if placement is StrokePlacement.INSIDE:
        return -width / 2.0
    if placement is StrokePlacement.OUTSIDE:
        return width / 2.0
    return 0.0


def draw_growth(attrs: AttributeStore, factor: float = 1.0) -> float:
    """Moves the stroke's center line so the stroke lands on its placement."""
    width = stroke_total_width(attrs, factor)
    placement = attrs.get(STROKE_PLACEMENT)
    if placement is StrokePlacement.INSIDE:
        return -width / 2.0
    if placement is StrokePlacement.OUTSIDE:
        return width / 2.0
    return 0.0


def hit_growth(attrs: AttributeStore, factor: float = 1.0) -> float:
    """
    How far outside the outline a pointer still hits the figure. Mitered
    joins may reach up to the miter limit, so they widen the hit area.
    """
    placement = attrs.get(STROKE_PLACEMENT)
    if placement is StrokePlacement.INSIDE:
        return 0.0

    width = stroke_total_width(attrs, factor)
    if attrs.get(STROKE_JOIN) is StrokeJoin.MITER:
        width *= attrs.get(STROKE_MITER_LIMIT)
    if placement is StrokePlacement.OUTSIDE:
        return width
    return width / 2.0


def stroke_padding(attrs: AttributeStore, factor: float = 1.0) -> float:
    """Room the stroke needs around the bounds; none without a stroke."""
    if attrs.get(STROKE_COLOR) is None:
        return 0.0
    return hit_growth(attrs, factor)


def miter_length(attrs: AttributeStore, factor: float = 1.0) -> float:
    """
    Farthest a mitered corner may reach from its vertex. STROKE_MITER_LIMIT
    counts in stroke widths, so the length follows the stroke, not the
    offset distance it is applied with.
    """
    return stroke_total_width(attrs, factor) * attrs.get(STROKE_MITER_LIMIT)


def grow(
    outline: Outline,
    attrs: AttributeStore,
    distance: float,
    factor: float = 1.0,
) -> Outline:
    """Offsets `outline` using the join style and miter limit of `attrs`."""
    if distance == 0:
        return outline
    # offset_outline takes the limit in multiples of |distance|
    ratio = miter_length(attrs, factor) / abs(distance)
    return offset_outline(outline, distance, attrs.get(STROKE_JOIN), ratio)
