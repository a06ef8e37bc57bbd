import pytest
from shapeforge.core.attributes import Orientation
from shapeforge.core.bounds import Rect
from shapeforge.core.geo import (
    ShapeFamily,
    get_shape_family,
    outline,
    register_shape_family,
    shape_family_names,
)
from shapeforge.core.geo.primitives import line_segment_intersection

BOX = Rect(0, 0, 10, 10)


@pytest.mark.parametrize(
    "orientation, expected",
    [
        (Orientation.NORTH, [(5, 0), (10, 10), (0, 10)]),
        (Orientation.NORTH_EAST, [(0, 0), (10, 0), (10, 10)]),
        (Orientation.EAST, [(0, 0), (10, 5), (0, 10)]),
        (Orientation.SOUTH_EAST, [(10, 0), (10, 10), (0, 10)]),
        (Orientation.SOUTH, [(5, 10), (0, 0), (10, 0)]),
        (Orientation.SOUTH_WEST, [(10, 10), (0, 10), (0, 0)]),
        (Orientation.WEST, [(0, 5), (10, 0), (10, 10)]),
        (Orientation.NORTH_WEST, [(0, 10), (0, 0), (10, 0)]),
    ],
)
def test_triangle_table(orientation, expected):
    result = outline(BOX, orientation)
    assert list(result.points) == expected
    assert result.closed


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize(
    "box", [Rect(0, 0, 10, 10), Rect(-4, 3, 0.1, 25), Rect(7, 7, 33, 0.5)]
)
def test_triangle_is_simple(orientation, box):
    result = outline(box, orientation)
    assert len(result) == 3
    assert abs(result.area()) == pytest.approx(box.width * box.height / 2)

    # No two edges cross except at their shared vertices
    a, b, c = result.points
    assert line_segment_intersection(a, b, b, c) == pytest.approx(b)
    assert line_segment_intersection(b, c, c, a) == pytest.approx(c)


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize("k", [0.5, 2.0, 13.0])
def test_triangle_scales_with_box(orientation, k):
    box = Rect(2, -3, 8, 6)
    scaled_box = Rect(2 * k, -3 * k, 8 * k, 6 * k)
    base = outline(box, orientation)
    scaled = outline(scaled_box, orientation)
    for p, q in zip(base.points, scaled.points):
        assert q == pytest.approx((p[0] * k, p[1] * k))


@pytest.mark.parametrize("value", ["bogus", None, 7, "N"])
def test_unknown_orientation_uses_north(value):
    assert outline(BOX, value) == outline(BOX, Orientation.NORTH)


def test_triangle_is_registered():
    assert "triangle" in shape_family_names()
    assert get_shape_family("triangle").name == "triangle"


def test_unknown_family():
    with pytest.raises(KeyError):
        get_shape_family("no-such-shape")
    with pytest.raises(KeyError):
        outline(BOX, Orientation.NORTH, family="no-such-shape")


def test_family_needs_north():
    with pytest.raises(ValueError):
        ShapeFamily("broken", {Orientation.EAST: lambda r: []})


def test_register_custom_family():
    def diamond(r):
        cx, cy = r.center
        return [
            (cx, r.y),
            (r.x + r.width, cy),
            (cx, r.y + r.height),
            (r.x, cy),
        ]

    def flat(r):
        return [(r.x, r.y), (r.x + r.width, r.y), (r.x, r.y + r.height)]

    register_shape_family(
        ShapeFamily(
            "test-diamond",
            {Orientation.NORTH: diamond, Orientation.EAST: flat},
        )
    )
    assert len(outline(BOX, Orientation.NORTH, family="test-diamond")) == 4
    assert len(outline(BOX, Orientation.EAST, family="test-diamond")) == 3
    # Orientations missing from the table fall back to NORTH
    assert len(outline(BOX, Orientation.SOUTH, family="test-diamond")) == 4
