import dataclasses
import pytest
from shapeforge.core.bounds import BoundsSnapshot, Rect, rect_from_points


def test_rect_from_points_orders_corners():
    r = rect_from_points((10, 20), (0, 5))
    assert r.as_tuple() == (0, 5, 10, 15)


def test_rect_from_points_applies_minimum_extent():
    r = rect_from_points((5, 5), (5, 5))
    assert r.x == 5 and r.y == 5
    assert r.width == pytest.approx(0.1)
    assert r.height == pytest.approx(0.1)

    r = rect_from_points((0, 0), (0.05, 30))
    assert r.width == pytest.approx(0.1)
    assert r.height == 30


def test_rect_points_and_center():
    r = Rect(2, 4, 10, 6)
    assert r.start_point == (2, 4)
    assert r.end_point == (12, 10)
    assert r.center == (7, 7)


def test_rect_grown():
    r = Rect(0, 0, 10, 10).grown(2, 3)
    assert r.as_tuple() == (-2, -3, 14, 16)


def test_rect_copy_is_independent():
    r = Rect(1, 2, 3, 4)
    c = r.copy()
    c.x = 100
    assert r.x == 1


def test_rect_contains_point():
    r = Rect(0, 0, 10, 10)
    assert r.contains_point((5, 5))
    assert r.contains_point((10, 10))
    assert not r.contains_point((10.5, 5))


def test_snapshot_is_a_frozen_copy():
    r = Rect(1, 2, 3, 4)
    snap = BoundsSnapshot.of(r)
    r.x = 50
    assert snap.x == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.x = 7  # type: ignore[misc]
    restored = snap.to_rect()
    assert restored == Rect(1, 2, 3, 4)
    assert BoundsSnapshot.of(restored) == snap
