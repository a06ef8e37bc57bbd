import pytest
from shapeforge import config
from shapeforge.core.attributes import Orientation
from shapeforge.core.bounds import BoundsSnapshot, Rect
from shapeforge.core.figure import Figure
from shapeforge.handles import (
    RESIZE_ROLES,
    HandleRole,
    OrientationHandle,
    ResizeHandle,
    create_handles,
)


@pytest.fixture
def tall():
    return Figure(0, 0, 10, 20)


def _resize(fig, role):
    return ResizeHandle(fig, role)


class TestCreateHandles:
    def test_finest_level_adds_orientation_handle(self, tall):
        handles = create_handles(tall, 0)
        assert len(handles) == 9
        assert [h.role for h in handles[:8]] == list(RESIZE_ROLES)
        assert isinstance(handles[8], OrientationHandle)
        assert handles[8].owner is tall

    @pytest.mark.parametrize("level", [-1, 1, 2])
    def test_other_levels_only_resize(self, tall, level):
        handles = create_handles(tall, level)
        assert len(handles) == 8
        assert all(isinstance(h, ResizeHandle) for h in handles)

    def test_handles_are_new_each_time(self, tall):
        first = create_handles(tall, 0)
        second = create_handles(tall, 0)
        assert not set(map(id, first)) & set(map(id, second))


class TestResizeHandle:
    def test_locations(self, tall):
        assert _resize(tall, HandleRole.TOP_LEFT).location() == (0, 0)
        assert _resize(tall, HandleRole.TOP_MIDDLE).location() == (5, 0)
        assert _resize(tall, HandleRole.MIDDLE_RIGHT).location() == (10, 10)
        assert _resize(tall, HandleRole.BOTTOM_RIGHT).location() == (10, 20)

    def test_location_follows_figure(self, tall):
        handle = _resize(tall, HandleRole.BOTTOM_RIGHT)
        tall.set_bounds((0, 0), (30, 40))
        assert handle.location() == (30, 40)

    def test_rejects_orientation_role(self, tall):
        with pytest.raises(ValueError):
            ResizeHandle(tall, HandleRole.ORIENTATION)

    def test_drag_corner(self, tall):
        handle = _resize(tall, HandleRole.BOTTOM_RIGHT)
        handle.track_start((10, 20))
        handle.track((15, 25))
        handle.track((20, 30))
        assert tall.get_bounds() == Rect(0, 0, 20, 30)

    def test_drag_edge_moves_one_side(self, tall):
        handle = _resize(tall, HandleRole.MIDDLE_LEFT)
        handle.track_start((0, 10))
        handle.track((-5, 100))
        assert tall.get_bounds() == Rect(-5, 0, 15, 20)

    def test_drag_past_opposite_corner(self, tall):
        handle = _resize(tall, HandleRole.TOP_LEFT)
        handle.track_start((0, 0))
        handle.track((15, 25))
        assert tall.get_bounds() == Rect(10, 20, 5, 5)

    def test_drag_onto_opposite_edge_hits_floor(self, tall):
        handle = _resize(tall, HandleRole.TOP_MIDDLE)
        handle.track_start((5, 0))
        handle.track((5, 20))
        assert tall.get_bounds().height == pytest.approx(config.MIN_EXTENT)

    def test_track_end_returns_snapshots(self, tall):
        handle = _resize(tall, HandleRole.BOTTOM_MIDDLE)
        handle.track_start((5, 20))
        before, after = handle.track_end((5, 50))
        assert before == BoundsSnapshot(0, 0, 10, 20)
        assert after == BoundsSnapshot(0, 0, 10, 50)

        tall.restore(before)
        assert tall.get_bounds() == Rect(0, 0, 10, 20)

    def test_track_without_start_uses_current_bounds(self, tall):
        handle = _resize(tall, HandleRole.MIDDLE_RIGHT)
        handle.track((12, 0))
        assert tall.get_bounds() == Rect(0, 0, 12, 20)

    def test_contains(self, tall):
        handle = _resize(tall, HandleRole.TOP_MIDDLE)
        assert handle.contains((7, 2))
        assert not handle.contains((10, 0))
        assert handle.contains((10, 0), scale_denominator=2.0)


class TestOrientationHandle:
    def test_location_follows_orientation(self, tall):
        handle = OrientationHandle(tall)
        assert handle.location() == (5, 0)
        tall.orientation = Orientation.EAST
        assert handle.location() == (10, 10)
        tall.orientation = Orientation.SOUTH_WEST
        assert handle.location() == (0, 20)

    @pytest.mark.parametrize(
        "lead, expected",
        [
            ((10, 10), Orientation.EAST),
            ((0, 0), Orientation.NORTH_WEST),
            ((5, -5), Orientation.NORTH),
            ((10, 20), Orientation.SOUTH_EAST),
            ((5, 30), Orientation.SOUTH),
            ((-3, 10), Orientation.WEST),
            ((10, 0), Orientation.NORTH_EAST),
            ((0, 20), Orientation.SOUTH_WEST),
        ],
    )
    def test_track_snaps_to_octant(self, tall, lead, expected):
        handle = OrientationHandle(tall)
        handle.track(lead)
        assert tall.orientation is expected

    def test_track_at_center_keeps_orientation(self, tall):
        handle = OrientationHandle(tall)
        tall.orientation = Orientation.WEST
        handle.track((5, 10))
        assert tall.orientation is Orientation.WEST

    def test_track_end_returns_orientations(self, tall):
        handle = OrientationHandle(tall)
        handle.track_start(handle.location())
        assert handle.track_end((10, 10)) == (
            Orientation.NORTH,
            Orientation.EAST,
        )

    def test_cycle(self, tall):
        handle = OrientationHandle(tall)
        assert handle.cycle() is Orientation.NORTH_EAST
        assert tall.orientation is Orientation.NORTH_EAST
        assert handle.cycle(reverse=True) is Orientation.NORTH
        assert handle.cycle(reverse=True) is Orientation.NORTH_WEST

    def test_outline_changes_with_handle(self, tall):
        handle = OrientationHandle(tall)
        handle.track((10, 10))
        assert tall.get_outline().points == ((0, 0), (10, 10), (0, 20))
