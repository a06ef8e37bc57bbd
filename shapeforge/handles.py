from __future__ import annotations
import math
import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING
from . import config
from .core.attributes import Orientation
from .core.bounds import BoundsSnapshot, Rect

if TYPE_CHECKING:
    from .core.figure import Figure

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class HandleRole(Enum):
    """What dragging a handle does to its figure."""

    TOP_LEFT = auto()
    TOP_MIDDLE = auto()
    TOP_RIGHT = auto()
    MIDDLE_LEFT = auto()
    MIDDLE_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_MIDDLE = auto()
    BOTTOM_RIGHT = auto()
    ORIENTATION = auto()


RESIZE_ROLES: Tuple[HandleRole, ...] = (
    HandleRole.TOP_LEFT,
    HandleRole.TOP_MIDDLE,
    HandleRole.TOP_RIGHT,
    HandleRole.MIDDLE_LEFT,
    HandleRole.MIDDLE_RIGHT,
    HandleRole.BOTTOM_LEFT,
    HandleRole.BOTTOM_MIDDLE,
    HandleRole.BOTTOM_RIGHT,
)

# Position of each handle as fractions of the bounding box (fx, fy), with
# (0, 0) the top-left and (1, 1) the bottom-right corner.
_RESIZE_ANCHORS: Dict[HandleRole, Tuple[float, float]] = {
    HandleRole.TOP_LEFT: (0.0, 0.0),
    HandleRole.TOP_MIDDLE: (0.5, 0.0),
    HandleRole.TOP_RIGHT: (1.0, 0.0),
    HandleRole.MIDDLE_LEFT: (0.0, 0.5),
    HandleRole.MIDDLE_RIGHT: (1.0, 0.5),
    HandleRole.BOTTOM_LEFT: (0.0, 1.0),
    HandleRole.BOTTOM_MIDDLE: (0.5, 1.0),
    HandleRole.BOTTOM_RIGHT: (1.0, 1.0),
}

_COMPASS_ANCHORS: Dict[Orientation, Tuple[float, float]] = {
    Orientation.NORTH: (0.5, 0.0),
    Orientation.NORTH_EAST: (1.0, 0.0),
    Orientation.EAST: (1.0, 0.5),
    Orientation.SOUTH_EAST: (1.0, 1.0),
    Orientation.SOUTH: (0.5, 1.0),
    Orientation.SOUTH_WEST: (0.0, 1.0),
    Orientation.WEST: (0.0, 0.5),
    Orientation.NORTH_WEST: (0.0, 0.0),
}

# Octants counted clockwise from +x on a y-down canvas.
_OCTANTS: Tuple[Orientation, ...] = (
    Orientation.EAST,
    Orientation.SOUTH_EAST,
    Orientation.SOUTH,
    Orientation.SOUTH_WEST,
    Orientation.WEST,
    Orientation.NORTH_WEST,
    Orientation.NORTH,
    Orientation.NORTH_EAST,
)


def _point_on(rect: Rect, fractions: Tuple[float, float]) -> Point:
    fx, fy = fractions
    return (rect.x + rect.width * fx, rect.y + rect.height * fy)


class Handle(ABC):
    """
    An interactive manipulator of one figure. Handles keep no geometry of
    their own; every call reads the figure's current state.
    """

    def __init__(self, owner: "Figure", role: HandleRole):
        self.owner = owner
        self.role = role

    @abstractmethod
    def location(self) -> Point:
        pass

    def contains(self, point: Point, scale_denominator: float = 1.0) -> bool:
        """
        Whether `point` is on the handle. The handle keeps its on-screen
        size at every zoom level.
        """
        half = config.HANDLE_SIZE / 2.0 * scale_denominator
        hx, hy = self.location()
        return abs(point[0] - hx) <= half and abs(point[1] - hy) <= half

    @abstractmethod
    def track_start(self, anchor: Point):
        pass

    @abstractmethod
    def track(self, lead: Point):
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.role.name})"


class ResizeHandle(Handle):
    """Drags one corner or edge of the bounding box."""

    def __init__(self, owner: "Figure", role: HandleRole):
        if role not in _RESIZE_ANCHORS:
            raise ValueError(f"{role.name} is not a resize role")
        super().__init__(owner, role)
        self._initial: Optional[BoundsSnapshot] = None

    def location(self) -> Point:
        return _point_on(self.owner.get_bounds(), _RESIZE_ANCHORS[self.role])

    def track_start(self, anchor: Point):
        self._initial = self.owner.capture_snapshot()

    def track(self, lead: Point):
        if self._initial is not None:
            rect = self._initial.to_rect()
        else:
            rect = self.owner.get_bounds()
        left, top = rect.start_point
        right, bottom = rect.end_point

        fx, fy = _RESIZE_ANCHORS[self.role]
        if fx == 0.0:
            left = lead[0]
        elif fx == 1.0:
            right = lead[0]
        if fy == 0.0:
            top = lead[1]
        elif fy == 1.0:
            bottom = lead[1]

        # Crossing the opposite edge flips the box; set_bounds sorts it out.
        self.owner.set_bounds((left, top), (right, bottom))

    def track_end(self, lead: Point) -> Tuple[BoundsSnapshot, BoundsSnapshot]:
        """
        Finishes the drag and returns the (before, after) snapshots for
        the undo stack.
        """
        self.track(lead)
        before = self._initial or self.owner.capture_snapshot()
        self._initial = None
        return before, self.owner.capture_snapshot()


class OrientationHandle(Handle):
    """
    Sits on the compass point the figure faces. Dragging it points the
    figure at the octant under the pointer.
    """

    def __init__(self, owner: "Figure"):
        super().__init__(owner, HandleRole.ORIENTATION)
        self._initial: Optional[Orientation] = None

    def location(self) -> Point:
        anchor = _COMPASS_ANCHORS[self.owner.orientation]
        return _point_on(self.owner.get_bounds(), anchor)

    def track_start(self, anchor: Point):
        self._initial = self.owner.orientation

    def track(self, lead: Point):
        rect = self.owner.get_bounds()
        cx, cy = rect.center
        # Normalize by the half extents so a flat box still has eight
        # equally sized sectors.
        dx = (lead[0] - cx) / (rect.width / 2.0) if rect.width else 0.0
        dy = (lead[1] - cy) / (rect.height / 2.0) if rect.height else 0.0
        if math.hypot(dx, dy) < 1e-9:
            return
        angle = math.atan2(dy, dx)
        octant = int(round(angle / (math.pi / 4.0))) % 8
        self.owner.orientation = _OCTANTS[octant]

    def track_end(self, lead: Point) -> Tuple[Orientation, Orientation]:
        """Finishes the drag and returns (before, after) orientations."""
        self.track(lead)
        before = self._initial or self.owner.orientation
        self._initial = None
        return before, self.owner.orientation

    def cycle(self, reverse: bool = False) -> Orientation:
        """Steps the figure to the next orientation, clockwise by default."""
        current = self.owner.orientation
        step = current.previous() if reverse else current.next()
        self.owner.orientation = step
        logger.debug(
            f"Orientation cycled from {current.name} to "
            f"{self.owner.orientation.name}"
        )
        return self.owner.orientation


def create_handles(figure: "Figure", detail_level: int) -> List[Handle]:
    """
    Builds the handles for `figure`. The eight resize handles are always
    present; the finest detail level (0) adds the orientation handle.
    """
    handles: List[Handle] = [ResizeHandle(figure, r) for r in RESIZE_ROLES]
    if detail_level == 0:
        handles.append(OrientationHandle(figure))
    return handles
