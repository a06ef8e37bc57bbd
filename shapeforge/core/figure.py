from __future__ import annotations
import logging
from typing import Any, List, Optional, Tuple, TYPE_CHECKING
from blinker import Signal
from .. import config
from .attributes import ORIENTATION, AttributeStore, Orientation
from .bounds import BoundsSnapshot, Rect, rect_from_points
from .matrix import Matrix
from .geo import intersect, stroke
from .geo.outline import Outline
from .geo.shapes import ShapeFamily, get_shape_family

if TYPE_CHECKING:
    from ..connector import ChopConnector
    from ..handles import Handle

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class Figure:
    """
    A shape defined by a bounding box, a set of style attributes and a
    shape family. Every piece of boundary geometry is derived on demand
    from the current box and attributes; nothing derived is stored.

    Signals:
        updated: Sent with `key`, `old` and `new` when an attribute
            changes.
        transform_changed: Sent when the bounding box changes.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        orientation: Any = None,
        family: str = "triangle",
        attributes: Optional[AttributeStore] = None,
    ):
        self._rect = Rect(x, y, width, height)
        self._family: ShapeFamily = get_shape_family(family)
        if attributes is None:
            attributes = AttributeStore()
        self._attr = attributes

        self.updated = Signal()
        self.transform_changed = Signal()

        # Without an explicit orientation the store's value (or its
        # default) stands.
        if orientation is not None:
            self._attr.set(ORIENTATION, orientation)
        self._attr.changed.connect(self._on_attr_changed)

    def _on_attr_changed(self, sender: AttributeStore, **kwargs):
        self.updated.send(self, **kwargs)

    @property
    def attr(self) -> AttributeStore:
        return self._attr

    @property
    def family(self) -> ShapeFamily:
        return self._family

    @property
    def orientation(self) -> Orientation:
        return self._attr.get(ORIENTATION)  # type: ignore[return-value]

    @orientation.setter
    def orientation(self, value: Any):
        self._attr.set(ORIENTATION, value)

    def get_bounds(self) -> Rect:
        """A copy of the bounding box; changing it does not affect us."""
        return self._rect.copy()

    def get_start_point(self) -> Point:
        return self._rect.start_point

    def get_end_point(self) -> Point:
        return self._rect.end_point

    def get_outline(self) -> Outline:
        return self._family.outline(self._rect, self.orientation)

    def fill_outline(self, scale_factor: float = 1.0) -> Outline:
        """The outline a renderer fills, grown to meet the stroke."""
        grow = stroke.fill_growth(self._attr, scale_factor)
        return stroke.grow(self.get_outline(), self._attr, grow, scale_factor)

    def stroke_outline(self, scale_factor: float = 1.0) -> Outline:
        """The path a renderer strokes to honour the stroke placement."""
        grow = stroke.draw_growth(self._attr, scale_factor)
        return stroke.grow(self.get_outline(), self._attr, grow, scale_factor)

    def hit_outline(self, scale_denominator: float = 1.0) -> Outline:
        grow = stroke.hit_growth(self._attr, scale_denominator)
        return stroke.grow(
            self.get_outline(), self._attr, grow, scale_denominator
        )

    def contains(self, point: Point, scale_denominator: float = 1.0) -> bool:
        """
        Tests whether `point` hits the figure, including the area covered
        by its stroke. `scale_denominator` keeps pixel-sized strokes at a
        constant on-screen tolerance.
        """
        return self.hit_outline(scale_denominator).contains(point)

    def chop(self, point: Point) -> Point:
        """
        The point where a line from `point` toward this figure meets its
        stroke-grown boundary, in model space.
        """
        chopped = intersect.chop(self.hit_outline(1.0), point)
        if chopped is None:
            return self._rect.center
        return chopped

    def get_drawing_area(self) -> Rect:
        """The region a renderer has to repaint for this figure."""
        width = stroke.stroke_padding(self._attr, 1.0)
        width += config.DRAWING_AREA_PADDING
        return self._rect.grown(width, width)

    def set_bounds(self, anchor: Point, lead: Point):
        """
        Resizes the figure to the rectangle spanned by `anchor` and
        `lead`. Width and height never drop below `config.MIN_EXTENT`.
        """
        self._rect = rect_from_points(anchor, lead)
        self.transform_changed.send(self)

    def transform(self, matrix: Matrix):
        """
        Maps both corners of the bounding box through `matrix`. Rotations
        and shears only move the corners; the box stays axis-aligned.
        """
        anchor = matrix.transform_point(self.get_start_point())
        lead = matrix.transform_point(self.get_end_point())
        self.set_bounds(anchor, lead)

    def capture_snapshot(self) -> BoundsSnapshot:
        return BoundsSnapshot.of(self._rect)

    def restore(self, snapshot: BoundsSnapshot):
        """
        Puts the bounding box back to a previously captured snapshot.

        Raises:
            TypeError: if `snapshot` did not come from capture_snapshot().
        """
        if not isinstance(snapshot, BoundsSnapshot):
            raise TypeError(
                f"Cannot restore {type(self).__name__} from "
                f"{type(snapshot).__name__}"
            )
        self._rect = snapshot.to_rect()
        self.transform_changed.send(self)

    def clone(self) -> "Figure":
        """
        Returns an independent copy. Box and attributes are copied;
        signal receivers are not.
        """
        x, y, w, h = self._rect.as_tuple()
        return type(self)(
            x,
            y,
            w,
            h,
            orientation=self.orientation,
            family=self._family.name,
            attributes=self._attr.copy(),
        )

    def create_handles(self, detail_level: int) -> List["Handle"]:
        from ..handles import create_handles

        return create_handles(self, detail_level)

    def find_connector(
        self, point: Point, prototype: Any = None
    ) -> "ChopConnector":
        from ..connector import ChopConnector

        return ChopConnector(self)

    def find_compatible_connector(
        self, connector: Any, is_start_connector: bool
    ) -> "ChopConnector":
        from ..connector import ChopConnector

        return ChopConnector(self)

    def __repr__(self) -> str:
        x, y, w, h = self._rect.as_tuple()
        return (
            f"Figure(family='{self._family.name}', x={x}, y={y}, "
            f"width={w}, height={h}, orientation={self.orientation.name})"
        )
