from __future__ import annotations
import math
import logging
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    Optional,
    Tuple,
    Type,
    TypeVar,
)
from blinker import Signal

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A render-ready RGBA color, each channel in [0, 1].
ColorRGBA = Tuple[float, float, float, float]


class Orientation(Enum):
    """The compass direction the tip of an oriented figure points to."""

    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"

    @classmethod
    def parse(cls, value: Any) -> "Orientation":
        """
        Converts a member, short code ("NE") or member name ("NORTH_EAST")
        into an Orientation. Anything unrecognized maps to NORTH.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().upper().replace("-", "_").replace(" ", "_")
            for member in cls:
                if text in (member.value, member.name):
                    return member
        logger.warning(
            f"Unknown orientation {value!r}, falling back to NORTH"
        )
        return cls.NORTH

    def next(self) -> "Orientation":
        """The neighbouring orientation, clockwise."""
        members = list(Orientation)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "Orientation":
        members = list(Orientation)
        return members[(members.index(self) - 1) % len(members)]


class StrokePlacement(Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    CENTER = "center"


class StrokeJoin(Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class StrokeType(Enum):
    BASIC = "basic"
    DOUBLE = "double"


class FillUnderStroke(Enum):
    """How far the fill reaches beneath the stroke."""

    FULL = "full"
    CENTER = "center"
    NONE = "none"


_TRUE_STRINGS = ("true", "1", "on", "yes")
_FALSE_STRINGS = ("false", "0", "off", "no")


class AttributeKey(Generic[T]):
    """
    A typed attribute with a default value. Keys are compared by
    identity; the module-level constants below form the closed set of
    attributes a figure understands.
    """

    def __init__(
        self,
        name: str,
        var_type: Type[T],
        default: Optional[T],
        optional: bool = False,
        validator: Optional[Callable[[T], None]] = None,
        converter: Optional[Callable[[Any], T]] = None,
    ):
        """
        Args:
            name: Machine-readable identifier, unique among all keys.
            var_type: The Python type stored under this key.
            default: Value returned when the key was never set.
            optional: Whether None is a legal stored value.
            validator: Raises if a coerced value is out of range.
            converter: Replaces the default type coercion entirely.
        """
        self.name = name
        self.var_type = var_type
        self.default = default
        self.optional = optional
        self.validator = validator
        self.converter = converter

    def coerce(self, value: Any) -> Optional[T]:
        """
        Converts `value` to this key's type and validates it.

        Raises:
            TypeError: if the value cannot be converted.
            ValueError: if the converted value fails validation.
        """
        if value is None:
            return None if self.optional else self.default

        converted: T
        try:
            if self.converter is not None:
                converted = self.converter(value)
            elif isinstance(value, self.var_type):
                converted = value
            elif issubclass(self.var_type, Enum):
                converted = _coerce_enum(self.var_type, value)
            elif self.var_type is bool:
                converted = _coerce_bool(value)  # type: ignore[assignment]
            else:
                converted = self.var_type(value)  # type: ignore[call-arg]
        except (ValueError, TypeError, KeyError) as e:
            raise TypeError(
                f"Value '{value}' for key '{self.name}' cannot be coerced "
                f"to type {self.var_type.__name__}"
            ) from e

        if self.validator:
            try:
                self.validator(converted)
            except (ValueError, TypeError) as e:
                raise ValueError(
                    f"Validation failed for key '{self.name}' with value "
                    f"'{converted}': {e}"
                ) from e

        return converted

    def __repr__(self) -> str:
        return f"AttributeKey('{self.name}', default={self.default!r})"


def _coerce_enum(enum_type: Type[Any], value: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        if isinstance(value, str):
            return enum_type[value.strip().upper()]
        raise


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"'{value}' is not a boolean")
    if isinstance(value, (int, float)):
        return bool(value)
    raise TypeError(f"{type(value).__name__} is not a boolean")


def _coerce_color(value: Any) -> ColorRGBA:
    channels = tuple(float(c) for c in value)
    if len(channels) == 3:
        channels = channels + (1.0,)
    if len(channels) != 4:
        raise ValueError("a color needs 3 or 4 channels")
    return channels  # type: ignore[return-value]


def _validate_color(color: ColorRGBA) -> None:
    if not all(math.isfinite(c) for c in color):
        raise ValueError("color channels must be finite")
    if any(c < 0.0 or c > 1.0 for c in color):
        raise ValueError("color channels must be within [0, 1]")


def _at_least(minimum: float) -> Callable[[float], None]:
    def check(value: float) -> None:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        if value < minimum:
            raise ValueError(f"must be >= {minimum}")

    return check


ORIENTATION: AttributeKey[Orientation] = AttributeKey(
    "orientation",
    Orientation,
    Orientation.NORTH,
    converter=Orientation.parse,
)
STROKE_COLOR: AttributeKey[tuple] = AttributeKey(
    "stroke_color",
    tuple,
    (0.0, 0.0, 0.0, 1.0),
    optional=True,
    validator=_validate_color,
    converter=_coerce_color,
)
STROKE_WIDTH: AttributeKey[float] = AttributeKey(
    "stroke_width", float, 1.0, validator=_at_least(0.0)
)
STROKE_PLACEMENT: AttributeKey[StrokePlacement] = AttributeKey(
    "stroke_placement", StrokePlacement, StrokePlacement.CENTER
)
STROKE_JOIN: AttributeKey[StrokeJoin] = AttributeKey(
    "stroke_join", StrokeJoin, StrokeJoin.MITER
)
STROKE_MITER_LIMIT: AttributeKey[float] = AttributeKey(
    "stroke_miter_limit", float, 3.0, validator=_at_least(1.0)
)
STROKE_TYPE: AttributeKey[StrokeType] = AttributeKey(
    "stroke_type", StrokeType, StrokeType.BASIC
)
# Width of the gap between the two lines of a DOUBLE stroke, as a
# multiple of STROKE_WIDTH.
STROKE_INNER_WIDTH_FACTOR: AttributeKey[float] = AttributeKey(
    "stroke_inner_width_factor", float, 2.0, validator=_at_least(0.0)
)
# When set, STROKE_WIDTH is measured in screen pixels instead of model
# units.
IS_STROKE_PIXEL_VALUE: AttributeKey[bool] = AttributeKey(
    "is_stroke_pixel_value", bool, False
)
FILL_COLOR: AttributeKey[tuple] = AttributeKey(
    "fill_color",
    tuple,
    (1.0, 1.0, 1.0, 1.0),
    optional=True,
    validator=_validate_color,
    converter=_coerce_color,
)
FILL_UNDER_STROKE: AttributeKey[FillUnderStroke] = AttributeKey(
    "fill_under_stroke", FillUnderStroke, FillUnderStroke.CENTER
)

ALL_KEYS: Dict[str, AttributeKey] = {
    key.name: key
    for key in (
        ORIENTATION,
        STROKE_COLOR,
        STROKE_WIDTH,
        STROKE_PLACEMENT,
        STROKE_JOIN,
        STROKE_MITER_LIMIT,
        STROKE_TYPE,
        STROKE_INNER_WIDTH_FACTOR,
        IS_STROKE_PIXEL_VALUE,
        FILL_COLOR,
        FILL_UNDER_STROKE,
    )
}


def get_key(name: str) -> AttributeKey:
    """Looks up a key by name. Raises KeyError for unknown names."""
    try:
        return ALL_KEYS[name]
    except KeyError:
        raise KeyError(f"Unknown attribute '{name}'") from None


class AttributeStore:
    """
    Holds the style attributes of one figure. Keys that were never set
    read as their default, so `get` never fails for a known key.

    The `changed` signal is sent as `changed.send(store, key=..., old=...,
    new=...)` whenever a stored value actually changes.
    """

    def __init__(self, values: Optional[Dict[AttributeKey, Any]] = None):
        self._values: Dict[AttributeKey, Any] = {}
        self.changed = Signal()
        for key, value in (values or {}).items():
            self._values[key] = key.coerce(value)

    def get(self, key: AttributeKey[T]) -> Optional[T]:
        if key in self._values:
            return self._values[key]
        return key.default

    def set(self, key: AttributeKey[T], value: Any) -> None:
        old = self.get(key)
        new = key.coerce(value)
        self._values[key] = new
        if old != new:
            self.changed.send(self, key=key, old=old, new=new)

    def has(self, key: AttributeKey) -> bool:
        """True if the key was set explicitly, even to its default."""
        return key in self._values

    def remove(self, key: AttributeKey) -> None:
        """Forgets an explicit value; the key reads as its default again."""
        if key not in self._values:
            return
        old = self._values.pop(key)
        if old != key.default:
            self.changed.send(self, key=key, old=old, new=key.default)

    def __contains__(self, key: AttributeKey) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[AttributeKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def copy(self) -> "AttributeStore":
        """
        Returns an independent store with the same explicit values.
        Signal receivers are not carried over.
        """
        new_store = AttributeStore()
        new_store._values = dict(self._values)
        return new_store

    def __repr__(self) -> str:
        items = ", ".join(
            f"{k.name}={v!r}" for k, v in self._values.items()
        )
        return f"AttributeStore({items})"
