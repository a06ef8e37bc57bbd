import os
import logging


logger = logging.getLogger(__name__)


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


def getfloat(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return float(default)
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Ignoring non-numeric value '{raw}' for {name}, "
            f"using {default}"
        )
        return float(default)


# Smallest width or height a figure's bounding box may collapse to.
MIN_EXTENT = 0.1

# Extra padding added around the stroke area when computing the region a
# renderer has to repaint. It is applied even when no stroke is set.
DRAWING_AREA_PADDING = getfloat("SHAPEFORGE_DRAWING_AREA_PADDING", 1.0)

# Largest angle covered by one segment of a round stroke join.
ROUND_JOIN_MAX_STEP_DEG = 15.0

# Log every offset decision at DEBUG level.
DEBUG_GEOMETRY = getflag("SHAPEFORGE_DEBUG_GEOMETRY")

# Edge length of an interactive handle, in screen pixels.
HANDLE_SIZE = 7.0
