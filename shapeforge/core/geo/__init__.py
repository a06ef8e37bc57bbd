"""
Pure geometry for figure outlines: the outline value type, the
orientation tables of each shape family, width-aware offsetting and
boundary queries.
"""

from .outline import Outline
from .shapes import (
    ShapeFamily,
    TRIANGLE,
    get_shape_family,
    outline,
    register_shape_family,
    shape_family_names,
)
from .offset import offset_outline
from .intersect import chop

__all__ = [
    "Outline",
    "ShapeFamily",
    "TRIANGLE",
    "get_shape_family",
    "outline",
    "register_shape_family",
    "shape_family_names",
    "offset_outline",
    "chop",
]
