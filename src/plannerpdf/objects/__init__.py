"""Drawing object model."""

from .group import DrawingObject, Group, draw_order, iter_link_annotations
from .shapes import Circle, Line, Rect, Shape, line, shape
from .text import Text

__all__ = [
    "Circle",
    "DrawingObject",
    "Group",
    "Line",
    "Rect",
    "Shape",
    "Text",
    "draw_order",
    "iter_link_annotations",
    "line",
    "shape",
]
