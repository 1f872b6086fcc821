"""Composite drawing object and draw-order flattening."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from ..errors import EmptyGroupBounds
from ..geometry import Bounds
from ..link import Link, LinkAnnotation
from ..text_metrics import TextMeasurer
from .base import DrawingObjectMixin, normalize_common
from .shapes import Circle, Line, Rect, Shape
from .text import Text

_LEAF_TYPES = (Rect, Line, Shape, Circle, Text)


@dataclass
class Group(DrawingObjectMixin):
    """Ordered, mutable collection of drawing objects.

    Insertion order is the z-order among children of equal depth. A group
    link makes the whole group one clickable region.
    """

    objects: list[DrawingObject] = field(default_factory=list)
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        self.objects = list(self.objects)
        for obj in self.objects:
            require_drawing_object(obj)
        normalize_common(self)

    def push(self, obj: DrawingObject) -> None:
        require_drawing_object(obj)
        self.objects.append(obj)

    def extend(self, objects: Iterable[DrawingObject]) -> None:
        pending = list(objects)
        for obj in pending:
            require_drawing_object(obj)
        self.objects.extend(pending)

    def __iter__(self) -> Iterator[DrawingObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    @property
    def effective_depth(self) -> int:
        if self.depth is not None:
            return self.depth
        if not self.objects:
            return 0
        return max(obj.effective_depth for obj in self.objects)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        if not self.objects:
            msg = "cannot compute bounds of an empty group."
            raise EmptyGroupBounds(msg)
        return Bounds.envelope(obj.bounds(measurer) for obj in self.objects)

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Group:
        return Group(
            [obj.shift_by(x, y) for obj in self.objects],
            depth=self.depth,
            link=self.link,
        )

    def link_annotations(self, measurer: TextMeasurer | None = None) -> Iterator[LinkAnnotation]:
        if self.link is not None:
            yield LinkAnnotation(self.bounds(measurer), self.effective_depth, self.link)
            return
        for obj in self.objects:
            yield from obj.link_annotations(measurer)


DrawingObject = Union[Rect, Line, Shape, Circle, Text, Group]


def require_drawing_object(obj: Any) -> None:
    if not isinstance(obj, (*_LEAF_TYPES, Group)):
        msg = f"expected a drawing object, got {type(obj).__name__}."
        raise TypeError(msg)


def draw_order(objects: Iterable[DrawingObject]) -> list[tuple[int, DrawingObject]]:
    """Flatten groups into `(depth, leaf)` pairs stable-sorted by depth.

    A leaf without an explicit depth inherits the explicit depth of its
    nearest enclosing group, else 0.
    """
    flattened: list[tuple[int, DrawingObject]] = []

    def visit(obj: DrawingObject, inherited: int | None) -> None:
        depth = obj.depth if obj.depth is not None else inherited
        if isinstance(obj, Group):
            for child in obj.objects:
                visit(child, depth)
            return
        flattened.append((0 if depth is None else depth, obj))

    for obj in objects:
        visit(obj, None)
    return sorted(flattened, key=lambda item: item[0])


def iter_link_annotations(
    objects: Iterable[DrawingObject], measurer: TextMeasurer | None = None
) -> Iterator[LinkAnnotation]:
    for obj in objects:
        yield from obj.link_annotations(measurer)
