"""Uniform row/column partitioning of bounds into addressable cells."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import InvalidGeometry
from .geometry import Bounds, Padding


@dataclass(frozen=True)
class Grid:
    """A `rows` x `columns` partition of `bounds`.

    Row 1 is the topmost row and column 1 the leftmost. Indices and spans may
    be fractional.
    """

    bounds: Bounds
    rows: float
    columns: float
    padding: Padding | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "bounds", Bounds.coerce(self.bounds))
        if self.rows <= 0 or self.columns <= 0:
            msg = f"grid rows and columns must be > 0, got {self.rows}x{self.columns}."
            raise InvalidGeometry(msg)
        if self.padding is not None:
            object.__setattr__(self, "padding", Padding.coerce(self.padding))

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    @property
    def row_height(self) -> float:
        return self.height / self.rows

    @property
    def column_width(self) -> float:
        return self.width / self.columns

    def cell(
        self,
        row: float,
        col: float,
        width: float = 1,
        height: float = 1,
        padding: Any = None,
    ) -> Bounds:
        """Return the bounds of the cell at `(row, col)` spanning `width` x `height` cells.

        Spans extend right and down from the addressed cell. An explicit
        `padding` replaces the grid's default padding.
        """
        if width <= 0 or height <= 0:
            msg = f"cell span must be > 0, got {width}x{height}."
            raise InvalidGeometry(msg)

        row_h = self.row_height
        col_w = self.column_width
        llx = (col - 1) * col_w
        lly = self.height - row * row_h - (height - 1) * row_h
        urx = llx + col_w * width
        ury = lly + row_h * height

        origin = self.bounds.ll
        cell_bounds = Bounds.from_coords(
            origin.x + llx, origin.y + lly, origin.x + urx, origin.y + ury
        )
        return cell_bounds.with_padding(padding if padding is not None else self.padding)

    def map_cell(self, builder: Callable[..., Any]) -> Callable[..., Any]:
        """Compose cell lookup with `builder`.

        The returned callable takes `(row, col, *args, width=1, height=1,
        **kwargs)` and calls `builder(cell_bounds, *args, **kwargs)`.
        """

        def build_in_cell(
            row: float, col: float, *args: Any, width: float = 1, height: float = 1, **kwargs: Any
        ) -> Any:
            return builder(self.cell(row, col, width=width, height=height), *args, **kwargs)

        return build_in_cell

    def iter_cells(self) -> Iterator[tuple[int, int, Bounds]]:
        """Yield `(row, col, bounds)` for every whole cell in row-major order."""
        for row in range(1, int(self.rows) + 1):
            for col in range(1, int(self.columns) + 1):
                yield row, col, self.cell(row, col)
