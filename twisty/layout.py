"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Unfolds an N-dimensional shape into a flat 2D grid of cells (the "net").

"""
from __future__ import annotations

import time
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from twisty.config import DEFAULT_CONFIG, PuzzleConfig, validate_shape
from twisty.geometry import Position, Shape, Side

XY = Tuple[int, int]


def build_cells(shape: Shape) -> Tuple[int, int, List[Tuple[Position, XY]]]:
    """
    Lay out every valid position of ``shape`` on a 2D grid.

    Works one axis at a time, starting from the 0-dimensional layout (one
    cell at the origin). Adding axis ``k`` makes one copy of the current
    layout per coordinate of that axis and places the copies side by side:
    horizontally when the new dimension is odd, vertically when it is even.
    From the third axis on, neighbouring copies are separated by a one-cell
    gap. Copies for a capped coordinate drop the cells that would then be
    capped twice.

    Args:
        shape: Shape to lay out.

    Returns:
        (width, height, cells) where cells is a list of (position, (x, y))
        with +x to the right and +y up.
    """
    width, height = 1, 1
    cells: List[Tuple[Position, XY]] = [((), (0, 0))]

    for k in range(shape.dim):
        dim = k + 1
        cut = shape[k]
        prefix_cuts = shape.cuts[:k]
        horizontal = dim % 2 == 1
        span = width if horizontal else height

        new_cells: List[Tuple[Position, XY]] = []
        new_width, new_height = 0, 0
        for i, coord in enumerate(shape.coords(k)):
            shift = (span + 1) * i if dim > 2 else span * i
            capped = abs(coord) == cut
            for pos, (x, y) in cells:
                # a capped slice can only hold positions with no other cap
                if capped and any(abs(c) == n for c, n in zip(pos, prefix_cuts)):
                    continue
                if horizontal:
                    new_cells.append((pos + (coord,), (x + shift, y)))
                else:
                    new_cells.append((pos + (coord,), (x, y + shift)))
            if horizontal:
                new_width = max(new_width, width + shift)
                new_height = max(new_height, height)
            else:
                new_width = max(new_width, width)
                new_height = max(new_height, height + shift)

        assert len(new_cells) <= len(cells) * len(shape.coords(k))
        cells = new_cells
        width, height = new_width, new_height

    return width, height, cells


class Layout2d:
    """
    Two-way mapping between the positions of a shape and cells of a 2D grid.

    Every valid position (stickers, pieces and internal filler) owns exactly
    one cell, so ``mapping`` and ``inverse`` are exact inverses of each other.

    Attributes
    ----------
    shape : Shape
        The laid-out shape.
    width, height : int
        Grid size in cells.
    mapping : dict[Position, (x, y)]
        Cell of every position, +x right and +y up.
    inverse : dict[(x, y), Position]
        Position shown in every occupied cell (for hit testing).

    Example
    -------
        layout = Layout2d((3, 3, 3))
        layout.width, layout.height     # (29, 5)
        layout.position_at(1, 2)        # (-2, 0, -3)
    """

    def __init__(self, shape: Sequence[int], config: Optional[PuzzleConfig] = None):
        self.config: PuzzleConfig = config or DEFAULT_CONFIG
        self.shape: Shape = Shape(validate_shape(shape, self.config))

        start = time.perf_counter()
        self.width, self.height, cells = build_cells(self.shape)
        self.mapping: Dict[Position, XY] = dict(cells)
        self.inverse: Dict[XY, Position] = {xy: pos for pos, xy in cells}
        assert len(self.mapping) == len(self.inverse) == len(cells), "layout cells must not overlap"
        if self.config.verbose:
            print(f"layout gen in {time.perf_counter() - start:.4f}s ({self.width}x{self.height})")

    def __len__(self) -> int:
        return len(self.mapping)

    def __iter__(self) -> Iterator[Tuple[Position, XY]]:
        return iter(self.mapping.items())

    def __repr__(self) -> str:
        return f"Layout2d({self.shape!r}, {self.width}x{self.height})"

    def xy_of(self, pos: Position) -> XY:
        return self.mapping[tuple(pos)]

    def position_at(self, x: int, y: int) -> Optional[Position]:
        """Position in cell (x, y), or None for gaps and out-of-grid cells."""
        return self.inverse.get((x, y))

    def row_col(self, pos: Position) -> Tuple[int, int]:
        """(row, col) of a position with row 0 at the top, for image-style grids."""
        x, y = self.mapping[tuple(pos)]
        return self.height - y - 1, x

    def side_label_positions(self) -> Dict[Side, Position]:
        """
        Where to draw each side's key label: the centre of the layer just
        beneath that side (the off-centre layer on even axes).
        """
        base = [0 if cut % 2 == 1 else 1 for cut in self.shape.cuts]
        ret: Dict[Side, Position] = {}
        for axis, cut in enumerate(self.shape.cuts):
            pos = list(base)
            pos[axis] = cut - 1
            ret[Side.positive(axis)] = tuple(pos)
            pos[axis] = 1 - cut
            ret[Side.negative(axis)] = tuple(pos)
        return ret
