"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Terminal and image renderings of the unfolded net.

"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from twisty.layout import Layout2d

if TYPE_CHECKING:
    from twisty.puzzle import Puzzle

INTERNAL_GRAY: Tuple[int, int, int] = (128, 128, 128)
BACKGROUND: Tuple[int, int, int] = (0, 0, 0)
INTERNAL_CHAR = "·"
RESET = "\033[0m"


def _ansi(rgb: Tuple[int, int, int], text: str) -> str:
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m{text}{RESET}"


def net_rows(puzzle: "Puzzle", layout: Optional[Layout2d] = None, use_color: bool = True) -> List[str]:
    """
    Text rows of the net, top row first.

    Stickers show their side letter (optionally colored), internal cells a
    dot, and gaps a blank.
    """
    layout = layout or puzzle.layout
    grid = [[" " for _ in range(layout.width)] for _ in range(layout.height)]

    for pos in layout.mapping:
        r, c = layout.row_col(pos)
        grid[r][c] = INTERNAL_CHAR
    for pos, side in puzzle.stickers():
        r, c = layout.row_col(pos)
        grid[r][c] = _ansi(side.color, side.name) if use_color else side.name

    return [" ".join(row).rstrip() for row in grid]


def print_net(puzzle: "Puzzle", layout: Optional[Layout2d] = None, use_color: bool = True) -> None:
    """
    Print the net to the terminal, e.g. for a 3x3:

          U U U
        L · · · R
        L · · · R
          D D D
    """
    for row in net_rows(puzzle, layout, use_color=use_color):
        print(row)


def render_buffer(puzzle: "Puzzle", layout: Optional[Layout2d] = None) -> np.ndarray:
    """
    One pixel per cell: internal cells gray, stickers in their side color.

    Returns:
        uint8 array of shape (height, width, 3), row 0 at the top.
    """
    layout = layout or puzzle.layout
    buf = np.zeros((layout.height, layout.width, 3), dtype=np.uint8)
    buf[:, :] = BACKGROUND

    for pos in layout.mapping:
        buf[layout.row_col(pos)] = INTERNAL_GRAY
    for pos, side in puzzle.stickers():
        buf[layout.row_col(pos)] = side.color
    return buf


def render_png(puzzle: "Puzzle", path: str, layout: Optional[Layout2d] = None) -> str:
    """
    Save the one-pixel-per-cell net as an image (format from the extension).

    Returns:
        The path written.
    """
    buf = render_buffer(puzzle, layout)
    plt.imsave(path, buf)
    if puzzle.config.verbose:
        print(f"saved net {buf.shape[1]}x{buf.shape[0]} → {path}")
    return path
