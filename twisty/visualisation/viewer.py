"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Interactive matplotlib window: keyboard turns, click-to-mark pieces, grip highlight.

"""
from __future__ import annotations

import math
from typing import Optional, Set, Tuple

import matplotlib.pyplot as plt
from matplotlib import widgets
from matplotlib.patches import Rectangle

from twisty.controls.turn_builder import BuilderMode, TurnBuilder
from twisty.geometry import Position, is_sticker, sticker_to_piece
from twisty.layout import Layout2d
from twisty.puzzle import Puzzle
from twisty.turns import UndefinedPlane, describe
from twisty.visualisation.formats import (
    DEFAULT_FORMAT,
    HOVERED_FORMAT,
    INTERNAL_FORMAT,
    FilterSequence,
    StickerFormat,
    format_sticker,
)

INTERNAL_COLOR = (64, 64, 64)
LABEL_COLOR = "lightgray"
CYCLE_FILTER_KEY = "tab"


def _rgb(color: Tuple[int, int, int], alpha: float = 1.0) -> Tuple[float, float, float, float]:
    return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0, alpha


class PuzzleViewer:
    """
    Draw a puzzle's unfolded net and drive it from the keyboard.

    Controls
    --------
    - grip keys (f/s, e/d, r/w, ...) pick the side to hold,
    - axis keys (k, j, l, i, ...) pick from/to,
    - digits toggle layers, ``x`` switches to whole-puzzle turns, ``escape`` resets,
    - left click marks the piece under a sticker, right click clears marks,
    - ``tab`` steps through the filter stages (if any),
    - the "Scramble" button mixes the puzzle up.

    Turns whose axes don't form a plane are dropped with a short message.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        layout: Optional[Layout2d] = None,
        filter_sequence: Optional[FilterSequence] = None,
        figsize: Tuple[float, float] = (9, 6),
    ):
        self.puzzle = puzzle
        self.layout = layout or puzzle.layout
        self.turn_builder = TurnBuilder(puzzle.shape.cuts, puzzle.config)
        self.clicked_pieces: Set[Position] = set()
        self.hovered: Optional[Position] = None
        self.filter_sequence = filter_sequence or FilterSequence()
        self.filter_stage: Optional[int] = None

        self.fig = plt.figure(figsize=figsize)
        self.ax = self.fig.add_axes((0.02, 0.14, 0.96, 0.84))
        self.status = self.fig.text(0.02, 0.04, "", size=10, family="monospace")

        # matplotlib's default key bindings (s=save, f=fullscreen, ...) collide with the grip keys
        manager = self.fig.canvas.manager
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            self.fig.canvas.mpl_disconnect(handler_id)

        self._initialize_widgets()
        self.fig.canvas.mpl_connect("key_press_event", self._key_press)
        self.fig.canvas.mpl_connect("button_press_event", self._mouse_press)
        self.fig.canvas.mpl_connect("motion_notify_event", self._mouse_motion)

        self.redraw()

    def _initialize_widgets(self) -> None:
        self._ax_scramble = self.fig.add_axes((0.78, 0.02, 0.2, 0.07))
        self._btn_scramble = widgets.Button(self._ax_scramble, "Scramble")
        self._btn_scramble.on_clicked(self._scramble)

    # ---------- geometry ----------
    def cell_at(self, xdata: Optional[float], ydata: Optional[float]) -> Optional[Position]:
        """Position under a point in data coordinates (cell (x, y) spans [x, x+1) x [y, y+1))."""
        if xdata is None or ydata is None:
            return None
        return self.layout.position_at(int(math.floor(xdata)), int(math.floor(ydata)))

    # ---------- drawing ----------
    def _draw_cell(self, pos: Position, color: Tuple[int, int, int], fmt: StickerFormat) -> None:
        x, y = self.layout.xy_of(pos)
        size = fmt.sticker_scale
        offset = (1.0 - size) / 2.0
        self.ax.add_patch(Rectangle(
            (x + offset, y + offset), size, size,
            facecolor=_rgb(color, fmt.sticker_opacity),
            edgecolor=_rgb(fmt.outline_color),
            linewidth=fmt.outline_width * 20,
        ))

    def _active_stage(self):
        if self.filter_stage is None:
            return None
        return self.filter_sequence[self.filter_stage]

    def redraw(self) -> None:
        shape = self.puzzle.shape
        self.ax.clear()
        self.ax.set_xlim(0, self.layout.width)
        self.ax.set_ylim(0, self.layout.height)
        self.ax.set_aspect("equal")
        self.ax.set_axis_off()

        for pos in self.layout.mapping:
            if not is_sticker(shape, pos):
                self._draw_cell(pos, INTERNAL_COLOR, INTERNAL_FORMAT)

        gripped = self.turn_builder.gripped_side
        stage = self._active_stage()
        for pos, side in self.puzzle.stickers():
            fmt = format_sticker(shape, pos, self.clicked_pieces, gripped, stage)
            if pos == self.hovered and fmt is DEFAULT_FORMAT:
                fmt = HOVERED_FORMAT
            self._draw_cell(pos, side.color, fmt)

        axis_labels = self.turn_builder.expects_axis
        for side, pos in self.layout.side_label_positions().items():
            if axis_labels and not side.is_positive():
                continue
            label = side.into_axis().key if axis_labels else side.key
            x, y = self.layout.xy_of(pos)
            self.ax.text(x + 0.5, y + 0.5, label, ha="center", va="center",
                         color=LABEL_COLOR, family="monospace")

        self.status.set_text(self._status_line())
        self.fig.canvas.draw_idle()

    def _status_line(self) -> str:
        tb = self.turn_builder
        if tb.mode is BuilderMode.PUZZLE:
            mode = "puzzle"
        else:
            mode = f"grip={tb.grip.name if tb.grip else '-'} layers={tb.layers}"
        from_axis = tb.from_axis.index if tb.from_axis is not None else "-"
        stage = "-" if self.filter_stage is None else self.filter_stage
        return f"{mode} from={from_axis} filter={stage} | solved={self.puzzle.is_solved()}"

    # ---------- events ----------
    def _key_press(self, event) -> None:
        if event.key is None:
            return
        if event.key == CYCLE_FILTER_KEY and len(self.filter_sequence):
            if self.filter_stage is None:
                self.filter_stage = 0
            elif self.filter_stage + 1 < len(self.filter_sequence):
                self.filter_stage += 1
            else:
                self.filter_stage = None
            self.redraw()
            return

        turn = self.turn_builder.update(event.key)
        if turn is not None:
            try:
                self.puzzle.turn(turn)
            except UndefinedPlane as e:
                print(f"  ! dropped {describe(turn)}: {e}")
            else:
                print(f"{describe(turn)} | solved: {self.puzzle.is_solved()}")
        self.redraw()

    def _mouse_press(self, event) -> None:
        if event.inaxes is not self.ax:
            return
        if event.button == 3:
            self.clicked_pieces.clear()
            self.redraw()
            return
        if event.button != 1:
            return
        pos = self.cell_at(event.xdata, event.ydata)
        if pos is not None and is_sticker(self.puzzle.shape, pos):
            self.clicked_pieces.add(sticker_to_piece(self.puzzle.shape, pos))
            self.redraw()

    def _mouse_motion(self, event) -> None:
        pos = self.cell_at(event.xdata, event.ydata) if event.inaxes is self.ax else None
        if pos is not None and not is_sticker(self.puzzle.shape, pos):
            pos = None
        if pos != self.hovered:
            self.hovered = pos
            self.redraw()

    def _scramble(self, *args: object) -> None:
        self.puzzle.scramble()
        self.redraw()

    def show(self) -> None:
        plt.show()
