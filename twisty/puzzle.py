"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Puzzle state (sticker -> side mapping), turn algebra, scrambling and move history.

"""
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple
import random
import time

import numpy as np
import pandas as pd

from twisty.config import DEFAULT_CONFIG, PuzzleConfig, validate_shape
from twisty.geometry import Axis, Position, Shape, Side, capped_axis, solved_coloring
from twisty.layout import Layout2d
from twisty.turns import LayerMask, PuzzleTurn, SideTurn, Turn, UndefinedPlane, layer_depth
from twisty.visualisation import render

HISTORY_COLUMNS = ["step", "kind", "side", "from_axis", "to_axis", "layers", "phase"]


def track_history(method: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for Puzzle.turn: logs every successfully applied turn into the
    history, unless history is disabled. Phase is taken from `self._phase`
    ("scramble"/"solve"). A turn that raises is not logged.
    """
    @wraps(method)
    def wrapper(self, turn: Turn) -> Any:
        result = method(self, turn)

        if self._history_enabled and self.config.record_history:
            is_side = isinstance(turn, SideTurn)
            self._history_rows.append({
                "step": len(self._history_rows),
                "kind": "side" if is_side else "puzzle",
                "side": turn.side.name if is_side else None,
                "from_axis": turn.from_axis.index,
                "to_axis": turn.to_axis.index,
                "layers": str(turn.layers) if is_side else None,
                "phase": self._phase,
            })
        return result
    return wrapper


class Puzzle:
    """
    N-dimensional cuboid twisty puzzle, stored as one color (Side) per sticker.

    Design principles
    -----------------
    • The sticker mapping ``position -> Side`` is the only mutable state.
      Its key set is fixed at construction (every valid sticker position of
      the shape); turns only permute the values.

    • Turns are pure relabelings computed from a snapshot: every affected
      sticker's new color is read from its *preimage* position before any
      write happens.

    • For side turns between axes with different layer counts a quarter turn
      is not a bijection, so the turn degenerates to a half turn.

    Attributes
    ----------
    shape : Shape
        Layer count per axis.
    config : PuzzleConfig
        Bounds, scramble length, history / verbosity switches.

    Key methods
    ------------
    turn(turn)
        Apply a SideTurn or PuzzleTurn (raises UndefinedPlane for degenerate planes).

    is_solved()
        True iff every face shows a single color.

    scramble(rng)
        Apply random outer-layer side turns.

    print_net(), render_png()
        Terminal and image views of the unfolded net.

    Example
    -------
        p = Puzzle((3, 3, 4))
        p.turn(SideTurn(Side(0), Axis(1), Axis(2)))
        p.print_net()
    """

    def __init__(self, shape: Sequence[int], config: Optional[PuzzleConfig] = None):
        self.config: PuzzleConfig = config or DEFAULT_CONFIG
        start = time.perf_counter()
        self.shape: Shape = Shape(validate_shape(shape, self.config))
        self._stickers: Dict[Position, Side] = solved_coloring(self.shape)
        self._layout: Optional[Layout2d] = None
        if self.config.verbose:
            print(f"puzzle gen in {time.perf_counter() - start:.4f}s ({len(self._stickers)} stickers)")

        self._init_history_fields()

    def _init_history_fields(self) -> None:
        """
        Reset history bookkeeping.

        Creates:
            - self._history_rows: list of row dicts, one per applied turn, with keys
              ['step', 'kind', 'side', 'from_axis', 'to_axis', 'layers', 'phase'].
            - self._scramble_len: number of rows that belong to the last scramble.
        """
        self._history_rows: List[Dict[str, Any]] = []
        self._scramble_len: int = 0
        self._history_enabled: bool = True
        self._phase: str = "solve"

    @contextmanager
    def history_phase(self, phase: str):
        """
        Temporarily set the history 'phase' for recorded turns ('scramble' or 'solve').
        Usage:
            with puzzle.history_phase('scramble'):
                puzzle.turn(t1); puzzle.turn(t2)
        """
        prev = self._phase
        self._phase = phase
        try:
            yield
        finally:
            self._phase = prev

    @contextmanager
    def no_history(self):
        """Temporarily disable history recording (e.g. for check_turn)."""
        prev = self._history_enabled
        self._history_enabled = False
        try:
            yield
        finally:
            self._history_enabled = prev

    def clear_history(self) -> None:
        """Forget every recorded turn and reset the scramble checkpoint."""
        self._history_rows = []
        self._scramble_len = 0

    def moves_since_scramble(self) -> int:
        """Number of turns logged after the scramble checkpoint."""
        return max(0, len(self._history_rows) - self._scramble_len)

    def get_history(self) -> pd.DataFrame:
        """
        Return the move history as a new DataFrame.

        Columns:
            step (int)          : 0-based turn index
            kind (str)          : 'side' or 'puzzle'
            side (str|None)     : grip name for side turns
            from_axis (int)     : rotated-from axis
            to_axis (int)       : rotated-to axis
            layers (str|None)   : layer mask, e.g. '1' or '1,3'
            phase (str)         : 'scramble' or 'solve'
        """
        return pd.DataFrame(self._history_rows, columns=HISTORY_COLUMNS)

    # ---------- state access ----------
    @property
    def dim(self) -> int:
        return self.shape.dim

    def stickers(self) -> Iterator[Tuple[Position, Side]]:
        """Read-only iteration over (sticker position, side) pairs."""
        return iter(self._stickers.items())

    def color_of(self, pos: Position) -> Side:
        return self._stickers[tuple(pos)]

    def __len__(self) -> int:
        return len(self._stickers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self.shape == other.shape and self._stickers == other._stickers

    def __repr__(self) -> str:
        return f"Puzzle({self.shape!r}, solved={self.is_solved()})"

    def copy(self) -> "Puzzle":
        """Independent copy of the sticker state (and history), without re-enumerating."""
        other = Puzzle.__new__(Puzzle)
        other.config = self.config
        other.shape = self.shape
        other._stickers = dict(self._stickers)
        other._layout = self._layout
        other._history_rows = [dict(row) for row in self._history_rows]
        other._scramble_len = self._scramble_len
        other._history_enabled = self._history_enabled
        other._phase = self._phase
        return other

    @property
    def layout(self) -> Layout2d:
        """Unfolded 2D net of this shape (built on first use)."""
        if self._layout is None:
            self._layout = Layout2d(self.shape.cuts, self.config)
        return self._layout

    # ---------- solved check ----------
    def is_solved(self) -> bool:
        """
        Check whether every face shows one color.

        One pass over the stickers with a slot per (axis, polarity): the first
        sticker of a face claims the slot, every later one must match it.
        """
        pos_colors: List[Optional[Side]] = [None] * self.dim
        neg_colors: List[Optional[Side]] = [None] * self.dim
        for pos, color in self._stickers.items():
            axis = capped_axis(self.shape, pos)
            assert axis is not None, f"sticker {pos} must be on a side"
            slots = pos_colors if pos[axis] > 0 else neg_colors
            if slots[axis] is None:
                slots[axis] = color
            elif slots[axis] != color:
                return False
        return True

    # ---------- turns ----------
    def _check_axis(self, axis: Axis) -> None:
        if axis.index >= self.dim:
            raise UndefinedPlane(f"axis {axis.index} does not exist in a {self.dim}-dimensional puzzle")

    def turn_side(self, turn: SideTurn) -> None:
        """
        Rotate the layers of ``turn.side`` selected by ``turn.layers`` from
        ``turn.from_axis`` into ``turn.to_axis``.

        Raises:
            UndefinedPlane: from == to, or from/to is the grip's own axis. The
                            puzzle is left untouched.
        """
        side, from_axis, to_axis = turn.side, turn.from_axis, turn.to_axis
        self._check_axis(from_axis)
        self._check_axis(to_axis)
        if side.index >= self.dim:
            raise UndefinedPlane(f"side {side.name} does not exist in a {self.dim}-dimensional puzzle")
        if from_axis == to_axis or side.axis() == from_axis or side.axis() == to_axis:
            raise UndefinedPlane(f"{side.name}: {from_axis} -> {to_axis} is not a plane of rotation")

        g = side.index
        f = from_axis.index
        t = to_axis.index
        cut = self.shape[g]
        selected = {c for c in self.shape.coords(g) if layer_depth(c, cut, side) in turn.layers}
        # unequal cuts: a quarter turn would leave the shape, use a half turn
        quarter = self.shape[f] == self.shape[t]

        # phase 1: read every new color from the untouched mapping
        updates: List[Tuple[Position, Side]] = []
        for pos in self._stickers:
            if pos[g] not in selected:
                continue
            pre = list(pos)
            if quarter:
                pre[f] = pos[t]
                pre[t] = -pos[f]
            else:
                pre[f] = -pos[f]
                pre[t] = -pos[t]
            updates.append((pos, self._stickers[tuple(pre)]))

        # phase 2: write
        for pos, color in updates:
            self._stickers[pos] = color

    def turn_puzzle(self, turn: PuzzleTurn) -> None:
        """
        Reorient the whole puzzle from ``turn.from_axis`` into ``turn.to_axis``.

        Equal layer counts give a quarter turn; unequal ones fall back to a
        half turn in the same plane, the only orientation change that maps
        the shape onto itself.

        Raises:
            UndefinedPlane: from == to.
        """
        from_axis, to_axis = turn.from_axis, turn.to_axis
        self._check_axis(from_axis)
        self._check_axis(to_axis)
        if from_axis == to_axis:
            raise UndefinedPlane(f"{from_axis} -> {to_axis} is not a plane of rotation")

        f = from_axis.index
        t = to_axis.index
        quarter = self.shape[f] == self.shape[t]
        new_stickers: Dict[Position, Side] = {}
        for pos in self._stickers:
            pre = list(pos)
            if quarter:
                pre[f] = pos[t]
                pre[t] = -pos[f]
            else:
                pre[f] = -pos[f]
                pre[t] = -pos[t]
            new_stickers[pos] = self._stickers[tuple(pre)]
        self._stickers = new_stickers

    @track_history
    def turn(self, turn: Turn) -> None:
        """
        Apply a side turn or a whole-puzzle turn.

        Raises:
            UndefinedPlane: the turn's axes don't define a rotation plane.
            TypeError: ``turn`` is neither a SideTurn nor a PuzzleTurn.
        """
        if isinstance(turn, SideTurn):
            self.turn_side(turn)
        elif isinstance(turn, PuzzleTurn):
            self.turn_puzzle(turn)
        else:
            raise TypeError(f"Unexpected turn type: {type(turn)}")

    def scramble(self, rng: Optional[random.Random] = None, turns: Optional[int] = None,
                 seed: Optional[int] = None) -> int:
        """
        Apply random outer-layer side turns and mark the scramble checkpoint.

        Each iteration samples a grip in ``[-dim, dim)`` and two axes in
        ``[0, dim)``; colliding samples are skipped. This only mixes the
        puzzle up; it is not a uniform random state.

        Args:
            rng: Random source; a fresh ``random.Random(seed)`` if omitted.
            turns: Iterations to attempt (defaults to ``config.scramble_turns``).
            seed: Seed for the fresh random source.

        Returns:
            Number of turns actually applied.

        Side effects:
            - Records each turn with phase='scramble'.
            - Sets the scramble checkpoint to the new history length.
        """
        rng = rng or random.Random(seed)
        turns = self.config.scramble_turns if turns is None else turns
        dim = self.dim
        applied = 0
        start = time.perf_counter()

        with self.history_phase("scramble"):
            for _ in range(turns):
                side = Side(rng.randrange(-dim, dim))
                from_axis = rng.randrange(dim)
                if side.index == from_axis:
                    continue
                to_axis = rng.randrange(dim)
                if side.index == to_axis or from_axis == to_axis:
                    continue
                self.turn(SideTurn(side=side, from_axis=Axis(from_axis), to_axis=Axis(to_axis),
                                   layers=LayerMask()))
                applied += 1

        self._scramble_len = len(self._history_rows)
        if self.config.verbose:
            print(f"scrambled in {time.perf_counter() - start:.4f}s ({applied} turns)")
        return applied

    def check_turn(self, turn: Turn) -> None:
        """
        Sanity test for a single turn: turn followed by its inverse must restore
        the exact sticker mapping. Nothing is recorded in the history.

        Raises:
            AssertionError: if the round trip changes the state.
        """
        snap = dict(self._stickers)
        with self.no_history():
            self.turn(turn)
            self.turn(turn.inverse())
        assert snap == self._stickers, f"{turn} followed by its inverse changed the puzzle"

    # ---------- VIEWS ----------
    def to_array(self) -> np.ndarray:
        """
        Sticker state as an int array, one row per sticker sorted by position.

        Returns:
            Array of shape ``(n_stickers, dim + 1)``: the position coordinates
            followed by the side value (``~axis`` for negative sides).
        """
        rows = [pos + (side.value,) for pos, side in sorted(self._stickers.items())]
        return np.array(rows, dtype=np.int16).reshape(len(rows), self.dim + 1)

    def print_net(self, use_color: bool = True) -> None:
        """Print the unfolded net to the terminal, one side letter per sticker."""
        render.print_net(self, self.layout, use_color=use_color)

    def render_png(self, path: str) -> str:
        """Save the unfolded net as an image, one pixel per cell."""
        return render.render_png(self, path, layout=self.layout)
