"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Keyboard state machine that accumulates key presses into completed turns.

"""
from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence

from twisty.config import DEFAULT_CONFIG, PuzzleConfig, validate_shape
from twisty.geometry import Axis, Shape, Side
from twisty.turns import LayerMask, PuzzleTurn, SideTurn, Turn

RESET_KEYS = {"escape", "esc"}
PUZZLE_MODE_KEY = "x"
DIGITS = set("0123456789")


class BuilderMode(Enum):
    SIDE = auto()
    PUZZLE = auto()


class TurnBuilder:
    """
    Turns a stream of key presses into Turn values.

    Two modes:
      - SIDE: pick a grip with a side key, then two axis keys (from, to).
        Digit keys toggle layers in the layer mask. The grip is kept after
        each turn so several turns can be chained on the same face.
      - PUZZLE: entered with ``x``; two axis keys give a whole-puzzle turn.

    ``Escape`` resets to an empty SIDE state. A side key in PUZZLE mode goes
    back to SIDE mode with that grip; a digit in PUZZLE mode goes back to
    SIDE mode before toggling.

    The builder never checks whether side/from/to form a valid plane; that is
    Puzzle.turn's job.

    Parameters
    ----------
    shape : sequence of int
        Puzzle shape; only keys for its axes are recognised.

    Examples
    --------
    >>> tb = TurnBuilder((3, 3, 3))
    >>> [tb.update(k) for k in "fjl"]
    [None, None, SideTurn(side=Side(value=0), from_axis=Axis(index=1), to_axis=Axis(index=2), layers=LayerMask(layers=frozenset({1})))]
    """

    def __init__(self, shape: Sequence[int], config: Optional[PuzzleConfig] = None):
        self.config: PuzzleConfig = config or DEFAULT_CONFIG
        self.shape: Shape = Shape(validate_shape(shape, self.config))
        self.reset()

    def reset(self) -> None:
        """Back to SIDE mode with no grip, no from-axis and the default layer mask."""
        self.mode: BuilderMode = BuilderMode.SIDE
        self.layers: LayerMask = LayerMask()
        self.grip: Optional[Side] = None
        self.from_axis: Optional[Axis] = None

    def _enter_puzzle_mode(self) -> None:
        self.mode = BuilderMode.PUZZLE
        self.layers = LayerMask()
        self.grip = None
        self.from_axis = None

    @property
    def gripped_side(self) -> Optional[Side]:
        """Grip currently held, only meaningful in SIDE mode."""
        return self.grip if self.mode is BuilderMode.SIDE else None

    @property
    def expects_axis(self) -> bool:
        """True when the next useful key is an axis key (used to pick which labels to show)."""
        return self.mode is BuilderMode.PUZZLE or self.grip is not None

    def update(self, key: Optional[str]) -> Optional[Turn]:
        """
        Feed one key press.

        Args:
            key: Key name, e.g. ``"f"``, ``"3"``, ``"escape"``. Case-insensitive.

        Returns:
            The completed turn, or None while a turn is still being built.
        """
        if not key:
            return None
        lowered = key.lower()

        if lowered in RESET_KEYS:
            self.reset()
            return None
        if lowered == PUZZLE_MODE_KEY:
            self._enter_puzzle_mode()
            return None

        dim = self.shape.dim
        if lowered in DIGITS:
            layer = int(lowered)
            if layer == 0:
                return None
            if self.mode is BuilderMode.PUZZLE:
                self.reset()
            self.layers = self.layers.toggle(layer)
            return None

        side = Side.from_key(dim, lowered)
        if side is not None:
            if self.mode is BuilderMode.PUZZLE:
                self.reset()
            self.grip = side
            self.from_axis = None
            return None

        if self.mode is BuilderMode.SIDE and self.grip is None:
            return None

        axis = Axis.from_key(dim, lowered)
        if self.from_axis is None:
            self.from_axis = axis
            return None
        if axis is None:
            return None

        if self.mode is BuilderMode.SIDE:
            turn: Turn = SideTurn(side=self.grip, from_axis=self.from_axis, to_axis=axis, layers=self.layers)
        else:
            turn = PuzzleTurn(from_axis=self.from_axis, to_axis=axis)
        self.from_axis = None
        return turn
