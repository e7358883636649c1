"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Turn values (side turns, whole-puzzle turns, layer masks) and the turn error.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Union

from twisty.geometry import Axis, Side


class UndefinedPlane(ValueError):
    """`from` and `to` (with the grip, for side turns) don't define a plane of rotation."""


def layer_depth(coord: int, cut: int, side: Side) -> int:
    """
    1-based depth of a coordinate, counted from the ``side`` cap of its axis.

    The cap and the layer just beneath it are depth 1, then every other
    coordinate inward adds one: for ``cut=3`` seen from the positive side,
    ``3, 2 -> 1``, ``0 -> 2``, ``-2, -3 -> 3``.
    """
    if not side.is_positive():
        coord = -coord
    return max(1, (cut - coord + 1) // 2)


@dataclass(frozen=True)
class LayerMask:
    """
    Set of 1-based layer depths a side turn moves, measured from its grip.

    The default mask holds only the outermost layer.
    """

    layers: FrozenSet[int] = field(default_factory=lambda: frozenset({1}))

    @classmethod
    def of(cls, layers: Iterable[int]) -> "LayerMask":
        layers = frozenset(int(layer) for layer in layers)
        if any(layer < 1 for layer in layers):
            raise ValueError(f"layers are 1-based, got {sorted(layers)}")
        return cls(layers)

    def toggle(self, layer: int) -> "LayerMask":
        if layer < 1:
            raise ValueError(f"layers are 1-based, got {layer}")
        return LayerMask(self.layers ^ {layer})

    def __contains__(self, layer: int) -> bool:
        return layer in self.layers

    def __str__(self) -> str:
        return ",".join(str(layer) for layer in sorted(self.layers))


@dataclass(frozen=True)
class SideTurn:
    """Hold `side` fixed and rotate `from_axis` into `to_axis` for the layers in `layers`."""

    side: Side
    from_axis: Axis
    to_axis: Axis
    layers: LayerMask = field(default_factory=LayerMask)

    def inverse(self) -> "SideTurn":
        return SideTurn(side=self.side, from_axis=self.to_axis, to_axis=self.from_axis, layers=self.layers)


@dataclass(frozen=True)
class PuzzleTurn:
    """Reorient the whole puzzle, rotating `from_axis` into `to_axis`."""

    from_axis: Axis
    to_axis: Axis

    def inverse(self) -> "PuzzleTurn":
        return PuzzleTurn(from_axis=self.to_axis, to_axis=self.from_axis)


Turn = Union[SideTurn, PuzzleTurn]


def inverse(turn: Turn) -> Turn:
    return turn.inverse()


def describe(turn: Turn) -> str:
    """Short human-readable label, e.g. ``R 1->2 [1]`` or ``* 0->1``."""
    if isinstance(turn, SideTurn):
        return f"{turn.side.name} {turn.from_axis}->{turn.to_axis} [{turn.layers}]"
    return f"* {turn.from_axis}->{turn.to_axis}"
