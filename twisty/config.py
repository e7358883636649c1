"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Bounds and knobs shared by Puzzle, Layout2d and TurnBuilder.

"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Configuration for building and driving a puzzle.

    Key ideas:
    - Shapes are validated against `max_dim` / `max_layers` once, at construction.
    - Scrambling is a plain "mix it up" loop of `scramble_turns` random side turns.
    - History recording and status prints can be switched off for bulk work (tests, benchmarks).
    """

    max_dim: int = 10
    # Largest number of axes. Side names, keys and colors exist for 10 axes.

    max_layers: int = 19
    # Largest layer count on a single axis.

    scramble_turns: int = 1000
    # Number of random side turns attempted by Puzzle.scramble().

    record_history: bool = True
    # Log every applied turn into the pandas history frame.

    verbose: bool = False
    # Print timing lines ("puzzle gen in ...") while building/scrambling.


DEFAULT_CONFIG = PuzzleConfig()


def validate_shape(cuts: Sequence[int], config: PuzzleConfig | None = None) -> Tuple[int, ...]:
    """
    Check a shape against the configured bounds and return it as a tuple.

    Args:
        cuts: Layer count per axis, e.g. (3, 3, 4).
        config: Bounds to check against (defaults to DEFAULT_CONFIG).

    Returns:
        The shape as a tuple of ints.

    Raises:
        ValueError: empty shape, too many axes, or a layer count outside [1, max_layers].
    """
    config = config or DEFAULT_CONFIG
    cuts = tuple(cuts)
    if not cuts:
        raise ValueError("dimension should be greater than 0")
    if len(cuts) > config.max_dim:
        raise ValueError(f"dimension should be less than or equal to {config.max_dim}, got {len(cuts)}")
    for cut in cuts:
        if isinstance(cut, bool) or not isinstance(cut, numbers.Integral):
            raise ValueError(f"layer counts must be integers, got {cut!r}")
        if cut < 1:
            raise ValueError(f"layer count should be greater than 0, got {cut}")
        if cut > config.max_layers:
            raise ValueError(f"layer count should be less than or equal to {config.max_layers}, got {cut}")
    return tuple(int(cut) for cut in cuts)
