"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Sides, axes, shapes and the sticker/piece classifier.

"""

from dataclasses import dataclass
from functools import lru_cache
from itertools import product
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

# Per-axis tables, indexed by axis number. Positive and negative sides of the
# same axis sit at the same index in the two parallel tables.
POS_NAMES: List[str] = ["R", "U", "F", "O", "A", "Γ", "Θ", "Ξ", "Σ", "Ψ"]
NEG_NAMES: List[str] = ["L", "D", "B", "I", "P", "Δ", "Λ", "Π", "Φ", "Ω"]

POS_KEYS: List[str] = ["f", "e", "r", "t", "v", "y", "n", "q", ",", "/"]
NEG_KEYS: List[str] = ["s", "d", "w", "g", "c", "h", "b", "a", "m", "."]
AXIS_KEYS: List[str] = ["k", "j", "l", "i", "u", "o", "p", ";", "[", "'"]

POS_COLORS: List[Tuple[int, int, int]] = [
    (255, 0, 0),
    (255, 255, 255),
    (0, 255, 0),
    (255, 0, 255),
    (10, 170, 133),
    (119, 72, 17),
    (244, 159, 239),
    (178, 152, 103),
    (156, 245, 66),
    (7, 133, 23),
]
NEG_COLORS: List[Tuple[int, int, int]] = [
    (255, 128, 0),
    (255, 255, 0),
    (0, 128, 255),
    (143, 16, 234),
    (125, 170, 10),
    (109, 69, 100),
    (212, 169, 78),
    (178, 121, 103),
    (66, 212, 245),
    (47, 47, 189),
]

TABLE_DIM = len(POS_NAMES)

# one int coordinate per axis; stickers, pieces and internal filler alike
Position = Tuple[int, ...]


def _normalize_key(key: str) -> Optional[str]:
    if len(key) != 1:
        return None
    return key.lower()


@dataclass(frozen=True, order=True)
class Side:
    """
    One face of the puzzle: an axis plus a polarity.

    Values run over ``-dim .. dim-1``. Axis ``i`` has the positive side ``i``
    and the negative side ``~i`` (``-i-1``); ``opposite()`` maps one to the
    other.

    Examples
    --------
    >>> Side(0).opposite()
    Side(value=-1)
    >>> Side(-1).opposite() == Side(0)
    True
    >>> Side(1).name, Side(~1).name
    ('U', 'D')
    """

    value: int

    def __post_init__(self) -> None:
        if not -TABLE_DIM <= self.value < TABLE_DIM:
            raise ValueError(f"side should be in -{TABLE_DIM}..={TABLE_DIM - 1}, got {self.value}")

    @classmethod
    def positive(cls, axis: int) -> "Side":
        return cls(axis)

    @classmethod
    def negative(cls, axis: int) -> "Side":
        return cls(~axis)

    @classmethod
    def all(cls, dim: int) -> List["Side"]:
        """Every side of a ``dim``-dimensional puzzle, positive sides first."""
        return [cls(i) for i in range(dim)] + [cls(~i) for i in range(dim)]

    @classmethod
    def from_key(cls, dim: int, key: str) -> Optional["Side"]:
        """Grip key -> Side, restricted to the first ``dim`` axes."""
        key = _normalize_key(key)
        if key is None:
            return None
        if key in POS_KEYS[:dim]:
            return cls(POS_KEYS.index(key))
        if key in NEG_KEYS[:dim]:
            return cls(~NEG_KEYS.index(key))
        return None

    def opposite(self) -> "Side":
        return Side(~self.value)

    def is_positive(self) -> bool:
        return self.value >= 0

    @property
    def index(self) -> int:
        """Axis number, for either polarity."""
        return self.value if self.is_positive() else ~self.value

    def axis(self) -> "Axis":
        """Axis of this side regardless of polarity."""
        return Axis(self.index)

    def into_axis(self) -> "Axis":
        """Same axis as ``axis()``, but refuses negative sides."""
        if not self.is_positive():
            raise ValueError(f"cannot convert negative side {self.name} into an axis")
        return Axis(self.value)

    def _get(self, pos: Sequence, neg: Sequence):
        return pos[self.index] if self.is_positive() else neg[self.index]

    @property
    def name(self) -> str:
        return self._get(POS_NAMES, NEG_NAMES)

    @property
    def key(self) -> str:
        return self._get(POS_KEYS, NEG_KEYS)

    @property
    def color(self) -> Tuple[int, int, int]:
        return self._get(POS_COLORS, NEG_COLORS)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Axis:
    """
    A non-negative dimension index, i.e. the positive restriction of Side.
    """

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < TABLE_DIM:
            raise ValueError(f"axis should be in 0..{TABLE_DIM - 1}, got {self.index}")

    @classmethod
    def all(cls, dim: int) -> List["Axis"]:
        return [cls(i) for i in range(dim)]

    @classmethod
    def from_key(cls, dim: int, key: str) -> Optional["Axis"]:
        key = _normalize_key(key)
        if key is None or key not in AXIS_KEYS[:dim]:
            return None
        return cls(AXIS_KEYS.index(key))

    def into_side(self) -> Side:
        return Side(self.index)

    @property
    def key(self) -> str:
        return AXIS_KEYS[self.index]

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return str(self.index)


@lru_cache(maxsize=None)
def axis_coords(cut: int) -> Tuple[int, ...]:
    """
    All legal coordinates along an axis with ``cut`` layers.

    ``-cut``, then ``1-cut, 3-cut, ..., cut-1``, then ``cut``: ``cut + 2``
    values, symmetric about zero.

    >>> axis_coords(3)
    (-3, -2, 0, 2, 3)
    >>> axis_coords(4)
    (-4, -3, -1, 1, 3, 4)
    """
    return (-cut,) + tuple(range(1 - cut, cut, 2)) + (cut,)


class Shape:
    """
    Immutable per-axis layer counts, e.g. ``Shape((3, 3, 4))``.

    The per-axis coordinate lists are computed once and reused by every
    enumeration over this shape.
    """

    def __init__(self, cuts: Sequence[int]):
        self._cuts: Tuple[int, ...] = tuple(int(c) for c in cuts)
        self._coords: Tuple[Tuple[int, ...], ...] = tuple(axis_coords(c) for c in self._cuts)

    @property
    def cuts(self) -> Tuple[int, ...]:
        return self._cuts

    @property
    def dim(self) -> int:
        return len(self._cuts)

    def __len__(self) -> int:
        return len(self._cuts)

    def __getitem__(self, axis: int) -> int:
        return self._cuts[axis]

    def __iter__(self) -> Iterator[int]:
        return iter(self._cuts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self._cuts == other._cuts
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cuts)

    def __repr__(self) -> str:
        return f"Shape({'x'.join(str(c) for c in self._cuts)})"

    def coords(self, axis: int) -> Tuple[int, ...]:
        return self._coords[axis]

    def prefix(self, dim: int) -> "Shape":
        """The shape made of the first ``dim`` axes."""
        return Shape(self._cuts[:dim])

    def positions(self) -> Iterator[Position]:
        """Every valid position, internal ones included."""
        return enumerate_all(self)

    def stickers(self) -> Iterator[Position]:
        return (pos for pos in self.positions() if is_sticker(self, pos))

    def pieces(self) -> Iterator[Position]:
        return (pos for pos in self.positions() if is_piece(self, pos))


# ---------- classifier ----------

def _capped_count(shape: Shape, pos: Position) -> int:
    return sum(1 for coord, cut in zip(pos, shape.cuts) if abs(coord) == cut)


def is_valid(shape: Shape, pos: Position) -> bool:
    """At most one axis may sit on its cap."""
    return _capped_count(shape, pos) <= 1


def is_sticker(shape: Shape, pos: Position) -> bool:
    return _capped_count(shape, pos) == 1


def is_piece(shape: Shape, pos: Position) -> bool:
    if _capped_count(shape, pos) != 0:
        return False
    return any(abs(coord) == cut - 1 for coord, cut in zip(pos, shape.cuts))


def enumerate_all(shape: Shape) -> Iterator[Position]:
    """
    Lazily yield every valid position of ``shape``.

    Cartesian product of the per-axis coordinate lists, filtered by
    ``is_valid``. The order is the ``itertools.product`` order, so it is
    deterministic for a given shape and every call starts afresh.
    """
    cuts = shape.cuts
    for pos in product(*(shape.coords(i) for i in range(shape.dim))):
        capped = 0
        for coord, cut in zip(pos, cuts):
            if coord == cut or coord == -cut:
                capped += 1
                if capped > 1:
                    break
        else:
            yield pos


def capped_axis(shape: Shape, pos: Position) -> Optional[int]:
    """Index of the first capped axis, or None for internal positions."""
    for axis, (coord, cut) in enumerate(zip(pos, shape.cuts)):
        if abs(coord) == cut:
            return axis
    return None


def sticker_side(shape: Shape, pos: Position) -> Side:
    """
    The face a sticker lies on.

    Raises:
        ValueError: if ``pos`` is not a sticker.
    """
    if not is_sticker(shape, pos):
        raise ValueError(f"{pos} is not a sticker of {shape}")
    axis = capped_axis(shape, pos)
    return Side.positive(axis) if pos[axis] > 0 else Side.negative(axis)


def sticker_to_piece(shape: Shape, sticker: Position) -> Position:
    """Pull the capped coordinate one step toward zero."""
    ret = []
    for coord, cut in zip(sticker, shape.cuts):
        if coord == cut:
            ret.append(coord - 1)
        elif -coord == cut:
            ret.append(coord + 1)
        else:
            ret.append(coord)
    return tuple(ret)


def piece_sides(shape: Shape, piece: Position) -> Tuple[Side, ...]:
    """
    All sides a piece touches: one per axis one step short of its cap.
    """
    ret = []
    for axis, (coord, cut) in enumerate(zip(piece, shape.cuts)):
        if coord + 1 == cut:
            ret.append(Side.positive(axis))
        elif coord - 1 == -cut:
            ret.append(Side.negative(axis))
    assert ret, f"piece {piece} should be on at least one side"
    return tuple(ret)


def solved_coloring(shape: Shape) -> Dict[Position, Side]:
    """Canonical coloring: every sticker shows the side it lies on."""
    return {pos: sticker_side(shape, pos) for pos in shape.stickers()}
