"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Display-only sticker styling: formats, piece filters and highlight precedence.

"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, List, Optional, Tuple

from twisty.geometry import Position, Shape, Side, piece_sides, sticker_side, sticker_to_piece

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class StickerFormat:
    """How a single cell is drawn. Never part of the puzzle state."""

    outline_color: RGB = (100, 100, 100)
    outline_width: float = 0.02
    # fraction of a cell
    sticker_scale: float = 1.0
    # 0 transparent, 1 opaque
    sticker_opacity: float = 1.0


INTERNAL_FORMAT = StickerFormat(outline_color=(0, 0, 0), outline_width=0.0, sticker_scale=0.5)
DEFAULT_FORMAT = StickerFormat()
HOVERED_FORMAT = StickerFormat(outline_color=(200, 200, 200), outline_width=0.05)
CLICKED_FORMAT = StickerFormat(outline_color=(255, 255, 255), outline_width=0.05)
GRIPPED_FORMAT = StickerFormat(outline_color=(100, 100, 100), outline_width=0.05)


@dataclass
class FilterTerm:
    """Matches a piece whose sides are all in `must_have` and none in `cant_have`."""

    must_have: List[Side] = field(default_factory=list)
    cant_have: List[Side] = field(default_factory=list)

    def matches(self, shape: Shape, piece: Position) -> bool:
        for side in piece_sides(shape, piece):
            if side not in self.must_have:
                return False
            if side in self.cant_have:
                return False
        return True


@dataclass
class Filter:
    """Matches a piece if any of its terms does; matching pieces get `format`."""

    terms: List[FilterTerm]
    format: StickerFormat

    def try_get(self, shape: Shape, piece: Position) -> Optional[StickerFormat]:
        for term in self.terms:
            if term.matches(shape, piece):
                return self.format
        return None


@dataclass
class FilterStage:
    """Filters shown together; the first one that matches a piece wins."""

    filters: List[Filter] = field(default_factory=list)

    def try_get(self, shape: Shape, piece: Position) -> Optional[StickerFormat]:
        for f in self.filters:
            fmt = f.try_get(shape, piece)
            if fmt is not None:
                return fmt
        return None


@dataclass
class FilterSequence:
    """Ordered stages, stepped through one at a time by the viewer."""

    stages: List[FilterStage] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.stages)

    def __getitem__(self, idx: int) -> FilterStage:
        return self.stages[idx]


def format_sticker(
    shape: Shape,
    sticker: Position,
    clicked_pieces: Collection[Position] = (),
    gripped_side: Optional[Side] = None,
    filter_stage: Optional[FilterStage] = None,
) -> StickerFormat:
    """
    Pick the format for one sticker.

    Precedence: clicked piece > gripped side > active filter stage > default.
    """
    piece = sticker_to_piece(shape, sticker)
    if piece in clicked_pieces:
        return CLICKED_FORMAT
    if gripped_side is not None and sticker_side(shape, sticker) == gripped_side:
        return GRIPPED_FORMAT
    if filter_stage is not None:
        fmt = filter_stage.try_get(shape, piece)
        if fmt is not None:
            return fmt
    return DEFAULT_FORMAT
