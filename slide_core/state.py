from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

import numpy as np

__all__ = [
    "Block",
    "BoardState",
    "Pos",
    "occupancy_grid",
    "footprint_counts",
]

Pos = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Block:
    """Rectangle on the board: anchor (x, y) is the top-left cell, (w, h) the size."""

    name: str
    x: int
    y: int
    w: int
    h: int

    @property
    def pos(self) -> Pos:
        return (self.x, self.y)

    @property
    def size(self) -> Pos:
        return (self.w, self.h)

    def cells(self) -> Iterator[Pos]:
        for j in range(self.h):
            for i in range(self.w):
                yield (self.x + i, self.y + j)

    def shifted(self, dx: int, dy: int) -> Block:
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True, slots=True)
class BoardState:
    """
    Immutable snapshot of a sliding-block board.

    Blocks are kept as a tuple in a fixed order (sorted by name when loaded),
    which fixes the order in which moves are generated.
    Equality and hash cover the size and every block, so a state is its own
    dedup key.
    (0, 0) is the top-left cell; x grows to the right, y grows downwards.
    """

    width: int
    height: int
    blocks: Tuple[Block, ...]


    # ---- queries
    def wins(self, block_id: str, pos: Pos) -> bool:
        """True iff the named block exists and its anchor is exactly ``pos``."""
        b = self.block(block_id)
        return b is not None and b.pos == tuple(pos)


    def block(self, block_id: str) -> Optional[Block]:
        for b in self.blocks:
            if b.name == block_id:
                return b
        return None


    def index_of(self, block_id: str) -> int:
        for i, b in enumerate(self.blocks):
            if b.name == block_id:
                return i
        raise KeyError(block_id)


    def names(self) -> Tuple[str, ...]:
        return tuple(b.name for b in self.blocks)


    # ---- derived states
    def with_block_moved(self, index: int, dx: int, dy: int) -> BoardState:
        blocks = list(self.blocks)
        blocks[index] = blocks[index].shifted(dx, dy)
        return BoardState(width=self.width, height=self.height, blocks=tuple(blocks))


def occupancy_grid(state: BoardState) -> np.ndarray:
    """Boolean grid of shape (height, width); True marks a free cell.

    Built on demand for move generation, never stored on the state.
    Blocks are assumed to be inside the board.
    """
    free = np.ones((state.height, state.width), dtype=bool)
    for b in state.blocks:
        free[b.y:b.y + b.h, b.x:b.x + b.w] = False
    return free


def footprint_counts(state: BoardState) -> np.ndarray:
    """How many blocks cover each cell; the part of a footprint past the edge is clipped."""
    counts = np.zeros((state.height, state.width), dtype=np.int32)
    for b in state.blocks:
        x0, x1 = max(b.x, 0), max(b.x + b.w, 0)
        y0, y1 = max(b.y, 0), max(b.y + b.h, 0)
        counts[y0:y1, x0:x1] += 1
    return counts
