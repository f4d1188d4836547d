from __future__ import annotations
from typing import Dict, List, Optional, Tuple

import numpy as np

from .state import Block, BoardState, occupancy_grid

# (dx, dy, glyph), in the order moves are tried for every block
DIRECTIONS: Tuple[Tuple[int, int, str], ...] = (
    (0, 1, "v"),
    (0, -1, "^"),
    (1, 0, ">"),
    (-1, 0, "<"),
)

DELTAS: Dict[str, Tuple[int, int]] = {g: (dx, dy) for dx, dy, g in DIRECTIONS}

OPPOSITE: Dict[str, str] = {"v": "^", "^": "v", ">": "<", "<": ">"}

# (block id, direction glyph)
Move = Tuple[str, str]


def inverse(move: Move) -> Move:
    name, glyph = move
    return (name, OPPOSITE[glyph])


def _destination_strip(state: BoardState, block: Block, dx: int, dy: int) -> Optional[Tuple[slice, slice]]:
    """Cells one step past the block's leading edge as (rows, cols) slices.

    None when that strip lies outside the board, i.e. the edge touches the border.
    """
    if dy != 0:
        row = block.y + block.h if dy > 0 else block.y - 1
        if row < 0 or row >= state.height:
            return None
        return slice(row, row + 1), slice(block.x, block.x + block.w)
    col = block.x + block.w if dx > 0 else block.x - 1
    if col < 0 or col >= state.width:
        return None
    return slice(block.y, block.y + block.h), slice(col, col + 1)


def can_move(free: np.ndarray, state: BoardState, block: Block, dx: int, dy: int) -> bool:
    """A block may shift by (dx, dy) iff every cell past its leading edge is on the board and free."""
    strip = _destination_strip(state, block, dx, dy)
    if strip is None:
        return False
    rows, cols = strip
    return bool(free[rows, cols].all())


def successors(state: BoardState) -> List[Tuple[Move, BoardState]]:
    """All legal unit moves from ``state`` with the state each one leads to.

    Order is fixed: blocks in state order, then down, up, right, left.
    At most 4 moves per block; the input state itself is never returned.
    """
    free = occupancy_grid(state)
    succs: List[Tuple[Move, BoardState]] = []
    for i, b in enumerate(state.blocks):
        for dx, dy, glyph in DIRECTIONS:
            if can_move(free, state, b, dx, dy):
                succs.append(((b.name, glyph), state.with_block_moved(i, dx, dy)))
    return succs


def block_moves(state: BoardState, block_id: str) -> List[Move]:
    """Legal moves of a single block."""
    free = occupancy_grid(state)
    b = state.block(block_id)
    if b is None:
        raise KeyError(block_id)
    return [(b.name, glyph) for dx, dy, glyph in DIRECTIONS if can_move(free, state, b, dx, dy)]


def apply_move(state: BoardState, move: Move) -> BoardState:
    """Shift the named block by the move's delta without checking legality.

    Used to replay a path that the generator already produced.
    """
    name, glyph = move
    dx, dy = DELTAS[glyph]
    return state.with_block_moved(state.index_of(name), dx, dy)
