from __future__ import annotations
from typing import List, Sequence

from .moves import Move, apply_move
from .state import BoardState

EMPTY = "."


def render_ascii(state: BoardState, empty: str = EMPTY) -> str:
    """One line per row; every cell shows the first character of its block's id."""
    grid = [[empty for _ in range(state.width)] for _ in range(state.height)]
    for b in state.blocks:
        ch = b.name[:1] or "?"
        for x, y in b.cells():
            grid[y][x] = ch
    return "\n".join("".join(row) for row in grid)


def render_solution(initial: BoardState, moves: Sequence[Move], empty: str = EMPTY) -> str:
    """Each step as "i:", the move ("A >"), then the board after it."""
    out: List[str] = []
    board = initial
    for i, m in enumerate(moves):
        board = apply_move(board, m)
        out.append(f"{i}:\n{m[0]} {m[1]}\n")
        out.append(render_ascii(board, empty) + "\n")
    return "\n".join(out)
