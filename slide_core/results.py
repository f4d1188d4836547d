from __future__ import annotations
from typing import List, Optional, Sequence
import os

from .moves import Move
from .render import render_ascii, render_solution
from .state import BoardState


def format_moves(moves: Sequence[Move]) -> str:
    return " ".join(f"{name}{glyph}" for name, glyph in moves)


def write_result(out_dir: str, initial: BoardState, moves: Sequence[Move], nodes: Optional[int] = None) -> str:
    """Writes ``<out_dir>/<path length>.txt`` and returns its path.

    One file per distinct length, so successive incumbents of a branch and
    bound run end up side by side.
    """
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"{len(moves)}.txt")
    lines: List[str] = [
        f"Solution length: {len(moves)}",
    ]
    if nodes is not None:
        lines.append(f"States explored: {nodes}")
    lines += [f"Moves: {format_moves(moves)}", "", render_ascii(initial), "", render_solution(initial, moves)]
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path
