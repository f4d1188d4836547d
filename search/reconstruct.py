from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

from slide_core.moves import Move, apply_move
from slide_core.state import BoardState

# state -> (predecessor, move that led here); None for the start state
Parent = Dict[BoardState, Optional[Tuple[BoardState, Move]]]


def reconstruct(parent: Parent, goal: BoardState) -> List[Move]:
    moves: List[Move] = []
    cur = goal
    while parent[cur] is not None:
        cur, m = parent[cur]  # type: ignore
        moves.append(m)
    moves.reverse()
    return moves


def replay(initial: BoardState, moves: Sequence[Move]) -> List[BoardState]:
    """Boards after each move, in order; the initial board is not included."""
    boards: List[BoardState] = []
    cur = initial
    for m in moves:
        cur = apply_move(cur, m)
        boards.append(cur)
    return boards


def replay_states(initial: BoardState, moves: Sequence[Move]) -> List[BoardState]:
    return [initial] + replay(initial, moves)
