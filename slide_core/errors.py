from __future__ import annotations
from typing import Tuple


class PuzzleConfigError(ValueError):
    """Puzzle description cannot be turned into a valid starting board."""


class OutOfBoundsError(PuzzleConfigError):
    def __init__(self, block_id: str, pos: Tuple[int, int], size: Tuple[int, int], board: Tuple[int, int]) -> None:
        self.block_id = block_id
        super().__init__(
            f"block {block_id!r} at {pos} with size {size} does not fit on a {board[0]}x{board[1]} board"
        )


class OverlapError(PuzzleConfigError):
    def __init__(self, first: str, second: str, cell: Tuple[int, int]) -> None:
        self.first = first
        self.second = second
        self.cell = cell
        super().__init__(f"blocks {first!r} and {second!r} overlap at {cell}")
