from __future__ import annotations
from typing import List, Tuple

from slide_core.goal_check import Goal
from slide_core.parser import parse_puzzle_file
from slide_core.state import BoardState


def load_puzzle_by_id(puzzle_id: str) -> Tuple[BoardState, Goal]:
    """Puzzle ids are file paths, one puzzle per file; surrounding whitespace is ignored."""
    return parse_puzzle_file(puzzle_id.strip())


def read_puzzle_list(path: str) -> List[str]:
    """Non-empty lines of a list file, skipping '#' comments."""
    with open(path, "r", encoding="utf-8") as f:
        return [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]
