from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import os

from slide_core.errors import PuzzleConfigError
from slide_core.parser import parse_puzzle_str

PUZZLE_SUFFIXES = (".json", ".yaml", ".yml")


@dataclass
class PuzzleRef:
    path: str


def iterate_puzzle_files(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[PuzzleRef, str]]:
    """Iterate over puzzle files in the given subfolders and return (puzzle reference, file text)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(PUZZLE_SUFFIXES):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                yield PuzzleRef(path=fpath), f.read()


def check_puzzle(text: str, *, max_w: Optional[int] = None, max_h: Optional[int] = None,
                 max_blocks: Optional[int] = None) -> Optional[str]:
    """Returns None for a usable puzzle, otherwise the reason it is skipped."""
    try:
        state, _ = parse_puzzle_str(text)
    except PuzzleConfigError as e:
        return str(e)
    if max_w is not None and state.width > max_w:
        return f"width {state.width} > {max_w}"
    if max_h is not None and state.height > max_h:
        return f"height {state.height} > {max_h}"
    if max_blocks is not None and len(state.blocks) > max_blocks:
        return f"{len(state.blocks)} blocks > {max_blocks}"
    return None
