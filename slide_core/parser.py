from __future__ import annotations
import json
from typing import Any, Dict, Mapping, Tuple

import numpy as np
import yaml

from .errors import OutOfBoundsError, OverlapError, PuzzleConfigError
from .goal_check import Goal
from .state import Block, BoardState, footprint_counts

KEY_SIZE = "size"
KEY_BOARD = "board"
KEY_GOAL_BLOCK = "goal_block"
KEY_GOAL_POS = "goal_pos"


def _pair(value: Any, what: str) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise PuzzleConfigError(f"{what} must be a pair of integers, got {value!r}")
    a, b = value
    if isinstance(a, bool) or isinstance(b, bool) or not isinstance(a, int) or not isinstance(b, int):
        raise PuzzleConfigError(f"{what} must be a pair of integers, got {value!r}")
    return a, b


def validate_state(state: BoardState) -> None:
    """Raises if a block leaves the board or two blocks share a cell."""
    for b in state.blocks:
        if b.x < 0 or b.y < 0 or b.x + b.w > state.width or b.y + b.h > state.height:
            raise OutOfBoundsError(b.name, b.pos, b.size, (state.width, state.height))

    counts = footprint_counts(state)
    clashes = np.argwhere(counts > 1)
    if len(clashes) == 0:
        return
    y, x = (int(v) for v in clashes[0])
    owners = [b.name for b in state.blocks if b.x <= x < b.x + b.w and b.y <= y < b.y + b.h]
    raise OverlapError(owners[0], owners[1], (x, y))


def parse_puzzle_dict(cfg: Mapping[str, Any]) -> Tuple[BoardState, Goal]:
    """Builds the starting board and the goal from a loaded puzzle description.

    Expected keys:
      size: [width, height]
      board: {id: {pos: [x, y], size: [w, h]}, ...}
      goal_block: id
      goal_pos: [x, y]
    Block ids are normalized to str; blocks are ordered by id.
    """
    if not isinstance(cfg, Mapping):
        raise PuzzleConfigError(f"puzzle must be a mapping, got {type(cfg).__name__}")
    missing = [k for k in (KEY_SIZE, KEY_BOARD, KEY_GOAL_BLOCK, KEY_GOAL_POS) if k not in cfg]
    if missing:
        raise PuzzleConfigError(f"missing keys: {', '.join(missing)}")

    width, height = _pair(cfg[KEY_SIZE], KEY_SIZE)
    if width <= 0 or height <= 0:
        raise PuzzleConfigError(f"board size must be positive, got {width}x{height}")

    board = cfg[KEY_BOARD]
    if not isinstance(board, Mapping):
        raise PuzzleConfigError("board must map block ids to {pos, size}")

    blocks: Dict[str, Block] = {}
    for raw_id, spec in board.items():
        name = str(raw_id)
        if name in blocks:
            raise PuzzleConfigError(f"duplicate block id {name!r}")
        if not isinstance(spec, Mapping) or "pos" not in spec or "size" not in spec:
            raise PuzzleConfigError(f"block {name!r} needs pos and size")
        x, y = _pair(spec["pos"], f"{name}.pos")
        w, h = _pair(spec["size"], f"{name}.size")
        if w <= 0 or h <= 0:
            raise PuzzleConfigError(f"block {name!r} has non-positive size {w}x{h}")
        blocks[name] = Block(name=name, x=x, y=y, w=w, h=h)

    goal_block = str(cfg[KEY_GOAL_BLOCK])
    if goal_block not in blocks:
        raise PuzzleConfigError(f"goal block {goal_block!r} is not on the board")
    goal = Goal(block=goal_block, pos=_pair(cfg[KEY_GOAL_POS], KEY_GOAL_POS))

    state = BoardState(
        width=width,
        height=height,
        blocks=tuple(blocks[k] for k in sorted(blocks)),
    )
    validate_state(state)
    return state, goal


def parse_puzzle_str(text: str) -> Tuple[BoardState, Goal]:
    """Parses a puzzle written as JSON or YAML."""
    try:
        if text.lstrip().startswith("{"):
            cfg = json.loads(text)
        else:
            cfg = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PuzzleConfigError(f"cannot parse puzzle: {e}") from e
    if cfg is None:
        raise PuzzleConfigError("Empty puzzle")
    return parse_puzzle_dict(cfg)


def parse_puzzle_file(path: str) -> Tuple[BoardState, Goal]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_puzzle_str(f.read())
