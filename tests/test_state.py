import numpy as np

from slide_core.parser import parse_puzzle_str
from slide_core.state import Block, BoardState, occupancy_grid

PUZ = """
size: [4, 3]
board:
  A: {pos: [0, 0], size: [2, 2]}
  B: {pos: [3, 1], size: [1, 2]}
goal_block: A
goal_pos: [2, 1]
"""


def test_parse_orders_blocks_by_id():
    s, goal = parse_puzzle_str(PUZ)
    assert s.width == 4 and s.height == 3
    assert s.names() == ("A", "B")
    assert s.block("B") == Block(name="B", x=3, y=1, w=1, h=2)
    assert goal.block == "A" and goal.pos == (2, 1)


def test_wins_checks_anchor_only():
    s, _ = parse_puzzle_str(PUZ)
    assert s.wins("A", (0, 0))
    # (1, 1) is covered by A's footprint but is not its anchor
    assert not s.wins("A", (1, 1))
    assert not s.wins("Z", (0, 0))


def test_states_equal_by_content():
    s, _ = parse_puzzle_str(PUZ)
    moved = s.with_block_moved(1, 0, -1)
    back = moved.with_block_moved(1, 0, 1)
    assert moved != s
    assert back == s
    assert hash(back) == hash(s)
    assert len({s, moved, back}) == 2


def test_with_block_moved_leaves_original_untouched():
    s, _ = parse_puzzle_str(PUZ)
    s.with_block_moved(0, 1, 0)
    assert s.block("A").pos == (0, 0)


def test_occupancy_grid():
    s, _ = parse_puzzle_str(PUZ)
    free = occupancy_grid(s)
    assert free.shape == (3, 4)
    assert free.dtype == np.bool_
    expected = np.array([
        [False, False, True, True],
        [False, False, True, False],
        [True, True, True, False],
    ])
    assert (free == expected).all()


def test_empty_board_is_all_free():
    s = BoardState(width=2, height=2, blocks=())
    assert occupancy_grid(s).all()
