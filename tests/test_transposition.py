from slide_core.parser import parse_puzzle_str
from search.transposition import Transposition

PUZ = """
size: [2, 1]
board:
  A: {pos: [0, 0], size: [1, 1]}
goal_block: A
goal_pos: [1, 0]
"""


def test_seen_better_records_only_improvements():
    s, _ = parse_puzzle_str(PUZ)
    t = Transposition()
    assert t.seen_better(s, 5) is False
    assert t.best(s) == 5
    assert t.seen_better(s, 5) is True
    assert t.seen_better(s, 7) is True
    assert t.best(s) == 5
    assert t.seen_better(s, 3) is False
    assert t.best(s) == 3
    assert len(t) == 1


def test_equal_states_share_an_entry():
    s, _ = parse_puzzle_str(PUZ)
    same, _ = parse_puzzle_str(PUZ)
    t = Transposition()
    t.seen_better(s, 1)
    assert t.seen_better(same, 1) is True
    assert t.best(s.with_block_moved(0, 1, 0)) is None
