from slide_core.parser import parse_puzzle_str
from search.bfs import bfs
from search.dfs import dfs
from search.reconstruct import replay

SMALL = """
size: [3, 3]
board:
  A: {pos: [0, 0], size: [1, 1]}
  B: {pos: [0, 1], size: [2, 1]}
  C: {pos: [2, 2], size: [1, 1]}
goal_block: A
goal_pos: [2, 2]
"""

TINY = """
size: [2, 2]
board:
  A: {pos: [0, 0], size: [1, 1]}
goal_block: A
goal_pos: [1, 1]
"""

PAIR = """
size: [2, 2]
board:
  A: {pos: [0, 0], size: [1, 1]}
  B: {pos: [1, 0], size: [1, 1]}
goal_block: A
goal_pos: [5, 5]
"""


def test_dfs_tiny():
    s, goal = parse_puzzle_str(TINY)
    res = dfs(s, goal)
    assert res["success"] is True
    assert res["termination"] == "ok"
    assert res["solution_len"] == 2


def test_dfs_incumbents_decrease_to_bfs_length():
    s, goal = parse_puzzle_str(SMALL)
    res = dfs(s, goal)
    lengths = [len(p) for p in res["incumbents"]]
    assert lengths
    assert all(a > b for a, b in zip(lengths, lengths[1:]))
    assert lengths[-1] == bfs(s, goal)["solution_len"]
    assert res["moves"] == res["incumbents"][-1]
    for path in res["incumbents"]:
        assert goal(replay(s, path)[-1])


def test_dfs_on_incumbent_callback():
    s, goal = parse_puzzle_str(SMALL)
    seen = []
    res = dfs(s, goal, on_incumbent=lambda moves, st: seen.append((list(moves), st)))
    assert [m for m, _ in seen] == res["incumbents"]
    assert all(goal(st) for _, st in seen)


def test_dfs_already_solved():
    s, goal = parse_puzzle_str(TINY.replace("goal_pos: [1, 1]", "goal_pos: [0, 0]"))
    res = dfs(s, goal)
    assert res["moves"] == []
    assert res["incumbents"] == [[]]


def test_dfs_max_len_cap():
    s, goal = parse_puzzle_str(SMALL)
    best = bfs(s, goal)["solution_len"]
    capped = dfs(s, goal, max_len=best)
    assert capped["success"] is False
    assert capped["termination"] == "exhausted"
    ok = dfs(s, goal, max_len=best + 1)
    assert [len(p) for p in ok["incumbents"]] == [best]


def test_dfs_unreachable():
    s, goal = parse_puzzle_str(PAIR)
    res = dfs(s, goal)
    assert res["success"] is False
    assert res["termination"] == "exhausted"
    assert res["incumbents"] == []


def test_dfs_stores_agree():
    s, goal = parse_puzzle_str(SMALL)
    a = dfs(s, goal, store="paths")
    b = dfs(s, goal, store="parents")
    assert [len(p) for p in a["incumbents"]] == [len(p) for p in b["incumbents"]]
    assert a["nodes"] == b["nodes"]
    assert goal(replay(s, b["moves"])[-1])


def test_dfs_deterministic():
    s, goal = parse_puzzle_str(SMALL)
    assert dfs(s, goal)["incumbents"] == dfs(s, goal)["incumbents"]


def test_dfs_budget_keeps_incumbents():
    s, goal = parse_puzzle_str(SMALL)
    full = dfs(s, goal)
    first = full["incumbents"][0]
    calls = []

    def stop():
        return bool(calls)

    res = dfs(s, goal, on_incumbent=lambda moves, st: calls.append(moves), stop_fn=stop)
    assert res["termination"] == "budget"
    assert res["incumbents"] == [first]
    assert res["success"] is True
