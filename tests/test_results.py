from slide_core.parser import parse_puzzle_str
from slide_core.results import format_moves, write_result

TINY = """
size: [2, 2]
board:
  A: {pos: [0, 0], size: [1, 1]}
goal_block: A
goal_pos: [1, 1]
"""


def test_format_moves():
    assert format_moves([("A", "v"), ("B", "<")]) == "Av B<"


def test_one_file_per_length(tmp_path):
    s, _ = parse_puzzle_str(TINY)
    p4 = write_result(str(tmp_path), s, [("A", ">"), ("A", "v"), ("A", "<"), ("A", ">")])
    p2 = write_result(str(tmp_path), s, [("A", "v"), ("A", ">")], nodes=4)
    assert sorted(f.name for f in tmp_path.iterdir()) == ["2.txt", "4.txt"]
    txt = open(p2, encoding="utf-8").read()
    assert txt.startswith("Solution length: 2\nStates explored: 4\nMoves: Av A>\n")
    assert txt.rstrip().endswith("..\n.A")
    assert "States explored" not in open(p4, encoding="utf-8").read()
