from __future__ import annotations
import argparse

from slide_core.logging_utils import get_level_from_string, setup_logging
from slide_core.puzzles.resolve import load_puzzle_by_id
from slide_core.render import render_ascii, render_solution
from slide_core.results import format_moves, write_result
from search.selector import get_search


def main():
    p = argparse.ArgumentParser(description="Solve one sliding-block puzzle")
    p.add_argument("puzzle_id", help="path to a puzzle file (.json/.yaml)")
    p.add_argument("--mode", default="bfs", choices=["bfs", "dfs"], help="search mode")
    p.add_argument("--store", default="paths", choices=["paths", "parents"],
                   help="carry move lists in the frontier, or keep a parent map")
    p.add_argument("--max_len", type=int, default=None, help="dfs: only accept solutions shorter than this")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--out_dir", default=None, help="write <len>.txt per solution found")
    p.add_argument("--log_level", default="info")
    p.add_argument("--log_file", default=None)
    p.add_argument("--quiet", action="store_true", help="do not print the boards")
    args = p.parse_args()

    setup_logging(get_level_from_string(args.log_level), log_file=args.log_file)

    start, goal = load_puzzle_by_id(args.puzzle_id)
    print(render_ascii(start))
    print(f"goal: {goal.block} -> {goal.pos}\n")

    kwargs = dict(store=args.store, time_limit_s=args.time_limit, node_limit=args.node_limit)
    search = get_search(args.mode)
    if args.mode == "dfs":
        kwargs["max_len"] = args.max_len
        if args.out_dir is not None:
            kwargs["on_incumbent"] = lambda moves, _s: print(
                "wrote", write_result(args.out_dir, start, moves)
            )

    res = search(start, goal, **kwargs)
    print("Result:", {k: v for k, v in res.items() if k not in ("moves", "incumbents")})

    if not res["success"]:
        print(f"FAILED after {res['nodes']} states ({res['termination']})")
        return
    moves = res["moves"]  # type: ignore
    print(f"Winner! After {res['nodes']} states, with path of {len(moves)}")
    print("Moves:", format_moves(moves))
    if args.out_dir is not None:
        print("wrote", write_result(args.out_dir, start, moves, int(res["nodes"])))
    if not args.quiet:
        print()
        print(render_solution(start, moves))


if __name__ == "__main__":
    main()
