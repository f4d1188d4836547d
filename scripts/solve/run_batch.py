from __future__ import annotations
import argparse, csv, os, time
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from slide_core.errors import PuzzleConfigError
from slide_core.puzzles.resolve import load_puzzle_by_id, read_puzzle_list
from search.selector import get_search

FIELDS = ["puzzle_id", "mode", "success", "termination", "nodes", "runtime", "solution_len"]


def _run_one(args_tuple) -> Dict[str, object]:
    puzzle_id, mode, store, time_limit, node_limit = args_tuple
    try:
        start, goal = load_puzzle_by_id(puzzle_id)
    except (OSError, PuzzleConfigError):
        return {"puzzle_id": puzzle_id, "mode": mode, "success": False, "termination": "invalid",
                "nodes": 0, "runtime": 0.0, "solution_len": -1}
    res = get_search(mode)(start, goal, store=store, time_limit_s=time_limit, node_limit=node_limit)
    return {
        "puzzle_id": puzzle_id,
        "mode": mode,
        "success": bool(res.get("success", False)),
        "termination": res.get("termination", ""),
        "nodes": int(res.get("nodes", 0)),
        "runtime": float(res.get("runtime", 0.0)),
        "solution_len": int(res.get("solution_len", -1)),
    }


def main():
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (flags, parallel)")
    p.add_argument("--list", required=True, help="file with one puzzle path per line")
    p.add_argument("--mode", default="bfs", choices=["bfs", "dfs"])
    p.add_argument("--store", default="paths", choices=["paths", "parents"])
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=10.0)
    p.add_argument("--node_limit", type=int, default=2000000)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    puzzle_ids = read_puzzle_list(args.list)

    jobs = args.jobs or cpu_count()
    payload = [(pid, args.mode, args.store, args.time_limit, args.node_limit) for pid in puzzle_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc=f"Running {args.mode}", unit="puzzle")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload),
                             desc=f"Running {args.mode}", unit="puzzle"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} puzzles → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
