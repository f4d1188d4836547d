from __future__ import annotations
import argparse, yaml, os, random
from typing import List
from slide_core.puzzles.io import iterate_puzzle_files, check_puzzle


"""
Write a list of usable puzzle files for scripts.solve.run_batch.

Usage:
  python -m scripts.make_list --config configs/data.yaml --out puzzles/lists/all.txt --seed 42 --limit 100
"""

def write_list(path: str, items: List[str]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for it in items:
            f.write(it + "\n")


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/data.yaml")
    p.add_argument("--out", type=str, required=True)
    p.add_argument("--seed", type=int, default=None, help="shuffle with this seed (default: keep sorted order)")
    p.add_argument("--limit", type=int, default=0, help="keep at most this many puzzles (0 = all)")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["puzzles"]["root_dir"]
    rels = cfg["puzzles"]["sources"]
    flt  = cfg.get("filters", {})

    all_ids: List[str] = []
    for ref, text in iterate_puzzle_files(root, rels):
        if check_puzzle(text,
                        max_w=flt.get("max_width"),
                        max_h=flt.get("max_height"),
                        max_blocks=flt.get("max_blocks")) is None:
            all_ids.append(ref.path)

    if args.seed is not None:
        random.Random(args.seed).shuffle(all_ids)
    if args.limit:
        all_ids = all_ids[:args.limit]

    write_list(args.out, all_ids)
    print("written:", args.out, len(all_ids))

if __name__ == "__main__":
    main()
