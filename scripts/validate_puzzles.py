from __future__ import annotations
import argparse, yaml
from slide_core.puzzles.io import iterate_puzzle_files, check_puzzle


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/data.yaml")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["puzzles"]["root_dir"]
    rels = cfg["puzzles"]["sources"]
    flt  = cfg.get("filters", {})

    ok = 0
    bad = 0
    for ref, text in iterate_puzzle_files(root, rels):
        reason = check_puzzle(text,
                              max_w=flt.get("max_width"),
                              max_h=flt.get("max_height"),
                              max_blocks=flt.get("max_blocks"))
        if reason is None:
            ok += 1
        else:
            bad += 1
            print(f"[skip] {ref.path}: {reason}")
    print(f"valid: {ok}, skipped: {bad}")

if __name__ == "__main__":
    main()
