from __future__ import annotations
from typing import Callable

from search.bfs import bfs
from search.dfs import dfs


def get_search(name: str) -> Callable:
    name = name.lower()
    if name == "bfs":
        return bfs
    if name in ("dfs", "bnb"):
        return dfs
    raise ValueError(f"unknown search mode: {name}")
