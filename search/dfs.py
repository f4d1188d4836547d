from __future__ import annotations
from typing import Callable, List, Optional
import logging
import math
import time

from slide_core.moves import Move, successors
from slide_core.state import BoardState
from .bfs import LOG_EVERY, STORES, Result, SuccFn, out_of_budget
from .frontier import LifoFrontier
from .reconstruct import Parent, reconstruct
from .transposition import Transposition

logger = logging.getLogger(__name__)

IncumbentFn = Callable[[List[Move], BoardState], None]


def dfs(
    start: BoardState,
    is_goal_fn: Callable[[BoardState], bool],
    succ_fn: SuccFn = successors,
    store: str = "paths",
    max_len: Optional[int] = None,
    on_incumbent: Optional[IncumbentFn] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    stop_fn: Optional[Callable[[], bool]] = None,
    log_every: int = LOG_EVERY,
) -> Result:
    """Depth-first branch and bound.

    Keeps the best goal path found so far (the incumbent) and its length as a
    bound; anything at or beyond the bound is dropped. The search does not stop
    at the first solution, only when the stack is empty, so the last incumbent
    is a shortest path (of length < ``max_len`` when a cap is given).

    A successor is pushed only if it beats the best length recorded for its
    state, so a state can be re-expanded when reached by a shorter path.
    Every improving solution is appended to ``incumbents`` and passed to
    ``on_incumbent``. ``nodes`` counts popped entries.
    """
    if store not in STORES:
        raise ValueError(f"unknown store: {store}")
    carry = store == "paths"

    t0 = time.time()
    bound = math.inf if max_len is None else max_len
    trans = Transposition()
    trans.seen_better(start, 0)
    parent: Parent = {start: None}
    stack = LifoFrontier()
    stack.push(([], start) if carry else (0, start))

    incumbents: List[List[Move]] = []
    popped = 0
    budget_hit = False

    while len(stack) > 0:
        if out_of_budget(t0, popped, time_limit_s, node_limit, stop_fn):
            budget_hit = True
            break
        if carry:
            moves, s = stack.pop()
            g = len(moves)
        else:
            g, s = stack.pop()
        popped += 1
        if log_every and popped % log_every == 0:
            logger.info("Processed %d states, %d on stack, bound %s", popped, len(stack), bound)

        if g >= bound:
            continue
        # a shorter entry for s was pushed later and already handled
        if not carry and g > trans.best(s):
            continue

        if is_goal_fn(s):
            path = moves if carry else reconstruct(parent, s)
            bound = g
            incumbents.append(path)
            logger.info("Incumbent with path of %d after %d states", g, popped)
            if on_incumbent is not None:
                on_incumbent(path, s)
            continue

        ng = g + 1
        for m, ns in succ_fn(s):
            if trans.seen_better(ns, ng):
                continue
            if carry:
                stack.push((moves + [m], ns))
            else:
                parent[ns] = (s, m)
                stack.push((ng, ns))

    runtime = time.time() - t0
    if budget_hit:
        termination = "budget"
    elif incumbents:
        termination = "ok"
    else:
        termination = "exhausted"
    res: Result = {
        "success": bool(incumbents),
        "termination": termination,
        "nodes": popped,
        "runtime": runtime,
        "incumbents": incumbents,
    }
    if incumbents:
        best = incumbents[-1]
        res["solution_len"] = len(best)
        res["moves"] = best
    logger.debug("dfs %s: %d incumbents after %d states (%.2fs)", termination, len(incumbents), popped, runtime)
    return res
