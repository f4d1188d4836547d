from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import logging
import time

from slide_core.moves import Move, successors
from slide_core.state import BoardState
from .frontier import FifoFrontier
from .reconstruct import Parent, reconstruct

logger = logging.getLogger(__name__)

Result = Dict[str, object]
SuccFn = Callable[[BoardState], List[Tuple[Move, BoardState]]]

# "paths": every frontier entry carries its move list (more memory, no bookkeeping)
# "parents": entries are bare states, moves come back from a parent map
STORES = ("paths", "parents")

LOG_EVERY = 1_000_000


def out_of_budget(
    t0: float,
    explored: int,
    time_limit_s: Optional[float],
    node_limit: Optional[int],
    stop_fn: Optional[Callable[[], bool]],
) -> bool:
    if time_limit_s is not None and (time.time() - t0) > time_limit_s:
        return True
    if node_limit is not None and explored >= node_limit:
        return True
    return stop_fn is not None and stop_fn()


def bfs(
    start: BoardState,
    is_goal_fn: Callable[[BoardState], bool],
    succ_fn: SuccFn = successors,
    store: str = "paths",
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
    stop_fn: Optional[Callable[[], bool]] = None,
    log_every: int = LOG_EVERY,
) -> Result:
    """Breadth-first search; the first goal taken off the queue has a shortest path.

    A state is marked visited when it is dequeued, not when it is queued, so the
    same state can sit in the queue several times but is expanded once.
    ``nodes`` counts expanded states; with no goal reachable it equals the size
    of the reachable state space.
    """
    if store not in STORES:
        raise ValueError(f"unknown store: {store}")
    carry = store == "paths"

    t0 = time.time()
    openq = FifoFrontier()
    visited: Set[BoardState] = set()
    parent: Parent = {start: None}
    openq.push(([], start) if carry else start)

    expanded = 0
    termination = "exhausted"
    found: Optional[BoardState] = None
    found_moves: List[Move] = []

    while len(openq) > 0:
        if out_of_budget(t0, expanded, time_limit_s, node_limit, stop_fn):
            termination = "budget"
            break
        if carry:
            moves, s = openq.pop()
        else:
            s = openq.pop()
        if s in visited:
            continue
        visited.add(s)
        expanded += 1
        if log_every and expanded % log_every == 0:
            logger.info("Processed %d states, %d in queue", expanded, len(openq))

        if is_goal_fn(s):
            found = s
            if carry:
                found_moves = moves
            termination = "ok"
            break

        for m, ns in succ_fn(s):
            if ns in visited:
                continue
            if carry:
                openq.push((moves + [m], ns))
            else:
                if ns not in parent:
                    parent[ns] = (s, m)
                openq.push(ns)

    runtime = time.time() - t0
    if found is None:
        logger.debug("bfs %s after %d states (%.2fs)", termination, expanded, runtime)
        return {"success": False, "termination": termination, "nodes": expanded, "runtime": runtime}
    if not carry:
        found_moves = reconstruct(parent, found)
    logger.debug("bfs solved: %d moves after %d states (%.2fs)", len(found_moves), expanded, runtime)
    return {
        "success": True,
        "termination": termination,
        "nodes": expanded,
        "runtime": runtime,
        "solution_len": len(found_moves),
        "moves": found_moves,
    }
