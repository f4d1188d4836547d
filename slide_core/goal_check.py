from __future__ import annotations
from dataclasses import dataclass

from .state import BoardState, Pos


@dataclass(frozen=True, slots=True)
class Goal:
    """Target block and the anchor position it has to reach.

    Instances are callable, so a goal can be passed directly as ``is_goal_fn``.
    """

    block: str
    pos: Pos

    def __call__(self, state: BoardState) -> bool:
        return state.wins(self.block, self.pos)
