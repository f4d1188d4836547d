from __future__ import annotations
from typing import Dict, Hashable, Optional


class Transposition:
    """Store the best known path length g(s) per state."""
    def __init__(self) -> None:
        self.best_g: Dict[Hashable, int] = {}

    def seen_better(self, s: Hashable, g: int) -> bool:
        """True if s was already reached in g or fewer moves; otherwise records g for s."""
        old = self.best_g.get(s)
        if old is None or g < old:
            self.best_g[s] = g
            return False
        return True

    def best(self, s: Hashable) -> Optional[int]:
        return self.best_g.get(s)

    def __len__(self) -> int:
        return len(self.best_g)
