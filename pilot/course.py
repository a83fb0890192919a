import numpy as np
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from pilot.errors import ProtocolError

def find_optimal_boost_checkpoint(checkpoints) -> int:
    """
    Id of the checkpoint at the end of the longest edge of the ring, i.e. the
    target a pod is heading to while it flies the longest straight.
    """
    cps = np.asarray(checkpoints, dtype=np.float64)
    # Edge i runs from checkpoint i to checkpoint i+1 (wrapping)
    edges = np.linalg.norm(np.roll(cps, -1, axis=0) - cps, axis=1)
    return int((np.argmax(edges) + 1) % len(cps))

@dataclass(frozen=True)
class Course:
    laps: int
    checkpoints: Tuple[Tuple[int, int], ...]
    optimal_boost_checkpoint_id: int = field(default=-1)

    @classmethod
    def build(cls, laps: int, checkpoints: Sequence[Sequence[int]]) -> 'Course':
        if len(checkpoints) < 2:
            raise ProtocolError(f"A course needs at least 2 checkpoints, got {len(checkpoints)}")
        cps = tuple((int(x), int(y)) for x, y in checkpoints)
        return cls(laps=int(laps), checkpoints=cps,
                   optimal_boost_checkpoint_id=find_optimal_boost_checkpoint(cps))

    @property
    def checkpoint_count(self) -> int:
        return len(self.checkpoints)

    def checkpoint(self, checkpoint_id: int) -> Tuple[int, int]:
        return self.checkpoints[checkpoint_id % len(self.checkpoints)]

    def next_id(self, checkpoint_id: int) -> int:
        return (checkpoint_id + 1) % len(self.checkpoints)
