"""Random turn order of the players."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


def shuffle_indices(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return the indices 0..count-1 in a Fisher-Yates shuffled order."""
    rng = rng or random.Random()
    indices = list(range(count))
    for i in range(count - 1, 0, -1):
        j = rng.randrange(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def build_turn_queue(players: Sequence[T], rng: Optional[random.Random] = None) -> deque[T]:
    """Return a queue holding the players in a random order."""
    return deque(players[index] for index in shuffle_indices(len(players), rng))