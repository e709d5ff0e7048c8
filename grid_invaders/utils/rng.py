"""Deterministic random source.

Invader fire is the only random decision in a step. Unless the caller injects
a generator, one is seeded from ``state.seed`` and the tick so that replaying
the same inputs against the same seed reproduces the same game.
"""

import random
from typing import Optional
from grid_invaders.state import State


def tick_rng(state: State, rng: Optional[random.Random] = None) -> random.Random:
    """Return ``rng`` if given, else a generator seeded by ``(seed, tick)``."""
    if rng is not None:
        return rng
    base_seed = hash((state.seed if state.seed is not None else 0, state.tick))
    return random.Random(base_seed)
