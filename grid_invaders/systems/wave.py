"""Wave regeneration system.

When the last invader of a wave is destroyed the next step spawns a full new
wave straight away and shortens the invader fire interval, making each wave
shoot more often than the previous one.
"""

import logging
from dataclasses import replace
from grid_invaders.levels.wave import create_invaders
from grid_invaders.state import State

logger = logging.getLogger(__name__)


def next_shot_interval(state: State) -> int:
    """Shot interval after a wave clear, floored at ``min_shot_interval``."""
    config = state.config
    return max(state.shot_interval - config.shot_interval_step, config.min_shot_interval)


def wave_system(state: State) -> State:
    """Regenerate the wave if ``invaders`` is empty."""
    if len(state.invaders) > 0:
        return state
    shot_interval = next_shot_interval(state)
    logger.debug(
        "Wave cleared at tick %d; shot interval %d -> %d",
        state.tick,
        state.shot_interval,
        shot_interval,
    )
    return replace(
        state,
        invaders=create_invaders(state.config),
        shot_interval=shot_interval,
    )
