"""Terminal condition systems.

``tick_system`` freezes the clock once the game is over; ``terminal_system``
sets the ``is_game_over`` latch. The latch is never cleared.
"""

import logging
from dataclasses import replace
from grid_invaders.state import State
from grid_invaders.utils.terminal import is_game_over

logger = logging.getLogger(__name__)


def tick_system(state: State, tick: int) -> State:
    """Accept the driver's tick unless the game is already over."""
    if is_game_over(state):
        return state
    return replace(state, tick=tick)


def terminal_system(state: State) -> State:
    """Set ``is_game_over`` if lives are exhausted or invaders landed (idempotent)."""
    if state.is_game_over or not is_game_over(state):
        return state
    logger.debug(
        "Game over at tick %d: lives=%d score=%d",
        state.tick,
        state.player_lives,
        state.score,
    )
    return replace(state, is_game_over=True)
