"""Invader formation systems.

The formation moves as a block on a coarse clock: sideways every
``drift_period`` ticks, and one row down on the subset of those ticks that are
also multiples of ``shot_interval + descent_offset``. Invaders fire on ticks
that are multiples of ``shot_interval``.

The direction flip reads only the first and last listed invader, assuming
the row-major, ascending-column order produced by
:func:`grid_invaders.levels.wave.create_invaders`. Nothing re-sorts the
formation, so that order is preserved across steps.
"""

import random
from dataclasses import replace
from pyrsistent import pvector
from grid_invaders.state import State


def invader_fire_system(state: State, rng: random.Random) -> State:
    """Append an incoming shot at a uniformly chosen invader on fire ticks."""
    if not state.invaders or state.tick % state.shot_interval != 0:
        return state
    shooter = rng.choice(list(state.invaders))
    return replace(state, incoming_shots=state.incoming_shots.append(shooter))


def invader_drift_system(state: State) -> State:
    """Shift every invader sideways, and down on descent ticks."""
    config = state.config
    if not state.invaders or state.tick % config.drift_period != 0:
        return state
    d_row = 1 if state.tick % (state.shot_interval + config.descent_offset) == 0 else 0
    d_col = state.invader_direction
    return replace(
        state,
        invaders=pvector(invader.shifted(d_row, d_col) for invader in state.invaders),
    )


def invader_direction_system(state: State) -> State:
    """Bounce the formation off the board edges."""
    if not state.invaders:
        return state
    if state.invaders[0].col <= 0:
        direction = 1
    elif state.invaders[-1].col >= state.size - 1:
        direction = -1
    else:
        return state
    return replace(state, invader_direction=direction)
