"""State reducer and step orchestration.

This module wires together all systems in the correct order to implement a
single *tick* transition given an :class:`~grid_invaders.actions.Input`. The
exported :func:`advance` is the only public entry point for gameplay
progression and is pure: it returns a *new* :class:`grid_invaders.state.State`.
:func:`run` folds ``advance`` over an input stream, which is all an external
clock-driven driver needs to do.

Ordering rationale (high level):

1. ``tick_system`` accepts the driver's tick unless the game is already over.
2. Ship input is applied and the column clamped.
3. ``wave_system`` respawns an empty formation before anything reads it.
4. Invader fire, damage and shot/invader collisions all read the positions
    from the start of the step, so they run before the formation drifts and
    before shots propagate.
5. Drift and the direction flip act on the invaders that survived.
6. Shots propagate; the shot fired this tick is added afterwards so it
    shows up directly in front of the ship.
7. ``terminal_system`` latches game over and ``board_system`` rasterizes.
"""

import random
from itertools import count
from typing import Iterable, Iterator, Optional, Union

from grid_invaders.actions import Input, Key
from grid_invaders.levels.wave import initial_state
from grid_invaders.state import State
from grid_invaders.systems.board import board_system
from grid_invaders.systems.collision import collision_system
from grid_invaders.systems.damage import damage_system
from grid_invaders.systems.invader import (
    invader_direction_system,
    invader_drift_system,
    invader_fire_system,
)
from grid_invaders.systems.ship import clamp_ship_system, fire_system, ship_system
from grid_invaders.systems.shot import shot_system
from grid_invaders.systems.terminal import terminal_system, tick_system
from grid_invaders.systems.wave import wave_system
from grid_invaders.utils.rng import tick_rng


def advance(
    state: State, action: Input, rng: Optional[random.Random] = None
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable game state.
        action (Input): Tick counter and held key from the driver. Unknown keys
            are treated as ``Key.NONE``.
        rng (random.Random | None): Random source for invader fire targeting.
            Defaults to a generator seeded from ``state.seed`` and the tick.

    Returns:
        State: Next state snapshot with a freshly rasterized board. Once game
            over the tick stays frozen but the step still runs.
    """
    key = Key.parse(action.key)

    state = tick_system(state, action.tick)
    state = ship_system(state, key)
    state = clamp_ship_system(state)
    state = wave_system(state)

    state = invader_fire_system(state, tick_rng(state, rng))
    state = damage_system(state)
    state = collision_system(state)

    state = invader_drift_system(state)
    state = invader_direction_system(state)

    state = shot_system(state)
    state = fire_system(state, key)

    state = terminal_system(state)
    return board_system(state)


def ticks(keys: Iterable[Union[Key, str]], start: int = 0) -> Iterator[Input]:
    """Pair each key with an increasing tick, starting at ``start``."""
    for tick, key in zip(count(start), keys):
        yield Input(tick=tick, key=Key.parse(key))


def run(
    inputs: Iterable[Input],
    state: Optional[State] = None,
    rng: Optional[random.Random] = None,
) -> Iterator[State]:
    """Fold :func:`advance` over ``inputs``, yielding every intermediate state.

    Arguments:
        inputs: Driver events in tick order.
        state: Starting state; defaults to :func:`initial_state`.
        rng: Shared random source for every step (see :func:`advance`).

    Yields:
        State: The state returned by each call to ``advance``.
    """
    if state is None:
        state = initial_state()
    for action in inputs:
        state = advance(state, action, rng)
        yield state

