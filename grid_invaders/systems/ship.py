"""Player ship systems.

Translates the held :class:`~grid_invaders.actions.Key` into ship movement and
outgoing shots. Movement is applied unclamped by :func:`ship_system`;
:func:`clamp_ship_system` pulls the column back onto the board afterwards.
"""

from dataclasses import replace
from grid_invaders.actions import Key
from grid_invaders.components import Position
from grid_invaders.state import State


def ship_system(state: State, key: Key) -> State:
    """Shift the ship one column for ``LEFT`` / ``RIGHT``; other keys are no-ops."""
    if key == Key.LEFT:
        return replace(state, ship_column=state.ship_column - 1)
    if key == Key.RIGHT:
        return replace(state, ship_column=state.ship_column + 1)
    return state


def clamp_ship_system(state: State) -> State:
    """Clamp ``ship_column`` into ``[0, N-1]``."""
    column = min(max(state.ship_column, 0), state.size - 1)
    if column == state.ship_column:
        return state
    return replace(state, ship_column=column)


def fire_system(state: State, key: Key) -> State:
    """Append an outgoing shot directly in front of the ship on ``FIRE``."""
    if key != Key.FIRE:
        return state
    shot = Position(state.player_row - 1, state.ship_column)
    return replace(state, outgoing_shots=state.outgoing_shots.append(shot))
