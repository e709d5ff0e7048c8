"""Shot propagation system.

Incoming shots travel one row down per step and leave the board after the
player row; outgoing shots travel one row up and leave after row 0.
"""

from dataclasses import replace
from pyrsistent import pvector
from grid_invaders.state import State


def shot_system(state: State) -> State:
    """Advance all shots by one row, discarding those that leave the board."""
    incoming = pvector(
        shot.shifted(d_row=1)
        for shot in state.incoming_shots
        if shot.row < state.player_row
    )
    outgoing = pvector(
        shot.shifted(d_row=-1) for shot in state.outgoing_shots if shot.row > 0
    )
    return replace(state, incoming_shots=incoming, outgoing_shots=outgoing)
