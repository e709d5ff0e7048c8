"""Shot-invader collision system.

Outgoing shots and invaders that share a cell destroy each other. Score grows
by one when *any* such overlap exists in the step, regardless of how many
invaders are hit at once.
"""

from dataclasses import replace
from grid_invaders.state import State
from grid_invaders.utils.collision import any_collision, filter_out_collisions


def collision_system(state: State) -> State:
    """Remove colliding shots and invaders and update the score."""
    if not any_collision(state.outgoing_shots, state.invaders):
        return state
    return replace(
        state,
        invaders=filter_out_collisions(state.invaders, state.outgoing_shots),
        outgoing_shots=filter_out_collisions(state.outgoing_shots, state.invaders),
        score=state.score + 1,
    )
