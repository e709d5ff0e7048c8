from dataclasses import replace
from grid_invaders.components import Position
from grid_invaders.state import State
from grid_invaders.utils.collision import collides


def damage_system(state: State) -> State:
    """Take one life if an incoming shot sits on the ship's cell.

    Only a single life is lost per step, however many shots overlap. Must run
    before :func:`grid_invaders.systems.shot.shot_system`, which discards
    shots that have reached the player row.
    """
    ship = Position(state.player_row, state.ship_column)
    if not any(collides(shot, ship) for shot in state.incoming_shots):
        return state
    return replace(state, player_lives=state.player_lives - 1)
