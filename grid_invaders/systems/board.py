from dataclasses import replace
from grid_invaders.state import State
from grid_invaders.utils.board import rasterize


def board_system(state: State) -> State:
    """Recompute the derived ``board`` from entity positions."""
    return replace(state, board=rasterize(state))
