"""Wave builder and initial state.

A wave is laid out row by row: even rows take the even slots, odd rows the
odd slots, giving the staggered formation. Slots span half the board width
starting at ``config.invader_column_offset``. Invaders are listed row-major
with ascending columns, which the direction flip relies on.
"""

from dataclasses import replace
from typing import Optional
from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_invaders.components import Position
from grid_invaders.config import DEFAULT_CONFIG, GameConfig
from grid_invaders.state import State
from grid_invaders.utils.board import rasterize


def create_row_of_invaders(config: GameConfig, row: int) -> PVector[Position]:
    slots = range(config.board_size // 2)
    return pvector(
        Position(row, slot + config.invader_column_offset)
        for slot in slots
        if slot % 2 == row % 2
    )


def create_invaders(config: GameConfig = DEFAULT_CONFIG) -> PVector[Position]:
    """Return a full fresh wave for ``config``."""
    invaders: PVector[Position] = pvector()
    for row in range(config.invader_rows):
        invaders = invaders.extend(create_row_of_invaders(config, row))
    return invaders


def initial_state(
    config: GameConfig = DEFAULT_CONFIG, seed: Optional[int] = None
) -> State:
    """Build the starting state: full wave, full lives, zero score.

    Arguments:
        config: Game parameters.
        seed: Base seed for invader fire targeting (``None`` behaves as 0).

    Returns:
        State: Tick-0 state with its board already rasterized.
    """
    state = State(
        config=config,
        tick=0,
        ship_column=config.board_size // 2,
        player_lives=config.starting_lives,
        invader_direction=1,
        invaders=create_invaders(config),
        shot_interval=config.starting_shot_interval,
        seed=seed,
    )
    return replace(state, board=rasterize(state))
