"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
entire game snapshot at a single tick. All systems are pure functions that
take a previous ``State`` plus inputs (e.g. a :class:`~grid_invaders.actions.Key`)
and return a *new* ``State``; no mutation happens in-place. The external
driver threads the returned value into the next call, folding the engine over
the tick stream.

Design notes:

* Entity collections are **persistent vectors** (``pyrsistent.PVector``) of
    :class:`~grid_invaders.components.Position`. Order matters for
    ``invaders``: the direction flip reads the first and last entries as the
    leftmost and rightmost invader.
* ``board`` is a derived projection recomputed at the end of every step by
    :func:`grid_invaders.systems.board.board_system`. Systems never read it.
* ``is_game_over`` is a latch. Once set the reducer stops advancing ``tick``.

See :mod:`grid_invaders.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from grid_invaders.components import Position
from grid_invaders.config import DEFAULT_CONFIG, GameConfig
from grid_invaders.types import Board


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        config (GameConfig): Fixed parameters for the run.
        tick (int): Last tick accepted from the driver.
        board (Board): Rasterized grid of ``Cell`` markers (derived).
        ship_column (int): Column of the player's ship, clamped to the board.
        player_lives (int): Remaining lives; may drop below zero.
        is_game_over (bool): True once lives run out or invaders land.
        score (int): Number of steps in which a shot hit an invader.
        invader_direction (int): ``+1`` or ``-1``; sideways drift direction.
        invaders (PVector[Position]): Live invaders in row-major order.
        incoming_shots (PVector[Position]): Invader shots moving down.
        outgoing_shots (PVector[Position]): Player shots moving up.
        shot_interval (int): Tick modulus controlling invader fire rate.
        seed (int | None): Base RNG seed for invader fire targeting.
    """

    config: GameConfig = DEFAULT_CONFIG
    tick: int = 0
    board: Board = ()
    ship_column: int = 0
    player_lives: int = DEFAULT_CONFIG.starting_lives
    is_game_over: bool = False
    score: int = 0
    invader_direction: int = 1
    invaders: PVector[Position] = pvector()
    incoming_shots: PVector[Position] = pvector()
    outgoing_shots: PVector[Position] = pvector()
    shot_interval: int = DEFAULT_CONFIG.starting_shot_interval

    # RNG
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return self.config.board_size

    @property
    def player_row(self) -> int:
        return self.config.player_row

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns a persistent map of field name to value, skipping empty
        collections and the derived ``board``. Handy for diagnostics and test
        failure messages without dumping the whole grid.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "board":
                continue
            value = getattr(self, field)
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
