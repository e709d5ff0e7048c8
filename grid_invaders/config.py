"""Game constants.

Every number the simulation depends on lives in :class:`GameConfig`. The
defaults reproduce the classic 10x10 layout; a config instance travels inside
each ``State`` so systems never reach for module globals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Fixed parameters for one run.

    Attributes:
        board_size: Side length ``N`` of the square board.
        starting_lives: Player lives at the start.
        starting_shot_interval: Initial invader fire modulus (in ticks).
        shot_interval_step: Amount the fire modulus shrinks per cleared wave.
        min_shot_interval: Floor for the fire modulus.
        invader_rows: Number of rows in a fresh wave.
        invader_column_offset: Column of the first invader slot in a wave.
        drift_period: Invaders drift sideways on ticks divisible by this.
        descent_offset: Invaders descend on ticks divisible by
            ``shot_interval + descent_offset``.
    """

    board_size: int = 10
    starting_lives: int = 3
    starting_shot_interval: int = 20
    shot_interval_step: int = 5
    min_shot_interval: int = 1
    invader_rows: int = 6
    invader_column_offset: int = 4
    drift_period: int = 10
    descent_offset: int = 10

    def __post_init__(self) -> None:
        if self.board_size < 2:
            raise ValueError(f"board_size must be at least 2, got {self.board_size}")
        if self.min_shot_interval < 1:
            raise ValueError(
                f"min_shot_interval must be positive, got {self.min_shot_interval}"
            )
        if self.starting_shot_interval < self.min_shot_interval:
            raise ValueError(
                "starting_shot_interval must not be below min_shot_interval: "
                f"{self.starting_shot_interval} < {self.min_shot_interval}"
            )
        if self.shot_interval_step < 0:
            raise ValueError(
                f"shot_interval_step must be non-negative, got {self.shot_interval_step}"
            )
        if self.drift_period < 1 or self.descent_offset < 0:
            raise ValueError("drift_period must be positive and descent_offset non-negative")
        if not 0 < self.invader_rows < self.player_row:
            raise ValueError(
                f"invader_rows must be in [1, {self.player_row - 1}], got {self.invader_rows}"
            )
        last_column = self.invader_column_offset + self.board_size // 2 - 1
        if self.invader_column_offset < 0 or last_column >= self.board_size:
            raise ValueError(
                f"Wave with column offset {self.invader_column_offset} does not fit "
                f"a board of size {self.board_size}"
            )

    @property
    def player_row(self) -> int:
        """Row the ship sits on (the last one)."""
        return self.board_size - 1


DEFAULT_CONFIG = GameConfig()
