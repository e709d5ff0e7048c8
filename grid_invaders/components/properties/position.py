"""Position component.

Immutable integer board coordinates shared by the ship's shots, invaders and
invader shots. Row 0 is the top of the board; the ship sits on the last row.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Board coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def shifted(self, d_row: int = 0, d_col: int = 0) -> "Position":
        """Return a copy offset by ``(d_row, d_col)``."""
        return Position(self.row + d_row, self.col + d_col)
