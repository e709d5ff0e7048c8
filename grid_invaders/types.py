"""Common type aliases and enumerations.

``Board`` is the rasterized grid handed to external painters; ``Cell`` values
are the integer markers a canvas painter switches on.
"""

from enum import IntEnum
from typing import Tuple


class Cell(IntEnum):
    """Marker stored in each board cell."""

    EMPTY = 0
    PLAYER = 1
    INVADER = 2
    SHOT = 3


Row = Tuple[Cell, ...]
Board = Tuple[Row, ...]
