"""Component package.

Importing::

    from grid_invaders.components import Position
"""

from .properties import Position

__all__ = [
    "Position",
]
