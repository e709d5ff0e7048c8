"""Collision helpers.

Two entities collide when they occupy the same cell. Filtering is a pure
position-set operation: the result does not depend on the order of
``others``, only the surviving ``items`` keep their original order.
"""

from typing import Iterable
from pyrsistent import pvector
from pyrsistent.typing import PVector
from grid_invaders.components import Position


def collides(a: Position, b: Position) -> bool:
    """Return True if both positions address the same cell."""
    return a.row == b.row and a.col == b.col


def filter_out_collisions(
    items: Iterable[Position], others: Iterable[Position]
) -> PVector[Position]:
    """Drop every item that shares a cell with any of ``others``."""
    occupied = set(others)
    return pvector(item for item in items if item not in occupied)


def any_collision(items: Iterable[Position], others: Iterable[Position]) -> bool:
    """Presence test: True if at least one item overlaps any of ``others``."""
    occupied = set(others)
    return any(item in occupied for item in items)
