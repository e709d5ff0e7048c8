"""Property component aggregates.

Re-exports the immutable value objects systems read and replace between
steps. Entities in this game carry nothing but a location, so
:class:`Position` is the only property.
"""

from .position import Position

__all__ = [
    "Position",
]
