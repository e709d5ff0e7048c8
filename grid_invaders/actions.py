"""Player input enumerations.

Defines the string :class:`Key` enum consumed by the reducer, the :class:`Input`
value produced by the external clock once per tick, and a stable integer
:class:`GymAction` mapping for Gymnasium compatibility.
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Any, Dict


class Key(StrEnum):
    """Currently held key.

    Members:
        LEFT, RIGHT: Move the ship one column.
        FIRE: Launch an outgoing shot in front of the ship.
        NONE: No key held (also used for anything unrecognised).
    """

    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    NONE = auto()

    @classmethod
    def parse(cls, value: Any) -> "Key":
        """Coerce a driver key into a ``Key``.

        Accepts enum members, their string values and the DOM key names emitted
        by browser drivers. Unknown values map to ``Key.NONE`` so that stray
        keys are no-ops.
        """
        if isinstance(value, Key):
            return value
        if isinstance(value, str):
            if value in DOM_KEYS:
                return DOM_KEYS[value]
            try:
                return cls(value.lower())
            except ValueError:
                pass
        return cls.NONE


DOM_KEYS: Dict[str, Key] = {
    "ArrowLeft": Key.LEFT,
    "ArrowRight": Key.RIGHT,
    "Space": Key.FIRE,
    " ": Key.FIRE,
}


@dataclass(frozen=True)
class Input:
    """One clock event: the tick counter plus the key held at that moment.

    Attributes:
        tick: Monotonically increasing counter supplied by the driver.
        key: Held key; raw strings are coerced with :meth:`Key.parse`.
    """

    tick: int
    key: Key = Key.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.key, Key):
            object.__setattr__(self, "key", Key.parse(self.key))


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    NONE = 0  # start at 0 for explicitness
    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()

    @property
    def key(self) -> Key:
        return Key[self.name]
