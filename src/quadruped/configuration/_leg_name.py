from enum import Enum, Flag


class LegFlags(Flag):
    """Selects which legs a leg-position transform applies to."""

    NONE = 0
    FRONT_LEFT = 1
    FRONT_RIGHT = 2
    REAR_LEFT = 4
    REAR_RIGHT = 8

    FRONT = FRONT_LEFT | FRONT_RIGHT
    REAR = REAR_LEFT | REAR_RIGHT
    LEFT = FRONT_LEFT | REAR_LEFT
    RIGHT = FRONT_RIGHT | REAR_RIGHT
    ALL = FRONT_LEFT | FRONT_RIGHT | REAR_LEFT | REAR_RIGHT


class LegName(Enum):
    """Enum for the four legs, values are the configuration keys."""

    FRONT_LEFT = 'front_left'
    FRONT_RIGHT = 'front_right'
    REAR_LEFT = 'rear_left'
    REAR_RIGHT = 'rear_right'

    @property
    def flag(self) -> LegFlags:
        return LegFlags[self.name]

    def is_selected(self, legs: LegFlags) -> bool:
        """True when this leg is part of the ``legs`` selector."""
        return bool(legs & self.flag)


# Order used everywhere the four legs are iterated
LEG_ORDER = (LegName.FRONT_LEFT, LegName.FRONT_RIGHT, LegName.REAR_LEFT, LegName.REAR_RIGHT)
