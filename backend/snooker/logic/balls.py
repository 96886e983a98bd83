"""Ball values and the fixed colour clearance order."""

from types import MappingProxyType

from snooker.logic.enums import Ball

MAX_REDS = 15

BALL_POINTS: MappingProxyType[Ball, int] = MappingProxyType(
    {
        Ball.RED: 1,
        Ball.YELLOW: 2,
        Ball.GREEN: 3,
        Ball.BROWN: 4,
        Ball.BLUE: 5,
        Ball.PINK: 6,
        Ball.BLACK: 7,
    },
)

# colours must be cleared in ascending value once the reds are gone
CLEARANCE_ORDER: tuple[Ball, ...] = (
    Ball.YELLOW,
    Ball.GREEN,
    Ball.BROWN,
    Ball.BLUE,
    Ball.PINK,
    Ball.BLACK,
)

COLOURS: frozenset[Ball] = frozenset(CLEARANCE_ORDER)

FOUL_POINT_OPTIONS: frozenset[int] = frozenset({4, 5, 6, 7})

# a red followed by the black, for every red still on the table
MAX_POINTS_PER_RED = BALL_POINTS[Ball.RED] + BALL_POINTS[Ball.BLACK]


def ball_points(ball: Ball) -> int:
    """Return the point value of a ball."""
    return BALL_POINTS[ball]


def clearance_points(from_index: int = 0) -> int:
    """Sum of the clearance colours still to be potted from ``from_index`` onward."""
    return sum(BALL_POINTS[ball] for ball in CLEARANCE_ORDER[from_index:])
