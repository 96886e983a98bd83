"""
String enum definitions for snooker scoring concepts.
"""

from enum import Enum


class Ball(str, Enum):
    """Object balls on a snooker table."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BROWN = "brown"
    BLUE = "blue"
    PINK = "pink"
    BLACK = "black"


class Phase(str, Enum):
    """Phase of the current frame.

    FOUL_PENDING suspends play until foul points are adjudicated.
    GAME_OVER is terminal for the whole match.
    """

    AWAITING_RED = "awaiting_red"
    AWAITING_COLOUR = "awaiting_colour"
    CLEARANCE_SEQUENCE = "clearance_sequence"
    FOUL_PENDING = "foul_pending"
    FRAME_OVER = "frame_over"
    GAME_OVER = "game_over"


TERMINAL_PHASES = frozenset({Phase.FRAME_OVER, Phase.GAME_OVER})


class ShotKind(str, Enum):
    """Kinds of entries recorded in the shot history."""

    POT = "pot"
    MISS = "miss"
    FOUL = "foul"


class MatchAction(str, Enum):
    """Operations a scoreboard client may invoke on a match."""

    POT_BALL = "pot_ball"
    FOUL = "foul"
    APPLY_FOUL_POINTS = "apply_foul_points"
    END_TURN = "end_turn"
    END_FRAME = "end_frame"
    RESTART_FRAME = "restart_frame"
    UNDO = "undo"
    RESET_MATCH = "reset_match"


class RejectionReason(str, Enum):
    """Codes reported to clients when an operation is not applied."""

    MATCH_OVER = "match_over"
    FRAME_OVER = "frame_over"
    FOUL_PENDING = "foul_pending"
    NO_FOUL_PENDING = "no_foul_pending"
    ILLEGAL_BALL = "illegal_ball"
    INVALID_FOUL_POINTS = "invalid_foul_points"
    NOTHING_TO_UNDO = "nothing_to_undo"
