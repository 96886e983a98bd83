"""Typed domain exceptions for scoring rule violations.

Transition functions in shots.py and frame.py raise subclasses of
GameRuleError when an operation is not allowed in the current state.
ScoringEngine catches them at its boundary and converts them into a
rejected ActionResult, so callers never see these exceptions for an
ordinary illegal move.
"""

from snooker.logic.enums import Ball, RejectionReason


class GameRuleError(Exception):
    """Base exception for scoring rule violations.

    Each subclass carries the RejectionReason reported to clients.
    """

    reason: RejectionReason = RejectionReason.ILLEGAL_BALL


class MatchOverError(GameRuleError):
    """The match has finished; nothing but a reset is accepted."""

    reason = RejectionReason.MATCH_OVER


class FrameOverError(GameRuleError):
    """The frame has concluded and must be ended before play continues."""

    reason = RejectionReason.FRAME_OVER


class FoulPendingError(GameRuleError):
    """A foul was called and its points have not been adjudicated yet."""

    reason = RejectionReason.FOUL_PENDING


class NoFoulPendingError(GameRuleError):
    """Foul points were offered but no foul is awaiting adjudication."""

    reason = RejectionReason.NO_FOUL_PENDING


class IllegalBallError(GameRuleError):
    """The ball is not playable in the current phase.

    Attributes:
        ball: The ball that was attempted.
        legal: The balls that would have been accepted.

    """

    reason = RejectionReason.ILLEGAL_BALL

    def __init__(self, ball: Ball, legal: frozenset[Ball]) -> None:
        self.ball = ball
        self.legal = legal
        allowed = ", ".join(sorted(b.value for b in legal)) or "none"
        super().__init__(f"{ball.value} is not playable (legal: {allowed})")


class InvalidFoulPointsError(GameRuleError):
    """Foul points outside the allowed options."""

    reason = RejectionReason.INVALID_FOUL_POINTS

    def __init__(self, points: int) -> None:
        self.points = points
        super().__init__(f"foul value {points} is not one of 4, 5, 6, 7")


class InvalidMatchSettingsError(Exception):
    """Match configuration cannot be used to start a match.

    Not a GameRuleError: bad settings are a caller bug, not a rejected move.
    """
