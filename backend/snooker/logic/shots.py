"""
Shot-level transitions: pots, fouls and turn changes.

Every function takes the current frozen state (and history where an event
is recorded) and returns the replacement. Rule violations raise
GameRuleError subclasses before anything is built, so a rejected call has
no effect.
"""

import structlog

from snooker.logic.balls import CLEARANCE_ORDER, FOUL_POINT_OPTIONS, ball_points
from snooker.logic.enums import Ball, Phase
from snooker.logic.exceptions import (
    FoulPendingError,
    FrameOverError,
    IllegalBallError,
    InvalidFoulPointsError,
    MatchOverError,
    NoFoulPendingError,
)
from snooker.logic.frame import conclude_frame
from snooker.logic.history import HistoryLedger
from snooker.logic.legality import is_sequence_context, legal_balls
from snooker.logic.state import GameState, add_points, close_break, other_player

logger = structlog.get_logger()

_LAST_CLEARANCE_INDEX = len(CLEARANCE_ORDER) - 1


def check_in_play(state: GameState) -> None:
    """Raise unless shots can currently be recorded."""
    if state.is_game_over:
        raise MatchOverError("match is over")
    if state.is_frame_over:
        raise FrameOverError(f"frame {state.frame_number} is over")
    if state.is_foul_pending:
        raise FoulPendingError("foul points must be applied first")


def resolve_turn_phase(state: GameState) -> GameState:
    """
    Return the phase the incoming player faces after a turn change.

    With reds on the table the next shot is always a red. Once they are
    gone, an unresolved colour after the final red is forfeited and the
    clearance starts from yellow; an in-progress clearance keeps its place.
    """
    if state.reds_remaining > 0:
        return state.model_copy(update={"phase": Phase.AWAITING_RED})
    if state.last_red_colour_pending:
        return state.model_copy(
            update={
                "phase": Phase.CLEARANCE_SEQUENCE,
                "last_red_colour_pending": False,
                "clearance_index": 0,
            },
        )
    return state.model_copy(update={"phase": Phase.CLEARANCE_SEQUENCE})


def _change_turn(state: GameState) -> GameState:
    switched = close_break(state).model_copy(update={"active_player": other_player(state.active_player)})
    return resolve_turn_phase(switched)


def _after_pot(state: GameState, ball: Ball) -> dict[str, object]:
    """Table updates for a legal pot, excluding the score itself."""
    if is_sequence_context(state):
        return {
            "phase": Phase.CLEARANCE_SEQUENCE,
            "clearance_index": min(state.clearance_index + 1, _LAST_CLEARANCE_INDEX),
        }

    if ball == Ball.RED:
        reds_remaining = state.reds_remaining - 1
        return {
            "reds_remaining": reds_remaining,
            "last_red_colour_pending": reds_remaining == 0,
            "phase": Phase.AWAITING_COLOUR,
        }

    if state.last_red_colour_pending:
        return {
            "last_red_colour_pending": False,
            "clearance_index": 0,
            "phase": Phase.CLEARANCE_SEQUENCE,
        }

    if state.reds_remaining > 0:
        return {"phase": Phase.AWAITING_RED}
    return {"phase": Phase.CLEARANCE_SEQUENCE, "clearance_index": 0}


def pot_ball(state: GameState, history: HistoryLedger, ball: Ball) -> tuple[GameState, HistoryLedger]:
    """
    Credit a legal pot to the active player.

    Potting the black at the end of the clearance concludes the frame.

    Raises:
        MatchOverError, FrameOverError, FoulPendingError: play is suspended
        IllegalBallError: ball is not in legal_balls(state)

    """
    check_in_play(state)
    legal = legal_balls(state)
    if ball not in legal:
        raise IllegalBallError(ball, legal)

    player = state.active_player
    points = ball_points(ball)
    final_colour = is_sequence_context(state) and state.clearance_index == _LAST_CLEARANCE_INDEX

    updates = _after_pot(state, ball)
    updates["scores"] = add_points(state.scores, player, points)
    updates["current_break"] = state.current_break + points
    new_state = state.model_copy(update=updates)

    if final_colour:
        new_state = conclude_frame(new_state)

    return new_state, history.append_pot(player, ball, points)


def call_foul(state: GameState) -> GameState:
    """
    Switch the turn after a foul and hold play until points are applied.

    The phase the incoming player will face is computed now and parked in
    ``phase_after_foul``.
    """
    check_in_play(state)
    resolved = _change_turn(state)
    return resolved.model_copy(
        update={
            "phase": Phase.FOUL_PENDING,
            "phase_after_foul": resolved.phase,
            "fouling_player": state.active_player,
        },
    )


def apply_foul_points(state: GameState, history: HistoryLedger, points: int) -> tuple[GameState, HistoryLedger]:
    """Credit foul points to the non-offending player and resume play."""
    if not state.is_foul_pending or state.fouling_player is None or state.phase_after_foul is None:
        raise NoFoulPendingError("no foul is awaiting points")
    if points not in FOUL_POINT_OPTIONS:
        raise InvalidFoulPointsError(points)

    credited = other_player(state.fouling_player)
    new_state = state.model_copy(
        update={
            "scores": add_points(state.scores, credited, points),
            "current_break": 0,
            "phase": state.phase_after_foul,
            "phase_after_foul": None,
            "fouling_player": None,
        },
    )
    logger.debug("foul points applied", credited_player=credited, points=points)
    return new_state, history.append_foul(credited, points)


def end_turn(state: GameState, history: HistoryLedger) -> tuple[GameState, HistoryLedger]:
    """Record a miss for the active player and hand the table to the opponent."""
    check_in_play(state)
    return _change_turn(state), history.append_miss(state.active_player)
