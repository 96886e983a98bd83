"""
Frame and match progression.

Frame results are derived from the scores on the table; the match ends
once the configured number of frames has been played.
"""

from snooker.logic.balls import BALL_POINTS, MAX_POINTS_PER_RED, clearance_points
from snooker.logic.enums import TERMINAL_PHASES, Ball, Phase
from snooker.logic.exceptions import FoulPendingError, MatchOverError
from snooker.logic.settings import MatchSettings
from snooker.logic.state import (
    GameState,
    PlayerNumber,
    add_points,
    initial_state,
    other_player,
    record_break,
)


def leader(scores: tuple[int, int]) -> PlayerNumber | None:
    """Return the player with the strictly higher value, or None on a tie."""
    if scores[0] > scores[1]:
        return 1
    if scores[1] > scores[0]:
        return 2
    return None


def conclude_frame(state: GameState) -> GameState:
    """Mark the frame as finished on the table and record its result."""
    winner = leader(state.scores)
    return record_break(state).model_copy(
        update={
            "phase": Phase.FRAME_OVER,
            "frame_winner": winner,
            "frame_drawn": winner is None,
        },
    )


def _next_breaker(state: GameState, settings: MatchSettings) -> PlayerNumber:
    if settings.alternate_break_off:
        return other_player(state.breaking_player)
    return 1


def end_frame(state: GameState, settings: MatchSettings) -> GameState:
    """
    Award the frame on score and set up the next one.

    A tied frame awards nothing. When the frame just played was the last
    one configured, the match ends instead of a new frame starting.

    Raises:
        MatchOverError: the match has already ended
        FoulPendingError: foul points have not been applied yet

    """
    if state.is_game_over:
        raise MatchOverError("match is over")
    if state.is_foul_pending:
        raise FoulPendingError("foul points must be applied first")

    state = record_break(state)
    frames_won = state.frames_won
    winner = leader(state.scores)
    if winner is not None:
        frames_won = add_points(frames_won, winner, 1)

    last_frame = state.frame_number >= settings.total_frames
    next_state = initial_state(
        breaking_player=_next_breaker(state, settings),
        frames_won=frames_won,
        frame_number=state.frame_number if last_frame else state.frame_number + 1,
        highest_breaks=state.highest_breaks,
    )
    if last_frame:
        return next_state.model_copy(update={"phase": Phase.GAME_OVER})
    return next_state


def restart_frame(state: GameState) -> GameState:
    """Abandon the current frame without a result and rack up again."""
    if state.is_game_over:
        raise MatchOverError("match is over")
    return initial_state(
        breaking_player=state.breaking_player,
        frames_won=state.frames_won,
        frame_number=state.frame_number,
        highest_breaks=state.highest_breaks,
    )


def match_winner(state: GameState) -> PlayerNumber | None:
    """Return the match winner once it is over; None while playing or on a draw."""
    if not state.is_game_over:
        return None
    return leader(state.frames_won)


def is_match_drawn(state: GameState) -> bool:
    return state.is_game_over and state.frames_won[0] == state.frames_won[1]


def points_remaining(state: GameState) -> int:
    """
    Maximum points still available on the table.

    Every red on the table is counted with a black; a colour owed after a
    red (including the final red) counts as a black too.
    """
    phase = state.phase_after_foul if state.is_foul_pending else state.phase
    if phase is None or phase in TERMINAL_PHASES:
        return 0

    if phase == Phase.CLEARANCE_SEQUENCE:
        return clearance_points(state.clearance_index)

    total = state.reds_remaining * MAX_POINTS_PER_RED + clearance_points()
    if phase == Phase.AWAITING_COLOUR:
        total += BALL_POINTS[Ball.BLACK]
    return total


def snookers_required(state: GameState) -> bool:
    """True when the trailing player cannot catch up on the balls left."""
    if leader(state.scores) is None:
        return False
    return state.score_difference > points_remaining(state)
