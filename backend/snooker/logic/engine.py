"""
Scoring engine: owner of the live match state.

ScoringEngine is the boundary the scoreboard talks to. It runs the pure
transitions from shots.py and frame.py, snapshots the previous state onto
the undo stack before each shot-level change, and converts rule
violations into rejected results instead of exceptions.

All calls are synchronous and made by a single writer, so operations
never interleave.
"""

from collections.abc import Callable
from typing import NamedTuple

import structlog

from snooker.logic import frame, shots
from snooker.logic.enums import Ball, MatchAction, RejectionReason
from snooker.logic.exceptions import GameRuleError
from snooker.logic.history import HistoryLedger
from snooker.logic.legality import legal_balls
from snooker.logic.settings import MatchSettings, validate_settings
from snooker.logic.state import GameState, initial_state
from snooker.logic.types import ScoreboardView, get_scoreboard_view
from snooker.logic.undo import UndoStack

logger = structlog.get_logger()

ShotTransition = Callable[[GameState, HistoryLedger], tuple[GameState, HistoryLedger]]


class ActionResult(NamedTuple):
    """
    Outcome of an engine operation.

    ``applied`` is False when the operation was rejected; ``reason`` then
    says why and the match state is untouched.
    """

    applied: bool
    reason: RejectionReason | None = None


APPLIED = ActionResult(applied=True)


class ScoringEngine:
    """Live scoring for one match between two players."""

    def __init__(self, settings: MatchSettings) -> None:
        validate_settings(settings)
        self._settings = settings
        self._state = initial_state()
        self._history = HistoryLedger()
        self._undo = UndoStack()
        logger.info(
            "match started",
            players=list(settings.player_names),
            total_frames=settings.total_frames,
        )

    # ------------------------------------------------------------------
    # read-only accessors
    # ------------------------------------------------------------------

    @property
    def settings(self) -> MatchSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> HistoryLedger:
        return self._history

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    def legal_balls(self) -> frozenset[Ball]:
        return legal_balls(self._state)

    def view(self) -> ScoreboardView:
        return get_scoreboard_view(self._state, self._history, self._settings, can_undo=self.can_undo)

    # ------------------------------------------------------------------
    # shot-level operations (undoable)
    # ------------------------------------------------------------------

    def pot_ball(self, ball: Ball) -> ActionResult:
        return self._apply_shot(
            MatchAction.POT_BALL,
            lambda state, history: shots.pot_ball(state, history, ball),
            ball=ball,
        )

    def foul(self) -> ActionResult:
        return self._apply_shot(
            MatchAction.FOUL,
            lambda state, history: (shots.call_foul(state), history),
        )

    def apply_foul_points(self, points: int) -> ActionResult:
        return self._apply_shot(
            MatchAction.APPLY_FOUL_POINTS,
            lambda state, history: shots.apply_foul_points(state, history, points),
            points=points,
        )

    def end_turn(self) -> ActionResult:
        return self._apply_shot(MatchAction.END_TURN, shots.end_turn)

    def undo(self) -> ActionResult:
        """Restore the state and history from before the last shot-level operation."""
        snapshot = self._undo.pop()
        if snapshot is None:
            return ActionResult(applied=False, reason=RejectionReason.NOTHING_TO_UNDO)
        self._state = snapshot.state
        self._history = snapshot.history
        logger.debug("undo applied", phase=self._state.phase, remaining_depth=len(self._undo))
        return APPLIED

    # ------------------------------------------------------------------
    # frame and match operations (clear the undo stack)
    # ------------------------------------------------------------------

    def end_frame(self) -> ActionResult:
        finished = self._state
        try:
            self._state = frame.end_frame(finished, self._settings)
        except GameRuleError as e:
            return self._reject(MatchAction.END_FRAME, e)
        self._start_fresh_frame()

        logger.info(
            "frame ended",
            frame_number=finished.frame_number,
            scores=list(finished.scores),
            frames_won=list(self._state.frames_won),
        )
        if self._state.is_game_over:
            logger.info(
                "match over",
                winner=frame.match_winner(self._state),
                frames_won=list(self._state.frames_won),
            )
        return APPLIED

    def restart_frame(self) -> ActionResult:
        try:
            self._state = frame.restart_frame(self._state)
        except GameRuleError as e:
            return self._reject(MatchAction.RESTART_FRAME, e)
        self._start_fresh_frame()
        logger.info("frame restarted", frame_number=self._state.frame_number)
        return APPLIED

    def reset_match(self) -> ActionResult:
        """Return to the start of frame 1 with no frames won. Always applied."""
        self._state = initial_state()
        self._start_fresh_frame()
        logger.info("match reset")
        return APPLIED

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _apply_shot(self, action: MatchAction, transition: ShotTransition, **context: object) -> ActionResult:
        try:
            new_state, new_history = transition(self._state, self._history)
        except GameRuleError as e:
            return self._reject(action, e, **context)

        self._undo.push(self._state, self._history)
        self._state = new_state
        self._history = new_history
        logger.debug(
            "action applied",
            action=action,
            active_player=new_state.active_player,
            phase=new_state.phase,
            scores=list(new_state.scores),
            **context,
        )
        if new_state.is_frame_over:
            logger.info("frame concluded on the table", winner=new_state.frame_winner, scores=list(new_state.scores))
        return APPLIED

    def _start_fresh_frame(self) -> None:
        self._history = HistoryLedger()
        self._undo.clear()

    def _reject(self, action: MatchAction, error: GameRuleError, **context: object) -> ActionResult:
        logger.warning("action rejected", action=action, reason=error.reason, detail=str(error), **context)
        return ActionResult(applied=False, reason=error.reason)
