"""
Game state model for a snooker match.

GameState is frozen: transitions in shots.py and frame.py return new
instances built with ``model_copy``, which lets the undo stack hold plain
references instead of copies.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from snooker.logic.balls import CLEARANCE_ORDER, MAX_REDS
from snooker.logic.enums import TERMINAL_PHASES, Phase

PlayerNumber = Literal[1, 2]


def other_player(player: PlayerNumber) -> PlayerNumber:
    """Return the opponent of player 1 or 2."""
    return 2 if player == 1 else 1


def add_points(values: tuple[int, int], player: PlayerNumber, points: int) -> tuple[int, int]:
    """Return a copy of a per-player pair with ``points`` added for ``player``."""
    if player == 1:
        return (values[0] + points, values[1])
    return (values[0], values[1] + points)


class GameState(BaseModel):
    """
    Complete state of a match: the frame in play plus match progress.

    Per-player pairs are indexed by ``player - 1``.
    """

    model_config = ConfigDict(frozen=True)

    # match progress
    frames_won: tuple[int, int] = (0, 0)
    frame_number: int = Field(default=1, ge=1)
    highest_breaks: tuple[int, int] = (0, 0)

    # frame scoring
    scores: tuple[int, int] = (0, 0)
    active_player: PlayerNumber = 1
    breaking_player: PlayerNumber = 1
    current_break: int = Field(default=0, ge=0)

    # table
    reds_remaining: int = Field(default=MAX_REDS, ge=0, le=MAX_REDS)
    phase: Phase = Phase.AWAITING_RED
    last_red_colour_pending: bool = False  # final red potted, its colour not yet resolved
    clearance_index: int = Field(default=0, ge=0, le=len(CLEARANCE_ORDER) - 1)

    # foul adjudication, set only while phase is FOUL_PENDING
    phase_after_foul: Phase | None = None
    fouling_player: PlayerNumber | None = None

    # frame result, set only once the frame has concluded on the table
    frame_winner: PlayerNumber | None = None
    frame_drawn: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    @property
    def is_frame_over(self) -> bool:
        return self.phase == Phase.FRAME_OVER

    @property
    def is_foul_pending(self) -> bool:
        return self.phase == Phase.FOUL_PENDING

    @property
    def in_play(self) -> bool:
        """True while shots can be recorded (not concluded, no foul pending)."""
        return self.phase not in TERMINAL_PHASES and self.phase != Phase.FOUL_PENDING

    def score_of(self, player: PlayerNumber) -> int:
        return self.scores[player - 1]

    @property
    def score_difference(self) -> int:
        return abs(self.scores[0] - self.scores[1])


def initial_state(
    *,
    breaking_player: PlayerNumber = 1,
    frames_won: tuple[int, int] = (0, 0),
    frame_number: int = 1,
    highest_breaks: tuple[int, int] = (0, 0),
) -> GameState:
    """Return the state at the start of a frame, carrying match progress forward."""
    return GameState(
        frames_won=frames_won,
        frame_number=frame_number,
        highest_breaks=highest_breaks,
        active_player=breaking_player,
        breaking_player=breaking_player,
    )


def record_break(state: GameState) -> GameState:
    """Fold the running break into the active player's highest break."""
    player = state.active_player
    if state.current_break <= state.highest_breaks[player - 1]:
        return state
    best = list(state.highest_breaks)
    best[player - 1] = state.current_break
    return state.model_copy(update={"highest_breaks": (best[0], best[1])})


def close_break(state: GameState) -> GameState:
    """End the active player's break: record it, then zero the running total."""
    return record_break(state).model_copy(update={"current_break": 0})
