"""
Read-only views of a match for scoreboard clients.
"""

from pydantic import BaseModel, Field

from snooker.logic.enums import Ball, Phase
from snooker.logic.frame import is_match_drawn, match_winner, points_remaining, snookers_required
from snooker.logic.history import HistoryLedger, ShotEvent
from snooker.logic.legality import legal_balls
from snooker.logic.settings import MatchSettings
from snooker.logic.state import GameState, PlayerNumber


class PlayerView(BaseModel):
    """One player's panel on the scoreboard."""

    player: PlayerNumber
    name: str
    score: int
    frames_won: int
    highest_break: int
    is_active: bool
    history: list[ShotEvent] = Field(default_factory=list)


class ScoreboardView(BaseModel):
    """Everything a client needs to render the match."""

    players: list[PlayerView]
    frame_number: int
    total_frames: int
    phase: Phase
    current_break: int
    reds_remaining: int
    clearance_index: int
    last_red_colour_pending: bool
    legal_balls: list[Ball]
    score_difference: int
    points_remaining: int
    snookers_required: bool
    frame_winner: PlayerNumber | None = None
    frame_drawn: bool = False
    match_winner: PlayerNumber | None = None
    match_drawn: bool = False
    can_undo: bool = False


def get_scoreboard_view(
    state: GameState,
    history: HistoryLedger,
    settings: MatchSettings,
    *,
    can_undo: bool = False,
) -> ScoreboardView:
    """Build the scoreboard from state, per-player history and settings."""
    players: list[PlayerView] = []
    for player in (1, 2):
        players.append(
            PlayerView(
                player=player,
                name=settings.player_name(player),
                score=state.scores[player - 1],
                frames_won=state.frames_won[player - 1],
                highest_break=state.highest_breaks[player - 1],
                is_active=state.active_player == player and not state.is_game_over,
                history=list(history.for_player(player)),
            ),
        )

    # order legal balls by value so clients can lay buttons out left to right
    ordered_legal = [ball for ball in Ball if ball in legal_balls(state)]

    return ScoreboardView(
        players=players,
        frame_number=state.frame_number,
        total_frames=settings.total_frames,
        phase=state.phase,
        current_break=state.current_break,
        reds_remaining=state.reds_remaining,
        clearance_index=state.clearance_index,
        last_red_colour_pending=state.last_red_colour_pending,
        legal_balls=ordered_legal,
        score_difference=state.score_difference,
        points_remaining=points_remaining(state),
        snookers_required=snookers_required(state),
        frame_winner=state.frame_winner,
        frame_drawn=state.frame_drawn,
        match_winner=match_winner(state),
        match_drawn=is_match_drawn(state),
        can_undo=can_undo,
    )
