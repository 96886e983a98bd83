from typing import Any

import pytest
from starlette.testclient import TestClient

from snooker.logic.engine import ScoringEngine
from snooker.logic.enums import Ball, Phase
from snooker.logic.settings import MatchSettings
from snooker.logic.state import GameState, PlayerNumber
from snooker.server.app import create_app
from snooker.server.settings import ServerSettings

# ============================================================================
# Test State Builder Helpers
# ============================================================================


def create_state(
    *,
    scores: tuple[int, int] = (0, 0),
    frames_won: tuple[int, int] = (0, 0),
    frame_number: int = 1,
    active_player: PlayerNumber = 1,
    breaking_player: PlayerNumber = 1,
    current_break: int = 0,
    reds_remaining: int = 15,
    phase: Phase = Phase.AWAITING_RED,
    last_red_colour_pending: bool = False,
    clearance_index: int = 0,
    phase_after_foul: Phase | None = None,
    fouling_player: PlayerNumber | None = None,
    highest_breaks: tuple[int, int] = (0, 0),
) -> GameState:
    """Create a GameState with sensible defaults for testing."""
    return GameState(
        scores=scores,
        frames_won=frames_won,
        frame_number=frame_number,
        active_player=active_player,
        breaking_player=breaking_player,
        current_break=current_break,
        reds_remaining=reds_remaining,
        phase=phase,
        last_red_colour_pending=last_red_colour_pending,
        clearance_index=clearance_index,
        phase_after_foul=phase_after_foul,
        fouling_player=fouling_player,
        highest_breaks=highest_breaks,
    )


def create_settings(total_frames: int = 3, **kwargs: Any) -> MatchSettings:
    return MatchSettings(player_names=("Ronnie", "Judd"), total_frames=total_frames, **kwargs)


def engine_with_state(state: GameState, settings: MatchSettings | None = None) -> ScoringEngine:
    """Create an engine positioned at ``state`` with empty history and undo stack."""
    engine = ScoringEngine(settings or create_settings())
    engine._state = state
    return engine


def pot_all_reds_with_blacks(engine: ScoringEngine) -> None:
    """Pot every red followed by the black, without changing the active player."""
    for _ in range(engine.state.reds_remaining):
        assert engine.pot_ball(Ball.RED).applied
        assert engine.pot_ball(Ball.BLACK).applied


def clear_colours(engine: ScoringEngine) -> None:
    """Pot whatever single colour is legal until the frame is over."""
    while not engine.state.is_frame_over:
        (ball,) = engine.legal_balls()
        assert engine.pot_ball(ball).applied


@pytest.fixture
def settings():
    return create_settings()


@pytest.fixture
def engine(settings):
    return ScoringEngine(settings)


@pytest.fixture
def server_settings():
    return ServerSettings(cors_origins=["http://localhost:3000"], default_total_frames=3)


@pytest.fixture
def app(server_settings):
    return create_app(settings=server_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
