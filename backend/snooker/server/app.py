from __future__ import annotations

import json
from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import BaseModel, ValidationError
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from shared.logging import setup_logging
from snooker.logic.engine import ScoringEngine
from snooker.logic.exceptions import InvalidMatchSettingsError
from snooker.logic.settings import MatchSettings
from snooker.server.settings import ServerSettings
from snooker.server.types import ActionResponse, FoulPointsRequest, PotBallRequest, StartMatchRequest

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request

    from snooker.logic.engine import ActionResult

RequestModel = TypeVar("RequestModel", bound=BaseModel)

_MAX_REQUEST_BODY_SIZE = 4096


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def _parse_body(request: Request, model: type[RequestModel]) -> RequestModel | None:
    """Decode a small JSON body into ``model``; None when it is oversized or invalid."""
    raw_body = await request.body()
    if len(raw_body) > _MAX_REQUEST_BODY_SIZE:
        return None
    try:
        return model(**json.loads(raw_body))
    except (ValueError, TypeError, json.JSONDecodeError, UnicodeDecodeError, ValidationError):  # fmt: skip
        return None


def _no_match() -> JSONResponse:
    return JSONResponse({"error": "No match in progress"}, status_code=404)


def _invalid_body() -> JSONResponse:
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


def _action_response(engine: ScoringEngine, result: ActionResult) -> JSONResponse:
    """Serialize an engine result; rejected operations answer 409."""
    body = ActionResponse(applied=result.applied, reason=result.reason, match=engine.view())
    return JSONResponse(body.model_dump(mode="json"), status_code=200 if result.applied else 409)


async def start_match(request: Request) -> JSONResponse:
    settings: ServerSettings = request.app.state.settings

    match_request = await _parse_body(request, StartMatchRequest)
    if match_request is None:
        return _invalid_body()

    total_frames = match_request.total_frames or settings.default_total_frames
    try:
        match_settings = MatchSettings(
            player_names=match_request.player_names,
            total_frames=total_frames,
            alternate_break_off=match_request.alternate_break_off,
        )
        engine = ScoringEngine(match_settings)
    except (ValidationError, InvalidMatchSettingsError) as e:
        return JSONResponse({"error": "Invalid match settings", "detail": str(e)}, status_code=400)

    request.app.state.engine = engine
    return JSONResponse(engine.view().model_dump(mode="json"), status_code=201)


async def get_match(request: Request) -> JSONResponse:
    engine: ScoringEngine | None = request.app.state.engine
    if engine is None:
        return _no_match()
    return JSONResponse(engine.view().model_dump(mode="json"))


async def pot_ball(request: Request) -> JSONResponse:
    engine: ScoringEngine | None = request.app.state.engine
    if engine is None:
        return _no_match()
    pot = await _parse_body(request, PotBallRequest)
    if pot is None:
        return _invalid_body()
    return _action_response(engine, engine.pot_ball(pot.ball))


async def apply_foul_points(request: Request) -> JSONResponse:
    engine: ScoringEngine | None = request.app.state.engine
    if engine is None:
        return _no_match()
    foul_points = await _parse_body(request, FoulPointsRequest)
    if foul_points is None:
        return _invalid_body()
    return _action_response(engine, engine.apply_foul_points(foul_points.points))


def _bodiless_action(
    operation: Callable[[ScoringEngine], ActionResult],
) -> Callable[[Request], Awaitable[JSONResponse]]:
    """Build an endpoint for an engine operation that takes no arguments."""

    async def endpoint(request: Request) -> JSONResponse:
        engine: ScoringEngine | None = request.app.state.engine
        if engine is None:
            return _no_match()
        return _action_response(engine, operation(engine))

    return endpoint


def create_app(
    settings: ServerSettings | None = None,
    engine: ScoringEngine | None = None,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = ServerSettings()

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/match", start_match, methods=["POST"]),
        Route("/match", get_match, methods=["GET"]),
        Route("/match/pot", pot_ball, methods=["POST"]),
        Route("/match/foul", _bodiless_action(ScoringEngine.foul), methods=["POST"]),
        Route("/match/foul-points", apply_foul_points, methods=["POST"]),
        Route("/match/end-turn", _bodiless_action(ScoringEngine.end_turn), methods=["POST"]),
        Route("/match/end-frame", _bodiless_action(ScoringEngine.end_frame), methods=["POST"]),
        Route("/match/restart-frame", _bodiless_action(ScoringEngine.restart_frame), methods=["POST"]),
        Route("/match/undo", _bodiless_action(ScoringEngine.undo), methods=["POST"]),
        Route("/match/reset", _bodiless_action(ScoringEngine.reset_match), methods=["POST"]),
    ]

    app = Starlette(routes=routes)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    app.state.settings = settings
    app.state.engine = engine

    logger.info("scoreboard server ready")
    return app


def get_app() -> Starlette:  # pragma: no cover
    """ASGI application factory for production use (uvicorn --factory snooker.server.app:get_app)."""
    settings = ServerSettings()
    setup_logging(settings.log_dir)
    return create_app(settings=settings)
