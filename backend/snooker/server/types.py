from pydantic import BaseModel, ConfigDict, Field

from snooker.logic.enums import Ball, RejectionReason
from snooker.logic.types import ScoreboardView


class StartMatchRequest(BaseModel):
    """Body of POST /match. total_frames falls back to the server default."""

    model_config = ConfigDict(extra="forbid")

    player_names: tuple[str, str]
    total_frames: int | None = Field(default=None, ge=1, strict=True)
    alternate_break_off: bool = False


class PotBallRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ball: Ball


class FoulPointsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    points: int = Field(strict=True)


class ActionResponse(BaseModel):
    applied: bool
    reason: RejectionReason | None = None
    match: ScoreboardView
