"""Shot history for the frame in play.

Each legal pot, missed turn and adjudicated foul becomes an immutable
event in the ledger. The ledger itself is frozen: ``append`` returns a
new ledger, so a snapshot taken before a shot keeps the shorter history.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from snooker.logic.enums import Ball, ShotKind
from snooker.logic.state import PlayerNumber


class BaseShotEvent(BaseModel):
    """Fields shared by every history entry."""

    model_config = ConfigDict(frozen=True)

    kind: ShotKind
    id: int = Field(ge=1)
    player: PlayerNumber

    @property
    def points(self) -> int:
        return 0


class PotEvent(BaseShotEvent):
    """A ball legally potted by ``player``."""

    kind: Literal[ShotKind.POT] = ShotKind.POT
    ball: Ball
    points_scored: int = Field(ge=1)

    @property
    def points(self) -> int:
        return self.points_scored


class MissEvent(BaseShotEvent):
    """``player`` ended their visit without scoring."""

    kind: Literal[ShotKind.MISS] = ShotKind.MISS


class FoulEvent(BaseShotEvent):
    """Foul points awarded to ``player`` after the opponent fouled."""

    kind: Literal[ShotKind.FOUL] = ShotKind.FOUL
    foul_points: Literal[4, 5, 6, 7]

    @property
    def points(self) -> int:
        return self.foul_points


ShotEvent = Annotated[PotEvent | MissEvent | FoulEvent, Field(discriminator="kind")]


class HistoryLedger(BaseModel):
    """Append-only, per-frame sequence of shot events with increasing ids."""

    model_config = ConfigDict(frozen=True)

    events: tuple[ShotEvent, ...] = ()

    def __len__(self) -> int:
        return len(self.events)

    @property
    def next_id(self) -> int:
        return self.events[-1].id + 1 if self.events else 1

    def append_pot(self, player: PlayerNumber, ball: Ball, points: int) -> HistoryLedger:
        event = PotEvent(id=self.next_id, player=player, ball=ball, points_scored=points)
        return self._with(event)

    def append_miss(self, player: PlayerNumber) -> HistoryLedger:
        return self._with(MissEvent(id=self.next_id, player=player))

    def append_foul(self, player: PlayerNumber, points: int) -> HistoryLedger:
        return self._with(FoulEvent(id=self.next_id, player=player, foul_points=points))

    def _with(self, event: PotEvent | MissEvent | FoulEvent) -> HistoryLedger:
        return self.model_copy(update={"events": (*self.events, event)})

    def for_player(self, player: PlayerNumber) -> tuple[PotEvent | MissEvent | FoulEvent, ...]:
        """Events owned by one player, in shot order."""
        return tuple(event for event in self.events if event.player == player)

    def points_for(self, player: PlayerNumber) -> int:
        """Points credited to ``player`` by pots and received fouls."""
        return sum(event.points for event in self.for_player(player))

    @property
    def total_points(self) -> int:
        return sum(event.points for event in self.events)
