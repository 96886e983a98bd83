"""Match configuration supplied once when a match starts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from snooker.logic.exceptions import InvalidMatchSettingsError

NUM_PLAYERS = 2
MAX_NAME_LENGTH = 50
DEFAULT_TOTAL_FRAMES = 7


class MatchSettings(BaseModel):
    """
    Immutable configuration for one match.

    Player 1 is ``player_names[0]`` and player 2 is ``player_names[1]``.
    """

    model_config = ConfigDict(frozen=True)

    player_names: tuple[str, str]
    total_frames: int = Field(default=DEFAULT_TOTAL_FRAMES, ge=1)
    # player 1 breaks every frame unless this is set
    alternate_break_off: bool = False

    @field_validator("player_names")
    @classmethod
    def _validate_names(cls, names: tuple[str, str]) -> tuple[str, str]:
        stripped = tuple(name.strip() for name in names)
        for name in stripped:
            if not name:
                raise ValueError("player names must not be blank")
            if len(name) > MAX_NAME_LENGTH:
                raise ValueError(f"player names must be at most {MAX_NAME_LENGTH} characters")
        return stripped  # type: ignore[return-value]

    def player_name(self, player: int) -> str:
        """Return the display name for player 1 or 2."""
        return self.player_names[player - 1]


def validate_settings(settings: MatchSettings) -> None:
    """Check cross-field constraints the field validators cannot express.

    Raises InvalidMatchSettingsError when the match cannot be started.
    """
    errors: list[str] = []

    first, second = settings.player_names
    if first.casefold() == second.casefold():
        errors.append(f"player names must differ (both are {first!r})")

    if errors:
        raise InvalidMatchSettingsError("; ".join(errors))
