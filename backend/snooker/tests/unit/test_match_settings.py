import pytest
from pydantic import ValidationError

from snooker.logic.exceptions import InvalidMatchSettingsError
from snooker.logic.settings import MatchSettings, validate_settings


class TestMatchSettings:
    def test_defaults(self):
        settings = MatchSettings(player_names=("Ronnie", "Judd"))
        assert settings.total_frames == 7
        assert settings.alternate_break_off is False
        assert settings.player_name(1) == "Ronnie"
        assert settings.player_name(2) == "Judd"

    def test_names_are_stripped(self):
        settings = MatchSettings(player_names=("  Mark ", "Neil"))
        assert settings.player_names == ("Mark", "Neil")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            MatchSettings(player_names=("Mark", "  "))

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="at most 50"):
            MatchSettings(player_names=("M" * 51, "Neil"))

    def test_requires_two_names(self):
        with pytest.raises(ValidationError):
            MatchSettings(player_names=("Mark",))  # type: ignore[arg-type]

    @pytest.mark.parametrize("total_frames", [0, -3])
    def test_total_frames_at_least_one(self, total_frames):
        with pytest.raises(ValidationError, match="total_frames"):
            MatchSettings(player_names=("Mark", "Neil"), total_frames=total_frames)

    def test_frozen(self):
        settings = MatchSettings(player_names=("Mark", "Neil"))
        with pytest.raises(ValidationError):
            settings.total_frames = 9  # type: ignore[misc]


class TestValidateSettings:
    def test_distinct_names_pass(self):
        validate_settings(MatchSettings(player_names=("Mark", "Neil")))

    def test_duplicate_names_rejected_case_insensitively(self):
        with pytest.raises(InvalidMatchSettingsError, match="must differ"):
            validate_settings(MatchSettings(player_names=("Mark", "mark")))
