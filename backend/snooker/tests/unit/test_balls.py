import pytest

from snooker.logic.balls import (
    BALL_POINTS,
    CLEARANCE_ORDER,
    COLOURS,
    FOUL_POINT_OPTIONS,
    MAX_POINTS_PER_RED,
    ball_points,
    clearance_points,
)
from snooker.logic.enums import Ball


class TestBallPoints:
    def test_values(self):
        assert [ball_points(ball) for ball in Ball] == [1, 2, 3, 4, 5, 6, 7]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BALL_POINTS[Ball.RED] = 2  # type: ignore[index]

    def test_red_and_black_make_eight(self):
        assert MAX_POINTS_PER_RED == 8


class TestClearanceOrder:
    def test_ascending_by_value_ending_on_black(self):
        values = [BALL_POINTS[ball] for ball in CLEARANCE_ORDER]
        assert values == sorted(values)
        assert CLEARANCE_ORDER[-1] == Ball.BLACK

    def test_contains_every_colour_once(self):
        assert len(CLEARANCE_ORDER) == 6
        assert frozenset(CLEARANCE_ORDER) == COLOURS
        assert Ball.RED not in COLOURS

    def test_clearance_points(self):
        assert clearance_points() == 27
        assert clearance_points(4) == 13  # pink + black
        assert clearance_points(len(CLEARANCE_ORDER)) == 0


def test_foul_point_options():
    assert FOUL_POINT_OPTIONS == {4, 5, 6, 7}
