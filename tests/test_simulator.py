"""Tests for the goal simulator."""

import pytest

from finscore.domain.errors import ValidationError
from finscore.domain.simulator import MAX_MONTHS, format_duration, simulate_goal


class TestSimulateGoal:
    """Tests for simulate_goal."""

    def test_no_interest(self):
        projection = simulate_goal(1_200_000, 100_000, 0)
        assert projection.months == 12
        assert projection.total_contributed == 1_200_000
        assert projection.total_interest == 0
        assert projection.reached

    def test_interest_shortens_time(self):
        with_interest = simulate_goal(1_200_000, 100_000, 8)
        assert with_interest.months == 12
        assert with_interest.total_interest > 0

        long_run = simulate_goal(10_000_000, 100_000, 12)
        assert long_run.months < 100
        assert long_run.total_interest > 0

    @pytest.mark.parametrize("goal,monthly", [(0, 100), (1000, 0), (-5, 100), (1000, -1)])
    def test_non_positive_inputs_rejected(self, goal, monthly):
        with pytest.raises(ValidationError):
            simulate_goal(goal, monthly)

    @pytest.mark.parametrize("value", ["abc", None, True, float("nan"), float("inf")])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError):
            simulate_goal(value, 100)

    def test_numeric_strings_accepted(self):
        assert simulate_goal("1000", "100", "0").months == 10

    def test_capped_at_max_months(self):
        projection = simulate_goal(1_000_000_000, 1, 0)
        assert projection.months == MAX_MONTHS
        assert not projection.reached

    def test_negative_rate_never_reports_negative_interest(self):
        projection = simulate_goal(1000, 100, -12)
        assert projection.total_interest == 0


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        "months,text",
        [(5, "5 meses"), (12, "1 año"), (13, "1 año y 1 mes"), (26, "2 años y 2 meses")],
    )
    def test_format(self, months, text):
        assert format_duration(months) == text
