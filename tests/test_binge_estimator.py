"""Unit tests for the binge-watch estimator."""

import pytest

from playlist_pipeline.core.analysis import estimate_binge_days
from playlist_pipeline.core.errors import ValidationError


class TestEstimateBingeDays:
    """Tests for estimate_binge_days."""

    def test_exact_division(self):
        assert estimate_binge_days(7200, hours=1, minutes=0) == 2

    def test_remainder_adds_a_day(self):
        assert estimate_binge_days(7201, hours=1, minutes=0) == 3

    def test_minutes_only(self):
        assert estimate_binge_days(3600, hours=0, minutes=45) == 2

    def test_zero_total(self):
        assert estimate_binge_days(0, hours=1) == 0

    @pytest.mark.parametrize("hours,minutes", [(0, 0), (None, None), ("", ""), ("abc", "xyz"), (-1, 30)])
    def test_non_positive_budget_is_rejected(self, hours, minutes):
        with pytest.raises(ValidationError):
            estimate_binge_days(7200, hours, minutes)

    def test_string_inputs_parse_leading_integer(self):
        assert estimate_binge_days(7200, hours="1", minutes="30min") == 2
        assert estimate_binge_days(7200, hours=" 2.5", minutes=None) == 1

    def test_unparseable_field_defaults_to_zero(self):
        assert estimate_binge_days(3600, hours="lots", minutes="30") == 2
