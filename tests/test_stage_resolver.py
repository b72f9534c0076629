"""Tests for stage detection."""

import logging

import pytest

from pay_enhancement.calculators import CalculationErrorKind, StageResolver


class TestFloorMatching:
    """Test highest-stage-at-or-below matching."""

    def test_exact_stage_value_resolves_to_that_stage(self, current):
        resolution = StageResolver.resolve(current, 16, 47700)
        assert resolution.resolved
        assert resolution.stage == 9
        assert resolution.error is None

    def test_pay_between_stages_resolves_to_lower(self, current):
        """Pay above stage 9 but below stage 10 stays at stage 9."""
        resolution = StageResolver.resolve(current, 16, 47700 + 1000)
        assert resolution.stage == 9

    def test_one_below_stage_value_resolves_to_previous(self, current):
        resolution = StageResolver.resolve(current, 16, 47699)
        assert resolution.stage == 8

    def test_minimum_is_inclusive(self, current):
        resolution = StageResolver.resolve(current, 16, current.minimum(16))
        assert resolution.stage == 0

    def test_pay_above_maximum_resolves_to_last_stage(self, current):
        last = current.stage_count(16) - 1
        resolution = StageResolver.resolve(current, 16, 10_000_000)
        assert resolution.stage == last

    def test_repeated_stage_value_picks_highest(self, small_current):
        """Equal consecutive stages resolve to the later one."""
        resolution = StageResolver.resolve(small_current, 1, 1650)
        assert resolution.stage == 2

    @pytest.mark.parametrize(
        "pay,expected",
        [
            (3000, 0),
            (3299, 0),
            (3300, 1),
            (3600, 2),
            (3899, 2),
            (3900, 3),
            (9999, 3),
        ],
    )
    def test_small_scale_stages(self, small_current, pay, expected):
        assert StageResolver.resolve(small_current, 2, pay).stage == expected


class TestResolutionFailures:
    """Test inputs that cannot be resolved."""

    def test_below_minimum_cites_minimum(self, current):
        resolution = StageResolver.resolve(current, 16, 1000)
        assert not resolution.resolved
        assert resolution.error.kind == CalculationErrorKind.PAY_BELOW_MINIMUM
        assert resolution.error.minimum_pay == 27270
        assert resolution.error.grade == 16
        assert "27270" in resolution.error.message

    def test_unknown_grade(self, current):
        resolution = StageResolver.resolve(current, 23, 50000)
        assert resolution.error.kind == CalculationErrorKind.INVALID_GRADE
        assert resolution.error.grade == 23

    def test_zero_pay_is_invalid_input(self, current):
        resolution = StageResolver.resolve(current, 16, 0)
        assert resolution.error.kind == CalculationErrorKind.NON_POSITIVE_PAY

    def test_negative_pay_is_invalid_input(self, current):
        resolution = StageResolver.resolve(current, 16, -10)
        assert resolution.error.kind == CalculationErrorKind.NON_POSITIVE_PAY

    def test_non_positive_grade_is_invalid_input(self, current):
        for grade in (0, -3):
            resolution = StageResolver.resolve(current, grade, 47700)
            assert resolution.error.kind == CalculationErrorKind.INVALID_GRADE

    def test_empty_stage_sequence_is_unresolvable(self, small_current, caplog):
        """A grade without stages is a reference-data fault, logged as an error."""
        with caplog.at_level(logging.ERROR):
            resolution = StageResolver.resolve(small_current, 5, 1000)

        assert resolution.error.kind == CalculationErrorKind.STAGE_UNRESOLVABLE
        assert resolution.stage is None
        assert "reference data is inconsistent" in caplog.text
