"""Tests for the difference and bucketing engine."""

import re

import pytest

from timephrase import format_relative
from timephrase.engine import SECONDS_PER_UNIT, THRESHOLDS, bucket, classify, difference
from timephrase.locales import en_us
from timephrase.types import Classification, Duration, Instant, Tense, Unit

REFERENCE = Instant(1546300800)


def offset(seconds: int = 0, nanos: int = 0) -> Instant:
    return REFERENCE + Duration.from_nanos(seconds * 1_000_000_000 + nanos)


class TestThresholdTable:
    """Test the threshold table itself."""

    def test_seconds_per_unit(self):
        """Average Gregorian month and year lengths."""
        assert SECONDS_PER_UNIT[Unit.MINUTE] == 60
        assert SECONDS_PER_UNIT[Unit.HOUR] == 3600
        assert SECONDS_PER_UNIT[Unit.DAY] == 86400
        assert SECONDS_PER_UNIT[Unit.WEEK] == 604800
        assert SECONDS_PER_UNIT[Unit.MONTH] == 2629800
        assert SECONDS_PER_UNIT[Unit.YEAR] == 31557600

    def test_thresholds_increase(self):
        """Bounds are strictly increasing."""
        bounds = [upper for upper, _ in THRESHOLDS]
        assert bounds == sorted(set(bounds))


class TestBucket:
    """Boundary law: buckets change exactly at each threshold."""

    @pytest.mark.parametrize(
        "seconds,unit,amount",
        [
            (0, Unit.SECOND, 0),
            (1, Unit.SECOND, 1),
            (59, Unit.SECOND, 59),
            (60, Unit.MINUTE, 1),
            (119, Unit.MINUTE, 1),
            (120, Unit.MINUTE, 2),
            (3599, Unit.MINUTE, 59),
            (3600, Unit.HOUR, 1),
            (86399, Unit.HOUR, 23),
            (86400, Unit.DAY, 1),
            (604799, Unit.DAY, 6),
            (604800, Unit.WEEK, 1),
            (2629799, Unit.WEEK, 4),
            (2629800, Unit.MONTH, 1),
            (31557599, Unit.MONTH, 11),
            (31557600, Unit.YEAR, 1),
            (10 * 31557600 + 5, Unit.YEAR, 10),
        ],
    )
    def test_boundaries(self, seconds, unit, amount):
        """Values on a boundary belong to the larger unit."""
        assert bucket(seconds) == (unit, amount)

    def test_rejects_negative(self):
        """Magnitudes are never negative."""
        with pytest.raises(ValueError):
            bucket(-1)

    def test_amount_at_least_one_above_floor(self):
        """Every positive magnitude yields a positive amount."""
        for seconds in [1, 60, 3600, 86400, 604800, 2629800, 31557600]:
            for delta in (0, 1, 7):
                _, amount = bucket(seconds + delta)
                assert amount >= 1


class TestDifference:
    """Test signed difference."""

    def test_positive_when_target_is_later(self):
        """Difference is the time from reference to target."""
        assert difference(offset(5), REFERENCE) == Duration(5, 0)
        assert difference(offset(-5), REFERENCE) == Duration(-5, 0)

    def test_accepts_posix_seconds(self):
        """Numbers are read as POSIX seconds."""
        assert difference(1546300860, REFERENCE) == Duration(60, 0)


class TestClassify:
    """Test classification of instant pairs."""

    def test_past(self):
        """Target before reference is past."""
        assert classify(offset(-3600), REFERENCE) == Classification(Tense.PAST, Unit.HOUR, 1)

    def test_future(self):
        """Target after reference is future."""
        assert classify(offset(86400), REFERENCE) == Classification(Tense.FUTURE, Unit.DAY, 1)

    @pytest.mark.parametrize(
        "nanos,unit,amount",
        [
            (1, Unit.NANOSECOND, 1),
            (999, Unit.NANOSECOND, 999),
            (1_500, Unit.MICROSECOND, 1),
            (999_999, Unit.MICROSECOND, 999),
            (2_500_000, Unit.MILLISECOND, 2),
            (999_999_999, Unit.MILLISECOND, 999),
        ],
    )
    def test_sub_second_units(self, nanos, unit, amount):
        """Sub-second differences pick the largest fitting sub-second unit."""
        assert classify(offset(nanos=nanos), REFERENCE) == Classification(Tense.FUTURE, unit, amount)
        assert classify(offset(nanos=-nanos), REFERENCE) == Classification(Tense.PAST, unit, amount)

    def test_same_instant(self):
        """Identical instants classify as zero nanoseconds."""
        result = classify(REFERENCE, REFERENCE)
        assert result.unit is Unit.NANOSECOND
        assert result.amount == 0

    def test_negative_millisecond_is_not_a_second(self):
        """-0.001s stays under the sub-second floor."""
        assert classify(offset(nanos=-1_000_000), REFERENCE) == Classification(
            Tense.PAST, Unit.MILLISECOND, 1
        )

    def test_negative_fraction_near_minute(self):
        """-59.5s is 59 whole seconds, not a minute."""
        result = classify(offset(-60, 500_000_000), REFERENCE)
        assert result == Classification(Tense.PAST, Unit.SECOND, 59)

    def test_positive_fraction_near_minute(self):
        """+59.999s is 59 whole seconds."""
        result = classify(offset(59, 999_999_999), REFERENCE)
        assert result == Classification(Tense.FUTURE, Unit.SECOND, 59)

    def test_negative_just_past_minute(self):
        """-60.000000001s is one minute."""
        result = classify(offset(-60, -1), REFERENCE)
        assert result == Classification(Tense.PAST, Unit.MINUTE, 1)

    @pytest.mark.parametrize(
        "seconds,nanos",
        [(1, 0), (59, 0), (60, 0), (61, 500_000_000), (3600, 1), (604800, 0), (31557600, 0), (0, 1)],
    )
    def test_symmetry(self, seconds, nanos):
        """Swapping target and reference flips tense and keeps the amount."""
        target = offset(seconds, nanos)
        forward = classify(target, REFERENCE)
        backward = classify(REFERENCE, target)
        assert forward.tense is Tense.FUTURE
        assert backward.tense is Tense.PAST
        assert (forward.unit, forward.amount) == (backward.unit, backward.amount)


class TestScenarios:
    """Reference scenarios at 2019-01-01T00:00:00.000Z."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "just now"),
            (-1, "1 second ago"),
            (-59, "59 seconds ago"),
            (60, "in 1 minute"),
            (-3600, "1 hour ago"),
            (86400, "in 1 day"),
            (-31557600, "1 year ago"),
        ],
    )
    def test_scenario(self, seconds, expected):
        assert format_relative(offset(seconds), REFERENCE) == expected

    @pytest.mark.parametrize("nanos", [0, 1, 999_999, 500_000_000, 999_999_999])
    def test_sub_second_is_just_now_both_ways(self, nanos):
        """Sub-second differences never carry a tense."""
        assert format_relative(offset(nanos=nanos), REFERENCE) == "just now"
        assert format_relative(offset(nanos=-nanos), REFERENCE) == "just now"

    @pytest.mark.parametrize(
        "seconds",
        [1, 2, 59, 61, 150, 3601, 7300, 90000, 400000, 700000, 2000000, 5300000, 40000000, 400000000],
    )
    def test_amount_appears_in_output(self, seconds):
        """The digits in the phrase are exactly the classified amount."""
        for signed in (seconds, -seconds):
            result = classify(offset(signed), REFERENCE)
            text = en_us(result.tense, result.unit, result.amount)
            assert re.findall(r"\d+", text) == [str(result.amount)]
