"""End-to-end tests for the public entry points."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from stringify_interval import (
    DisplayConfig,
    DisplaySettings,
    FixedUnitConfig,
    NumberOutOfRangeError,
    Text,
    ThresholdMap,
    with_date,
    with_lazy_date,
    with_now,
    without_date,
)


@pytest.fixture
def config_with_zeroes():
    """Every default unit shown even when zero."""
    return DisplayConfig(
        years=DisplaySettings(display_zero=True),
        months=DisplaySettings(display_zero=True),
        days=DisplaySettings(display_zero=True),
        hours=DisplaySettings(display_zero=True),
        minutes=DisplaySettings(display_zero=True),
        seconds=DisplaySettings.new(0, 600, display_zero=True),
    )


@pytest.fixture
def clocklike():
    """Configuration and text for "hh:mm:ss" output."""
    clock = DisplaySettings(pad=2, display_zero=True)
    config = FixedUnitConfig(hours=clock, minutes=clock, seconds=clock)
    text = (
        Text.default()
        .with_labels(
            hours=ThresholdMap.single_value(""),
            minutes=ThresholdMap.single_value(""),
            seconds=ThresholdMap.single_value(""),
        )
        .with_separators(joiner=":", spacer="", drop_final_joiner=True)
    )
    return config, text


class TestWithoutDate:
    """Test without_date with fixed units only."""

    @pytest.mark.parametrize(
        "interval,expected",
        [
            (120, "2 minutes"),
            (500, "8 minutes and 20 seconds"),
            (-5_000, "1 hour and 23 minutes"),
            (50_000, "13 hours and 53 minutes"),
            (-500_000, "5 days, 18 hours and 53 minutes"),
            (5_000_000, "57 days, 20 hours and 53 minutes"),
            (50_000_000, "578 days, 16 hours and 53 minutes"),
            (-50_000_000, "578 days, 16 hours and 53 minutes"),
            (1_234_567, "14 days, 6 hours and 56 minutes"),
        ],
    )
    def test_default_config(self, interval, expected):
        """Test the default configuration."""
        assert without_date(interval) == expected

    def test_zero(self):
        """Test a zero interval falls back to the smallest unit."""
        assert without_date(0) == "0 seconds"

    def test_sign_is_ignored(self):
        """Test negative intervals render like positive ones."""
        for interval in (59, 601, 86_399, 7_777_777):
            assert without_date(-interval) == without_date(interval)

    def test_weeks_and_seconds(self):
        """Test the days absorbed by seconds when only weeks and seconds show."""
        config = FixedUnitConfig.none().with_weeks().with_seconds()
        assert without_date(-5_000_000, config) == "8 weeks and 161600 seconds"

    def test_weeks_minutes_and_seconds(self):
        """Test skipped units are absorbed by the next smaller enabled unit."""
        config = FixedUnitConfig.none().with_weeks().with_minutes().with_seconds()
        assert (
            without_date(-5_000_000, config) == "8 weeks, 2693 minutes and 20 seconds"
        )

    def test_clocklike(self, clocklike):
        """Test padded, unlabelled output."""
        config, text = clocklike
        interval = timedelta(days=3, hours=2, seconds=1)
        assert without_date(interval, config, text) == "74:00:01"

    def test_clocklike_minute(self, clocklike):
        """Test zero hours and seconds are padded and kept."""
        config, text = clocklike
        assert without_date(timedelta(minutes=1), config, text) == "00:01:00"

    def test_timedelta_truncates_sub_second(self):
        """Test fractions of a second are dropped."""
        interval = timedelta(minutes=8, seconds=20, microseconds=900_000)
        assert without_date(interval) == "8 minutes and 20 seconds"

    def test_rejects_float(self):
        """Test non-integer intervals are rejected."""
        with pytest.raises(TypeError):
            without_date(1.5)

    def test_count_overflow(self):
        """Test counts above the 32 bit range raise NumberOutOfRangeError."""
        config = FixedUnitConfig.none().with_seconds()
        with pytest.raises(NumberOutOfRangeError):
            without_date(2**32, config)


class TestWithDate:
    """Test with_date."""

    def test_long_interval(self):
        """Test years and months followed by fixed units."""
        assert (
            with_date(50_000_000, datetime(1950, 1, 1))
            == "1 year, 7 months, 1 day, 16 hours and 53 minutes"
        )

    def test_long_interval_in_past(self):
        """Test counting back from the anchor date."""
        assert (
            with_date(-50_000_000, datetime(1950, 1, 1))
            == "1 year, 6 months, 29 days, 16 hours and 53 minutes"
        )

    @pytest.mark.parametrize("interval", [50_000_000, -50_000_000])
    def test_months_only(self, interval):
        """Test months are counted beyond twelve without years."""
        config = DisplayConfig.none().with_months()
        assert with_date(interval, datetime(2020, 1, 1), config) == "19 months"

    @pytest.mark.parametrize(
        "interval,expected",
        [
            (timedelta(days=14) - timedelta(seconds=1), "0 months"),
            (timedelta(days=14), "1 month"),
            (timedelta(days=14, seconds=1), "1 month"),
        ],
    )
    @pytest.mark.parametrize(
        "anchor,sign", [(datetime(2001, 2, 1), 1), (datetime(2001, 3, 1), -1)]
    )
    def test_month_rounding_threshold(self, interval, expected, anchor, sign):
        """Test rounding to the nearest month across February 2001."""
        config = DisplayConfig.none().with_months()
        assert with_date(interval * sign, anchor, config) == expected

    @pytest.mark.parametrize(
        "interval,expected",
        [
            (timedelta(days=183) - timedelta(seconds=1), "0 years"),
            (timedelta(days=183), "1 year"),
            (timedelta(days=183, seconds=1), "1 year"),
        ],
    )
    @pytest.mark.parametrize(
        "anchor,sign", [(datetime(2000, 1, 1), 1), (datetime(2001, 1, 1), -1)]
    )
    def test_year_rounding_threshold(self, interval, expected, anchor, sign):
        """Test rounding to the nearest year across 2000."""
        config = DisplayConfig.none().with_years()
        assert with_date(interval * sign, anchor, config) == expected

    @pytest.mark.parametrize(
        "interval,expected",
        [(-timedelta(days=183), "1 year"), (-timedelta(days=182), "0 years")],
    )
    def test_year_rounding_back_across_1999(self, interval, expected):
        """Test rounding back from 2000-01-01 over the shorter year 1999."""
        config = DisplayConfig.none().with_years()
        assert with_date(interval, datetime(2000, 1, 1), config) == expected

    def test_with_zeroes(self, config_with_zeroes):
        """Test zero counts are shown when configured."""
        assert (
            with_date(timedelta(days=15), datetime(2020, 1, 1), config_with_zeroes)
            == "0 years, 0 months, 15 days, 0 hours and 0 minutes"
        )

    def test_with_zeroes_long(self, config_with_zeroes):
        """Test a zero month count between non-zero units."""
        assert (
            with_date(32_918_400, datetime(2020, 1, 1), config_with_zeroes)
            == "1 year, 0 months, 15 days, 0 hours and 0 minutes"
        )

    def test_zero_months(self):
        """Test a zero interval with months only."""
        config = DisplayConfig.none().with_months()
        assert with_date(0, datetime(2000, 1, 1), config) == "0 months"

    def test_zero_years(self):
        """Test a zero interval with years only."""
        config = DisplayConfig.none().with_years()
        assert with_date(0, datetime(2000, 1, 1), config) == "0 years"

    def test_timezone_aware_anchor(self):
        """Test aware anchors give the same result as naive ones."""
        aware = datetime(1950, 1, 1, tzinfo=timezone.utc)
        assert with_date(50_000_000, aware) == with_date(
            50_000_000, datetime(1950, 1, 1)
        )

    def test_date_overflow(self):
        """Test intervals leaving the datetime range raise NumberOutOfRangeError."""
        with pytest.raises(NumberOutOfRangeError):
            with_date(10**12, datetime(2000, 1, 1))


class TestWithLazyDate:
    """Test with_lazy_date and with_now."""

    def test_provider_not_called_without_calendar_units(self):
        """Test the date is never requested for fixed units."""
        provider = Mock(return_value=datetime(2000, 1, 1))

        output = with_lazy_date(
            500, provider, DisplayConfig.default_without_calendar()
        )

        assert output == "8 minutes and 20 seconds"
        provider.assert_not_called()

    def test_provider_called_once(self):
        """Test the date is requested exactly once for calendar units."""
        provider = Mock(return_value=datetime(1950, 1, 1))

        output = with_lazy_date(50_000_000, provider)

        assert output == "1 year, 7 months, 1 day, 16 hours and 53 minutes"
        provider.assert_called_once_with()

    def test_with_now(self, monkeypatch):
        """Test with_now anchors on the current UTC time."""
        now = Mock(return_value=datetime(1950, 1, 1, tzinfo=timezone.utc))
        monkeypatch.setattr("stringify_interval.api.utc_now", now)

        assert (
            with_now(-50_000_000)
            == "1 year, 6 months, 29 days, 16 hours and 53 minutes"
        )
        now.assert_called_once_with()

    def test_with_now_short_interval(self):
        """Test short intervals against the real clock."""
        assert with_now(60) == "1 minute"
