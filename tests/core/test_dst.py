"""Tests for core/dst.py - daylight-saving classification."""

from datetime import datetime, timezone

import pytest

import core.dst
from core.dst import dst_status, is_dst
from core.exceptions import DateTimeParseError, InvalidTimezoneError


class TestNewYork2024Transitions:
    """Spring forward March 10, fall back November 3."""

    def test_before_spring_forward(self, database):
        assert is_dst("2024-03-09T12:00:00", "America/New_York", database) is False

    def test_after_spring_forward(self, database):
        assert is_dst("2024-03-11T12:00:00", "America/New_York", database) is True

    def test_before_fall_back(self, database):
        assert is_dst("2024-11-02T12:00:00", "America/New_York", database) is True

    def test_after_fall_back(self, database):
        assert is_dst("2024-11-04T12:00:00", "America/New_York", database) is False


class TestSeasons:
    """Northern and southern hemisphere zones."""

    @pytest.mark.parametrize("zone,summer,winter", [
        ("America/New_York", "2024-07-15T12:00:00", "2024-01-15T12:00:00"),
        ("Europe/London", "2024-07-15T12:00:00", "2024-01-15T12:00:00"),
        ("Australia/Sydney", "2024-01-15T12:00:00", "2024-07-15T12:00:00"),
    ])
    def test_summer_vs_winter(self, zone, summer, winter, database):
        assert is_dst(summer, zone, database) is True
        assert is_dst(winter, zone, database) is False

    def test_dublin_summer_is_daylight(self, database):
        """Dublin's negative-save tzdata encoding still reads as summer DST."""
        assert is_dst("2024-07-15T12:00:00", "Europe/Dublin", database) is True
        assert is_dst("2024-01-15T12:00:00", "Europe/Dublin", database) is False


class TestNoDaylightRule:
    """Zones without daylight time always report False."""

    @pytest.mark.parametrize("zone", ["UTC", "Etc/GMT+5", "America/Phoenix", "Asia/Tokyo"])
    @pytest.mark.parametrize("text", ["2024-01-15T12:00:00", "2024-07-15T12:00:00"])
    def test_always_false(self, zone, text, database):
        assert is_dst(text, zone, database) is False


class TestInputFormats:
    """The full parser chain applies."""

    def test_zulu_input(self, database):
        assert is_dst("2024-07-15T12:00:00.000Z", "America/New_York", database) is True

    def test_space_separated_input(self, database):
        assert is_dst("2024-07-15 12:00:00", "America/New_York", database) is True

    def test_date_only_input(self, database):
        assert is_dst("2024-07-15", "America/New_York", database) is True

    def test_fall_back_overlap_reads_first_occurrence(self, database):
        """01:30 on 2024-11-03 is taken as the EDT occurrence."""
        assert is_dst("2024-11-03T01:30:00", "America/New_York", database) is True


class TestErrors:

    def test_invalid_timezone(self, database):
        with pytest.raises(InvalidTimezoneError):
            is_dst("2024-07-15T12:00:00", "Invalid/Timezone", database)

    def test_invalid_datetime(self, database):
        with pytest.raises(DateTimeParseError):
            is_dst("invalid-date", "America/New_York", database)

    def test_out_of_range_datetime(self, database):
        with pytest.raises(DateTimeParseError):
            is_dst("9999-12-31T23:00:00", "America/New_York", database)


class TestDstStatus:
    """dst_status() parses once and reports the instant it classified."""

    def test_reports_instant_and_flag(self, database):
        status = dst_status("2024-07-15T12:00:00", "America/New_York", database)

        assert status.instant == datetime(2024, 7, 15, 16, 0, 0, tzinfo=timezone.utc)
        assert status.timezone == "America/New_York"
        assert status.is_dst is True

    def test_parses_text_once(self, database, monkeypatch):
        calls = []
        real_parse = core.dst.parse_datetime

        def counting_parse(*args):
            calls.append(args[0])
            return real_parse(*args)

        monkeypatch.setattr(core.dst, "parse_datetime", counting_parse)

        dst_status("2024-01-15", "Europe/London", database)

        assert calls == ["2024-01-15"]
