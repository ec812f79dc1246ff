"""Tests for ISO/JSON output, HTML elements, Discord styles and differences."""

from __future__ import annotations

import pytest

from globaltime import Datetime, Duration, EpochNanoseconds, Instant, TypeCoercionError, ZonedInstant

FRIDAY_MS = 1_744_934_400_000
FRIDAY_NS = FRIDAY_MS * 1_000_000
# 2025-04-18T16:20:30Z
AFTERNOON_MS = FRIDAY_MS + (16 * 3600 + 20 * 60 + 30) * 1000


class TestIsoAndJson:
    def test_to_iso_string_is_utc(self) -> None:
        assert Datetime(FRIDAY_MS, "Asia/Tokyo").to_iso_string() == "2025-04-18T00:00:00.000Z"

    def test_to_iso_string_truncates_sub_millisecond(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 1_999_999), "UTC")
        assert dt.to_iso_string() == "2025-04-18T00:00:00.001Z"

    def test_to_json_is_zoned(self) -> None:
        assert Datetime(FRIDAY_MS, "Europe/Amsterdam").to_json() == "2025-04-18T02:00:00+02:00[Europe/Amsterdam]"

    def test_to_json_round_trip(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 5), "America/New_York", calendar="gregory")
        back = Datetime(Datetime.parse_strict(dt.to_json()))
        assert back.epoch_nanoseconds == dt.epoch_nanoseconds
        assert back.timezone_id == dt.timezone_id
        assert back.calendar_id == "gregory"

    def test_epoch_round_trip(self) -> None:
        for ms in (0, -1, FRIDAY_MS, 8_640_000_000_000_000, -8_640_000_000_000_000):
            assert Datetime(ms, "UTC").get_time() == ms


class TestHtml:
    def test_to_html_string(self) -> None:
        html = Datetime(FRIDAY_MS, "Asia/Tokyo").to_html_string()
        assert html == (
            '<time datetime="2025-04-18T00:00:00.000Z">'
            "Fri Apr 18 2025 09:00:00 UTC+0900 (Asia/Tokyo)</time>"
        )

    def test_to_html_uses_host_zone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TZ", "Europe/Amsterdam")
        html = Datetime(FRIDAY_MS, "Asia/Tokyo").to_html()
        assert "(Europe/Amsterdam)</time>" in html

    def test_to_html_discord_string(self) -> None:
        html = Datetime(AFTERNOON_MS, "UTC").to_html_discord_string("t")
        assert html == (
            '<time datetime="2025-04-18T16:20:30.000Z" data-discord-style="t" '
            'title="Fri Apr 18 2025 16:20:30 UTC+0000 (UTC)">16:20</time>'
        )

    def test_text_is_escaped(self) -> None:
        from globaltime import FormatConfig

        config = FormatConfig(day_names=["<S>", "M", "T", "W", "T", "F&", "S"])
        html = Datetime(FRIDAY_MS, "UTC", config=config).to_html_string()
        assert html.endswith(">F&amp; Apr 18 2025 00:00:00 UTC+0000 (UTC)</time>")


class TestDiscordText:
    @pytest.mark.parametrize(
        "style,expected",
        [
            ("t", "16:20"),
            ("T", "16:20:30"),
            ("d", "2025-04-18"),
            ("D", "2025 April 18"),
            ("f", "2025 April 18 16:20"),
            ("F", "Friday, 2025 April 18 16:20"),
        ],
    )
    def test_styles(self, style: str, expected: str) -> None:
        assert Datetime(AFTERNOON_MS, "UTC").discord_text(style) == expected

    def test_default_style(self) -> None:
        assert Datetime(AFTERNOON_MS, "UTC").discord_text() == "2025 April 18 16:20"

    def test_relative_style(self) -> None:
        assert Datetime(0, "UTC").discord_text("R").endswith("days ago")

    def test_invalid_style(self) -> None:
        with pytest.raises(ValueError):
            Datetime(0, "UTC").discord_text("x")


class TestRelativeTime:
    @pytest.mark.parametrize(
        "offset_ms,expected",
        [
            (0, "now"),
            (999, "now"),
            (1_000, "1 second ago"),
            (90_000, "1 minute ago"),
            (2 * 3_600_000, "2 hours ago"),
            (3 * 86_400_000, "3 days ago"),
            (-45_000, "45 seconds from now"),
            (-86_400_000, "1 day from now"),
        ],
    )
    def test_phrases(self, offset_ms: int, expected: str) -> None:
        then = Datetime(FRIDAY_MS, "UTC")
        now = Datetime(FRIDAY_MS + offset_ms, "UTC")
        assert then.relative_time(now) == expected


class TestDifference:
    def test_until_across_zones(self) -> None:
        a = Datetime(0, "UTC")
        b = Datetime(90_000, "Asia/Tokyo")
        assert a.until(b) == Duration(minutes=1, seconds=30)
        assert a.until(b, largest_unit="second").humanize() == "90 seconds"

    def test_since(self) -> None:
        a = Datetime(0, "UTC")
        b = Datetime(90_000, "UTC")
        assert b.since(a) == Duration(minutes=1, seconds=30)
        assert a.since(b) == Duration(minutes=-1, seconds=-30)

    def test_antisymmetric(self) -> None:
        a = Datetime(FRIDAY_MS, "America/New_York")
        b = Datetime(FRIDAY_MS + 123_456_789, "Europe/Amsterdam")
        assert a.until(b) == -b.until(a)
        assert a.until(b) == b.since(a)

    def test_calendar_units(self) -> None:
        a = Datetime(FRIDAY_MS, "UTC")
        b = a.with_month(5).with_date(20)
        assert a.until(b, largest_unit="month") == Duration(months=2, days=2)
        assert a.until(b, largest_unit="month").humanize() == "2 months, 2 days"

    def test_accepts_zoned_instant_and_instant(self) -> None:
        a = Datetime(0, "UTC")
        assert a.until(ZonedInstant(60_000_000_000, "Asia/Tokyo")) == Duration(minutes=1)
        assert a.until(Instant(60_000_000_000)) == Duration(minutes=1)

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeCoercionError):
            Datetime(0, "UTC").until(60_000)

    def test_rounding_options(self) -> None:
        a = Datetime(0, "UTC")
        b = Datetime(90_000, "UTC")
        assert a.until(b, smallest_unit="minute", rounding_mode="halfExpand") == Duration(minutes=2)
        assert b.since(a, smallest_unit="minute", rounding_mode="halfExpand") == Duration(minutes=2)
