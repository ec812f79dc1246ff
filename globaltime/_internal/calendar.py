"""Proleptic Gregorian date math on epoch days.

Every date conversion in the package goes through the two functions
``ymd_to_epoch_days`` and ``epoch_days_to_ymd``, which use Howard Hinnant's
era-based ``days_from_civil``/``civil_from_days`` algorithms. Years are
astronomical (year 0 is 1 BCE), and any integer epoch day is valid.

Epoch day 0 is 1970-01-01, a Thursday.
"""

from __future__ import annotations

_DAYS_PER_ERA = 146_097  # 400 Gregorian years
_EPOCH_SHIFT = 719_468  # days from 0000-03-01 to 1970-01-01

# Month lengths, January first; February is patched for leap years.
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years.

    Examples:
        >>> [is_leap_year(y) for y in (1900, 2000, 2024, 2025)]
        [False, True, True, False]
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the length of a month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def ymd_to_epoch_days(year: int, month: int, day: int) -> int:
    """Count days from 1970-01-01 to a date.

    Examples:
        >>> ymd_to_epoch_days(1970, 1, 1)
        0
        >>> ymd_to_epoch_days(2025, 4, 18)
        20196
    """
    # The computational year starts in March so the leap day falls last.
    if month <= 2:
        year -= 1
    era, year_of_era = divmod(year, 400)
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def epoch_days_to_ymd(days: int) -> tuple[int, int, int]:
    """Return (year, month, day) for a count of days since 1970-01-01.

    Examples:
        >>> epoch_days_to_ymd(-1)
        (1969, 12, 31)
    """
    era, day_of_era = divmod(days + _EPOCH_SHIFT, _DAYS_PER_ERA)
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = era * 400 + year_of_era + (1 if month <= 2 else 0)
    return (year, month, day)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year."""
    return ymd_to_epoch_days(year, month, day) - ymd_to_epoch_days(year, 1, 1) + 1


def iso_weekday(year: int, month: int, day: int) -> int:
    """Return the ISO day of week, Monday=1 through Sunday=7.

    Examples:
        >>> iso_weekday(2025, 4, 18)
        5
    """
    return (ymd_to_epoch_days(year, month, day) + 3) % 7 + 1


def iso_week(year: int, month: int, day: int) -> tuple[int, int]:
    """Return the ISO-8601 (week-numbering year, week number) of a date.

    A date belongs to the week of its nearest Thursday, and the
    week-numbering year is that Thursday's calendar year.

    Examples:
        >>> iso_week(2021, 1, 1)
        (2020, 53)
        >>> iso_week(2025, 4, 18)
        (2025, 16)
    """
    days = ymd_to_epoch_days(year, month, day)
    thursday = days - iso_weekday(year, month, day) + 4
    week_year = epoch_days_to_ymd(thursday)[0]
    return (week_year, (thursday - ymd_to_epoch_days(week_year, 1, 1)) // 7 + 1)


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift (year, month) by a signed number of months.

    Examples:
        >>> add_months(2025, 4, 9)
        (2026, 1)
        >>> add_months(2025, 1, -1)
        (2024, 12)
    """
    year_shift, month_index = divmod(month - 1 + months, 12)
    return (year + year_shift, month_index + 1)


def constrain_day(year: int, month: int, day: int) -> int:
    """Clamp a day to the last valid day of the month."""
    return min(day, days_in_month(year, month))


__all__ = [
    "add_months",
    "constrain_day",
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "epoch_days_to_ymd",
    "is_leap_year",
    "iso_week",
    "iso_weekday",
    "ymd_to_epoch_days",
]
