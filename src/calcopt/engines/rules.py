"""
calcopt.engines.rules
---------------------
Pure rules of the Coptic calendar: leap years, month lengths, field ranges
and era resolution. No state.

Year layout: months 1..12 have 30 days, month 13 (the epagomenal days) has
5 days, or 6 in a leap year. A year Y is leap iff Y mod 4 == 3.
"""

from __future__ import annotations

from typing import Any, List

from ..core.errors import InvalidEraError, InvalidValueError, UnsupportedFieldError
from ..core.fields import Field
from ..core.types import Era, ValueRange

# Shifted day 0 is Coptic 1-01-01 (ISO 0284-08-29); epoch day 0 is ISO 1970-01-01.
# 574971 = MJD of the Coptic epoch negated, 40587 = MJD of 1970-01-01.
EPOCH_SHIFT = 574971 + 40587

# Symmetric in year-of-era: BEFORE_AM 999_999_999 is proleptic year -999_999_998.
MAX_YEAR = 999_999_999
MIN_YEAR = 1 - MAX_YEAR

DAYS_PER_CYCLE = 365 * 4 + 1
MONTHS_PER_YEAR = 13


def year_start(proleptic_year: int) -> int:
    """Shifted-day index of day 1 of month 1 of ``proleptic_year``."""
    return (proleptic_year - 1) * 365 + proleptic_year // 4


MIN_EPOCH_DAY = year_start(MIN_YEAR) - EPOCH_SHIFT
MAX_EPOCH_DAY = year_start(MAX_YEAR + 1) - 1 - EPOCH_SHIFT

MOY_RANGE = ValueRange.of(1, 13)
DOM_RANGE = ValueRange.of(1, 5, 30)
DOM_RANGE_NONLEAP = ValueRange.of(1, 5)
DOM_RANGE_LEAP = ValueRange.of(1, 6)
DOM_RANGE_FULL = ValueRange.of(1, 30)
DOY_RANGE = ValueRange.of(1, 365, 366)
YEAR_RANGE = ValueRange.of(MIN_YEAR, MAX_YEAR)
EPOCH_DAY_RANGE = ValueRange.of(MIN_EPOCH_DAY, MAX_EPOCH_DAY)
PROLEPTIC_MONTH_RANGE = ValueRange.of(MIN_YEAR * 13, MAX_YEAR * 13 + 12)

_CHRONO_RANGES = {
    Field.DAY_OF_WEEK: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
    Field.DAY_OF_MONTH: DOM_RANGE,
    Field.DAY_OF_YEAR: DOY_RANGE,
    Field.EPOCH_DAY: EPOCH_DAY_RANGE,
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 5),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
    Field.MONTH_OF_YEAR: MOY_RANGE,
    Field.PROLEPTIC_MONTH: PROLEPTIC_MONTH_RANGE,
    Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
    Field.YEAR: YEAR_RANGE,
    Field.ERA: ValueRange.of(0, 1),
}


def is_leap_year(proleptic_year: int) -> bool:
    # Python % is floor-mod: -1 % 4 == 3, so year -1 is leap like year 3.
    return proleptic_year % 4 == 3


def days_in_month(month: int, is_leap: bool) -> int:
    MOY_RANGE.check_valid_value(month, Field.MONTH_OF_YEAR)
    if month == 13:
        return 6 if is_leap else 5
    return 30


def days_in_year(is_leap: bool) -> int:
    return 366 if is_leap else 365


def month_range() -> ValueRange:
    return MOY_RANGE


def day_of_month_range(month: int, is_leap: bool) -> ValueRange:
    MOY_RANGE.check_valid_value(month, Field.MONTH_OF_YEAR)
    if month == 13:
        return DOM_RANGE_LEAP if is_leap else DOM_RANGE_NONLEAP
    return DOM_RANGE_FULL


def field_range(field: Field) -> ValueRange:
    """Range of ``field`` across all Coptic dates (not refined by any instance)."""
    try:
        return _CHRONO_RANGES[field]
    except KeyError:
        raise UnsupportedFieldError(f"Unsupported field: {field}") from None


def eras() -> List[Era]:
    return [Era.BEFORE_AM, Era.AM]


def era_of(value: int) -> Era:
    if value == 0:
        return Era.BEFORE_AM
    if value == 1:
        return Era.AM
    raise InvalidEraError(f"Invalid era: {value}")


def proleptic_year(era: Any, year_of_era: int) -> int:
    if not isinstance(era, Era):
        raise InvalidEraError("Era must be a Coptic Era")
    return year_of_era if era is Era.AM else 1 - year_of_era


def check_date(proleptic_year: int, month: int, day: int) -> None:
    """Raise InvalidValueError unless (year, month, day) is a valid Coptic date."""
    YEAR_RANGE.check_valid_value(proleptic_year, Field.YEAR)
    MOY_RANGE.check_valid_value(month, Field.MONTH_OF_YEAR)
    day_of_month_range(month, is_leap_year(proleptic_year)).check_valid_value(day, Field.DAY_OF_MONTH)


def clamp_day(proleptic_year: int, month: int, day: int) -> int:
    """
    Previous-valid-day policy: a day past the end of month 13 is pulled back
    to its last day. Other months always have 30 days, so nothing else moves.
    """
    if month == 13 and day > 5:
        return 6 if is_leap_year(proleptic_year) else 5
    return day
