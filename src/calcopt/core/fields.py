"""
calcopt.core.fields
-------------------
The closed set of well-known fields and units. A date handles these
directly; anything else must satisfy the protocols in
``calcopt.engines.interfaces`` and resolve itself.
"""

from __future__ import annotations

from enum import Enum


class Field(Enum):
    # time-of-day fields: known names, never supported by a date
    NANO_OF_SECOND = ("NanoOfSecond", False)
    SECOND_OF_MINUTE = ("SecondOfMinute", False)
    MINUTE_OF_HOUR = ("MinuteOfHour", False)
    HOUR_OF_DAY = ("HourOfDay", False)
    AMPM_OF_DAY = ("AmPmOfDay", False)
    INSTANT_SECONDS = ("InstantSeconds", False)
    OFFSET_SECONDS = ("OffsetSeconds", False)

    DAY_OF_WEEK = ("DayOfWeek", True)
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ("AlignedDayOfWeekInMonth", True)
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ("AlignedDayOfWeekInYear", True)
    DAY_OF_MONTH = ("DayOfMonth", True)
    DAY_OF_YEAR = ("DayOfYear", True)
    EPOCH_DAY = ("EpochDay", True)
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", True)
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", True)
    MONTH_OF_YEAR = ("MonthOfYear", True)
    PROLEPTIC_MONTH = ("ProlepticMonth", True)
    YEAR_OF_ERA = ("YearOfEra", True)
    YEAR = ("Year", True)
    ERA = ("Era", True)

    @property
    def display_name(self) -> str:
        return self.value[0]

    def is_date_based(self) -> bool:
        return self.value[1]

    def is_time_based(self) -> bool:
        return not self.value[1]

    def __str__(self) -> str:
        return self.display_name


class Unit(Enum):
    NANOS = ("Nanos", "time")
    MICROS = ("Micros", "time")
    MILLIS = ("Millis", "time")
    SECONDS = ("Seconds", "time")
    MINUTES = ("Minutes", "time")
    HOURS = ("Hours", "time")
    HALF_DAYS = ("HalfDays", "time")
    DAYS = ("Days", "date")
    WEEKS = ("Weeks", "date")
    MONTHS = ("Months", "date")
    YEARS = ("Years", "date")
    DECADES = ("Decades", "date")
    CENTURIES = ("Centuries", "date")
    MILLENNIA = ("Millennia", "date")
    ERAS = ("Eras", "date")
    FOREVER = ("Forever", "none")

    @property
    def display_name(self) -> str:
        return self.value[0]

    def is_date_based(self) -> bool:
        return self.value[1] == "date"

    def is_time_based(self) -> bool:
        return self.value[1] == "time"

    def __str__(self) -> str:
        return self.display_name


# Months per unit for the month-index arithmetic.
MONTHS_PER_UNIT = {
    Unit.MONTHS: 1,
    Unit.YEARS: 13,
    Unit.DECADES: 130,
    Unit.CENTURIES: 1300,
    Unit.MILLENNIA: 13000,
}
