from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .errors import InvalidValueError

if TYPE_CHECKING:
    from ..engines.date import CopticDate

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Era(IntEnum):
    BEFORE_AM = 0
    AM = 1

    @property
    def display_name(self) -> str:
        return "BEFORE_AM" if self is Era.BEFORE_AM else "AM"


@dataclass(frozen=True)
class ValueRange:
    """Closed interval [minimum, maximum] with an optional smaller typical maximum.

    Month 13 is why ``smallest_maximum`` exists: the day-of-month range of the
    calendar as a whole is 1 - 5/30.
    """
    minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.smallest_maximum:
            raise ValueError("minimum must be <= smallest_maximum")
        if self.smallest_maximum > self.maximum:
            raise ValueError("smallest_maximum must be <= maximum")

    @staticmethod
    def of(minimum: int, *maxima: int) -> "ValueRange":
        if len(maxima) == 1:
            return ValueRange(minimum, maxima[0], maxima[0])
        if len(maxima) == 2:
            return ValueRange(minimum, maxima[0], maxima[1])
        raise TypeError("ValueRange.of takes (min, max) or (min, smallest_max, max)")

    @property
    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.maximum

    def is_int_value(self) -> bool:
        return self.minimum >= INT32_MIN and self.maximum <= INT32_MAX

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: Any) -> int:
        if not self.is_valid_value(value):
            raise InvalidValueError(f"Invalid value for {field} (valid values {self}): {value}")
        return value

    def check_valid_int_value(self, value: int, field: Any) -> int:
        if not self.is_valid_int_value(value):
            raise InvalidValueError(f"Invalid int value for {field} (valid values {self}): {value}")
        return value

    def __contains__(self, value: int) -> bool:
        return self.is_valid_value(value)

    def __str__(self) -> str:
        if self.is_fixed:
            return f"{self.minimum} - {self.maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"


@dataclass(frozen=True)
class DateInfo:
    iso_date: Optional[date]
    epoch_day: int
    coptic: "CopticDate"
    day_of_week: int
    day_of_year: int
    is_leap_year: bool
    length_of_month: int
    attributes: Optional[Dict[str, Any]] = None
