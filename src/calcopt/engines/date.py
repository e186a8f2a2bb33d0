"""
calcopt.engines.date
--------------------
The Coptic date value: (proleptic year, month, day), immutable, validated on
construction. Conversion to and from the epoch day is closed form; every
other field is derived from the three primitives.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from ..core import queries
from ..core.errors import (
    InvalidFieldError,
    UnsupportedCombinationError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from ..core.fields import MONTHS_PER_UNIT, Field, Unit
from ..core.time import (
    ISO_MAX_EPOCH_DAY,
    ISO_MIN_EPOCH_DAY,
    epoch_day_to_iso,
    iso_to_epoch_day,
    safe_add,
    safe_multiply,
    safe_negate,
)
from ..core.types import Era, ValueRange
from . import rules
from .period import CopticPeriod, amount_between, period_between


@dataclass(frozen=True, order=True)
class CopticDate:
    """
    A date in the Coptic calendar.

    Field order makes the natural dataclass ordering chronological.
    Construct with ``CopticDate(year, month, day)``, ``CopticDate.of(...)``,
    ``CopticDate.from_epoch_day(n)`` or ``CopticDate.from_iso(d)``.
    """
    proleptic_year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("proleptic_year", "month", "day"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int, got {type(v).__name__}")
        rules.check_date(self.proleptic_year, self.month, self.day)

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, *args: Any) -> "CopticDate":
        """``of(year, month, day)`` or ``of(era, year_of_era, month, day)``."""
        if len(args) == 3:
            return cls(*args)
        if len(args) == 4:
            era, yoe, month, day = args
            return cls(rules.proleptic_year(era, yoe), month, day)
        raise TypeError("of() takes (year, month, day) or (era, year_of_era, month, day)")

    @classmethod
    def of_year_day(cls, proleptic_year: int, day_of_year: int) -> "CopticDate":
        rules.YEAR_RANGE.check_valid_value(proleptic_year, Field.YEAR)
        leap = rules.is_leap_year(proleptic_year)
        ValueRange.of(1, rules.days_in_year(leap)).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        return cls(proleptic_year, (day_of_year - 1) // 30 + 1, (day_of_year - 1) % 30 + 1)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> "CopticDate":
        rules.EPOCH_DAY_RANGE.check_valid_value(epoch_day, Field.EPOCH_DAY)
        shifted = epoch_day + rules.EPOCH_SHIFT
        # Every 4 years contribute 1461 days; floor division keeps this exact
        # for negative years too.
        year = (4 * shifted + 1463) // rules.DAYS_PER_CYCLE
        doy0 = shifted - rules.year_start(year)
        # Month 13 is the only short month, and it is the last one.
        return cls(year, doy0 // 30 + 1, doy0 % 30 + 1)

    @classmethod
    def from_iso(cls, d: date) -> "CopticDate":
        return cls.from_epoch_day(iso_to_epoch_day(d))

    @classmethod
    def _resolve_previous_valid(cls, proleptic_year: int, month: int, day: int) -> "CopticDate":
        return cls(proleptic_year, month, rules.clamp_day(proleptic_year, month, day))

    # ---------------------------------------------------------
    # Derived values
    # ---------------------------------------------------------

    @property
    def chronology(self):
        from .chronology import COPTIC
        return COPTIC

    @property
    def era(self) -> Era:
        return Era.AM if self.proleptic_year >= 1 else Era.BEFORE_AM

    @property
    def year_of_era(self) -> int:
        return self.proleptic_year if self.proleptic_year >= 1 else 1 - self.proleptic_year

    @property
    def day_of_year(self) -> int:
        return (self.month - 1) * 30 + self.day

    @property
    def day_of_week(self) -> int:
        """ISO numbering, 1 = Monday .. 7 = Sunday."""
        return (self.to_epoch_day() + 3) % 7 + 1

    @property
    def proleptic_month(self) -> int:
        return self.proleptic_year * rules.MONTHS_PER_YEAR + self.month - 1

    def is_leap_year(self) -> bool:
        return rules.is_leap_year(self.proleptic_year)

    def length_of_month(self) -> int:
        return rules.days_in_month(self.month, self.is_leap_year())

    def length_of_year(self) -> int:
        return rules.days_in_year(self.is_leap_year())

    def to_epoch_day(self) -> int:
        shifted = rules.year_start(self.proleptic_year) + self.day_of_year - 1
        return shifted - rules.EPOCH_SHIFT

    def to_iso(self) -> date:
        return epoch_day_to_iso(self.to_epoch_day())

    # ---------------------------------------------------------
    # Field protocol
    # ---------------------------------------------------------

    def is_supported(self, field: Any) -> bool:
        if isinstance(field, Field):
            return field.is_date_based()
        supported_by = getattr(field, "is_supported_by", None)
        return supported_by is not None and bool(supported_by(self))

    def is_unit_supported(self, unit: Any) -> bool:
        if isinstance(unit, Unit):
            return unit in (Unit.DAYS, Unit.WEEKS) or unit in MONTHS_PER_UNIT
        is_date_based = getattr(unit, "is_date_based", None)
        return is_date_based is not None and bool(is_date_based())

    def range(self, field: Any) -> ValueRange:
        if isinstance(field, Field):
            if not self.is_supported(field):
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            if field is Field.DAY_OF_MONTH:
                return ValueRange.of(1, self.length_of_month())
            if field is Field.DAY_OF_YEAR:
                return ValueRange.of(1, self.length_of_year())
            if field is Field.ALIGNED_WEEK_OF_MONTH:
                return ValueRange.of(1, 1 if self.month == 13 else 5)
            return rules.field_range(field)
        self._check_external_field(field)
        return field.range_refined_by(self)

    def get(self, field: Any) -> int:
        r = self.range(field)
        if not r.is_int_value():
            raise InvalidFieldError(f"Invalid field {field} for get(), use get_long() instead")
        return r.check_valid_int_value(self.get_long(field), field)

    def get_long(self, field: Any) -> int:
        if isinstance(field, Field):
            if field is Field.DAY_OF_WEEK:
                return self.day_of_week
            if field is Field.ALIGNED_DAY_OF_WEEK_IN_MONTH:
                return (self.day - 1) % 7 + 1
            if field is Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
                return (self.day_of_year - 1) % 7 + 1
            if field is Field.DAY_OF_MONTH:
                return self.day
            if field is Field.DAY_OF_YEAR:
                return self.day_of_year
            if field is Field.EPOCH_DAY:
                return self.to_epoch_day()
            if field is Field.ALIGNED_WEEK_OF_MONTH:
                return (self.day - 1) // 7 + 1
            if field is Field.ALIGNED_WEEK_OF_YEAR:
                return (self.day_of_year - 1) // 7 + 1
            if field is Field.MONTH_OF_YEAR:
                return self.month
            if field is Field.PROLEPTIC_MONTH:
                return self.proleptic_month
            if field is Field.YEAR_OF_ERA:
                return self.year_of_era
            if field is Field.YEAR:
                return self.proleptic_year
            if field is Field.ERA:
                return int(self.era)
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        self._check_external_field(field)
        return field.get_from(self)

    def with_field(self, field: Any, new_value: int) -> "CopticDate":
        if isinstance(field, Field):
            # raises UnsupportedFieldError for time fields
            rules.field_range(field).check_valid_value(new_value, field)

            # offset remap: move by whole days, structure follows
            if field is Field.DAY_OF_WEEK:
                return self.plus_days(new_value - self.day_of_week)
            if field in (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, Field.ALIGNED_DAY_OF_WEEK_IN_YEAR):
                return self.plus_days(new_value - self.get_long(field))
            if field in (Field.ALIGNED_WEEK_OF_MONTH, Field.ALIGNED_WEEK_OF_YEAR):
                return self.plus_days((new_value - self.get_long(field)) * 7)

            # direct remap, previous-valid day
            if field is Field.DAY_OF_MONTH:
                return self._resolve_previous_valid(self.proleptic_year, self.month, new_value)
            if field is Field.DAY_OF_YEAR:
                return self._resolve_previous_valid(
                    self.proleptic_year, (new_value - 1) // 30 + 1, (new_value - 1) % 30 + 1
                )
            if field is Field.EPOCH_DAY:
                return CopticDate.from_epoch_day(new_value)
            if field is Field.MONTH_OF_YEAR:
                return self._resolve_previous_valid(self.proleptic_year, new_value, self.day)
            if field is Field.PROLEPTIC_MONTH:
                year, m0 = divmod(new_value, rules.MONTHS_PER_YEAR)
                return self._resolve_previous_valid(year, m0 + 1, self.day)
            if field is Field.YEAR_OF_ERA:
                year = new_value if self.proleptic_year >= 1 else 1 - new_value
                return self._resolve_previous_valid(year, self.month, self.day)
            if field is Field.YEAR:
                return self._resolve_previous_valid(new_value, self.month, self.day)
            if field is Field.ERA:
                if new_value == int(self.era):
                    return self
                return self._resolve_previous_valid(1 - self.proleptic_year, self.month, self.day)
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        self._check_external_field(field)
        return field.adjust_into(self, new_value)

    def with_adjuster(self, adjuster: Any) -> "CopticDate":
        adjust = getattr(adjuster, "adjust_into", None)
        if adjust is not None:
            return adjust(self)
        if callable(adjuster):
            return adjuster(self)
        raise TypeError(f"Not a date adjuster: {adjuster!r}")

    def with_year(self, proleptic_year: int) -> "CopticDate":
        return self.with_field(Field.YEAR, proleptic_year)

    def with_month(self, month: int) -> "CopticDate":
        return self.with_field(Field.MONTH_OF_YEAR, month)

    def with_day(self, day: int) -> "CopticDate":
        return self.with_field(Field.DAY_OF_MONTH, day)

    def with_day_of_year(self, day_of_year: int) -> "CopticDate":
        return self.with_field(Field.DAY_OF_YEAR, day_of_year)

    def _check_external_field(self, field: Any) -> None:
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"Unsupported field: {field}")

    # ---------------------------------------------------------
    # Queries and adjustment of other temporals
    # ---------------------------------------------------------

    def query(self, query: Callable[[Any], Any]) -> Any:
        if query is queries.chronology:
            return self.chronology
        if query is queries.precision:
            return Unit.DAYS
        if query is queries.local_date:
            if ISO_MIN_EPOCH_DAY <= self.to_epoch_day() <= ISO_MAX_EPOCH_DAY:
                return self.to_iso()
            return None
        if query in (queries.zone, queries.offset, queries.local_time):
            return None
        return query(self)

    def adjust_into(self, temporal: Any) -> Any:
        """Push this date into ``temporal`` (a calendar date or a ``datetime.date``)."""
        if isinstance(temporal, date):
            iso = self.to_iso()
            return temporal.replace(year=iso.year, month=iso.month, day=iso.day)
        return temporal.with_field(Field.EPOCH_DAY, self.to_epoch_day())

    # ---------------------------------------------------------
    # Unit arithmetic
    # ---------------------------------------------------------

    def plus(self, amount: int, unit: Any) -> "CopticDate":
        if isinstance(unit, Unit):
            if unit is Unit.DAYS:
                return self.plus_days(amount)
            if unit is Unit.WEEKS:
                return self.plus_days(safe_multiply(amount, 7))
            if unit in MONTHS_PER_UNIT:
                return self.plus_months(safe_multiply(amount, MONTHS_PER_UNIT[unit]))
            raise UnsupportedUnitError(f"{unit} not valid for CopticDate")
        if getattr(unit, "add_to", None) is None:
            raise UnsupportedUnitError(f"Unsupported unit: {unit!r}")
        return unit.add_to(self, amount)

    def minus(self, amount: int, unit: Any) -> "CopticDate":
        return self.plus(safe_negate(amount), unit)

    def plus_days(self, days: int) -> "CopticDate":
        if days == 0:
            return self
        return CopticDate.from_epoch_day(safe_add(self.to_epoch_day(), days))

    def plus_weeks(self, weeks: int) -> "CopticDate":
        return self.plus(weeks, Unit.WEEKS)

    def plus_months(self, months: int) -> "CopticDate":
        if months == 0:
            return self
        # One floor division by 13 absorbs any month/year borrow.
        index = safe_add(self.proleptic_month, months)
        year, m0 = divmod(index, rules.MONTHS_PER_YEAR)
        return self._resolve_previous_valid(year, m0 + 1, self.day)

    def plus_years(self, years: int) -> "CopticDate":
        return self.plus(years, Unit.YEARS)

    def minus_days(self, days: int) -> "CopticDate":
        return self.minus(days, Unit.DAYS)

    def minus_weeks(self, weeks: int) -> "CopticDate":
        return self.minus(weeks, Unit.WEEKS)

    def minus_months(self, months: int) -> "CopticDate":
        return self.minus(months, Unit.MONTHS)

    def minus_years(self, years: int) -> "CopticDate":
        return self.minus(years, Unit.YEARS)

    def plus_period(self, period: CopticPeriod) -> "CopticDate":
        return period.add_to(self)

    def minus_period(self, period: CopticPeriod) -> "CopticDate":
        return period.subtract_from(self)

    # ---------------------------------------------------------
    # Periods
    # ---------------------------------------------------------

    def until(self, end: Any, unit: Optional[Any] = None) -> Any:
        """
        Amount of time from this date to ``end``.

        With a unit, the whole number of that unit (truncated toward zero);
        without one, a ``CopticPeriod`` such that
        ``self.plus_period(self.until(end)) == end``.
        """
        if not isinstance(end, CopticDate):
            raise UnsupportedCombinationError(
                f"Unable to calculate period between CopticDate and {type(end).__name__}"
            )
        if unit is None:
            return period_between(self, end)
        return amount_between(self, end, unit)

    def __str__(self) -> str:
        return f"Coptic {self.era.display_name} {self.year_of_era}-{self.month:02d}-{self.day:02d}"
