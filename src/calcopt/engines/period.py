"""
calcopt.engines.period
----------------------
Month-aware amounts between two Coptic dates.

Whole months are counted on the packed month-day ``proleptic_month * 32 + day``
so that a month only counts once its day of month has been reached. The
remaining days are measured against ``start.plus_months(...)``, which applies
the same previous-valid-day clamp as unit arithmetic, so adding the period
back always lands on the end date.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..core.errors import UnsupportedUnitError
from ..core.fields import MONTHS_PER_UNIT, Unit
from ..core.time import safe_negate, trunc_div, trunc_mod

if TYPE_CHECKING:
    from .date import CopticDate


@dataclass(frozen=True)
class CopticPeriod:
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def chronology(self):
        from .chronology import COPTIC
        return COPTIC

    @property
    def total_months(self) -> int:
        return self.years * 13 + self.months

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def negated(self) -> "CopticPeriod":
        return CopticPeriod(safe_negate(self.years), safe_negate(self.months), safe_negate(self.days))

    def normalized(self) -> "CopticPeriod":
        total = self.total_months
        return CopticPeriod(trunc_div(total, 13), trunc_mod(total, 13), self.days)

    def add_to(self, d: "CopticDate") -> "CopticDate":
        return d.plus(self.total_months, Unit.MONTHS).plus(self.days, Unit.DAYS)

    def subtract_from(self, d: "CopticDate") -> "CopticDate":
        return d.minus(self.total_months, Unit.MONTHS).minus(self.days, Unit.DAYS)


ZERO = CopticPeriod()


def _months_between(start: "CopticDate", end: "CopticDate") -> int:
    packed1 = start.proleptic_month * 32 + start.day
    packed2 = end.proleptic_month * 32 + end.day
    return trunc_div(packed2 - packed1, 32)


def period_between(start: "CopticDate", end: "CopticDate") -> CopticPeriod:
    total_months = end.proleptic_month - start.proleptic_month
    sign_days = end.day - start.day
    if total_months > 0 and sign_days < 0:
        total_months -= 1
    elif total_months < 0 and sign_days > 0:
        total_months += 1
    days = end.to_epoch_day() - start.plus_months(total_months).to_epoch_day()
    return CopticPeriod(trunc_div(total_months, 13), trunc_mod(total_months, 13), days)


def amount_between(start: "CopticDate", end: "CopticDate", unit: Any) -> int:
    if isinstance(unit, Unit):
        if unit is Unit.DAYS:
            return end.to_epoch_day() - start.to_epoch_day()
        if unit is Unit.WEEKS:
            return trunc_div(end.to_epoch_day() - start.to_epoch_day(), 7)
        if unit in MONTHS_PER_UNIT:
            return trunc_div(_months_between(start, end), MONTHS_PER_UNIT[unit])
        if unit is Unit.ERAS:
            return int(end.era) - int(start.era)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")
    if getattr(unit, "between", None) is None:
        raise UnsupportedUnitError(f"Unsupported unit: {unit!r}")
    return unit.between(start, end)
