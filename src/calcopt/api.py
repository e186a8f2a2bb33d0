from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Sequence, Union

from .attributes.registry import compute_fields
from .core.queries import local_date as _local_date
from .core.types import DateInfo
from .engines import rules
from .engines.date import CopticDate

DateLike = Union[date, CopticDate]


def _coptic(d: DateLike) -> CopticDate:
    return d if isinstance(d, CopticDate) else CopticDate.from_iso(d)

def from_iso(d: date) -> CopticDate:
    return CopticDate.from_iso(d)

def to_iso(c: CopticDate) -> date:
    return c.to_iso()

def is_leap_year(Y: int) -> bool:
    return rules.is_leap_year(Y)

def date_info(d: DateLike, *, fields: Sequence[str] = ()) -> DateInfo:
    """Report on a day given either as an ISO ``date`` or as a ``CopticDate``."""
    c = _coptic(d)
    return DateInfo(
        iso_date=d if isinstance(d, date) else c.query(_local_date),
        epoch_day=c.to_epoch_day(),
        coptic=c,
        day_of_week=c.day_of_week,
        day_of_year=c.day_of_year,
        is_leap_year=c.is_leap_year(),
        length_of_month=c.length_of_month(),
        attributes=compute_fields(c, fields) if fields else None,
    )

def month_lengths(Y: int) -> List[int]:
    leap = rules.is_leap_year(Y)
    return [rules.days_in_month(M, leap) for M in range(1, 14)]

def month_bounds(Y: int, M: int, *, as_date: bool = True) -> Dict[str, Any]:
    first = CopticDate(Y, M, 1)
    last = first.with_day(first.length_of_month())
    out: Dict[str, Any] = {
        "Y": Y,
        "M": M,
        "length": first.length_of_month(),
        "first_epoch_day": first.to_epoch_day(),
        "last_epoch_day": last.to_epoch_day(),
    }
    if as_date:
        out["first_date"] = first.to_iso()
        out["last_date"] = last.to_iso()
    return out

def months_in_year(Y: int, *, as_date: bool = True) -> List[Dict[str, Any]]:
    return [month_bounds(Y, M, as_date=as_date) for M in range(1, 14)]

def new_year_day(Y: int, *, as_date: bool = True) -> Dict[str, Any]:
    """First day of month 1 (Nayrouz) of year ``Y``."""
    c = CopticDate(Y, 1, 1)
    out: Dict[str, Any] = {"Y": Y, "epoch_day": c.to_epoch_day(), "is_leap_year": c.is_leap_year()}
    if as_date:
        out["date"] = c.to_iso()
    return out

def first_day_of_month(Y: int, M: int) -> date:
    return month_bounds(Y, M)["first_date"]

def last_day_of_month(Y: int, M: int) -> date:
    return month_bounds(Y, M)["last_date"]
