# tests/test_period.py

import random
from datetime import date

import pytest

from calcopt import CopticDate, CopticPeriod, Unit, UnsupportedCombinationError, UnsupportedUnitError
from calcopt.engines.period import ZERO


def test_until_days_and_weeks():
    a = CopticDate(1743, 1, 1)
    b = CopticDate(1744, 1, 1)
    assert a.until(b, Unit.DAYS) == 366
    assert a.until(b, Unit.WEEKS) == 52
    assert b.until(a, Unit.WEEKS) == -52


def test_until_months_waits_for_day_of_month():
    a = CopticDate(1743, 1, 15)
    assert a.until(CopticDate(1743, 2, 14), Unit.MONTHS) == 0
    assert a.until(CopticDate(1743, 2, 15), Unit.MONTHS) == 1
    assert a.until(CopticDate(1744, 1, 15), Unit.MONTHS) == 13
    assert a.until(CopticDate(1744, 1, 15), Unit.YEARS) == 1
    assert a.until(CopticDate(1744, 1, 14), Unit.YEARS) == 0
    assert a.until(CopticDate(1742, 1, 16), Unit.YEARS) == 0
    assert a.until(CopticDate(1742, 1, 15), Unit.YEARS) == -1


def test_until_larger_units_and_eras():
    a = CopticDate(1, 1, 1)
    assert a.until(CopticDate(1001, 1, 1), Unit.MILLENNIA) == 1
    assert a.until(CopticDate(1001, 1, 1), Unit.CENTURIES) == 10
    assert a.until(CopticDate(1000, 13, 5), Unit.DECADES) == 99
    assert a.until(CopticDate(0, 13, 5), Unit.ERAS) == -1
    assert a.until(CopticDate(5, 1, 1), Unit.ERAS) == 0


def test_until_rejects_other_calendars():
    with pytest.raises(UnsupportedCombinationError):
        CopticDate(1743, 1, 1).until(date(2026, 9, 11))
    with pytest.raises(UnsupportedCombinationError):
        CopticDate(1743, 1, 1).until(date(2026, 9, 11), Unit.DAYS)


def test_until_rejects_time_units():
    with pytest.raises(UnsupportedUnitError):
        CopticDate(1743, 1, 1).until(CopticDate(1743, 1, 2), Unit.HOURS)


def test_period_simple():
    a = CopticDate(1743, 2, 10)
    assert a.until(CopticDate(1744, 3, 12)) == CopticPeriod(1, 1, 2)
    assert a.until(CopticDate(1743, 4, 5)) == CopticPeriod(0, 1, 25)
    assert a.until(a) == ZERO
    assert a.until(CopticDate(1743, 1, 20)) == CopticPeriod(0, 0, -20)


def test_period_into_short_month():
    a = CopticDate(1744, 1, 30)
    assert a.until(CopticDate(1744, 13, 3)) == CopticPeriod(0, 11, 3)
    b = CopticDate(1745, 1, 30)
    p = b.until(CopticDate(1744, 13, 5))
    assert p == CopticPeriod(0, -1, 0)
    assert b.plus_period(p) == CopticDate(1744, 13, 5)


def test_period_roundtrip_random():
    """start + start.until(end) == end, for dates across both eras."""
    random.seed(11)
    for _ in range(5000):
        a = CopticDate.from_epoch_day(random.randint(-700_000, 100_000))
        b = CopticDate.from_epoch_day(random.randint(-700_000, 100_000))
        p = a.until(b)
        assert a.plus_period(p) == b
        assert p.total_months == a.until(b, Unit.MONTHS)
        assert abs(p.months) < 13
        assert not (p.total_months > 0 and p.days < 0)
        assert not (p.total_months < 0 and p.days > 0)


def test_period_helpers():
    p = CopticPeriod(1, 15, -3)
    assert p.total_months == 28
    assert p.normalized() == CopticPeriod(2, 2, -3)
    assert p.negated() == CopticPeriod(-1, -15, 3)
    assert p.is_negative()
    assert ZERO.is_zero()
    d = CopticDate(1743, 1, 1)
    assert d.minus_period(p).plus_period(p) == d
    assert p.chronology.id == "Coptic"
