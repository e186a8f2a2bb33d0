# tests/test_epoch_day.py

import random
from datetime import date

import pytest

from calcopt import COPTIC, CopticDate, Era, InvalidValueError
from calcopt.engines import rules

# Coptic date <-> ISO date reference table
REFERENCE = [
    ((1, 1, 1), date(284, 8, 29)),
    ((1, 1, 2), date(284, 8, 30)),
    ((1, 1, 3), date(284, 8, 31)),
    ((3, 13, 6), date(287, 8, 29)),
    ((4, 1, 1), date(287, 8, 30)),
    ((4, 7, 4), date(288, 2, 29)),
    ((5, 1, 1), date(288, 8, 29)),
    ((1662, 3, 3), date(1945, 11, 12)),
    ((1686, 4, 23), date(1970, 1, 1)),
    ((1716, 4, 22), date(2000, 1, 1)),
    ((1728, 10, 28), date(2012, 7, 5)),
    ((1728, 10, 29), date(2012, 7, 6)),
    ((1743, 1, 1), date(2026, 9, 11)),
    ((1743, 13, 6), date(2027, 9, 11)),
    ((1744, 1, 1), date(2027, 9, 12)),
]


def test_epoch_day_zero():
    """ISO 1970-01-01 is Coptic 1686-04-23."""
    assert CopticDate.from_epoch_day(0) == CopticDate(1686, 4, 23)
    assert CopticDate(1686, 4, 23).to_epoch_day() == 0


def test_epoch_shift_is_coptic_epoch():
    assert CopticDate(1, 1, 1).to_epoch_day() == -rules.EPOCH_SHIFT
    assert CopticDate.from_epoch_day(-rules.EPOCH_SHIFT) == CopticDate(1, 1, 1)


@pytest.mark.parametrize("ymd, iso", REFERENCE)
def test_reference_table(ymd, iso):
    c = CopticDate(*ymd)
    assert c.to_iso() == iso
    assert CopticDate.from_iso(iso) == c
    assert c.to_epoch_day() == (iso - date(1970, 1, 1)).days


def test_epoch_day_roundtrip_random():
    random.seed(42)
    for _ in range(10000):
        n = random.randint(-2_000_000, 2_000_000)
        assert CopticDate.from_epoch_day(n).to_epoch_day() == n


def test_epoch_day_consecutive_across_eras():
    """Consecutive epoch days decode to consecutive dates, through year 0 and negative years."""
    start = CopticDate(-9, 1, 1).to_epoch_day()
    prev = CopticDate.from_epoch_day(start)
    for n in range(start + 1, CopticDate(10, 1, 1).to_epoch_day() + 1):
        cur = CopticDate.from_epoch_day(n)
        assert cur > prev
        if cur.day == 1:
            assert prev.day == prev.length_of_month()
        else:
            assert (cur.proleptic_year, cur.month, cur.day - 1) == (prev.proleptic_year, prev.month, prev.day)
        prev = cur


def test_date_roundtrip_all_days():
    for y in (-5, -1, 0, 1, 2, 3, 4, 1743):
        leap = rules.is_leap_year(y)
        for m in range(1, 14):
            for d in range(1, rules.days_in_month(m, leap) + 1):
                c = CopticDate(y, m, d)
                assert CopticDate.from_epoch_day(c.to_epoch_day()) == c


def test_iso_roundtrip_matches_datetime():
    random.seed(7)
    epoch = date(1970, 1, 1).toordinal()
    for _ in range(5000):
        d = date.fromordinal(random.randint(1, date(9999, 12, 31).toordinal()))
        c = CopticDate.from_iso(d)
        assert c.to_epoch_day() == d.toordinal() - epoch
        assert c.to_iso() == d
        assert c.day_of_week == d.isoweekday()


def test_supported_range_edges():
    lo = CopticDate.from_epoch_day(rules.MIN_EPOCH_DAY)
    hi = CopticDate.from_epoch_day(rules.MAX_EPOCH_DAY)
    assert lo == CopticDate(rules.MIN_YEAR, 1, 1)
    assert hi == CopticDate(rules.MAX_YEAR, 13, hi.length_of_month())
    with pytest.raises(InvalidValueError):
        CopticDate.from_epoch_day(rules.MIN_EPOCH_DAY - 1)
    with pytest.raises(InvalidValueError):
        CopticDate.from_epoch_day(rules.MAX_EPOCH_DAY + 1)


def test_construction_boundaries():
    assert CopticDate(3, 13, 6).day == 6
    assert CopticDate(4, 13, 5).day == 5
    for bad in [(4, 13, 6), (4, 13, 7), (3, 13, 7), (1, 1, 31), (1, 14, 1), (1, 0, 1), (1, 1, 0)]:
        with pytest.raises(InvalidValueError):
            CopticDate(*bad)
    with pytest.raises(InvalidValueError):
        CopticDate(rules.MAX_YEAR + 1, 1, 1)
    with pytest.raises(TypeError):
        CopticDate(1, 1.0, 1)


def test_era_factories():
    assert CopticDate.of(Era.AM, 1743, 1, 1) == CopticDate(1743, 1, 1)
    assert CopticDate.of(Era.BEFORE_AM, 1, 13, 5) == CopticDate(0, 13, 5)
    assert COPTIC.date(Era.BEFORE_AM, 2, 13, 6) == CopticDate(-1, 13, 6)
    assert COPTIC.date(1743, 2, 3) == CopticDate(1743, 2, 3)
    with pytest.raises(TypeError):
        CopticDate.of(1, 2)


def test_year_day_factory():
    assert CopticDate.of_year_day(1743, 1) == CopticDate(1743, 1, 1)
    assert CopticDate.of_year_day(1743, 366) == CopticDate(1743, 13, 6)
    assert COPTIC.date_year_day(Era.AM, 1744, 365) == CopticDate(1744, 13, 5)
    with pytest.raises(InvalidValueError):
        CopticDate.of_year_day(1744, 366)


def test_chronology_date_from():
    c = CopticDate(1743, 5, 6)
    assert COPTIC.date_from(c) is c
    assert COPTIC.date_from(c.to_iso()) == c
    assert COPTIC.date_epoch_day(0) == CopticDate(1686, 4, 23)
    assert COPTIC.date_now(date(2026, 9, 11)) == CopticDate(1743, 1, 1)
