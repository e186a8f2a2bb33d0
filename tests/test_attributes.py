# tests/test_attributes.py

from datetime import date

import pytest

import calcopt
from calcopt import (
    JULIAN_DAY,
    MODIFIED_JULIAN_DAY,
    RATA_DIE,
    CopticDate,
    Field,
    InvalidFieldError,
    InvalidValueError,
    UnsupportedFieldError,
)
from calcopt.attributes.registry import compute_fields


def test_standard_fields_registered():
    assert {"julian_day", "modified_julian_day", "rata_die"} <= set(calcopt.list_fields())
    assert calcopt.get_field("julian_day") is JULIAN_DAY


def test_external_field_values():
    c = CopticDate.from_iso(date(2000, 1, 1))
    assert c.is_supported(JULIAN_DAY)
    assert c.get_long(JULIAN_DAY) == 2451545
    assert c.get_long(MODIFIED_JULIAN_DAY) == 51544
    assert c.get_long(RATA_DIE) == date(2000, 1, 1).toordinal()


def test_external_field_with_and_range():
    c = CopticDate(1743, 1, 1)
    assert c.with_field(JULIAN_DAY, 2440588) == CopticDate(1686, 4, 23)
    r = c.range(MODIFIED_JULIAN_DAY)
    assert r.minimum == c.range(Field.EPOCH_DAY).minimum + 40587
    with pytest.raises(InvalidValueError):
        c.with_field(RATA_DIE, r.maximum * 10)
    # wide range: get() refuses, get_long() answers
    with pytest.raises(InvalidFieldError):
        c.get(JULIAN_DAY)


def test_compute_fields():
    c = CopticDate(1686, 4, 23)
    assert compute_fields(c, ["julian_day", "rata_die"]) == {"julian_day": 2440588, "rata_die": 719163}
    with pytest.raises(KeyError):
        compute_fields(c, ["no_such_field"])


def test_register_field_refuses_duplicates():
    with pytest.raises(KeyError):
        calcopt.register_field("julian_day", JULIAN_DAY)
    calcopt.register_field("julian_day", JULIAN_DAY, overwrite=True)


class _RefusingField:
    """External field that never applies to a date."""

    def is_date_based(self):
        return False

    def is_supported_by(self, temporal):
        return False

    def range_refined_by(self, temporal):
        raise AssertionError("not reached")

    def get_from(self, temporal):
        raise AssertionError("not reached")

    def adjust_into(self, temporal, new_value):
        raise AssertionError("not reached")


def test_external_field_that_cannot_resolve():
    c = CopticDate(1743, 1, 1)
    f = _RefusingField()
    assert not c.is_supported(f)
    with pytest.raises(UnsupportedFieldError):
        c.get_long(f)
    with pytest.raises(UnsupportedFieldError):
        c.range(f)
    with pytest.raises(UnsupportedFieldError):
        c.with_field(f, 1)
