from __future__ import annotations
from datetime import date

from .errors import ArithmeticOverflowError, InvalidValueError

# Proleptic Gregorian ordinal of ISO 1970-01-01 (epoch day 0); date(1, 1, 1) is ordinal 1.
ORDINAL_UNIX_EPOCH = 719163

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Epoch days representable by datetime.date (0001-01-01 .. 9999-12-31).
ISO_MIN_EPOCH_DAY = date.min.toordinal() - ORDINAL_UNIX_EPOCH
ISO_MAX_EPOCH_DAY = date.max.toordinal() - ORDINAL_UNIX_EPOCH


def iso_to_epoch_day(d: date) -> int:
    return d.toordinal() - ORDINAL_UNIX_EPOCH

def epoch_day_to_iso(epoch_day: int) -> date:
    if not ISO_MIN_EPOCH_DAY <= epoch_day <= ISO_MAX_EPOCH_DAY:
        raise InvalidValueError(f"Epoch day {epoch_day} is outside the range of datetime.date")
    return date.fromordinal(epoch_day + ORDINAL_UNIX_EPOCH)

# ---------------------------------------------------------
# Checked 64-bit arithmetic
# ---------------------------------------------------------

def _check_int64(value: int, op: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflowError(f"integer overflow in {op}")
    return value

def safe_add(a: int, b: int) -> int:
    _check_int64(a, "add")
    _check_int64(b, "add")
    return _check_int64(a + b, "add")

def safe_multiply(a: int, b: int) -> int:
    _check_int64(a, "multiply")
    _check_int64(b, "multiply")
    return _check_int64(a * b, "multiply")

def safe_negate(a: int) -> int:
    _check_int64(a, "negate")
    return _check_int64(-a, "negate")

def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``a // b`` rounds toward -inf)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def trunc_mod(a: int, b: int) -> int:
    return a - b * trunc_div(a, b)
