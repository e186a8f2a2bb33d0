from __future__ import annotations
from dataclasses import dataclass

from ..core.errors import UnsupportedFieldError
from ..core.fields import Field
from ..core.types import ValueRange
from .registry import register_field

@dataclass(frozen=True)
class EpochOffsetField:
    """Day count that differs from the epoch day by a fixed offset (JDN, MJD, ...)."""
    name: str
    offset: int

    def is_date_based(self) -> bool:
        return True

    def is_supported_by(self, temporal) -> bool:
        return temporal.is_supported(Field.EPOCH_DAY)

    def range_refined_by(self, temporal) -> ValueRange:
        r = temporal.range(Field.EPOCH_DAY)
        return ValueRange.of(r.minimum + self.offset, r.maximum + self.offset)

    def get_from(self, temporal) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported field: {self.name}")
        return temporal.get_long(Field.EPOCH_DAY) + self.offset

    def adjust_into(self, temporal, new_value: int):
        self.range_refined_by(temporal).check_valid_value(new_value, self)
        return temporal.with_field(Field.EPOCH_DAY, new_value - self.offset)

    def __str__(self) -> str:
        return self.name

# Noon-based Julian Day Number of the civil day (JDN of 1970-01-01 is 2440588).
JULIAN_DAY = EpochOffsetField("JulianDay", 2440588)
# MJD 0 is 1858-11-17.
MODIFIED_JULIAN_DAY = EpochOffsetField("ModifiedJulianDay", 40587)
# Rata Die 1 is 0001-01-01 (ISO proleptic).
RATA_DIE = EpochOffsetField("RataDie", 719163)

register_field("julian_day", JULIAN_DAY)
register_field("modified_julian_day", MODIFIED_JULIAN_DAY)
register_field("rata_die", RATA_DIE)
