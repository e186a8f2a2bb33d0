"""calcopt public API.

Coptic calendar engine: exact conversion between Coptic dates and epoch days,
plus the generic field / unit / query protocol.

Keep this surface small: users should mostly interact with names re-exported here.
"""

# Register the standard external fields on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    date_info,
    from_iso,
    to_iso,
    is_leap_year,
    month_lengths,
    month_bounds,
    months_in_year,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
)
from .attributes.registry import register_field, get_field, list_fields
from .attributes.standard import JULIAN_DAY, MODIFIED_JULIAN_DAY, RATA_DIE
from .core import queries
from .core.errors import (
    CalcoptError,
    InvalidFieldError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    InvalidValueError,
    InvalidEraError,
    ArithmeticOverflowError,
    UnsupportedCombinationError,
)
from .core.fields import Field, Unit
from .core.types import DateInfo, Era, ValueRange
from .engines.chronology import COPTIC, CopticChronology
from .engines.date import CopticDate
from .engines.period import CopticPeriod

__all__ = [
    "date_info",
    "from_iso",
    "to_iso",
    "is_leap_year",
    "month_lengths",
    "month_bounds",
    "months_in_year",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "register_field",
    "get_field",
    "list_fields",
    "JULIAN_DAY",
    "MODIFIED_JULIAN_DAY",
    "RATA_DIE",
    "queries",
    "CalcoptError",
    "InvalidFieldError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "InvalidValueError",
    "InvalidEraError",
    "ArithmeticOverflowError",
    "UnsupportedCombinationError",
    "Field",
    "Unit",
    "DateInfo",
    "Era",
    "ValueRange",
    "COPTIC",
    "CopticChronology",
    "CopticDate",
    "CopticPeriod",
]
