"""
calcopt.engines.chronology
--------------------------
The Coptic calendar system as an object: date factories plus the rules of
``calcopt.engines.rules``. ``COPTIC`` is the shared instance.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from ..core.errors import UnsupportedCombinationError
from ..core.fields import Field
from ..core.types import Era, ValueRange
from . import rules
from .date import CopticDate


class CopticChronology:
    """
    Factory for ``CopticDate`` values and entry point for calendar-wide rules.
    Stateless; equality is by type.
    """
    id = "Coptic"
    calendar_type = "coptic"

    # ---------------------------------------------------------
    # Date factories
    # ---------------------------------------------------------

    def date(self, *args: Any) -> CopticDate:
        """``date(year, month, day)`` or ``date(era, year_of_era, month, day)``."""
        return CopticDate.of(*args)

    def date_year_day(self, *args: Any) -> CopticDate:
        """``date_year_day(year, day_of_year)`` or ``date_year_day(era, year_of_era, day_of_year)``."""
        if len(args) == 2:
            return CopticDate.of_year_day(*args)
        if len(args) == 3:
            era, yoe, doy = args
            return CopticDate.of_year_day(rules.proleptic_year(era, yoe), doy)
        raise TypeError("date_year_day() takes (year, day_of_year) or (era, year_of_era, day_of_year)")

    def date_epoch_day(self, epoch_day: int) -> CopticDate:
        return CopticDate.from_epoch_day(epoch_day)

    def date_from(self, temporal: Any) -> CopticDate:
        if isinstance(temporal, CopticDate):
            return temporal
        if isinstance(temporal, date):
            return CopticDate.from_iso(temporal)
        is_supported = getattr(temporal, "is_supported", None)
        if is_supported is not None and is_supported(Field.EPOCH_DAY):
            return CopticDate.from_epoch_day(temporal.get_long(Field.EPOCH_DAY))
        raise UnsupportedCombinationError(
            f"Unable to obtain CopticDate from {type(temporal).__name__}"
        )

    def date_now(self, today: Optional[date] = None) -> CopticDate:
        return CopticDate.from_iso(today if today is not None else date.today())

    # ---------------------------------------------------------
    # Rules
    # ---------------------------------------------------------

    def is_leap_year(self, proleptic_year: int) -> bool:
        return rules.is_leap_year(proleptic_year)

    def proleptic_year(self, era: Any, year_of_era: int) -> int:
        return rules.proleptic_year(era, year_of_era)

    def era_of(self, value: int) -> Era:
        return rules.era_of(value)

    def eras(self) -> List[Era]:
        return rules.eras()

    def range(self, field: Field) -> ValueRange:
        return rules.field_range(field)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CopticChronology)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return "CopticChronology()"

    def __str__(self) -> str:
        return self.id


COPTIC = CopticChronology()
