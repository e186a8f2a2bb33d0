"""
calcopt.engines.interfaces
--------------------------
Boundaries between a date and the fields, units and temporals it does not
know about.

A date handles the closed ``Field`` / ``Unit`` enums itself. Any other object
passed where a field or unit is expected must satisfy the protocols below and
resolve itself against the generic accessor (``TemporalProtocol``) it is
handed.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from ..core.types import ValueRange


class TemporalProtocol(Protocol):
    """
    Read/write accessor handed to external fields and units.
    ``CopticDate`` implements it; so can any other temporal.
    """

    def is_supported(self, field: Any) -> bool:
        ...

    def range(self, field: Any) -> ValueRange:
        ...

    def get_long(self, field: Any) -> int:
        ...

    def with_field(self, field: Any, new_value: int) -> "TemporalProtocol":
        ...

    def plus(self, amount: int, unit: Any) -> "TemporalProtocol":
        ...

    def query(self, query: Callable[[Any], Any]) -> Any:
        ...


class TemporalFieldProtocol(Protocol):
    """An externally defined field that knows how to read and write itself."""

    def is_date_based(self) -> bool:
        ...

    def is_supported_by(self, temporal: TemporalProtocol) -> bool:
        ...

    def range_refined_by(self, temporal: TemporalProtocol) -> ValueRange:
        ...

    def get_from(self, temporal: TemporalProtocol) -> int:
        """
        Pull the value out of the temporal, typically through the well-known
        fields (e.g. EPOCH_DAY).
        """
        ...

    def adjust_into(self, temporal: TemporalProtocol, new_value: int) -> TemporalProtocol:
        ...


class TemporalUnitProtocol(Protocol):
    """An externally defined unit of amount."""

    def is_date_based(self) -> bool:
        ...

    def add_to(self, temporal: TemporalProtocol, amount: int) -> TemporalProtocol:
        ...

    def between(self, start: TemporalProtocol, end: TemporalProtocol) -> int:
        ...


class TemporalAdjusterProtocol(Protocol):
    """Strategy object accepted by ``with_adjuster``; plain callables work too."""

    def adjust_into(self, temporal: TemporalProtocol) -> TemporalProtocol:
        ...
