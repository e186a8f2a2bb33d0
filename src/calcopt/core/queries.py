"""
calcopt.core.queries
--------------------
Well-known queries for ``temporal.query(...)``.

A query is any callable taking a temporal. The functions below are the
well-known ones: a temporal recognizes them by identity inside its own
``query`` method and answers directly. Called on their own they simply ask
the temporal, yielding None when it has no ``query`` method.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

Query = Callable[[Any], Any]


def _ask(temporal: Any, query: Query) -> Optional[Any]:
    handler = getattr(temporal, "query", None)
    if handler is None:
        return None
    return handler(query)


def precision(temporal: Any) -> Optional[Any]:
    """Smallest supported unit (a ``Unit``)."""
    return _ask(temporal, precision)


def chronology(temporal: Any) -> Optional[Any]:
    """Calendar system the temporal belongs to."""
    return _ask(temporal, chronology)


def zone(temporal: Any) -> Optional[Any]:
    return _ask(temporal, zone)


def offset(temporal: Any) -> Optional[Any]:
    return _ask(temporal, offset)


def local_time(temporal: Any) -> Optional[Any]:
    return _ask(temporal, local_time)


def local_date(temporal: Any) -> Optional[Any]:
    """ISO ``datetime.date`` equivalent."""
    return _ask(temporal, local_date)
