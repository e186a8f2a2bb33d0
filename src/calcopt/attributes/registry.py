from __future__ import annotations
import logging
from typing import Any, Dict, List, Sequence

from ..engines.interfaces import TemporalFieldProtocol, TemporalProtocol

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, TemporalFieldProtocol] = {}

def register_field(name: str, field: TemporalFieldProtocol, *, overwrite: bool = False) -> None:
    if (not overwrite) and (name in _REGISTRY):
        raise KeyError(f"Field '{name}' already exists. Use overwrite=True to replace.")
    logger.debug("registered field %r -> %s", name, field)
    _REGISTRY[name] = field

def get_field(name: str) -> TemporalFieldProtocol:
    if name not in _REGISTRY:
        raise KeyError(f"Unknown field '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]

def list_fields() -> List[str]:
    return sorted(_REGISTRY)

def compute_fields(temporal: TemporalProtocol, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        out[name] = temporal.get_long(get_field(name))
    return out
