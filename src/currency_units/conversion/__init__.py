"""
Конверсия валютных величин по рынку курсов.
"""

from currency_units.conversion.broadcast import BroadcastResult, broadcast_convert, convert_each
from currency_units.conversion.engine import (
    RateResolution,
    ResolutionMode,
    as_mode,
    convert,
    find_pivot,
    missing_pivot_legs,
    pivot_candidates,
    resolve_rate,
)
from currency_units.conversion.shim import uconvert

__all__ = [
    # Engine
    "ResolutionMode",
    "RateResolution",
    "as_mode",
    "resolve_rate",
    "find_pivot",
    "pivot_candidates",
    "missing_pivot_legs",
    "convert",
    # Broadcast
    "BroadcastResult",
    "broadcast_convert",
    "convert_each",
    # Shim
    "uconvert",
]
