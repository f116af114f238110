"""
Unit conversion utilities for power levels.
"""

import math

from .constants import DB_PER_DECADE, DBM_OFFSET_DB


# ─── Power conversions ──────────────────────────────────────────────────────

def dbm_exponent(dbm: float) -> float:
    """Decimal exponent of the Watt value for a dBm level: (dBm - 30) / 10."""
    return (dbm - DBM_OFFSET_DB) / DB_PER_DECADE


def dbm_to_watts(dbm: float) -> float:
    """Convert dBm to Watts.

    Raises OverflowError for levels whose Watt value exceeds a float.
    """
    return 10.0 ** dbm_exponent(dbm)


def watts_to_dbm(watts: float) -> float:
    """Convert Watts to dBm."""
    if watts <= 0:
        return -float('inf')
    return DB_PER_DECADE * math.log10(watts) + DBM_OFFSET_DB
