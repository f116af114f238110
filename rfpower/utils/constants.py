"""
Reference constants for power-level conversions.

All values in SI units unless otherwise noted.
"""

# ─── Reference Levels ────────────────────────────────────────────────────────
REFERENCE_POWER_W = 1e-3       # 0 dBm reference [W]
DBM_OFFSET_DB = 30.0           # 10 * log10(1 W / 1 mW)
DB_PER_DECADE = 10.0           # power quantities use the 10*log10 convention

# ─── Field names shared by the views ─────────────────────────────────────────
FIELD_DBM = "dbm"
FIELD_WATTS = "watts"
FIELDS = (FIELD_DBM, FIELD_WATTS)

FIELD_LABELS = {
    FIELD_DBM: "dBm",
    FIELD_WATTS: "Watt",
}
