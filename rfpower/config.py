"""
Display configuration for the converter.

The defaults reproduce the fixed-point contract shared by both views:
six decimals for results, three for the dBm→W exponent, six for log₁₀.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConverterConfig:
    """Formatting and plotting options for a converter session."""

    # Fixed-point precision
    result_decimals: int = 6                # displayed dBm / W values
    exponent_decimals: int = 3              # (dBm - 30) / 10 in the steps
    log_decimals: int = 6                   # log₁₀(W) in the steps

    # Transfer-curve plot range (browser view)
    curve_min_dbm: float = -30.0
    curve_max_dbm: float = 60.0
    curve_points: int = 181

    def __post_init__(self) -> None:
        for name in ("result_decimals", "exponent_decimals", "log_decimals"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.curve_max_dbm <= self.curve_min_dbm:
            raise ValueError("curve_max_dbm must be greater than curve_min_dbm")
        if self.curve_points < 2:
            raise ValueError("curve_points must be >= 2")


DEFAULT_CONFIG = ConverterConfig()
