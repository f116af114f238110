"""
Bidirectional dBm ⇄ Watt conversion of raw field text.

Both entry points accept whatever is currently typed into a field and never
raise: incomplete or invalid text (empty, "-", "1e", "abc"), non-positive
power and results too large for a float all produce a *cleared* Conversion.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from ..config import ConverterConfig, DEFAULT_CONFIG
from ..utils.constants import FIELD_DBM, FIELD_WATTS
from ..utils.units import dbm_exponent, dbm_to_watts, watts_to_dbm
from .derivation import Derivation, dbm_to_watts_derivation, watts_to_dbm_derivation
from .parsing import format_fixed, format_plain, parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting one field into the other."""
    source: str                                 # field the text came from
    input_value: Optional[float] = None         # parsed field text
    value: Optional[float] = None               # converted value, None if cleared
    display: str = ""                           # fixed-point text for the other field
    derivation: Optional[Derivation] = None

    @property
    def cleared(self) -> bool:
        return self.value is None

    @property
    def operating_point(self) -> Optional[tuple[float, float]]:
        """(dBm, W) pair this conversion lands on, or None if cleared."""
        if self.cleared:
            return None
        if self.source == FIELD_DBM:
            return self.input_value, self.value
        return self.value, self.input_value

    @property
    def explanation(self) -> str:
        if self.derivation is None:
            return ""
        return self.derivation.render()


def convert_dbm_to_watts(text: str, config: ConverterConfig = DEFAULT_CONFIG) -> Conversion:
    """Convert dBm field text to the Watt display value and its derivation."""
    dbm = parse_number(text)
    if dbm is None:
        logger.debug("dBm text %r is not a number; clearing Watt field", text)
        return Conversion(source=FIELD_DBM)

    exponent = dbm_exponent(dbm)
    try:
        watts = dbm_to_watts(dbm)
    except OverflowError:
        logger.debug("%s dBm overflows a float Watt value; clearing", dbm)
        return Conversion(source=FIELD_DBM)

    watts_text = format_fixed(watts, config.result_decimals)
    derivation = dbm_to_watts_derivation(
        format_plain(dbm),
        format_fixed(exponent, config.exponent_decimals),
        watts_text,
    )
    return Conversion(source=FIELD_DBM, input_value=dbm, value=watts,
                      display=watts_text, derivation=derivation)


def convert_watts_to_dbm(text: str, config: ConverterConfig = DEFAULT_CONFIG) -> Conversion:
    """Convert Watt field text to the dBm display value and its derivation."""
    watts = parse_number(text)
    if watts is None or watts <= 0:
        # Zero and negative power have no dBm level; same as unfinished input
        logger.debug("Watt text %r has no dBm level; clearing dBm field", text)
        return Conversion(source=FIELD_WATTS)

    log_value = math.log10(watts)
    dbm = watts_to_dbm(watts)

    dbm_text = format_fixed(dbm, config.result_decimals)
    derivation = watts_to_dbm_derivation(
        format_plain(watts),
        format_fixed(log_value, config.log_decimals),
        dbm_text,
    )
    return Conversion(source=FIELD_WATTS, input_value=watts, value=dbm,
                      display=dbm_text, derivation=derivation)
