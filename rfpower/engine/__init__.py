"""Conversion engine: text parsing, dBm ⇄ W conversion, derivations, session state."""

from .conversion import Conversion, convert_dbm_to_watts, convert_watts_to_dbm
from .derivation import Derivation
from .session import ClearUpdate, ConverterSession, DbmUpdate, WattsUpdate
