"""
rfpower — dBm ⇄ Watt power converter.

One conversion engine shared by a Streamlit browser page and a terminal app.
"""

__version__ = "0.1.0"

from .config import ConverterConfig
from .engine import ConverterSession, convert_dbm_to_watts, convert_watts_to_dbm
