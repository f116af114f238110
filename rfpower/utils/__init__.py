"""Unit helpers and reference constants."""

from .units import dbm_exponent, dbm_to_watts, watts_to_dbm
