"""Energy conversion tables: eV and reciprocal centimetres."""

from .conversion import (
    CONVERT_TO_RCM,
    CONVERT_TO_EV,
    ENERGY_TABLES,
    ev_to_rcm,
    rcm_to_ev,
    lookup_to_rcm,
    lookup_to_ev,
    convert_energy,
)

__all__ = [
    "CONVERT_TO_RCM",
    "CONVERT_TO_EV",
    "ENERGY_TABLES",
    "ev_to_rcm",
    "rcm_to_ev",
    "lookup_to_rcm",
    "lookup_to_ev",
    "convert_energy",
]
