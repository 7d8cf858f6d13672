"""Length conversion tables: bohr to metres and angstrom."""

from .conversion import (
    CONVERT_BOHR_TO_METRES,
    CONVERT_BOHR_TO_ANG,
    LENGTH_TABLES,
    bohr_to_metres,
    bohr_to_angstrom,
    lookup_bohr_to_metres,
    lookup_bohr_to_ang,
    convert_length,
)

__all__ = [
    "CONVERT_BOHR_TO_METRES",
    "CONVERT_BOHR_TO_ANG",
    "LENGTH_TABLES",
    "bohr_to_metres",
    "bohr_to_angstrom",
    "lookup_bohr_to_metres",
    "lookup_bohr_to_ang",
    "convert_length",
]
