"""
phys_units - Energy and Length Unit Conversion Tables

Frozen lookup tables mapping unit names to scalar conversion functions,
for electron-volt / reciprocal-centimetre energies and bohr lengths in
(prefixed) metres or angstrom.
"""

__version__ = "0.1.0"

from .core.exceptions import PhysUnitsError, UnknownUnitError, InvalidPrefixError
from .energy import lookup_to_rcm, lookup_to_ev, convert_energy
from .length import lookup_bohr_to_metres, lookup_bohr_to_ang, convert_length

__all__ = [
    "PhysUnitsError",
    "UnknownUnitError",
    "InvalidPrefixError",
    "lookup_to_rcm",
    "lookup_to_ev",
    "convert_energy",
    "lookup_bohr_to_metres",
    "lookup_bohr_to_ang",
    "convert_length",
]
