"""
Energy unit conversions between electron-volt and reciprocal centimetres.

Every conversion is a single multiplication by a constant from
``core.constants``; no rounding is applied. Functions accept floats or
numpy arrays.
"""

import logging
from typing import Callable, Dict

from ..core.constants import EV_TO_RCM, RCM_TO_EV
from ..core.exceptions import UnknownUnitError
from ..core.table import ConversionTable

logger = logging.getLogger(__name__)

EnergyConversion = Callable[[float], float]


def unity(energy: float) -> float:
    """Return the energy unchanged."""
    return energy


def ev_to_rcm(energy_ev: float) -> float:
    """Convert energy from eV to cm^-1."""
    return energy_ev * EV_TO_RCM


def rcm_to_ev(energy_rcm: float) -> float:
    """Convert energy from cm^-1 to eV."""
    return energy_rcm * RCM_TO_EV


CONVERT_TO_RCM = ConversionTable("energy -> rcm", {
    "rcm": unity,
    "eV": ev_to_rcm,
})

CONVERT_TO_EV = ConversionTable("energy -> eV", {
    "eV": unity,
    "rcm": rcm_to_ev,
})

# Target unit -> table converting into it
ENERGY_TABLES: Dict[str, ConversionTable] = {
    "rcm": CONVERT_TO_RCM,
    "eV": CONVERT_TO_EV,
}


def lookup_to_rcm(unit: str) -> EnergyConversion:
    """
    Get the function converting an energy in ``unit`` to cm^-1.

    Raises:
        UnknownUnitError: If ``unit`` is not "rcm" or "eV"
    """
    return CONVERT_TO_RCM.lookup(unit)


def lookup_to_ev(unit: str) -> EnergyConversion:
    """
    Get the function converting an energy in ``unit`` to eV.

    Raises:
        UnknownUnitError: If ``unit`` is not "eV" or "rcm"
    """
    return CONVERT_TO_EV.lookup(unit)


def convert_energy(value: float, unit: str, target: str = "rcm") -> float:
    """
    Convert an energy between supported units.

    Args:
        value: Energy (scalar or array) expressed in ``unit``
        unit: Source unit label ("eV" or "rcm")
        target: Target unit label ("rcm" or "eV")

    Returns:
        Energy expressed in ``target``

    Raises:
        UnknownUnitError: If either unit is not supported
    """
    if not isinstance(target, str) or target not in ENERGY_TABLES:
        logger.debug(f"Rejected energy target {target!r}")
        raise UnknownUnitError(target, table="energy targets",
                               available=sorted(ENERGY_TABLES))
    return ENERGY_TABLES[target].lookup(unit)(value)
