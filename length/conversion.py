"""
Length unit conversions from bohr radii to metres and angstrom.

Both table directions share the ``f(value, prefix)`` calling convention so
they can be swapped freely. Only the metre conversion interprets the
prefix; the angstrom conversion accepts and ignores it.
"""

import logging
from typing import Callable, Dict, Optional

from ..core.constants import BOHR_RADIUS_METRES, METRIC_PREFIXES
from ..core.exceptions import InvalidPrefixError, UnknownUnitError
from ..core.table import ConversionTable

logger = logging.getLogger(__name__)

LengthConversion = Callable[[float, str], float]


def unity(length: float, prefix: Optional[str] = None) -> float:
    """Return the length unchanged. ``prefix`` is ignored."""
    return length


def bohr_to_metres(length_bohr: float, prefix: str = "m") -> float:
    """
    Convert length from bohr to (prefixed) metres.

    Args:
        length_bohr: Length in bohr (scalar or array)
        prefix: One of "pm", "nm", "mu", "mm", "cm", "m". Scales the
            result to pico-, nano-, micro-, milli-, centi-metres or not
            at all.

    Returns:
        Length in the requested metric unit

    Raises:
        InvalidPrefixError: If ``prefix`` is not a recognized label
    """
    try:
        scale = METRIC_PREFIXES[prefix]
    except (KeyError, TypeError):
        logger.debug(f"Rejected metric prefix {prefix!r}")
        raise InvalidPrefixError(prefix, available=METRIC_PREFIXES) from None
    return length_bohr * BOHR_RADIUS_METRES / scale


def bohr_to_angstrom(length_bohr: float, prefix: str = "ang") -> float:
    """
    Convert length from bohr to angstrom.

    ``prefix`` exists for parity with :func:`bohr_to_metres` and is not
    validated.
    """
    return bohr_to_metres(length_bohr, "nm") * 10.0


CONVERT_BOHR_TO_METRES = ConversionTable("bohr -> metres", {
    "bohr": unity,
    "m": bohr_to_metres,
})

CONVERT_BOHR_TO_ANG = ConversionTable("bohr -> angstrom", {
    "bohr": unity,
    "ang": bohr_to_angstrom,
})

# Target unit -> table holding its conversion
LENGTH_TABLES: Dict[str, ConversionTable] = {
    "bohr": CONVERT_BOHR_TO_METRES,
    "m": CONVERT_BOHR_TO_METRES,
    "ang": CONVERT_BOHR_TO_ANG,
}


def lookup_bohr_to_metres(unit: str) -> LengthConversion:
    """
    Get the ``f(value, prefix)`` function for a bohr -> metres lookup.

    Raises:
        UnknownUnitError: If ``unit`` is not "bohr" or "m"
    """
    return CONVERT_BOHR_TO_METRES.lookup(unit)


def lookup_bohr_to_ang(unit: str) -> LengthConversion:
    """
    Get the ``f(value, prefix)`` function for a bohr -> angstrom lookup.

    Raises:
        UnknownUnitError: If ``unit`` is not "bohr" or "ang"
    """
    return CONVERT_BOHR_TO_ANG.lookup(unit)


def convert_length(length_bohr: float, unit: str = "m", prefix: str = "m") -> float:
    """
    Convert a length given in bohr to ``unit``.

    Args:
        length_bohr: Length in bohr (scalar or array)
        unit: Target unit ("bohr", "m" or "ang")
        prefix: Metric prefix, only used when ``unit`` is "m"

    Returns:
        Converted length

    Raises:
        UnknownUnitError: If ``unit`` is not supported
        InvalidPrefixError: If ``unit`` is "m" and ``prefix`` is not recognized
    """
    if not isinstance(unit, str) or unit not in LENGTH_TABLES:
        logger.debug(f"Rejected length target {unit!r}")
        raise UnknownUnitError(unit, table="length targets",
                               available=sorted(LENGTH_TABLES))
    return LENGTH_TABLES[unit].lookup(unit)(length_bohr, prefix)
