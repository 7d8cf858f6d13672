"""Core infrastructure: constants, exceptions and tables."""

from .constants import (
    EV_TO_RCM,
    RCM_TO_EV,
    BOHR_RADIUS_METRES,
    METRIC_PREFIXES,
)
from .exceptions import (
    PhysUnitsError,
    ConfigurationError,
    UnknownUnitError,
    InvalidPrefixError,
)
from .table import ConversionTable

__all__ = [
    "EV_TO_RCM",
    "RCM_TO_EV",
    "BOHR_RADIUS_METRES",
    "METRIC_PREFIXES",
    "PhysUnitsError",
    "ConfigurationError",
    "UnknownUnitError",
    "InvalidPrefixError",
    "ConversionTable",
]
