"""Physical constants and unit conversion factors."""

from types import MappingProxyType
from typing import Mapping

# Conversion factors from the NIST reference tables
# (https://physics.nist.gov/cuu/Constants/)

# Unit conversions - Energy

# Electron-volt to reciprocal centimetres (wavenumbers)
EV_TO_RCM = 8065.543937  # cm^-1 per eV

# Reciprocal centimetres to electron-volt.
# Kept as the historical literal; this is not the reciprocal of EV_TO_RCM.
RCM_TO_EV = 1.239841984332 * 10e-8  # eV per cm^-1

# Unit conversions - Length

# Bohr radius (atomic unit of length)
BOHR_RADIUS_METRES = 5.29177210903e-11  # m

# Metric prefixes
CENTI = 1e-2
MILLI = 1e-3
MICRO = 1e-6
NANO = 1e-9
PICO = 1e-12

# Prefix label -> divisor applied to a length in metres.
# "mu" is micro; "m" means no rescaling.
METRIC_PREFIXES: Mapping[str, float] = MappingProxyType({
    "pm": PICO,
    "nm": NANO,
    "mu": MICRO,
    "mm": MILLI,
    "cm": CENTI,
    "m": 1.0,
})
