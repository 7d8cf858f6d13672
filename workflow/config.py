"""Dataclass-based configuration for unit normalization."""

from dataclasses import dataclass, fields

from ..core.constants import METRIC_PREFIXES
from ..core.exceptions import ConfigurationError
from ..energy import ENERGY_TABLES
from ..length import LENGTH_TABLES


@dataclass(frozen=True)
class NormalizationConfig:
    """
    Immutable description of how incoming values are normalized.

    Attributes:
        energy_unit: Unit energies arrive in ("eV" or "rcm")
        energy_target: Canonical energy unit ("rcm" or "eV")
        length_unit: Target for lengths given in bohr ("bohr", "m" or "ang")
        length_prefix: Metric prefix for the "m" target
            ("pm", "nm", "mu", "mm", "cm" or "m")
    """
    energy_unit: str = "eV"
    energy_target: str = "rcm"
    length_unit: str = "m"
    length_prefix: str = "m"

    def __post_init__(self):
        """Check every field against the conversion tables."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{f.name} must be a unit label string, got {value!r}",
                    field_name=f.name, value=value,
                )
        if self.energy_target not in ENERGY_TABLES:
            raise ConfigurationError(
                f"energy_target must be one of {sorted(ENERGY_TABLES)}, "
                f"got {self.energy_target!r}",
                field_name="energy_target", value=self.energy_target,
            )
        if self.energy_unit not in ENERGY_TABLES[self.energy_target]:
            raise ConfigurationError(
                f"Cannot convert energies from {self.energy_unit!r} "
                f"to {self.energy_target!r}",
                field_name="energy_unit", value=self.energy_unit,
            )
        if self.length_unit not in LENGTH_TABLES:
            raise ConfigurationError(
                f"length_unit must be one of {sorted(LENGTH_TABLES)}, "
                f"got {self.length_unit!r}",
                field_name="length_unit", value=self.length_unit,
            )
        # The prefix only has meaning for metres
        if self.length_unit == "m" and self.length_prefix not in METRIC_PREFIXES:
            raise ConfigurationError(
                f"length_prefix must be one of {list(METRIC_PREFIXES)}, "
                f"got {self.length_prefix!r}",
                field_name="length_prefix", value=self.length_prefix,
            )

    @property
    def length_label(self) -> str:
        """Unit label of normalized lengths, e.g. "nm" or "ang"."""
        if self.length_unit == "m":
            return self.length_prefix
        return self.length_unit
