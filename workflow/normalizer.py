"""Normalize batches of energies and lengths into canonical units."""

import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .config import NormalizationConfig
from ..energy import ENERGY_TABLES
from ..length import LENGTH_TABLES

logger = logging.getLogger(__name__)


class UnitNormalizer:
    """
    Convert incoming values into the units named by a NormalizationConfig.

    Conversion functions are resolved once at construction, so a bad
    config fails early and repeated calls skip the table lookups.

    Example:
        >>> normalizer = UnitNormalizer(NormalizationConfig(length_prefix="nm"))
        >>> lengths_nm = normalizer.normalize_lengths([1.0, 2.0])
    """

    def __init__(self, config: Optional[NormalizationConfig] = None):
        self.config = config or NormalizationConfig()
        self._energy_fn = ENERGY_TABLES[self.config.energy_target].lookup(
            self.config.energy_unit
        )
        self._length_fn = LENGTH_TABLES[self.config.length_unit].lookup(
            self.config.length_unit
        )

    def normalize_energy(self, value: float) -> float:
        """Convert a single energy to the target unit."""
        return float(self._energy_fn(float(value)))

    def normalize_length(self, value: float) -> float:
        """Convert a single length in bohr to the target unit."""
        return float(self._length_fn(float(value), self.config.length_prefix))

    def normalize_energies(self, values: ArrayLike) -> np.ndarray:
        """
        Convert an array of energies to the target unit.

        Args:
            values: Energies expressed in ``config.energy_unit``

        Returns:
            Float array in ``config.energy_target``
        """
        values = np.array(values, dtype=float)
        logger.info(
            f"Normalizing {values.size} energies: "
            f"{self.config.energy_unit} -> {self.config.energy_target}"
        )
        return self._energy_fn(values)

    def normalize_lengths(self, values: ArrayLike) -> np.ndarray:
        """
        Convert an array of lengths in bohr to the target unit.

        Args:
            values: Lengths in bohr

        Returns:
            Float array in ``config.length_label``
        """
        values = np.array(values, dtype=float)
        logger.info(
            f"Normalizing {values.size} lengths: bohr -> {self.config.length_label}"
        )
        return self._length_fn(values, self.config.length_prefix)
