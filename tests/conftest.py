"""Pytest fixtures for phys_units tests."""

import pytest
import numpy as np

from phys_units.workflow import NormalizationConfig, UnitNormalizer


@pytest.fixture
def sample_values():
    """Finite scalars spanning sign and magnitude."""
    return [0.0, 1.0, -2.5, 1e-12, 3.14159, 6000.0, 1e8]


@pytest.fixture
def bohr_grid():
    """Array of bond-length-like values in bohr."""
    return np.linspace(0.5, 5.0, 10)


@pytest.fixture
def odd_prefixes():
    """Prefix strings that are not metric prefix labels."""
    return ["km", "", "M", "NM", "ang", "nano", "µm"]


@pytest.fixture
def nm_config():
    """Energies eV -> rcm, lengths bohr -> nm."""
    return NormalizationConfig(
        energy_unit="eV",
        energy_target="rcm",
        length_unit="m",
        length_prefix="nm",
    )


@pytest.fixture
def nm_normalizer(nm_config):
    """UnitNormalizer built from nm_config."""
    return UnitNormalizer(nm_config)
