"""Tests for length conversion tables (bohr -> metres / angstrom)."""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from phys_units.length import (
    CONVERT_BOHR_TO_METRES,
    CONVERT_BOHR_TO_ANG,
    bohr_to_metres,
    bohr_to_angstrom,
    lookup_bohr_to_metres,
    lookup_bohr_to_ang,
    convert_length,
)
from phys_units.core.constants import BOHR_RADIUS_METRES, METRIC_PREFIXES
from phys_units.core.exceptions import (
    InvalidPrefixError,
    UnknownUnitError,
    PhysUnitsError,
)


class TestBohrToMetres:
    """Tests for the bohr -> metres table."""

    def test_bohr_to_metres(self):
        """Test 1 bohr in metres."""
        assert lookup_bohr_to_metres("m")(1.0, "m") == 5.29177210903e-11

    def test_bohr_to_nanometres(self):
        """Test 1 bohr in nanometres."""
        assert lookup_bohr_to_metres("m")(1.0, "nm") == 5.29177210903e-2

    @pytest.mark.parametrize("prefix,expected", [
        ("pm", 52.9177210903),
        ("nm", 5.29177210903e-2),
        ("mu", 5.29177210903e-5),
        ("mm", 5.29177210903e-8),
        ("cm", 5.29177210903e-9),
        ("m", 5.29177210903e-11),
    ])
    def test_all_prefixes(self, prefix, expected):
        """Test every recognized metric prefix."""
        assert_allclose(lookup_bohr_to_metres("m")(1.0, prefix), expected, rtol=1e-14)

    def test_prefix_scaling_formula(self, bohr_grid):
        """Test result = value * BOHR_RADIUS_METRES / divisor."""
        fn = lookup_bohr_to_metres("m")
        for prefix, divisor in METRIC_PREFIXES.items():
            assert_allclose(fn(bohr_grid, prefix),
                            bohr_grid * BOHR_RADIUS_METRES / divisor, rtol=0)

    def test_default_prefix_is_metres(self):
        """Test bohr_to_metres without a prefix gives metres."""
        assert bohr_to_metres(2.0) == 2.0 * BOHR_RADIUS_METRES

    def test_bohr_identity_ignores_prefix(self, sample_values, odd_prefixes):
        """Test bohr -> bohr returns the value for any prefix string."""
        fn = lookup_bohr_to_metres("bohr")
        for prefix in odd_prefixes + list(METRIC_PREFIXES):
            assert fn(1.0, prefix) == 1.0
        for x in sample_values:
            assert fn(x, "km") == x

    def test_table_keys(self):
        """Test the table holds exactly the supported units."""
        assert set(CONVERT_BOHR_TO_METRES) == {"bohr", "m"}
        assert CONVERT_BOHR_TO_METRES["m"] is bohr_to_metres


class TestInvalidPrefix:
    """Unknown prefixes raise a recoverable error."""

    def test_unknown_prefix_raises(self):
        """Test 'km' raises InvalidPrefixError naming the prefix."""
        with pytest.raises(InvalidPrefixError) as exc_info:
            lookup_bohr_to_metres("m")(1.0, "km")
        assert exc_info.value.prefix == "km"
        assert "km" in str(exc_info.value)

    def test_error_lists_available_prefixes(self):
        """Test the error carries the accepted prefixes."""
        with pytest.raises(InvalidPrefixError) as exc_info:
            bohr_to_metres(1.0, "fm")
        assert set(exc_info.value.available) == set(METRIC_PREFIXES)

    def test_odd_prefixes_rejected(self, odd_prefixes):
        """Test near-miss prefix strings are rejected."""
        fn = lookup_bohr_to_metres("m")
        for prefix in odd_prefixes:
            with pytest.raises(InvalidPrefixError):
                fn(1.0, prefix)

    def test_invalid_prefix_error_hierarchy(self):
        """Test the error is a ValueError and a PhysUnitsError."""
        with pytest.raises(ValueError):
            bohr_to_metres(1.0, "km")
        with pytest.raises(PhysUnitsError):
            bohr_to_metres(1.0, "km")

    def test_recoverable(self):
        """Test conversions keep working after a rejected prefix."""
        fn = lookup_bohr_to_metres("m")
        with pytest.raises(InvalidPrefixError):
            fn(1.0, "km")
        assert fn(1.0, "m") == 5.29177210903e-11


class TestBohrToAngstrom:
    """Tests for the bohr -> angstrom table."""

    def test_bohr_to_angstrom(self):
        """Test 1 bohr in angstrom."""
        assert lookup_bohr_to_ang("ang")(1.0, "ang") == 5.29177210903e-1

    def test_prefix_ignored(self, odd_prefixes):
        """Test the angstrom conversion accepts any prefix string."""
        fn = lookup_bohr_to_ang("ang")
        for prefix in odd_prefixes + ["m", "nm", "km"]:
            assert fn(1.0, prefix) == 5.29177210903e-1

    def test_default_prefix(self):
        """Test bohr_to_angstrom can be called without a prefix."""
        assert bohr_to_angstrom(1.0) == 5.29177210903e-1

    def test_matches_nanometres_times_ten(self, bohr_grid):
        """Test angstrom = nanometres * 10."""
        assert_allclose(bohr_to_angstrom(bohr_grid),
                        bohr_to_metres(bohr_grid, "nm") * 10.0, rtol=0)

    def test_bohr_identity(self, sample_values):
        """Test bohr -> bohr in the angstrom table."""
        fn = lookup_bohr_to_ang("bohr")
        for x in sample_values:
            assert fn(x, "ang") == x

    def test_table_keys(self):
        """Test the table holds exactly the supported units."""
        assert set(CONVERT_BOHR_TO_ANG) == {"bohr", "ang"}


class TestUnknownLengthUnit:
    """Tests for lookups of unsupported length units."""

    @pytest.mark.parametrize("lookup", [lookup_bohr_to_metres, lookup_bohr_to_ang])
    def test_unknown_unit_raises(self, lookup):
        """Test an unknown unit raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError) as exc_info:
            lookup("parsec")
        assert exc_info.value.unit == "parsec"

    def test_cross_table_units_rejected(self):
        """Test each table only knows its own target."""
        with pytest.raises(UnknownUnitError):
            lookup_bohr_to_metres("ang")
        with pytest.raises(UnknownUnitError):
            lookup_bohr_to_ang("m")


class TestConvertLength:
    """Tests for the convert_length helper."""

    def test_metres_with_prefix(self):
        """Test convert_length into nanometres."""
        assert convert_length(1.0, "m", "nm") == 5.29177210903e-2

    def test_angstrom(self):
        """Test convert_length into angstrom ignores the prefix."""
        assert convert_length(1.0, "ang", "km") == 5.29177210903e-1

    def test_bohr(self):
        """Test convert_length to bohr is the identity."""
        assert convert_length(3.5, "bohr") == 3.5

    def test_array_input(self, bohr_grid):
        """Test convert_length handles arrays."""
        result = convert_length(bohr_grid, "m", "pm")
        assert isinstance(result, np.ndarray)
        assert result.shape == bohr_grid.shape

    def test_unknown_unit(self):
        """Test an unknown unit raises UnknownUnitError."""
        with pytest.raises(UnknownUnitError):
            convert_length(1.0, "furlong")

    def test_unknown_prefix(self):
        """Test an unknown prefix for metres raises InvalidPrefixError."""
        with pytest.raises(InvalidPrefixError):
            convert_length(1.0, "m", "km")
