#!/usr/bin/env python3
"""
Example: Energy and Length Unit Conversion

This script demonstrates the phys_units conversion tables from the
command line.

Key features demonstrated:
- Energy lookups between eV and reciprocal centimetres
- Bohr lengths in prefixed metres and angstrom
- Recoverable errors for unknown units and prefixes
- Batch normalization with UnitNormalizer

Usage:
    python convert_units.py --energy 1.5 --from eV --to rcm
    python convert_units.py --length 2.0 --unit m --prefix nm
    python convert_units.py --demo
"""

import argparse
import logging
import sys

from phys_units.workflow import NormalizationConfig, UnitNormalizer
from phys_units.core.exceptions import PhysUnitsError
from phys_units.energy import convert_energy
from phys_units.length import convert_length

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_demo():
    """Print a small table of conversions and a batch normalization."""
    print("=" * 70)
    print("Unit Conversion Demo")
    print("=" * 70)

    print("\nEnergies:")
    for value, unit, target in [(1.0, "eV", "rcm"), (6000.0, "rcm", "eV")]:
        result = convert_energy(value, unit, target)
        print(f"  {value:g} {unit} -> {result:.6e} {target}")

    print("\nLengths (1 bohr):")
    for prefix in ("pm", "nm", "mu", "mm", "cm", "m"):
        print(f"  {convert_length(1.0, 'm', prefix):.6e} {prefix}")
    print(f"  {convert_length(1.0, 'ang'):.6f} ang")

    print("\n" + "-" * 50)
    print("Batch normalization")
    print("-" * 50)
    normalizer = UnitNormalizer(NormalizationConfig(length_prefix="nm"))
    print(f"  energies [rcm]: {normalizer.normalize_energies([0.1, 0.2, 0.5])}")
    print(f"  lengths  [nm]:  {normalizer.normalize_lengths([1.0, 1.4, 2.0])}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Convert energies and lengths")
    parser.add_argument("--energy", type=float, help="Energy value to convert")
    parser.add_argument("--from", dest="energy_unit", default="eV",
                        help="Unit of --energy (eV or rcm)")
    parser.add_argument("--to", dest="energy_target", default="rcm",
                        help="Target energy unit (rcm or eV)")
    parser.add_argument("--length", type=float, help="Length in bohr to convert")
    parser.add_argument("--unit", default="m", help="Target length unit (bohr, m or ang)")
    parser.add_argument("--prefix", default="m",
                        help="Metric prefix for metres (pm, nm, mu, mm, cm, m)")
    parser.add_argument("--demo", action="store_true", help="Run the demo instead")
    args = parser.parse_args(argv)

    if args.demo or (args.energy is None and args.length is None):
        run_demo()
        return 0

    try:
        if args.energy is not None:
            result = convert_energy(args.energy, args.energy_unit, args.energy_target)
            print(f"{args.energy:g} {args.energy_unit} = {result:.10g} {args.energy_target}")
        if args.length is not None:
            result = convert_length(args.length, args.unit, args.prefix)
            label = args.prefix if args.unit == "m" else args.unit
            print(f"{args.length:g} bohr = {result:.10g} {label}")
    except PhysUnitsError as e:
        logger.error(f"Conversion failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
