"""Workflow helpers for normalizing values into canonical units."""

from .config import NormalizationConfig
from .normalizer import UnitNormalizer

__all__ = [
    "NormalizationConfig",
    "UnitNormalizer",
]
