"""Custom exception hierarchy for phys_units."""

from typing import Iterable, Optional, Tuple


class PhysUnitsError(Exception):
    """Base exception for all phys_units errors."""
    pass


class ConfigurationError(PhysUnitsError):
    """Raised when configuration is invalid or inconsistent."""

    def __init__(self, message: str, field_name: str = None, value=None):
        super().__init__(message)
        self.field_name = field_name
        self.value = value


class UnknownUnitError(PhysUnitsError, KeyError):
    """Raised when a unit name is not a key of a conversion table."""

    def __init__(self, unit: str, table: str = None,
                 available: Optional[Iterable[str]] = None):
        self.unit = unit
        self.table = table
        self.available: Tuple[str, ...] = tuple(available or ())
        message = f"Unknown unit: {unit!r}"
        if table:
            message += f" (table: {table})"
        if self.available:
            message += f"; expected one of {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidPrefixError(PhysUnitsError, ValueError):
    """Raised when a metric prefix is not one of the recognized labels."""

    def __init__(self, prefix: str, available: Optional[Iterable[str]] = None):
        self.prefix = prefix
        self.available: Tuple[str, ...] = tuple(available or ())
        message = f"Unknown prefix: {prefix!r}"
        if self.available:
            message += f"; expected one of {', '.join(self.available)}"
        super().__init__(message)
