"""Read-only conversion tables keyed by unit name."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Tuple

from .exceptions import UnknownUnitError

logger = logging.getLogger(__name__)


class ConversionTable(Mapping):
    """
    Immutable mapping from a unit label to a conversion function.

    Keys are case-sensitive unit labels ("eV", "rcm", "bohr", ...). The
    mapping is populated once in the constructor and exposes no way to
    add, replace or remove entries afterwards.

    Attributes:
        name: Human readable description, e.g. "bohr -> metres"
    """

    __slots__ = ("name", "_entries")

    def __init__(self, name: str, entries: Dict[str, Callable]):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries)))
        logger.debug(f"Built conversion table '{name}': {', '.join(self.units)}")

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __reduce__(self):
        return (type(self), (self.name, dict(self._entries)))

    def __getitem__(self, unit: str) -> Callable:
        try:
            return self._entries[unit]
        except (KeyError, TypeError):
            logger.debug(f"Lookup of unknown unit {unit!r} in '{self.name}'")
            raise UnknownUnitError(unit, table=self.name, available=self.units) from None

    def __contains__(self, unit) -> bool:
        try:
            return unit in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ConversionTable({self.name!r}, units={self.units})"

    @property
    def units(self) -> Tuple[str, ...]:
        """Sorted tuple of supported unit labels."""
        return tuple(sorted(self._entries))

    def lookup(self, unit: str) -> Callable:
        """
        Return the conversion function registered for a unit.

        Args:
            unit: Unit label (case-sensitive)

        Returns:
            Conversion function for that unit

        Raises:
            UnknownUnitError: If the unit is not in this table
        """
        return self[unit]
