"""Symbol table mapping structure names to structure instances.

Walls are declared between names; the table turns those names back
into the structures they were registered for.
"""

from dataclasses import dataclass, field

import structlog

from castle_builder.errors import DuplicateSymbolError, UnknownSymbolError
from castle_builder.models.structures import Structure

log = structlog.get_logger(__name__)


@dataclass
class SymbolTable:
    """In-memory name -> structure table used during assembly."""

    _symbols: dict[str, Structure] = field(default_factory=dict)

    def register(self, name: str, entity: Structure) -> None:
        """Register a structure under a name.

        Raises:
            ValueError: If the name is empty
            DuplicateSymbolError: If the name is already registered
        """
        if not name:
            raise ValueError("Symbol name must not be empty")
        if name in self._symbols:
            raise DuplicateSymbolError(name)
        self._symbols[name] = entity
        log.debug("symbol_registered", name=name, kind=type(entity).__name__)

    def replace(self, name: str, entity: Structure) -> Structure:
        """Swap the structure behind an existing name.

        Returns:
            The structure that was previously registered

        Raises:
            UnknownSymbolError: If the name was never registered
        """
        previous = self.resolve(name)
        self._symbols[name] = entity
        log.debug("symbol_replaced", name=name, kind=type(entity).__name__)
        return previous

    def resolve(self, name: str) -> Structure:
        """Look up a structure by name.

        Raises:
            UnknownSymbolError: If the name was never registered
        """
        try:
            return self._symbols[name]
        except KeyError:
            raise UnknownSymbolError(name) from None

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
