"""Castle Builder - declare castles and assemble them into linked graphs."""

__version__ = "0.1.0"

from castle_builder.builder import CastleBuilder
from castle_builder.errors import (
    CastleAlreadyBuiltError,
    CastleDeclarationError,
    CastleError,
    DuplicateSymbolError,
    IncompleteWallError,
    UnknownSymbolError,
)
from castle_builder.models import Castle

__all__ = [
    "__version__",
    "Castle",
    "CastleBuilder",
    "CastleError",
    "CastleAlreadyBuiltError",
    "CastleDeclarationError",
    "DuplicateSymbolError",
    "IncompleteWallError",
    "UnknownSymbolError",
]
