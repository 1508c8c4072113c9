"""Graph assembly: resolve declared walls into a castle.

Structures are registered by name, then each declared wall is resolved
from its endpoint names to the registered structures. Assembly is
all-or-nothing; the first bad declaration raises and no castle is
returned.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from castle_builder.errors import CastleError, IncompleteWallError
from castle_builder.models.castle import Castle, DrawBridge, Wall
from castle_builder.models.structures import Keep, Tower
from castle_builder.registry import SymbolTable

log = structlog.get_logger(__name__)


@dataclass
class WallSpec:
    """A declared wall, still expressed in names."""

    source: str
    target: str | None = None
    drawbridge: bool = False


def build_symbol_table(keep: Keep | None, towers: Iterable[Tower]) -> SymbolTable:
    """Register every tower, then the keep."""
    symbols = SymbolTable()
    for tower in towers:
        symbols.register(tower.name, tower)
    if keep is not None:
        symbols.register(keep.name, keep)
    return symbols


def resolve_wall(spec: WallSpec, symbols: SymbolTable) -> Wall:
    """Turn one wall declaration into a wall between structures."""
    if spec.target is None:
        raise IncompleteWallError(spec.source)

    source = symbols.resolve(spec.source)
    target = symbols.resolve(spec.target)
    return Wall(
        source=source,
        target=target,
        drawbridge=DrawBridge() if spec.drawbridge else None,
    )


def assemble(keep: Keep | None, towers: Iterable[Tower], walls: Iterable[WallSpec]) -> Castle:
    """Assemble the castle from built structures and wall declarations.

    Args:
        keep: The keep, if the castle has one
        towers: Towers in declaration order
        walls: Wall declarations in declaration order

    Returns:
        The immutable castle; walls keep their declaration order

    Raises:
        DuplicateSymbolError: Two structures share a name
        IncompleteWallError: A wall has no destination
        UnknownSymbolError: A wall names a structure that was never declared
    """
    towers = list(towers)
    walls = list(walls)
    log.debug("assembly_started", towers=len(towers), walls=len(walls), has_keep=keep is not None)

    try:
        symbols = build_symbol_table(keep, towers)
        resolved = [resolve_wall(spec, symbols) for spec in walls]
    except CastleError as e:
        log.info("assembly_failed", error=type(e).__name__, detail=str(e))
        raise

    castle = Castle(keep=keep, towers=towers, walls=resolved)
    log.info(
        "castle_assembled",
        towers=len(castle.towers),
        walls=len(castle.walls),
        drawbridges=sum(1 for w in castle.walls if w.has_drawbridge),
    )
    return castle
