"""Nested block declarations using context managers.

    castle = BlockBuilder()
    with castle.keep() as keep:
        keep.building("dungeon")
        keep.hall(capacity=10, features=["fireplace"])
    castle.connect("keep", "ne")
    with castle.towers() as towers:
        towers.tower("ne", catapult=True)
        towers.drawbridge()
        towers.tower("nw")
    result = castle.build()

Inside a ``towers()`` block every tower is walled to the tower declared
before it; ``drawbridge()`` puts a drawbridge on the next of those walls.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from castle_builder.builder import CastleBuilder, HallBuilder, KeepBuilder
from castle_builder.errors import CastleDeclarationError
from castle_builder.models.castle import Castle
from castle_builder.models.structures import HallFeature


class KeepBlock:
    def __init__(self, keep: KeepBuilder):
        self.keep_builder = keep

    def building(self, name: str) -> None:
        self.keep_builder.building(name)

    def hall(
        self,
        name: str = "",
        capacity: int = 0,
        color: str | None = None,
        features: Iterable[HallFeature | str] = (),
    ) -> HallBuilder:
        return self.keep_builder.hall(name, capacity=capacity, color=color, features=tuple(features))

    def to(self, target: str) -> None:
        self.keep_builder.to(target)


class TowerBlock:
    def __init__(self, castle_builder: CastleBuilder):
        self.castle_builder = castle_builder
        self.last_tower: str | None = None
        self.pending_drawbridge = False

    def tower(self, name: str, catapult: bool = False) -> None:
        self.castle_builder.tower(name, catapult=catapult)
        if self.last_tower is not None:
            self.castle_builder.connect(self.last_tower, name, drawbridge=self.pending_drawbridge)
            self.pending_drawbridge = False
        self.last_tower = name

    def drawbridge(self) -> None:
        """Put a drawbridge on the wall to the next tower in this block."""
        self.castle_builder.require_open()
        if self.last_tower is None:
            raise CastleDeclarationError("drawbridge() must follow a tower in the same block")
        self.pending_drawbridge = True


class BlockBuilder:
    """Entry point for block-structured declarations."""

    def __init__(self, castle_builder: CastleBuilder | None = None):
        self.castle_builder = castle_builder or CastleBuilder()

    @contextmanager
    def keep(self, name: str | None = None) -> Iterator[KeepBlock]:
        yield KeepBlock(self.castle_builder.keep(name))

    @contextmanager
    def towers(self) -> Iterator[TowerBlock]:
        block = TowerBlock(self.castle_builder)
        yield block
        if block.pending_drawbridge:
            raise CastleDeclarationError("drawbridge() must be followed by a tower in the same block")

    def connect(self, source: str, target: str, drawbridge: bool = False) -> None:
        self.castle_builder.connect(source, target, drawbridge=drawbridge)

    def build(self) -> Castle:
        return self.castle_builder.build()
