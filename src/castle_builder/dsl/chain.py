"""Fluent chain declarations.

    castle = ChainBuilder()
    castle.tower("sw").catapult().wall().tower("nw").wall().drawbridge().tower("ne")
    castle.keep().tower("sw").tower("nw")
    result = castle.build()

Each ``wall()`` opens a wall at the current tower; ``tower(name)`` on
the wall declares the next tower and closes the wall onto it, while
``to(name)`` closes it onto a structure declared elsewhere.
"""

from castle_builder.assembler import WallSpec
from castle_builder.builder import CastleBuilder, KeepBuilder, TowerBuilder
from castle_builder.models.castle import Castle


class ChainBuilder:
    """Entry point for chained declarations."""

    def __init__(self, castle_builder: CastleBuilder | None = None):
        self.castle_builder = castle_builder or CastleBuilder()

    def tower(self, name: str) -> "ChainTower":
        return ChainTower(self, self.castle_builder.tower(name))

    def keep(self, name: str | None = None) -> "ChainKeep":
        return ChainKeep(self.castle_builder.keep(name))

    def build(self) -> Castle:
        return self.castle_builder.build()


class ChainTower:
    def __init__(self, chain: ChainBuilder, tower: TowerBuilder):
        self.chain = chain
        self.tower_builder = tower

    @property
    def name(self) -> str:
        return self.tower_builder.name

    def catapult(self) -> "ChainTower":
        self.tower_builder.catapult()
        return self

    def wall(self) -> "ChainWall":
        """Open a wall starting at this tower."""
        spec = self.chain.castle_builder.connect(self.name)
        return ChainWall(self.chain, spec)


class ChainWall:
    def __init__(self, chain: ChainBuilder, spec: WallSpec):
        self.chain = chain
        self.spec = spec

    def drawbridge(self) -> "ChainWall":
        self.chain.castle_builder.require_open()
        self.spec.drawbridge = True
        return self

    def tower(self, name: str) -> ChainTower:
        """Declare a new tower and end the wall there."""
        tower = self.chain.tower(name)
        self.spec.target = name
        return tower

    def to(self, name: str) -> ChainBuilder:
        """End the wall at an already declared structure."""
        self.chain.castle_builder.require_open()
        self.spec.target = name
        return self.chain


class ChainKeep:
    def __init__(self, keep: KeepBuilder):
        self.keep_builder = keep

    def building(self, name: str) -> "ChainKeep":
        self.keep_builder.building(name)
        return self

    def hall(self, name: str = "", capacity: int = 0, color: str | None = None, features: tuple = ()) -> "ChainKeep":
        self.keep_builder.hall(name, capacity=capacity, color=color, features=features)
        return self

    def tower(self, name: str) -> "ChainKeep":
        """Wall the keep to the named tower."""
        self.keep_builder.to(name)
        return self
