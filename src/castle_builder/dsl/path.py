"""Path-style declarations that remember where the last wall ended.

    castle = PathBuilder()
    castle.start("sw").to("nw").to("ne").to("se")
    castle.fix("keep").fix_to("sw").fix_to("nw")
    to = castle.connect_from("keep")
    to("ne")
"""

from functools import partial
from typing import Callable

from castle_builder.builder import CastleBuilder, KeepBuilder
from castle_builder.models.castle import Castle


class PathBuilder:
    """Declares walls relative to a remembered current position."""

    def __init__(self, castle_builder: CastleBuilder | None = None):
        self.castle_builder = castle_builder or CastleBuilder()
        self.last: str | None = None

    def tower(self, name: str, catapult: bool = False) -> "PathBuilder":
        self.castle_builder.tower(name, catapult=catapult)
        return self

    def keep(self, name: str | None = None) -> KeepBuilder:
        return self.castle_builder.keep(name)

    def start(self, name: str) -> "PathBuilder":
        """Move to ``name`` without building a wall."""
        self.last = name
        return self

    def to(self, name: str, drawbridge: bool = False) -> "PathBuilder":
        """Wall from the current position to ``name``, then move there."""
        if self.last is not None:
            self.castle_builder.connect(self.last, name, drawbridge=drawbridge)
        self.last = name
        return self

    def fix(self, name: str) -> "PathBuilder":
        """Pin the origin for following ``fix_to`` calls."""
        return self.start(name)

    def fix_to(self, name: str, drawbridge: bool = False) -> "PathBuilder":
        """Wall from the pinned origin to ``name`` without moving."""
        if self.last is not None:
            self.castle_builder.connect(self.last, name, drawbridge=drawbridge)
        return self

    def connect_from(self, source: str) -> Callable[..., "PathBuilder"]:
        """Return a function that walls ``source`` to its argument."""
        return partial(self._connect, source)

    def _connect(self, source: str, target: str, drawbridge: bool = False) -> "PathBuilder":
        self.castle_builder.connect(source, target, drawbridge=drawbridge)
        return self

    def build(self) -> Castle:
        return self.castle_builder.build()
