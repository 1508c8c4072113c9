"""Staging builder for castle declarations.

A :class:`CastleBuilder` collects the keep, towers and walls of one
castle. Nothing is resolved until :meth:`CastleBuilder.build`, which
hands the declarations to the assembler exactly once.
"""

from enum import Enum

from castle_builder.assembler import WallSpec, assemble
from castle_builder.config import get_settings
from castle_builder.errors import CastleAlreadyBuiltError, CastleDeclarationError
from castle_builder.models.castle import Castle
from castle_builder.models.structures import Hall, HallFeature, Keep, NamedBuilding, Tower


class BuildState(str, Enum):
    """Lifecycle of a castle under construction."""

    EMPTY = "empty"
    DECLARING = "declaring"
    ASSEMBLED = "assembled"


class CastleBuilder:
    """Collects declarations for a single castle."""

    def __init__(self):
        self._keep: KeepBuilder | None = None
        self._towers: list[TowerBuilder] = []
        self._walls: list[WallSpec] = []
        self._state = BuildState.EMPTY

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def wall_specs(self) -> list[WallSpec]:
        """Declared walls, in declaration order."""
        return list(self._walls)

    @property
    def tower_names(self) -> list[str]:
        return [t.name for t in self._towers]

    @property
    def keep_name(self) -> str | None:
        return self._keep.name if self._keep else None

    def require_open(self) -> None:
        """Raise if the castle is already built; otherwise mark it as being declared."""
        if self._state is BuildState.ASSEMBLED:
            raise CastleAlreadyBuiltError("Castle already built; start a new builder")
        self._state = BuildState.DECLARING

    def keep(self, name: str | None = None) -> "KeepBuilder":
        """Declare the keep, or return the one already declared.

        Args:
            name: Keep name (defaults to the configured keep name)
        """
        self.require_open()
        if name == "":
            raise ValueError("Keep name must not be empty")
        if self._keep is not None:
            if name is not None and name != self._keep.name:
                raise CastleDeclarationError(
                    f"Castle already has a keep named {self._keep.name!r}, cannot add {name!r}"
                )
            return self._keep

        self._keep = KeepBuilder(self, name if name is not None else get_settings().default_keep_name)
        return self._keep

    def tower(self, name: str, catapult: bool = False) -> "TowerBuilder":
        """Declare a tower."""
        self.require_open()
        if not name:
            raise ValueError("Tower name must not be empty")
        tower = TowerBuilder(self, name, catapult)
        self._towers.append(tower)
        return tower

    def connect(self, source: str, target: str | None = None, drawbridge: bool = False) -> WallSpec:
        """Declare a wall from ``source`` to ``target``.

        The target may be left unset and filled in on the returned spec
        before building.
        """
        self.require_open()
        spec = WallSpec(source=source, target=target, drawbridge=drawbridge)
        self._walls.append(spec)
        return spec

    def build(self) -> Castle:
        """Assemble the declared castle.

        On failure the builder stays open so the declarations can be
        corrected. On success it is sealed.
        """
        if self._state is BuildState.ASSEMBLED:
            raise CastleAlreadyBuiltError("Castle already built; start a new builder")

        keep = self._keep.build() if self._keep else None
        towers = [t.build() for t in self._towers]
        castle = assemble(keep, towers, self._walls)
        self._state = BuildState.ASSEMBLED
        return castle


class TowerBuilder:
    """Declaration of a single tower."""

    def __init__(self, castle_builder: CastleBuilder, name: str, has_catapult: bool = False):
        self.castle_builder = castle_builder
        self.name = name
        self.has_catapult = has_catapult

    def catapult(self) -> "TowerBuilder":
        """Put a catapult on the tower."""
        self.castle_builder.require_open()
        self.has_catapult = True
        return self

    def build(self) -> Tower:
        return Tower(name=self.name, has_catapult=self.has_catapult)


class KeepBuilder:
    """Declaration of the keep and the buildings inside it."""

    def __init__(self, castle_builder: CastleBuilder, name: str):
        self.castle_builder = castle_builder
        self.name = name
        self.buildings: list[NamedBuilding | HallBuilder] = []

    def building(self, name: str) -> "KeepBuilder":
        """Add a building known only by name (e.g. "dungeon")."""
        self.castle_builder.require_open()
        self.buildings.append(NamedBuilding(name=name))
        return self

    def hall(
        self,
        name: str = "",
        capacity: int = 0,
        color: str | None = None,
        features: tuple = (),
    ) -> "HallBuilder":
        """Add a hall and return its builder for further configuration."""
        self.castle_builder.require_open()
        hall = HallBuilder(self.castle_builder, name)
        hall.with_capacity(capacity)
        if color is not None:
            hall.with_color(color)
        hall.with_features(*features)
        self.buildings.append(hall)
        return hall

    def to(self, target: str) -> "KeepBuilder":
        """Declare a wall from the keep to ``target``."""
        self.castle_builder.connect(self.name, target)
        return self

    def build(self) -> Keep:
        buildings = [b.build() if isinstance(b, HallBuilder) else b for b in self.buildings]
        return Keep(name=self.name, buildings=buildings)


class HallBuilder:
    """Declaration of a hall inside the keep."""

    def __init__(self, castle_builder: CastleBuilder, name: str = ""):
        self.castle_builder = castle_builder
        self.name = name
        self.capacity = 0
        self.color = get_settings().default_hall_color
        self.features: set[HallFeature] = set()

    def with_capacity(self, capacity: int) -> "HallBuilder":
        self.castle_builder.require_open()
        if capacity < 0:
            raise ValueError(f"Hall capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        return self

    def with_color(self, color: str) -> "HallBuilder":
        self.castle_builder.require_open()
        self.color = color
        return self

    def with_features(self, *features: HallFeature | str) -> "HallBuilder":
        """Add features, given as enum members or their names."""
        self.castle_builder.require_open()
        for feature in features:
            self.features.add(HallFeature(feature))
        return self

    def build(self) -> Hall:
        return Hall(
            name=self.name,
            capacity=self.capacity,
            color=self.color,
            features=frozenset(self.features),
        )
