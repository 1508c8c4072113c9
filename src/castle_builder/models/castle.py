"""The assembled castle graph."""

from pydantic import BaseModel, ConfigDict

from castle_builder.models.structures import Keep, Tower


class DrawBridge(BaseModel):
    """Marker for a drawbridge on a wall. Carries no state."""

    model_config = ConfigDict(frozen=True)


class Wall(BaseModel):
    """A wall between two structures.

    ``source`` and ``target`` are the registered structure instances
    themselves, not copies.
    """

    model_config = ConfigDict(frozen=True)

    source: Keep | Tower
    target: Keep | Tower
    drawbridge: DrawBridge | None = None

    @property
    def has_drawbridge(self) -> bool:
        return self.drawbridge is not None

    def to_pair(self) -> tuple[str, str]:
        """Return the endpoint names."""
        return self.source.name, self.target.name


class Castle(BaseModel):
    """A fully assembled castle. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    keep: Keep | None = None
    towers: tuple[Tower, ...] = ()
    walls: tuple[Wall, ...] = ()

    def render(self) -> str:
        """Return a human-readable listing of the castle."""
        lines = []
        if self.keep is not None:
            lines.append(f"keep: {self.keep.name} with buildings")
            for building in self.keep.buildings:
                lines.append(f" {building}")
        lines.append("towers:")
        for tower in self.towers:
            suffix = " with catapult" if tower.has_catapult else ""
            lines.append(f" {tower.name}{suffix}")
        lines.append("walls:")
        for wall in self.walls:
            suffix = " with drawbridge" if wall.has_drawbridge else ""
            lines.append(f" {wall.source.name} to {wall.target.name}{suffix}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
