"""Castle declarations stored as JSON.

Example document:

    {
        "keep": {"name": "keep", "buildings": [{"kind": "named", "name": "dungeon"}]},
        "towers": [{"name": "ne", "catapult": true}, {"name": "nw"}],
        "walls": [
            {"from": "keep", "to": "ne"},
            {"from": "ne", "to": "nw", "drawbridge": true}
        ]
    }
"""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from castle_builder.builder import CastleBuilder
from castle_builder.models.castle import Castle
from castle_builder.models.structures import HallFeature


class BuildingDeclaration(BaseModel):
    """A building inside the keep; hall attributes are ignored for named buildings."""

    kind: Literal["named", "hall"] = "named"
    name: str = ""
    capacity: int = Field(default=0, ge=0)
    color: str | None = None
    features: list[HallFeature] = Field(default_factory=list)


class KeepDeclaration(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    buildings: list[BuildingDeclaration] = Field(default_factory=list)


class TowerDeclaration(BaseModel):
    name: str = Field(min_length=1)
    catapult: bool = False


class WallDeclaration(BaseModel):
    """A wall entry; ``to`` may be missing, which fails at build time."""

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str | None = Field(default=None, alias="to")
    drawbridge: bool = False


class CastleDeclaration(BaseModel):
    """A whole castle as written in a declaration file."""

    keep: KeepDeclaration | None = None
    towers: list[TowerDeclaration] = Field(default_factory=list)
    walls: list[WallDeclaration] = Field(default_factory=list)

    def to_builder(self) -> CastleBuilder:
        """Stage these declarations on a new builder."""
        builder = CastleBuilder()

        if self.keep is not None:
            keep = builder.keep(self.keep.name)
            for building in self.keep.buildings:
                if building.kind == "hall":
                    keep.hall(
                        building.name,
                        capacity=building.capacity,
                        color=building.color,
                        features=tuple(building.features),
                    )
                else:
                    keep.building(building.name)

        for tower in self.towers:
            builder.tower(tower.name, catapult=tower.catapult)

        for wall in self.walls:
            builder.connect(wall.source, wall.target, drawbridge=wall.drawbridge)

        return builder


def load_declaration(path: Path) -> CastleDeclaration:
    """Load and validate a declaration file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the document does not match the schema
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return CastleDeclaration.model_validate(data)


def build_castle(path: Path) -> Castle:
    """Load a declaration file and assemble the castle it describes."""
    return load_declaration(path).to_builder().build()
