"""Structure models: the named, connectable parts of a castle."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class HallFeature(str, Enum):
    """Fittings a hall can have."""

    FIREPLACE = "fireplace"
    DININGROOM = "diningroom"
    KITCHEN = "kitchen"


class NamedBuilding(BaseModel):
    """A building inside the keep known only by its name (e.g. a dungeon)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str

    def __str__(self) -> str:
        return self.name


class Hall(BaseModel):
    """A hall inside the keep."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hall"] = "hall"
    name: str = ""
    capacity: int = Field(default=0, ge=0)
    color: str = "white"
    features: frozenset[HallFeature] = Field(default_factory=frozenset)

    def __str__(self) -> str:
        label = f"hall {self.name}".rstrip()
        features = ", ".join(sorted(f.value for f in self.features))
        text = f"{label} (capacity {self.capacity}, {self.color})"
        if features:
            text += f" with {features}"
        return text


KeepBuilding = Annotated[NamedBuilding | Hall, Field(discriminator="kind")]


class Structure(BaseModel):
    """Base class for anything a wall can be attached to."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)


class Keep(Structure):
    """The central stronghold of the castle."""

    name: str = Field(default="keep", min_length=1)
    buildings: tuple[KeepBuilding, ...] = ()


class Tower(Structure):
    """A tower on the castle perimeter."""

    has_catapult: bool = False
