"""Data models for castle structures and the assembled castle."""

from castle_builder.models.structures import (
    Hall,
    HallFeature,
    Keep,
    KeepBuilding,
    NamedBuilding,
    Structure,
    Tower,
)
from castle_builder.models.castle import Castle, DrawBridge, Wall

__all__ = [
    "Castle",
    "DrawBridge",
    "Hall",
    "HallFeature",
    "Keep",
    "KeepBuilding",
    "NamedBuilding",
    "Structure",
    "Tower",
    "Wall",
]
