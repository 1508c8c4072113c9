"""Layout statistics for an assembled castle."""

from dataclasses import dataclass, field, asdict

import networkx as nx

from castle_builder.graph.export import to_networkx
from castle_builder.models.castle import Castle


@dataclass
class LayoutStats:
    """Summary counts describing a castle layout."""

    towers: int = 0
    walls: int = 0
    drawbridges: int = 0
    catapults: int = 0
    keep_buildings: int = 0
    components: int = 0  # Connected groups of structures
    unwalled: list[str] = field(default_factory=list)  # Structures with no walls

    def to_dict(self) -> dict:
        return asdict(self)


def layout_stats(castle: Castle) -> LayoutStats:
    """Compute layout statistics for a castle."""
    G = to_networkx(castle)

    return LayoutStats(
        towers=len(castle.towers),
        walls=len(castle.walls),
        drawbridges=sum(1 for w in castle.walls if w.has_drawbridge),
        catapults=sum(1 for t in castle.towers if t.has_catapult),
        keep_buildings=len(castle.keep.buildings) if castle.keep else 0,
        components=nx.number_connected_components(G) if G.number_of_nodes() else 0,
        unwalled=[name for name, degree in G.degree() if degree == 0],
    )
