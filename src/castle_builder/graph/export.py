"""Export an assembled castle as a networkx graph or plain data."""

import json

import networkx as nx

from castle_builder.models.castle import Castle


def to_networkx(castle: Castle) -> nx.MultiGraph:
    """Build an undirected multigraph with one node per structure and one edge per wall.

    Node attributes: ``kind`` ("keep" or "tower"), ``has_catapult``.
    Edge attributes: ``drawbridge``, ``order`` (declaration index),
    ``source`` (the declared starting end).
    """
    G = nx.MultiGraph()

    if castle.keep is not None:
        G.add_node(castle.keep.name, kind="keep", has_catapult=False)
    for tower in castle.towers:
        G.add_node(tower.name, kind="tower", has_catapult=tower.has_catapult)

    for i, wall in enumerate(castle.walls):
        G.add_edge(
            wall.source.name,
            wall.target.name,
            drawbridge=wall.has_drawbridge,
            order=i,
            source=wall.source.name,
        )

    return G


def castle_to_dict(castle: Castle) -> dict:
    """Convert a castle to plain data, with walls given by endpoint names."""
    keep = None
    if castle.keep is not None:
        keep = {
            "name": castle.keep.name,
            "buildings": [b.model_dump(mode="json") for b in castle.keep.buildings],
        }
        for building in keep["buildings"]:
            if "features" in building:
                building["features"] = sorted(building["features"])

    return {
        "keep": keep,
        "towers": [{"name": t.name, "catapult": t.has_catapult} for t in castle.towers],
        "walls": [
            {"from": w.source.name, "to": w.target.name, "drawbridge": w.has_drawbridge}
            for w in castle.walls
        ],
    }


def castle_to_json(castle: Castle, indent: int | None = 2) -> str:
    return json.dumps(castle_to_dict(castle), indent=indent)
