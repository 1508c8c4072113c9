"""Tests for graph export and layout statistics."""

import json

import pytest

from castle_builder.builder import CastleBuilder
from castle_builder.demos import chain_demo
from castle_builder.graph import castle_to_dict, castle_to_json, layout_stats, to_networkx


@pytest.fixture
def castle():
    return chain_demo()


class TestNetworkxExport:
    def test_nodes_and_edges(self, castle):
        G = to_networkx(castle)

        assert set(G.nodes) == {"keep", "ne", "nw", "sw", "se"}
        assert G.number_of_edges() == 8
        assert G.nodes["keep"]["kind"] == "keep"
        assert G.nodes["ne"]["has_catapult"] is True

    def test_edge_attributes(self, castle):
        G = to_networkx(castle)

        drawbridges = [d for _, _, d in G.edges(data=True) if d["drawbridge"]]
        assert len(drawbridges) == 1
        assert drawbridges[0]["order"] == 4
        assert drawbridges[0]["source"] == "ne"

    def test_parallel_walls_kept(self):
        builder = CastleBuilder()
        builder.tower("ne")
        builder.tower("nw")
        builder.connect("ne", "nw")
        builder.connect("nw", "ne")

        G = to_networkx(builder.build())

        assert G.number_of_edges("ne", "nw") == 2


class TestPlainExport:
    def test_dict_walls_by_name(self, castle):
        data = castle_to_dict(castle)

        assert data["walls"][0] == {"from": "keep", "to": "ne", "drawbridge": False}
        assert data["towers"][0] == {"name": "ne", "catapult": True}
        assert data["keep"]["buildings"][1]["features"] == ["fireplace"]

    def test_json_round_trips_through_json_module(self, castle):
        data = json.loads(castle_to_json(castle))

        assert data == castle_to_dict(castle)

    def test_no_keep(self):
        builder = CastleBuilder()
        builder.tower("ne")

        assert castle_to_dict(builder.build())["keep"] is None


class TestLayoutStats:
    def test_demo_stats(self, castle):
        stats = layout_stats(castle)

        assert stats.towers == 4
        assert stats.walls == 8
        assert stats.drawbridges == 1
        assert stats.catapults == 2
        assert stats.keep_buildings == 2
        assert stats.components == 1
        assert stats.unwalled == []

    def test_unwalled_and_components(self):
        builder = CastleBuilder()
        builder.tower("ne")
        builder.tower("nw")
        builder.tower("lonely")
        builder.connect("ne", "nw")

        stats = layout_stats(builder.build())

        assert stats.components == 2
        assert stats.unwalled == ["lonely"]

    def test_empty_castle(self):
        stats = layout_stats(CastleBuilder().build())

        assert stats.components == 0
        assert stats.to_dict()["walls"] == 0
