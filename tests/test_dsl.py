"""Tests for the declaration front ends."""

import pytest

from castle_builder.builder import CastleBuilder
from castle_builder.demos import DEMOS, blocks_demo, chain_demo, path_demo
from castle_builder.dsl import BlockBuilder, ChainBuilder, PathBuilder
from castle_builder.errors import CastleDeclarationError, IncompleteWallError
from castle_builder.models import HallFeature


def pairs(castle):
    return [w.to_pair() for w in castle.walls]


class TestChainBuilder:
    """Tests for fluent chains."""

    def test_tower_wall_tower(self):
        castle = ChainBuilder()
        (
            castle.tower("sw").catapult()
            .wall().tower("nw")
            .wall().drawbridge().tower("ne").catapult()
            .wall().tower("se")
        )

        result = castle.build()

        assert [t.name for t in result.towers] == ["sw", "nw", "ne", "se"]
        assert [t.has_catapult for t in result.towers] == [True, False, True, False]
        assert pairs(result) == [("sw", "nw"), ("nw", "ne"), ("ne", "se")]
        assert [w.has_drawbridge for w in result.walls] == [False, True, False]

    def test_wall_to_existing(self):
        castle = ChainBuilder()
        castle.tower("ne").wall().tower("nw").wall().to("ne")

        assert pairs(castle.build()) == [("ne", "nw"), ("nw", "ne")]

    def test_open_wall_fails(self):
        castle = ChainBuilder()
        castle.tower("ne").wall()

        with pytest.raises(IncompleteWallError) as exc_info:
            castle.build()

        assert exc_info.value.source == "ne"

    def test_keep_towers(self):
        castle = ChainBuilder()
        castle.keep().tower("sw").tower("nw")
        castle.tower("sw")
        castle.tower("nw")

        assert pairs(castle.build()) == [("keep", "sw"), ("keep", "nw")]

    def test_wraps_existing_builder(self):
        builder = CastleBuilder()
        ChainBuilder(builder).tower("ne")

        assert builder.tower_names == ["ne"]


class TestPathBuilder:
    """Tests for path-style declarations."""

    @pytest.fixture
    def castle(self):
        castle = PathBuilder()
        castle.keep()
        for name in ("sw", "nw", "ne", "se"):
            castle.tower(name)
        return castle

    def test_start_to(self, castle):
        castle.start("sw").to("nw").to("ne").to("se")

        assert pairs(castle.build()) == [("sw", "nw"), ("nw", "ne"), ("ne", "se")]

    def test_to_without_start_only_moves(self, castle):
        castle.to("sw").to("nw")

        assert pairs(castle.build()) == [("sw", "nw")]

    def test_fix_to(self, castle):
        castle.fix("keep").fix_to("sw").fix_to("nw").fix_to("ne", drawbridge=True)

        result = castle.build()

        assert pairs(result) == [("keep", "sw"), ("keep", "nw"), ("keep", "ne")]
        assert result.walls[2].has_drawbridge

    def test_connect_from(self, castle):
        to = castle.connect_from("keep")
        to("sw")
        to("se", drawbridge=True)

        result = castle.build()

        assert pairs(result) == [("keep", "sw"), ("keep", "se")]
        assert [w.has_drawbridge for w in result.walls] == [False, True]

    def test_repeated_connection_kept(self, castle):
        """The same pair declared twice yields two walls."""
        to = castle.connect_from("keep")
        to("sw")
        to("sw")

        assert pairs(castle.build()) == [("keep", "sw"), ("keep", "sw")]


class TestBlockBuilder:
    """Tests for block-structured declarations."""

    def test_towers_block_rings(self):
        castle = BlockBuilder()
        with castle.towers() as towers:
            towers.tower("ne", catapult=True)
            towers.drawbridge()
            towers.tower("nw")
            towers.tower("sw")

        result = castle.build()

        assert pairs(result) == [("ne", "nw"), ("nw", "sw")]
        assert result.walls[0].has_drawbridge
        assert not result.walls[1].has_drawbridge
        assert result.towers[0].has_catapult

    def test_keep_block(self):
        castle = BlockBuilder()
        with castle.keep() as keep:
            keep.building("dungeon")
            keep.hall(capacity=100, features=["fireplace"])

        result = castle.build()
        dungeon, hall = result.keep.buildings

        assert dungeon.name == "dungeon"
        assert hall.capacity == 100
        assert HallFeature.FIREPLACE in hall.features

    def test_dangling_drawbridge(self):
        castle = BlockBuilder()
        with pytest.raises(CastleDeclarationError):
            with castle.towers() as towers:
                towers.tower("ne")
                towers.drawbridge()

    def test_leading_drawbridge(self):
        """A drawbridge before the first tower has no wall to sit on."""
        castle = BlockBuilder()
        with pytest.raises(CastleDeclarationError):
            with castle.towers() as towers:
                towers.drawbridge()
                towers.tower("a")
                towers.tower("b")
                towers.tower("c")

        assert castle.castle_builder.wall_specs == []

    def test_separate_blocks_not_joined(self):
        castle = BlockBuilder()
        with castle.towers() as towers:
            towers.tower("ne")
            towers.tower("nw")
        with castle.towers() as towers:
            towers.tower("sw")
            towers.tower("se")

        assert pairs(castle.build()) == [("ne", "nw"), ("sw", "se")]

    def test_connect(self):
        castle = BlockBuilder()
        with castle.towers() as towers:
            towers.tower("se")
            towers.tower("ne")
        castle.connect("ne", "se")

        assert pairs(castle.build()) == [("se", "ne"), ("ne", "se")]


class TestDemos:
    """The demo castle is the same in every style."""

    def test_all_styles_agree(self):
        assert chain_demo() == path_demo() == blocks_demo()

    def test_styles_match_explicit_builder(self):
        builder = CastleBuilder()
        keep = builder.keep()
        keep.building("dungeon")
        keep.hall(capacity=10, features=("fireplace",))
        builder.tower("ne", catapult=True)
        builder.tower("nw")
        builder.tower("sw", catapult=True)
        builder.tower("se")
        for name in ("ne", "nw", "sw", "se"):
            builder.connect("keep", name)
        builder.connect("ne", "nw", drawbridge=True)
        builder.connect("nw", "sw")
        builder.connect("sw", "se")
        builder.connect("se", "ne")

        explicit = builder.build()

        for demo in DEMOS.values():
            assert demo() == explicit

    def test_demo_layout(self):
        castle = chain_demo()

        assert [t.name for t in castle.towers] == ["ne", "nw", "sw", "se"]
        assert pairs(castle) == [
            ("keep", "ne"),
            ("keep", "nw"),
            ("keep", "sw"),
            ("keep", "se"),
            ("ne", "nw"),
            ("nw", "sw"),
            ("sw", "se"),
            ("se", "ne"),
        ]
        assert [w.has_drawbridge for w in castle.walls].count(True) == 1

    def test_demo_registry(self):
        assert set(DEMOS) == {"chain", "path", "blocks"}
