"""The four-wall demo castle, declared once per front end.

Every style produces the same castle: a keep (dungeon and a hall with a
fireplace) walled to four towers, and the towers walled in a ring with a
drawbridge between ne and nw.
"""

from typing import Callable

from castle_builder.dsl import BlockBuilder, ChainBuilder, PathBuilder
from castle_builder.models.castle import Castle

CORNERS = ("ne", "nw", "sw", "se")


def chain_demo() -> Castle:
    castle = ChainBuilder()

    keep = castle.keep().building("dungeon").hall(capacity=10, features=("fireplace",))
    for name in CORNERS:
        keep.tower(name)

    (
        castle.tower("ne").catapult()
        .wall().drawbridge().tower("nw")
        .wall().tower("sw").catapult()
        .wall().tower("se")
        .wall().to("ne")
    )
    return castle.build()


def path_demo() -> Castle:
    castle = PathBuilder()

    keep = castle.keep()
    keep.building("dungeon")
    keep.hall(capacity=10, features=("fireplace",))

    castle.tower("ne", catapult=True).tower("nw").tower("sw", catapult=True).tower("se")

    to = castle.connect_from("keep")
    for name in CORNERS:
        to(name)

    castle.start("ne").to("nw", drawbridge=True).to("sw").to("se").to("ne")
    return castle.build()


def blocks_demo() -> Castle:
    castle = BlockBuilder()

    with castle.keep() as keep:
        keep.building("dungeon")
        keep.hall(capacity=10, features=["fireplace"])
        for name in CORNERS:
            keep.to(name)

    with castle.towers() as towers:
        towers.tower("ne", catapult=True)
        towers.drawbridge()
        towers.tower("nw")
        towers.tower("sw", catapult=True)
        towers.tower("se")

    castle.connect("se", "ne")
    return castle.build()


DEMOS: dict[str, Callable[[], Castle]] = {
    "chain": chain_demo,
    "path": path_demo,
    "blocks": blocks_demo,
}
