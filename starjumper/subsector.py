"""Generation of a subsector: a grid of hexes, each of which may hold a world."""

from __future__ import annotations

from dataclasses import dataclass, field

from starjumper.dice_throw import throw_dice
from starjumper.hex_coordinate import HexCoordinate
from starjumper.rnd import Rnd
from starjumper.world import World

SUBSECTOR_HEIGHT = 10
SUBSECTOR_WIDTH = 8

_OCCURRENCE_THROW = 4
_DEFAULT_WORLD_NAME = "No Name"


@dataclass
class Subsector:
    """A named subsector and the worlds found in it, ordered by column then row."""

    name: str
    worlds: list[World] = field(default_factory=list)

    @classmethod
    def generate(cls, name: str, rnd: Rnd) -> Subsector:
        """Roll for a world in every hex and generate the worlds that occur."""
        subsector = cls(name)
        for horizontal in range(1, SUBSECTOR_WIDTH + 1):
            for vertical in range(1, SUBSECTOR_HEIGHT + 1):
                if throw_dice(1, 6, rnd) >= _OCCURRENCE_THROW:
                    subsector.worlds.append(
                        World.generate(
                            _DEFAULT_WORLD_NAME,
                            HexCoordinate(horizontal, vertical),
                            rnd,
                        )
                    )
        return subsector