"""Generation and one-line description of a single world."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from starjumper.dice_throw import DiceThrow, throw_dice
from starjumper.hex_coordinate import HexCoordinate
from starjumper.rnd import Rnd
from starjumper.text import join_with_suffix
from starjumper.trade_classification import TradeClassification, classify_world

_HEADER = "Name               Statistics       Remarks"
_MAX_NAME_LENGTH = 18
_MAX_CLASSIFICATIONS_LENGTH = 42
_CLASSIFICATION_SUFFIX = ". "

_STARPORT_TABLE = "??AAABBCCDEEX"
_GAS_GIANT_ROLLS = range(2, 10)
_NAVAL_BASE_ROLLS = range(8, 13)
_SCOUT_BASE_ROLLS = range(7, 13)

_SCOUT_BASE_MODIFIERS = {"A": -3, "B": -2, "C": -1}
_TECH_LEVEL_STARPORT_MODIFIERS = {"A": 6, "B": 4, "C": 2, "X": -4}

_TECH_LEVEL_SIZE = (2, 2, 1, 1, 1, 0, 0, 0, 0, 0, 0)
_TECH_LEVEL_ATMOSPHERE = (1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1)
_TECH_LEVEL_HYDROGRAPHICS = (0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2)
_TECH_LEVEL_POPULATION = (0, 1, 1, 1, 1, 1, 0, 0, 0, 2, 4)
_TECH_LEVEL_GOVERNMENT = (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, -2, 0, 0)


def _table_modifier(table: Sequence[int], index: int) -> int:
    """Look up a tech level modifier; values past the table contribute nothing."""
    return table[index] if 0 <= index < len(table) else 0


def _hex_digit(value: int) -> str:
    if not 0 <= value <= 34:
        raise ValueError(f"{value} cannot be written as a single extended hex digit")
    if value < 10:
        return chr(ord("0") + value)
    return chr(ord("A") + value - 10)


def world_header() -> str:
    """Column header line for world descriptions."""
    return _HEADER


@dataclass
class World:
    """A world's position and its universal world profile."""

    name: str
    hex_coordinate: HexCoordinate
    starport: str = "X"
    naval_base: bool = False
    scout_base: bool = False
    gas_giant: bool = False
    size: int = 0
    atmosphere: int = 0
    hydrographics: int = 0
    population: int = 0
    government: int = 0
    law_level: int = 0
    tech_level: int = 0
    trade_classifications: tuple[TradeClassification, ...] = field(default_factory=tuple)

    @classmethod
    def generate(cls, name: str, hex_coordinate: HexCoordinate, rnd: Rnd) -> World:
        """Roll up a new world at the given hex."""
        world = cls(name, hex_coordinate)

        world.starport = _STARPORT_TABLE[throw_dice(2, 6, rnd)]

        if world.starport in ("A", "B"):
            world.naval_base = throw_dice(2, 6, rnd) in _NAVAL_BASE_ROLLS

        if world.starport not in ("E", "X"):
            modifier = _SCOUT_BASE_MODIFIERS.get(world.starport, 0)
            scout_roll = max(0, throw_dice(2, 6, rnd, [modifier]))
            world.scout_base = scout_roll in _SCOUT_BASE_ROLLS

        world.gas_giant = throw_dice(2, 6, rnd) in _GAS_GIANT_ROLLS

        world.size = throw_dice(2, 6, rnd, [-2])

        if world.size:
            world.atmosphere = max(0, throw_dice(2, 6, rnd, [-7, world.size]))
            hydro_throw = DiceThrow(2, 6, rnd)
            hydro_throw.add_modifier(-7)
            hydro_throw.add_modifier(world.atmosphere)
            if world.atmosphere in (0, 1) or world.atmosphere >= 10:
                hydro_throw.add_modifier(-4)
            world.hydrographics = min(10, max(0, hydro_throw.total()))

        world.population = throw_dice(2, 6, rnd, [-2])

        if world.population:
            world.government = max(0, throw_dice(2, 6, rnd, [-7, world.population]))
            world.law_level = max(0, throw_dice(2, 6, rnd, [-7, world.government]))

            tech_throw = DiceThrow(1, 6, rnd)
            starport_modifier = _TECH_LEVEL_STARPORT_MODIFIERS.get(world.starport)
            if starport_modifier is not None:
                tech_throw.add_modifier(starport_modifier)
            tech_throw.add_modifier(_table_modifier(_TECH_LEVEL_SIZE, world.size))
            tech_throw.add_modifier(_table_modifier(_TECH_LEVEL_ATMOSPHERE, world.atmosphere))
            tech_throw.add_modifier(
                _table_modifier(_TECH_LEVEL_HYDROGRAPHICS, world.hydrographics)
            )
            tech_throw.add_modifier(_table_modifier(_TECH_LEVEL_POPULATION, world.population))
            tech_throw.add_modifier(_table_modifier(_TECH_LEVEL_GOVERNMENT, world.government))
            world.tech_level = max(0, tech_throw.total())

        world.trade_classifications = tuple(classify_world(world))
        return world

    @property
    def base_code(self) -> str:
        """Single-character code for the bases present."""
        if self.naval_base:
            return "A" if self.scout_base else "N"
        return "S" if self.scout_base else " "

    def _classifications_text(self) -> str:
        text = ""
        for attribute in ("name", "short_name", "abbreviation"):
            text = join_with_suffix(
                (getattr(c, attribute) for c in self.trade_classifications),
                _CLASSIFICATION_SUFFIX,
            )
            if len(text) <= _MAX_CLASSIFICATIONS_LENGTH:
                break
        return text

    def describe(self) -> str:
        """One-line description in the standard subsector listing format."""
        profile = "".join(
            _hex_digit(value)
            for value in (
                self.size,
                self.atmosphere,
                self.hydrographics,
                self.population,
                self.government,
                self.law_level,
            )
        )
        return (
            f"{self.name:<{_MAX_NAME_LENGTH}} {str(self.hex_coordinate):>4} "
            f"{self.starport}{profile}-{_hex_digit(self.tech_level)} {self.base_code} "
            f"{self._classifications_text():<{_MAX_CLASSIFICATIONS_LENGTH}}"
            f"{'G' if self.gas_giant else ' '}"
        )

    def __str__(self) -> str:
        return self.describe()