"""Trade classifications that a world earns from its statistics."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from starjumper.world import World


@dataclass(frozen=True)
class TradeClassification:
    """A named trade classification with the rule that decides it."""

    name: str
    short_name: str
    abbreviation: str
    _predicate: Callable[[Any], bool] = field(repr=False, compare=False)

    def applies_to(self, world: World) -> bool:
        """Whether the world meets this classification's rule."""
        return bool(self._predicate(world))


def _is_agricultural(world: World) -> bool:
    return (
        4 <= world.atmosphere <= 9
        and 4 <= world.hydrographics <= 8
        and 5 <= world.population <= 7
    )


def _is_asteroid_belt(world: World) -> bool:
    return world.size == 0 and world.atmosphere == 0 and world.hydrographics == 0


def _is_barren_world(world: World) -> bool:
    return world.population == 0 and world.government == 0 and world.law_level == 0


def _is_desert_world(world: World) -> bool:
    return world.atmosphere >= 2 and world.hydrographics == 0


def _is_fluid_oceans(world: World) -> bool:
    return world.atmosphere >= 10 and world.hydrographics >= 1


def _is_high_population(world: World) -> bool:
    return world.population >= 9


def _is_ice_capped(world: World) -> bool:
    return world.atmosphere in (0, 1) and world.hydrographics >= 1


def _is_industrial(world: World) -> bool:
    return world.atmosphere in (0, 1, 2, 4, 7, 9) and world.population >= 9


def _is_low_population(world: World) -> bool:
    return world.population <= 3


def _is_non_agricultural(world: World) -> bool:
    return (
        world.atmosphere <= 3
        and world.hydrographics <= 3
        and world.population >= 6
    )


def _is_non_industrial(world: World) -> bool:
    return world.population <= 6


def _is_poor(world: World) -> bool:
    return 2 <= world.atmosphere <= 5 and world.hydrographics <= 3


def _is_rich(world: World) -> bool:
    return (
        world.atmosphere in (6, 8)
        and 6 <= world.population <= 8
        and 4 <= world.government <= 9
    )


def _is_vacuum_world(world: World) -> bool:
    return world.atmosphere == 0


def _is_water_world(world: World) -> bool:
    return world.hydrographics == 10


AGRICULTURAL = TradeClassification("Agricultural", "Ag", "Ag", _is_agricultural)
ASTEROID_BELT = TradeClassification("Asteroid Belt", "Asteroids", "As", _is_asteroid_belt)
BARREN_WORLD = TradeClassification("Barren World", "Barren", "Ba", _is_barren_world)
DESERT_WORLD = TradeClassification("Desert World", "Desert", "De", _is_desert_world)
FLUID_OCEANS = TradeClassification("Fluid Oceans", "Fluid Oceans", "Fl", _is_fluid_oceans)
HIGH_POPULATION = TradeClassification(
    "High Population", "High Pop", "Hi", _is_high_population
)
ICE_CAPPED = TradeClassification("Ice-capped", "Ice-capped", "Ic", _is_ice_capped)
INDUSTRIAL = TradeClassification("Industrial", "Industrial", "In", _is_industrial)
LOW_POPULATION = TradeClassification("Low Population", "Low Pop", "Lo", _is_low_population)
NON_AGRICULTURAL = TradeClassification(
    "Non-agricultural", "Non-ag", "Na", _is_non_agricultural
)
NON_INDUSTRIAL = TradeClassification(
    "Non-industrial", "Non-industrial", "Ni", _is_non_industrial
)
POOR = TradeClassification("Poor", "Poor", "Po", _is_poor)
RICH = TradeClassification("Rich", "Rich", "Ri", _is_rich)
VACUUM_WORLD = TradeClassification("Vacuum World", "Vacuum", "Va", _is_vacuum_world)
WATER_WORLD = TradeClassification("Water World", "Water World", "Wa", _is_water_world)

ALL_TRADE_CLASSIFICATIONS: tuple[TradeClassification, ...] = (
    AGRICULTURAL,
    ASTEROID_BELT,
    BARREN_WORLD,
    DESERT_WORLD,
    FLUID_OCEANS,
    HIGH_POPULATION,
    ICE_CAPPED,
    INDUSTRIAL,
    LOW_POPULATION,
    NON_AGRICULTURAL,
    NON_INDUSTRIAL,
    POOR,
    RICH,
    VACUUM_WORLD,
    WATER_WORLD,
)


def classify_world(world: World) -> list[TradeClassification]:
    """All trade classifications that apply to the world, in canonical order."""
    return [
        classification
        for classification in ALL_TRADE_CLASSIFICATIONS
        if classification.applies_to(world)
    ]