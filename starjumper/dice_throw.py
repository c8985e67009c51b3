"""Throws of several like dice with additive modifiers."""

from __future__ import annotations

from collections.abc import Iterable

from starjumper.rnd import Rnd
from starjumper.text import join_with_separator


class DiceThrow:
    """A set of dice rolled once, with modifiers added to their total."""

    def __init__(self, count: int, sides: int, rnd: Rnd) -> None:
        self.count = count
        self.sides = sides
        self.rolls: list[int] = [
            rnd.next_uniform_value_in_range(1, sides) for _ in range(count)
        ]
        self.modifiers: list[int] = []

    def add_modifier(self, modifier: int) -> None:
        """Add a modifier to the throw."""
        self.modifiers.append(modifier)

    def total(self) -> int:
        """Sum of all rolls and modifiers."""
        return sum(self.rolls) + sum(self.modifiers)

    def __str__(self) -> str:
        rolls = join_with_separator((str(roll) for roll in self.rolls), ", ")
        modifiers = join_with_separator((f"{m:+d}" for m in self.modifiers), ", ")
        return f"{self.count}D{self.sides} ({rolls}) {modifiers}"


def throw_dice(count: int, sides: int, rnd: Rnd, modifiers: Iterable[int] = ()) -> int:
    """Roll count dice of the given sides and return the modified total."""
    dice_throw = DiceThrow(count, sides, rnd)
    for modifier in modifiers:
        dice_throw.add_modifier(modifier)
    return dice_throw.total()