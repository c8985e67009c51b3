# starjumper

Generate star-system worlds and whole subsectors for classic science-fiction
role-playing games. Each world gets a starport, naval and scout bases, a gas
giant flag, its size, atmosphere, hydrographics, population, government, law
level and tech level, and the trade classifications that follow from them.

## Installation

```
pip install .
```

## Command line

The `worldgen` command prints one line describing a world:

```
worldgen --name Regina --hex 1910
```

With `--subsector` it prints a header line followed by one line for each
world in an 8 by 10 hex subsector. Every hex gets a world on a roll of 4 or
more on one die, so about half the hexes hold one:

```
worldgen --subsector
```

Options:

```
  -h, --help                       display this help message
  -b, --subsector                  generate a subsector
  -n, --name NAME                  set the world name
  -r, --rng TYPE                   set the random number generator type
                                     [arc4|min|max|median]
  -x, --hex XXYY                   set the world hex coordinate
                                     in the format "0101"
```

Without `--name` the world is called `No Name`; without `--hex` it sits at
`0101`. A hex coordinate must be four characters, each half a number from
1 to 99. `arc4`, the default, draws from the operating system's secure random
source; `min`, `max` and `median` always give the lowest, highest or middle
roll, which makes output repeatable. `--help`, an unknown option, an invalid
generator type or an invalid hex prints the usage to standard error and exits
with status 1.

## Library use

```python
from starjumper.hex_coordinate import HexCoordinate
from starjumper.rnd import FakeFixedRnd, SystemRnd
from starjumper.subsector import Subsector
from starjumper.world import World, world_header

world = World.generate("Test", HexCoordinate.from_string("0307"), FakeFixedRnd(2))
print(world_header())
print(world.describe())

subsector = Subsector.generate("Spinward", SystemRnd())
for w in subsector.worlds:
    print(w.describe())
```

which prints, for the first world:

```
Name               Statistics       Remarks
Test               0307 B432432-A   Non-industrial. Poor.                     G
```

Modules:

- `starjumper.world` – `World`, with `World.generate`, `World.describe` and
  the `base_code` property, and `world_header()`.
- `starjumper.subsector` – `Subsector.generate`, giving a named subsector whose
  `worlds` are ordered by column then row.
- `starjumper.trade_classification` – `TradeClassification` with
  `applies_to(world)`, the fifteen classifications (`AGRICULTURAL` through
  `WATER_WORLD`, gathered in `ALL_TRADE_CLASSIFICATIONS`) and
  `classify_world(world)`.
- `starjumper.dice_throw` – `throw_dice(count, sides, rnd, modifiers)` and the
  `DiceThrow` class, which keeps the individual rolls and modifiers and prints
  as e.g. `2D6 (4, 4) `.
- `starjumper.hex_coordinate` – `HexCoordinate`, parsed with `from_string` and
  printed as `XXYY`.
- `starjumper.rnd` – random sources sharing the `Rnd` interface
  (`next_value`, `next_uniform_value`, `next_uniform_value_in_range`):
  `SystemRnd`, the seeded `Jrand48Rnd`, and the fakes `FakeFixedRnd`,
  `FakeAscendingRnd`, `FakeMinRnd`, `FakeMaxRnd` and `FakeMedianRnd`.
- `starjumper.text` – `join_with_separator` and `join_with_suffix`.
- `starjumper.checks` – `verify_*` helpers that write a readable report of a
  failed expectation, with a line diff for multi-line strings, and either
  carry on (`OnFail.CONTINUE`) or raise `CheckFailure` (`OnFail.HALT`).

## Limitations

Worlds in a generated subsector are all named `No Name`, and the subsector's
own name is not printed. There is no map drawing, and nothing is saved to
disk: output goes to standard output only.

## Tests

```
pip install .[test]
pytest
```