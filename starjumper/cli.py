"""Command line generator for a single world or a whole subsector."""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from starjumper.hex_coordinate import HexCoordinate
from starjumper.rnd import FakeMaxRnd, FakeMedianRnd, FakeMinRnd, Rnd, SystemRnd
from starjumper.subsector import Subsector
from starjumper.world import World, world_header

_SHORT_OPTIONS = "bhn:r:x:"
_LONG_OPTIONS = ["subsector", "help", "name=", "rng=", "hex="]

_USAGE = (
    "usage: {prog} [OPTIONS]\n"
    "  -h, --help                       display this help message\n"
    "  -b, --subsector                  generate a subsector\n"
    "  -n, --name NAME                  set the world name\n"
    "  -r, --rng TYPE                   set the random number generator type\n"
    "                                     [arc4|min|max|median]\n"
    "  -x, --hex XXYY                   set the world hex coordinate\n"
    "                                     in the format \"0101\"\n"
)

_RND_TYPES = {
    "arc4": SystemRnd,
    "min": FakeMinRnd,
    "max": FakeMaxRnd,
    "median": FakeMedianRnd,
}


@dataclass
class Options:
    """Settings chosen on the command line."""

    hex_coordinate: HexCoordinate = field(default_factory=lambda: HexCoordinate(1, 1))
    name: str = "No Name"
    rnd: Rnd = field(default_factory=SystemRnd)
    subsector: bool = False


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "worldgen"


def _usage_and_exit() -> None:
    print(_USAGE.format(prog=_program_name()), file=sys.stderr, end="")
    raise SystemExit(1)


def rnd_from_type(type_name: str) -> Rnd:
    """Random number source for a type name; raises ValueError if unknown."""
    try:
        return _RND_TYPES[type_name]()
    except KeyError:
        raise ValueError(
            f'"{type_name}" is not a valid random number generator type'
        ) from None


def parse_options(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name); exits with usage on error."""
    try:
        parsed, _ = getopt.gnu_getopt(list(argv), _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError as error:
        print(f"{_program_name()}: {error}", file=sys.stderr)
        _usage_and_exit()

    options = Options()
    for option, value in parsed:
        if option in ("-b", "--subsector"):
            options.subsector = True
        elif option in ("-h", "--help"):
            _usage_and_exit()
        elif option in ("-n", "--name"):
            options.name = value
        elif option in ("-r", "--rng"):
            try:
                options.rnd = rnd_from_type(value)
            except ValueError as error:
                print(f"ERROR: {error}", file=sys.stderr)
                _usage_and_exit()
        elif option in ("-x", "--hex"):
            try:
                options.hex_coordinate = HexCoordinate.from_string(value)
            except ValueError:
                print(f'ERROR: "{value}" is not a valid hex coordinate', file=sys.stderr)
                _usage_and_exit()
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Generate and print a world or a subsector."""
    options = parse_options(sys.argv[1:] if argv is None else argv)
    if options.subsector:
        subsector = Subsector.generate(options.name, options.rnd)
        print(world_header())
        for world in subsector.worlds:
            print(world.describe())
    else:
        world = World.generate(options.name, options.hex_coordinate, options.rnd)
        print(world.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())