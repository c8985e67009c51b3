"""Hex map coordinates in the four-digit XXYY form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _parse_leading_int(text: str) -> int:
    """Parse a leading decimal integer, yielding 0 where there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class HexCoordinate:
    """A column and row position on a hex map."""

    horizontal: int
    vertical: int

    @classmethod
    def from_string(cls, string: str) -> HexCoordinate:
        """Parse a four-character XXYY coordinate, each part in 1 to 99.

        Raises ValueError for anything else.
        """
        if len(string) != 4:
            raise ValueError(f"{string!r} is not a four-character hex coordinate")
        horizontal = _parse_leading_int(string[:2])
        vertical = _parse_leading_int(string[2:])
        if not 1 <= horizontal <= 99 or not 1 <= vertical <= 99:
            raise ValueError(f"{string!r} is not a valid hex coordinate")
        return cls(horizontal, vertical)

    def __str__(self) -> str:
        return f"{self.horizontal:02d}{self.vertical:02d}"