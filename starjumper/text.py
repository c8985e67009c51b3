"""Joining lists of strings with separators or suffixes."""

from __future__ import annotations

from collections.abc import Iterable


def join_with_separator(strings: Iterable[str], separator: str) -> str:
    """Join strings with the separator placed between them."""
    return separator.join(strings)


def join_with_suffix(strings: Iterable[str], suffix: str) -> str:
    """Join strings with the suffix placed after each of them."""
    return "".join(f"{string}{suffix}" for string in strings)