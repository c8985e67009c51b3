"""Verification helpers that report failed expectations in a readable form."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, TextIO


class OnFail(Enum):
    """What to do once a failed check has been reported."""

    CONTINUE = "continue"
    HALT = "halt"


class CheckFailure(AssertionError):
    """Raised when a check fails and is set to halt."""


def _split_first_line(text: str) -> tuple[str, str]:
    end = text.find("\n")
    if end == -1:
        return text, ""
    return text[:end], text[end + 1:]


def _is_str_literal(expression: str) -> bool:
    return len(expression) >= 2 and expression.startswith('"') and expression.endswith('"')


def _is_multi_line(text: str | None) -> bool:
    return text is not None and "\n" in text


def _location(file: str, line: int, function: str) -> str:
    return f"{file}:{line}: in {function}():\n"


def _fail(report: str, out: TextIO | None, on_fail: OnFail) -> None:
    (out if out is not None else sys.stderr).write(report)
    if on_fail is OnFail.HALT:
        raise CheckFailure(report)


def is_substr(string: str | None, substring: str | None) -> bool:
    """Whether substring occurs in string; False if either is None."""
    if string is None or substring is None:
        return False
    return substring in string


def is_str_eq(str1: str | None, str2: str | None) -> bool:
    """Whether both strings are equal, treating two Nones as equal."""
    return str1 == str2


def print_int_expression(out: TextIO, parameter: str, expression: str, value: int) -> None:
    """Write an integer expression and, unless it is the literal itself, its value."""
    if expression == str(value):
        out.write(f"    {parameter}: {expression}\n")
    else:
        out.write(f"    {parameter} ({expression}): {value}\n")


def print_str_expression(
    out: TextIO, parameter: str, expression: str, value: str | None
) -> None:
    """Write a string expression and, unless it is a literal, its value."""
    if value is None:
        out.write(f"    {parameter} ({expression}): NULL\n")
    elif _is_str_literal(expression):
        out.write(f"    {parameter}: {expression}\n")
    else:
        out.write(f'    {parameter} ({expression}): "{value}"\n')


def print_str_diff(out: TextIO, str1: str | None, str2: str | None) -> None:
    """Write a line-by-line comparison of two strings."""
    rest1, rest2 = str1 or "", str2 or ""
    while True:
        line1, rest1 = _split_first_line(rest1)
        line2, rest2 = _split_first_line(rest2)
        if line1 == line2:
            out.write(f'====== "{line1}"\n')
        else:
            out.write(f'str1 < "{line1}"\n')
            out.write(f'str2 > "{line2}"\n')
        if not rest1 and not rest2:
            break


class _Report:
    """Collects report text with the writing interface of a stream."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, text: str) -> int:
        self.parts.append(text)
        return len(text)

    def __str__(self) -> str:
        return "".join(self.parts)


def verify_false(
    file: str,
    line: int,
    function: str,
    expression: str,
    value: Any,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if value is true."""
    if not value:
        return
    _fail(
        _location(file, line, function) + f"    `{expression}` expected to be false\n",
        out,
        on_fail,
    )


def verify_true(
    file: str,
    line: int,
    function: str,
    expression: str,
    value: Any,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if value is false."""
    if value:
        return
    _fail(
        _location(file, line, function) + f"    `{expression}` expected to be true\n",
        out,
        on_fail,
    )


def verify_int_eq(
    file: str,
    line: int,
    function: str,
    int1_expression: str,
    int1: int,
    int2_expression: str,
    int2: int,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if the two integers differ."""
    if int1 == int2:
        return
    report = _Report()
    report.write(_location(file, line, function))
    report.write(f"    `{int1_expression}` expected to equal `{int2_expression}`\n\n")
    print_int_expression(report, "int1", int1_expression, int1)
    print_int_expression(report, "int2", int2_expression, int2)
    _fail(str(report), out, on_fail)


def verify_none(
    file: str,
    line: int,
    function: str,
    expression: str,
    value: Any,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if value is not None."""
    if value is None:
        return
    _fail(
        _location(file, line, function) + f"    `{expression}` expected to be NULL\n",
        out,
        on_fail,
    )


def verify_not_none(
    file: str,
    line: int,
    function: str,
    expression: str,
    value: Any,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if value is None."""
    if value is not None:
        return
    _fail(
        _location(file, line, function) + f"    `{expression}` expected to be non-NULL\n",
        out,
        on_fail,
    )


def verify_str_contains(
    file: str,
    line: int,
    function: str,
    str_expression: str,
    string: str | None,
    substr_expression: str,
    substr: str | None,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if substr does not occur in string."""
    if is_substr(string, substr):
        return
    report = _Report()
    report.write(_location(file, line, function))
    report.write(f"    `{str_expression}` expected to contain `{substr_expression}`\n\n")
    print_str_expression(report, "str", str_expression, string)
    print_str_expression(report, "substr", substr_expression, substr)
    _fail(str(report), out, on_fail)


def verify_str_eq(
    file: str,
    line: int,
    function: str,
    str1_expression: str,
    str1: str | None,
    str2_expression: str,
    str2: str | None,
    out: TextIO | None = None,
    on_fail: OnFail = OnFail.HALT,
) -> None:
    """Report if the two strings differ, with a line diff for multi-line strings."""
    if is_str_eq(str1, str2):
        return
    report = _Report()
    report.write(_location(file, line, function))
    report.write(f"    `{str1_expression}` expected to equal `{str2_expression}`\n\n")
    if _is_multi_line(str1) or _is_multi_line(str2):
        report.write(f"    str1 ({str1_expression}): {(str1 or '').count(chr(10))} lines\n")
        report.write(f"    str2 ({str2_expression}): {(str2 or '').count(chr(10))} lines\n")
        report.write("\n")
        print_str_diff(report, str1, str2)
        report.write("\n")
    else:
        print_str_expression(report, "str1", str1_expression, str1)
        print_str_expression(report, "str2", str2_expression, str2)
    _fail(str(report), out, on_fail)