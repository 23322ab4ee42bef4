"""Read the count-prefixed domain lists from a text stream."""

from __future__ import annotations

from typing import TextIO

from .errors import InputFormatError


def _strip_eol(line: str) -> str:
    return line.rstrip("\n").rstrip("\r")


def read_count(stream: TextIO) -> int:
    """Parse the leading token of the next line as a non-negative count."""
    line = stream.readline()
    if not line:
        raise InputFormatError("expected a count line, got end of input")
    tokens = line.split()
    # int() rejects some characters str.isdigit() accepts ("²")
    if not tokens or not (tokens[0].isascii() and tokens[0].isdigit()):
        raise InputFormatError(f"expected a non-negative count, got {_strip_eol(line)!r}")
    return int(tokens[0])


def read_domains(stream: TextIO, count: int) -> list[str]:
    """Read ``count`` raw domain lines.

    All whitespace before the first domain is skipped, blank lines included;
    later lines are taken as they are apart from the line terminator.
    """
    domains: list[str] = []
    if count == 0:
        return domains

    line = stream.readline()
    while line and not line.strip():
        line = stream.readline()
    line = line.lstrip()

    while line:
        domains.append(_strip_eol(line))
        if len(domains) == count:
            return domains
        line = stream.readline()

    raise InputFormatError(f"expected {count} domains, got {len(domains)}")
