"""Exceptions raised by the domain checker."""

from __future__ import annotations


class ForbiddenDomainsError(Exception):
    """Base class for all errors raised by this package."""


class MalformedDomainError(ForbiddenDomainsError, ValueError):
    """A raw domain string splits into an empty label."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"malformed domain: {raw!r}")
        self.raw = raw


class InputFormatError(ForbiddenDomainsError):
    """Input stream does not match the expected count/lines layout."""
