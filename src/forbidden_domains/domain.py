"""Dotted domain names split into labels and compared from the top-level label."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import MalformedDomainError


class Domain(BaseModel):
    """A domain name as an ordered tuple of labels.

    ``labels[0]`` is the most specific label and ``labels[-1]`` the top-level
    one, in the order they appear in the raw string.
    """

    model_config = ConfigDict(frozen=True)

    labels: tuple[str, ...]

    @field_validator("labels")
    @classmethod
    def labels_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("a domain has at least one label")
        return v

    @classmethod
    def from_raw(cls, raw: str, strict: bool = True) -> Domain:
        """Split ``raw`` on ``.`` without any normalization.

        In strict mode an empty label (empty input, leading, trailing or
        doubled dot) raises MalformedDomainError.
        """
        labels = tuple(raw.split("."))
        if strict and "" in labels:
            raise MalformedDomainError(raw)
        return cls(labels=labels)

    def get_subdomains(self) -> tuple[str, ...]:
        return self.labels

    def is_subdomain_of(self, other: Domain) -> bool:
        """True if this domain sits strictly below ``other``.

        ``other`` is the parent: ``m.ya.ru`` is a subdomain of ``ya.ru``, never
        the other way round, and no domain is a subdomain of itself.
        """
        if len(self.labels) <= len(other.labels):
            return False
        return self.labels[-len(other.labels):] == other.labels

    def __len__(self) -> int:
        return len(self.labels)

    def __str__(self) -> str:
        return ".".join(self.labels)
