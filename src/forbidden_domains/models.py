from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Verdict(StrEnum):
    BAD = "Bad"
    GOOD = "Good"


class CheckResult(BaseModel):
    """Verdict for a single candidate domain."""

    domain: str
    verdict: Verdict


class IndexStats(BaseModel):
    """Counters collected while building a DomainIndex."""

    forbidden_count: int = 0
    termini: int = 0
    pruned: int = 0
    subtrees_discarded: int = 0
    # includes the root; not reduced when a terminus discards a subtree
    nodes_created: int = 1


class RunStats(BaseModel):
    """Statistics for a single checker run."""

    forbidden_read: int = 0
    candidates_checked: int = 0
    bad_count: int = 0
    good_count: int = 0
