"""Label trie over a forbidden-domain set.

The trie is rooted at top-level labels. Each node maps a label either to a
child node (keep descending) or to ``TERMINUS``, which marks the path down to
that label as a forbidden domain in its own right. Everything below a
terminus is forbidden too, so nothing is ever stored beneath one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

import structlog

from .domain import Domain
from .models import IndexStats, Verdict

log = structlog.get_logger()


class _Terminus(Enum):
    TERMINUS = "terminus"


TERMINUS = _Terminus.TERMINUS


@dataclass
class SubDomainNode:
    children: dict[str, SubDomainNode | _Terminus] = field(default_factory=dict)


class DomainIndex:
    """Answers "is this domain equal to or below a forbidden one?"

    Built once from the whole forbidden set and read-only afterwards, so a
    single instance can be queried from any number of callers.
    """

    def __init__(self, forbidden: Iterable[Domain], strict: bool = True) -> None:
        self._root = SubDomainNode()
        self._strict = strict
        self.stats = IndexStats()

        # Shorter domains first: a subsuming entry must be in place before
        # anything it subsumes comes along.
        domains = sorted(forbidden, key=len)
        self.stats.forbidden_count = len(domains)
        for domain in domains:
            self._insert(domain)

        log.info("index_built", **self.stats.model_dump())

    def _insert(self, domain: Domain) -> None:
        node = self._root
        labels = domain.labels
        for depth in range(len(labels) - 1, -1, -1):
            label = labels[depth]
            entry = node.children.get(label)
            if entry is TERMINUS:
                self.stats.pruned += 1
                return

            if depth == 0:
                if entry is not None:
                    self.stats.subtrees_discarded += 1
                node.children[label] = TERMINUS
                self.stats.termini += 1
                return

            if entry is None:
                entry = SubDomainNode()
                node.children[label] = entry
                self.stats.nodes_created += 1
            node = entry

    def is_forbidden(self, candidate: Domain | str) -> bool:
        if isinstance(candidate, str):
            candidate = Domain.from_raw(candidate, strict=self._strict)

        node = self._root
        for label in reversed(candidate.labels):
            entry = node.children.get(label)
            if entry is None:
                return False
            if entry is TERMINUS:
                return True
            node = entry
        return False

    def check(self, candidate: Domain | str) -> Verdict:
        return Verdict.BAD if self.is_forbidden(candidate) else Verdict.GOOD


def build_index(forbidden_domains: Iterable[str], strict: bool = True) -> DomainIndex:
    """Parse raw forbidden domains and build an index over them."""
    return DomainIndex(
        (Domain.from_raw(raw, strict=strict) for raw in forbidden_domains),
        strict=strict,
    )
