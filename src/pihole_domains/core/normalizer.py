"""Domain normalization and batch accumulation.

Every function in this module is a **pure** transformation.  Domain
syntax is deliberately not validated here — the API owns that check.
"""

from __future__ import annotations

from pihole_domains.core.models import DomainBatch


def wildcard_to_regex(domain: str) -> str:
    """Rewrite *domain* into a regex matching it and all its subdomains.

    ``example.com`` becomes ``(\\.|^)example\\.com$``.
    """
    escaped = domain.replace(".", "\\.")
    return f"(\\.|^){escaped}$"


def normalize_domain(token: str, *, wildcard: bool = False) -> str:
    """Turn a raw CLI token into a domain entry."""
    if wildcard:
        return wildcard_to_regex(token)
    return token


class DomainBatchBuilder:
    """Mutable accumulator used while parsing; frozen by :meth:`build`."""

    def __init__(self) -> None:
        self._domains: list[str] = []

    def add(self, token: str, *, wildcard: bool = False) -> str:
        entry = normalize_domain(token, wildcard=wildcard)
        self._domains.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self._domains)

    def build(self) -> DomainBatch:
        return DomainBatch(domains=tuple(self._domains))
