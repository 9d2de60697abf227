"""Domain models for pihole-domains.

All models are **frozen** dataclasses or ``str`` enums — immutable
value objects with no behaviour beyond data access.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# List selectors
# ---------------------------------------------------------------------------

class ListType(str, Enum):
    """Which of the two domain lists an operation targets."""

    ALLOW = "allow"
    DENY = "deny"


class ListKind(str, Enum):
    """Whether list entries are literal domains or regex patterns."""

    EXACT = "exact"
    REGEX = "regex"


# ---------------------------------------------------------------------------
# Domain batch
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DomainBatch:
    """Immutable, ordered batch of domain entries for one invocation.

    Duplicates are permitted — the API enforces uniqueness per list.
    """

    domains: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.domains)

    def __bool__(self) -> bool:
        return len(self.domains) > 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.domains)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Session:
    """Opaque authentication context for a single invocation."""

    sid: str | None = None
    """Session id, or ``None`` when the API requires no authentication."""

    csrf: str | None = None
    """CSRF token returned alongside the session id."""


# ---------------------------------------------------------------------------
# Operation outcomes
# ---------------------------------------------------------------------------

class Outcome(str, Enum):
    ADDED = "added"
    ADD_FAILED = "add_failed"
    REMOVED = "removed"
    REMOVE_FAILED = "remove_failed"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Per-domain outcome of an add or remove request."""

    domain: str
    outcome: Outcome
    reason: str | None = None
    """Human-readable failure reason; ``None`` on success."""


@dataclass(frozen=True, slots=True)
class AddReport:
    results: tuple[OperationResult, ...] = ()

    @property
    def added(self) -> tuple[OperationResult, ...]:
        return tuple(r for r in self.results if r.outcome is Outcome.ADDED)

    @property
    def failed(self) -> tuple[OperationResult, ...]:
        return tuple(r for r in self.results if r.outcome is Outcome.ADD_FAILED)


@dataclass(frozen=True, slots=True)
class RemoveReport:
    """Outcome of a batch delete.

    When :attr:`error` is set the whole batch failed and :attr:`results`
    is empty — the API does not itemize batch-delete failures.
    """

    results: tuple[OperationResult, ...] = ()
    error: str | None = None

    @property
    def removed(self) -> tuple[OperationResult, ...]:
        return tuple(r for r in self.results if r.outcome is Outcome.REMOVED)


@dataclass(frozen=True, slots=True)
class DomainRecord:
    """One entry of a displayed list."""

    domain: str
    comment: str | None
    groups: tuple[int, ...]
    date_added: int | None
    date_modified: int | None


@dataclass(frozen=True, slots=True)
class ListReport:
    list_type: ListType
    list_kind: ListKind
    records: tuple[DomainRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return len(self.records) > 0
