"""Custom exception hierarchy for pihole-domains.

All exceptions that cross layer boundaries must inherit from
:class:`PiholeDomainsError`.  Raw third-party exceptions (httpx,
pydantic) must NEVER propagate beyond the infrastructure layer or the
reconciler — they are caught and re-raised as a typed subclass defined
here.

Per-item API failures are *not* exceptions: they are reported as
:class:`~pihole_domains.core.models.OperationResult` values so that one
rejected domain never aborts the rest of the batch.

Hierarchy
---------
PiholeDomainsError
├── InvalidCommentError
├── SelectorMissingError
├── AuthError
├── TransportError
│   └── UnexpectedResponseError
├── BatchLevelApiError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations


class PiholeDomainsError(Exception):
    """Base exception for all pihole-domains errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Local validation (raised before any session is opened) ----------------

class InvalidCommentError(PiholeDomainsError):
    """Raised when a comment contains characters outside the allowed set."""


class SelectorMissingError(PiholeDomainsError):
    """Raised when an operation needs a list type and kind but lacks one."""


# --- Remote API ------------------------------------------------------------

class AuthError(PiholeDomainsError):
    """Raised when the API rejects authentication or no credentials exist."""


class TransportError(PiholeDomainsError):
    """Raised when a request cannot be completed at the HTTP level."""


class UnexpectedResponseError(TransportError):
    """Raised when the API answers with a payload we cannot interpret."""


class BatchLevelApiError(PiholeDomainsError):
    """Raised when the API reports one error for the whole request."""


# --- Environment / configuration -------------------------------------------

class ConfigError(PiholeDomainsError):
    """Raised when settings from the environment fail validation."""


class EnvironmentError(PiholeDomainsError):
    """Raised when a required runtime dependency is not available."""
