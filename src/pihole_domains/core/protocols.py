"""Protocols (interfaces) consumed by the core layer.

These define the contract that the infrastructure transport must
satisfy.  Core code depends ONLY on this protocol — never on the
concrete HTTP implementation.
"""

from __future__ import annotations

from typing import Any, Protocol

from pihole_domains.core.models import Session


class ApiTransport(Protocol):
    """Contract for the remote administrative API.

    Implementations own authentication mechanics, timeouts and the
    wire encoding, and must map every backend-specific exception to a
    :class:`~pihole_domains.exceptions.PiholeDomainsError` subclass.
    """

    def login(self) -> Session:
        """Authenticate and return a fresh session.

        Raises
        ------
        AuthError
            When credentials are missing or rejected.
        TransportError
            When the API cannot be reached.
        """
        ...  # pragma: no cover

    def logout(self, session: Session) -> None:
        """Invalidate *session* on the server."""
        ...  # pragma: no cover

    def post(self, session: Session, path: str, body: Any) -> dict[str, Any]:
        """POST a JSON *body* to *path* and return the decoded response."""
        ...  # pragma: no cover

    def get(self, session: Session, path: str) -> dict[str, Any]:
        """GET *path* and return the decoded response."""
        ...  # pragma: no cover
