"""Session lifecycle around the API transport.

Exactly one session is opened per invocation and it is closed on every
exit path of the operation that opened it.  No retries happen here: a
single authentication failure is fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from pihole_domains.core.models import Session
from pihole_domains.core.protocols import ApiTransport
from pihole_domains.exceptions import PiholeDomainsError

logger = logging.getLogger(__name__)


class SessionManager:
    """Open / close API sessions through an injected transport."""

    def __init__(self, transport: ApiTransport) -> None:
        self._transport: ApiTransport = transport

    def open(self) -> Session:
        """Authenticate.  :class:`AuthError` propagates unchanged."""
        session = self._transport.login()
        logger.debug("session opened (authenticated=%s)", session.sid is not None)
        return session

    def close(self, session: Session) -> None:
        """Invalidate *session*.

        Logout failures are logged but never reported to the user; they
        must not mask the outcome of the operation itself.
        """
        try:
            self._transport.logout(session)
        except PiholeDomainsError as exc:
            logger.debug("logout failed: %s", exc)
        else:
            logger.debug("session closed")

    @contextmanager
    def scope(self) -> Iterator[Session]:
        """Yield an open session and close it however the block exits."""
        session = self.open()
        try:
            yield session
        finally:
            self.close(session)
