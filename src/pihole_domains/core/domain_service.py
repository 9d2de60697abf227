"""Core domain-list service — orchestrates one add, remove or list call.

Depends on an :class:`~pihole_domains.core.protocols.ApiTransport`
injected at construction time, keeping the core free of any HTTP
imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Every call opens exactly one session and closes it on every exit
  path, including transport and reconciliation failures.
* Only :class:`~pihole_domains.exceptions.PiholeDomainsError`
  subclasses escape.
"""

from __future__ import annotations

import logging
from typing import Any

from pihole_domains.core.models import (
    AddReport,
    DomainBatch,
    ListKind,
    ListReport,
    ListType,
    RemoveReport,
    Session,
)
from pihole_domains.core.protocols import ApiTransport
from pihole_domains.core.reconciler import reconcile_add, reconcile_list, reconcile_remove
from pihole_domains.core.request_builder import (
    ApiRequest,
    build_add_request,
    build_list_request,
    build_remove_request,
)
from pihole_domains.core.session import SessionManager
from pihole_domains.exceptions import PiholeDomainsError, TransportError

logger = logging.getLogger(__name__)


class DomainListService:
    """Drive batch operations against the allow/deny lists.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`ApiTransport` protocol.
    """

    def __init__(self, transport: ApiTransport) -> None:
        self._transport: ApiTransport = transport
        self._sessions = SessionManager(transport)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(
        self,
        batch: DomainBatch,
        list_type: ListType,
        kind: ListKind,
        comment: str | None = None,
    ) -> AddReport:
        """Add every domain of *batch* with one shared *comment*."""
        request = build_add_request(batch, list_type, kind, comment)
        with self._sessions.scope() as session:
            response = self._send(session, request)
            return reconcile_add(response)

    def remove(
        self,
        batch: DomainBatch,
        list_type: ListType,
        kind: ListKind,
    ) -> RemoveReport:
        request = build_remove_request(batch, list_type, kind)
        with self._sessions.scope() as session:
            response = self._send(session, request)
            return reconcile_remove(response, batch)

    def list_domains(self, list_type: ListType, kind: ListKind) -> ListReport:
        request = build_list_request(list_type, kind)
        with self._sessions.scope() as session:
            response = self._send(session, request)
            return reconcile_list(response, list_type, kind)

    # ------------------------------------------------------------------
    # Transport delegation (safe boundary)
    # ------------------------------------------------------------------

    def _send(self, session: Session, request: ApiRequest) -> dict[str, Any]:
        """Call the transport and ensure only our exceptions escape."""
        logger.debug("%s %s", request.method, request.path)
        try:
            if request.method == "GET":
                return self._transport.get(session, request.path)
            return self._transport.post(session, request.path, request.json_body())
        except PiholeDomainsError:
            raise
        except Exception as exc:
            raise TransportError(f"Unexpected transport error: {exc}") from exc
