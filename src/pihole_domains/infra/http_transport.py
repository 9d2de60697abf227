"""httpx backed implementation of :class:`~pihole_domains.core.protocols.ApiTransport`.

This module is the **only** place in the codebase that imports
``httpx``.  All httpx exceptions are caught here and re-raised as typed
:class:`~pihole_domains.exceptions.PiholeDomainsError` subclasses —
nothing raw escapes the infrastructure boundary.

JSON error bodies (``{"error": {...}}``) are returned to the caller
even on non-2xx status codes: interpreting the ``error`` field belongs
to the reconciler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

import httpx
from pydantic import ValidationError

from pihole_domains.core.models import Session
from pihole_domains.core.wire import AuthRequest, AuthResponse
from pihole_domains.exceptions import AuthError, TransportError, UnexpectedResponseError
from pihole_domains.infra.credentials import prompt_totp, resolve_password
from pihole_domains.infra.settings import Settings
from pihole_domains.version import __version__

logger = logging.getLogger(__name__)

_Method = Literal["GET", "POST", "DELETE"]


class HttpxTransport:
    """Concrete :class:`ApiTransport` talking to the Pi-hole REST API.

    Usage::

        with HttpxTransport(settings) as transport:
            service = DomainListService(transport)
            service.add(...)

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        client: httpx.Client | None = None,
        password_provider: Callable[[], str] | None = None,
        totp_provider: Callable[[], int] | None = None,
    ) -> None:
        self._base_url = settings.api_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(settings.timeout_seconds),
            verify=settings.verify_tls,
            headers={
                "User-Agent": f"pihole-domains/{__version__}",
                "Accept": "application/json",
            },
        )
        self._password_provider = password_provider or (lambda: resolve_password(settings))
        self._totp_provider = totp_provider or prompt_totp

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool (idempotent)."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def login(self) -> Session:
        """Authenticate, skipping the password when the API needs none."""
        probe = self._parse_auth(self._request("GET", "auth"))
        if probe.session.valid:
            logger.debug("API does not require authentication")
            return Session()

        password = self._password_provider()
        totp = self._totp_provider() if probe.session.totp else None
        body = AuthRequest(password=password, totp=totp).model_dump(
            mode="json", exclude_none=True,
        )
        result = self._parse_auth(self._request("POST", "auth", json=body))

        if not result.session.valid or result.session.sid is None:
            message = result.session.message
            if message is None and result.error is not None:
                message = result.error.message
            raise AuthError(
                f"Authentication failed: {message or 'invalid credentials'}",
                hint="Check PIHOLE_PASSWORD or the app password file.",
            )

        logger.debug("logged in (validity=%ss)", result.session.validity)
        return Session(sid=result.session.sid, csrf=result.session.csrf)

    def logout(self, session: Session) -> None:
        if session.sid is None:
            return
        self._request("DELETE", "auth", session)

    def post(self, session: Session, path: str, body: Any) -> dict[str, Any]:
        return self._request("POST", path, session, json=body)

    def get(self, session: Session, path: str) -> dict[str, Any]:
        return self._request("GET", path, session)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        # Joined by hand: httpx would read "domains:batchDelete" as a URL scheme.
        return f"{self._base_url}/{path.lstrip('/')}"

    @staticmethod
    def _auth_headers(session: Session | None) -> dict[str, str]:
        headers: dict[str, str] = {}
        if session is not None and session.sid is not None:
            headers["X-FTL-SID"] = session.sid
            if session.csrf is not None:
                headers["X-FTL-CSRF"] = session.csrf
        return headers

    def _request(
        self,
        method: _Method,
        path: str,
        session: Session | None = None,
        *,
        json: Any = None,
    ) -> dict[str, Any]:
        url = self.url_for(path)
        try:
            response = self._client.request(
                method, url, json=json, headers=self._auth_headers(session),
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Request to {url} failed: {exc}",
                hint="Check PIHOLE_API_URL and that the API is reachable.",
            ) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        if response.status_code == 204 or not response.content:
            if response.is_error:
                raise TransportError(f"HTTP {response.status_code} with empty body.")
            return {}

        try:
            data: Any = response.json()
        except ValueError as exc:
            if response.is_error:
                raise TransportError(
                    f"HTTP {response.status_code}: {response.text[:200]}",
                ) from exc
            raise UnexpectedResponseError("API returned a non-JSON body.") from exc

        if not isinstance(data, dict):
            raise UnexpectedResponseError(
                f"Expected a JSON object from the API, got {type(data).__name__}.",
            )
        return data

    @staticmethod
    def _parse_auth(data: dict[str, Any]) -> AuthResponse:
        try:
            return AuthResponse.model_validate(data)
        except ValidationError as exc:
            raise UnexpectedResponseError("Malformed authentication response.") from exc
