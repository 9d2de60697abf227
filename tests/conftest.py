"""Shared pytest fixtures and configuration for the pihole-domains test suite.

Guidelines
----------
* No internet access in any test.
* The API is replaced at the transport boundary by :class:`FakeTransport`
  or, for the HTTP layer itself, by ``httpx.MockTransport``.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from typing import Any

import pytest

from pihole_domains.core.models import Session
from pihole_domains.exceptions import AuthError


class FakeTransport:
    """Recording stand-in for the API transport.

    ``responses`` maps a path to the JSON object returned for it; an
    exception instance as the value is raised instead.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        *,
        login_error: Exception | None = None,
        logout_error: Exception | None = None,
    ) -> None:
        self.responses: dict[str, Any] = responses or {}
        self.login_error = login_error
        self.logout_error = logout_error
        self.logins = 0
        self.logouts = 0
        self.calls: list[tuple[str, str, Any]] = []

    def login(self) -> Session:
        if self.login_error is not None:
            raise self.login_error
        self.logins += 1
        return Session(sid="sid-123", csrf="csrf-456")

    def logout(self, session: Session) -> None:
        self.logouts += 1
        if self.logout_error is not None:
            raise self.logout_error

    def post(self, session: Session, path: str, body: Any) -> dict[str, Any]:
        self.calls.append(("POST", path, body))
        return self._respond(path)

    def get(self, session: Session, path: str) -> dict[str, Any]:
        self.calls.append(("GET", path, None))
        return self._respond(path)

    def _respond(self, path: str) -> dict[str, Any]:
        response = self.responses.get(path, {})
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_login_transport() -> FakeTransport:
    return FakeTransport(login_error=AuthError("Authentication failed: password incorrect"))
