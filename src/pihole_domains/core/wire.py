"""Typed request / response payloads exchanged with the Pi-hole API.

These Pydantic v2 models describe *what* travels over the wire; the
request builder and the reconciler are the only consumers.  Unknown
response fields are ignored so that newer API versions keep working.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pihole_domains.core.models import ListKind, ListType


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class AddDomainsRequest(_WireModel):
    """Body of ``POST domains/{type}/{kind}``."""

    domain: list[str]
    comment: str | None = None


class BatchDeleteItem(_WireModel):
    """One element of the ``POST domains:batchDelete`` array."""

    item: str
    type: ListType
    kind: ListKind


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ApiErrorBody(_WireModel):
    """The ``error`` object the API attaches to failed requests."""

    key: str | None = None
    message: str | None = None
    hint: str | None = None


class ProcessedSuccess(_WireModel):
    item: str


class ProcessedError(_WireModel):
    item: str
    error: str = ""


class Processed(_WireModel):
    success: list[ProcessedSuccess] = Field(default_factory=list)
    errors: list[ProcessedError] = Field(default_factory=list)


class AddDomainsResponse(_WireModel):
    processed: Processed | None = None
    error: ApiErrorBody | None = None


class BatchDeleteResponse(_WireModel):
    # Kept loose: the API may answer with an error object or a bare string.
    error: Any = None


class DomainEntryPayload(_WireModel):
    domain: str
    comment: str | None = None
    groups: list[int] = Field(default_factory=list)
    date_added: int | None = None
    date_modified: int | None = None


class ListDomainsResponse(_WireModel):
    domains: list[DomainEntryPayload] = Field(default_factory=list)
    error: ApiErrorBody | None = None


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class AuthRequest(_WireModel):
    password: str
    totp: int | None = None


class SessionPayload(_WireModel):
    valid: bool = False
    totp: bool = False
    sid: str | None = None
    csrf: str | None = None
    validity: int | None = None
    message: str | None = None


class AuthResponse(_WireModel):
    session: SessionPayload = Field(default_factory=SessionPayload)
    error: ApiErrorBody | None = None
