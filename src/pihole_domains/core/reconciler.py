"""Result reconciliation — raw API responses into structured reports.

The reconciler is the only place that interprets response payloads.
Malformed payloads are mapped to
:class:`~pihole_domains.exceptions.UnexpectedResponseError`; nothing
from pydantic escapes this module.

Boundary case
-------------
For add requests, the counts in ``processed.success`` and
``processed.errors`` decide what is reported, not the size of the
requested batch.  A domain the API silently drops from both arrays
produces no result at all.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel, ValidationError

from pihole_domains.core.models import (
    AddReport,
    DomainBatch,
    DomainRecord,
    ListKind,
    ListReport,
    ListType,
    OperationResult,
    Outcome,
    RemoveReport,
)
from pihole_domains.core.wire import (
    AddDomainsResponse,
    ApiErrorBody,
    BatchDeleteResponse,
    ListDomainsResponse,
)
from pihole_domains.exceptions import BatchLevelApiError, UnexpectedResponseError

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# Raw SQLite message the API forwards for duplicate entries.
DUPLICATE_DOMAIN_ERROR = "UNIQUE constraint failed: domainlist.domain, domainlist.type"
DUPLICATE_DOMAIN_MESSAGE = "Domain already in the specified list"

TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def translate_error(message: str) -> str:
    """Rewrite known API error messages into human-readable text."""
    if message == DUPLICATE_DOMAIN_ERROR:
        return DUPLICATE_DOMAIN_MESSAGE
    return message


def format_timestamp(epoch: int | None) -> str:
    """Render epoch seconds as a local, human-readable date."""
    if epoch is None:
        return "unknown"
    return datetime.fromtimestamp(epoch).strftime(TIMESTAMP_FORMAT)


def describe_api_error(error: Any) -> str:
    """Flatten an API ``error`` value (object or string) into one line."""
    if isinstance(error, ApiErrorBody):
        error = error.model_dump(exclude_none=True)
    if isinstance(error, dict):
        message = error.get("message") or error.get("key")
        if message:
            hint = error.get("hint")
            return f"{message} ({hint})" if hint else str(message)
        return json.dumps(error, separators=(",", ":"))
    return str(error)


def _parse(model: type[_ModelT], response: Any) -> _ModelT:
    if not isinstance(response, dict):
        raise UnexpectedResponseError(
            f"Expected a JSON object from the API, got {type(response).__name__}.",
        )
    try:
        return model.model_validate(response)
    except ValidationError as exc:
        raise UnexpectedResponseError(
            f"Malformed API response: {exc.error_count()} invalid field(s).",
            hint="The API version may be incompatible with this client.",
        ) from exc


def _raise_batch_error(error: ApiErrorBody) -> NoReturn:
    raise BatchLevelApiError(
        error.message or error.key or "The API reported an error.",
        hint=error.hint,
    )


# ---------------------------------------------------------------------------
# Public reconcilers
# ---------------------------------------------------------------------------

def reconcile_add(response: Any) -> AddReport:
    """Map ``processed.success`` / ``processed.errors`` onto results."""
    parsed = _parse(AddDomainsResponse, response)
    if parsed.processed is None:
        if parsed.error is not None:
            _raise_batch_error(parsed.error)
        raise UnexpectedResponseError("API response lacks a 'processed' block.")

    results = [
        OperationResult(domain=entry.item, outcome=Outcome.ADDED)
        for entry in parsed.processed.success
    ]
    results.extend(
        OperationResult(
            domain=entry.item,
            outcome=Outcome.ADD_FAILED,
            reason=translate_error(entry.error),
        )
        for entry in parsed.processed.errors
    )
    report = AddReport(results=tuple(results))
    logger.debug(
        "add reconciled: %d added, %d failed", len(report.added), len(report.failed),
    )
    return report


def reconcile_remove(response: Any, batch: DomainBatch) -> RemoveReport:
    """Report the whole batch removed unless a top-level error is present."""
    parsed = _parse(BatchDeleteResponse, response)
    if parsed.error is not None and parsed.error != "" and parsed.error != {}:
        message = describe_api_error(parsed.error)
        logger.debug("batch delete failed: %s", message)
        return RemoveReport(results=(), error=message)

    return RemoveReport(
        results=tuple(
            OperationResult(domain=domain, outcome=Outcome.REMOVED)
            for domain in batch.domains
        ),
    )


def reconcile_list(response: Any, list_type: ListType, kind: ListKind) -> ListReport:
    parsed = _parse(ListDomainsResponse, response)
    if parsed.error is not None:
        _raise_batch_error(parsed.error)

    records = tuple(
        DomainRecord(
            domain=entry.domain,
            comment=entry.comment,
            groups=tuple(entry.groups),
            date_added=entry.date_added,
            date_modified=entry.date_modified,
        )
        for entry in parsed.domains
    )
    return ListReport(list_type=list_type, list_kind=kind, records=records)
