"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct network or filesystem I/O — the transport is injected.
* No imports from ``cli`` or ``infra``.
"""

from pihole_domains.core.command_parser import ParseAction, ParsedCommand, ParseResult, parse_command
from pihole_domains.core.domain_service import DomainListService
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
    Session,
)
from pihole_domains.core.protocols import ApiTransport
from pihole_domains.core.session import SessionManager

__all__: list[str] = [
    "AddReport",
    "ApiTransport",
    "DomainBatch",
    "DomainListService",
    "DomainRecord",
    "ListKind",
    "ListReport",
    "ListType",
    "OperationResult",
    "Outcome",
    "ParseAction",
    "ParseResult",
    "ParsedCommand",
    "RemoveReport",
    "Session",
    "SessionManager",
    "parse_command",
]
