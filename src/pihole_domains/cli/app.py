"""CLI application entry point and command routing for pihole-domains.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pihole_domains.exceptions.PiholeDomainsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing, request building and
  reconciliation are delegated to the core layer.
* The parser only *describes* what to do (:class:`ParseAction`); this
  module alone decides when the process stops.
* Settings, logging and the HTTP transport are set up lazily, so help
  and empty-batch paths never touch the network or the environment.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from pihole_domains.cli import exit_codes
from pihole_domains.cli.console import err_console, escape
from pihole_domains.cli.report import print_usage, render_add, render_list, render_remove
from pihole_domains.core.command_parser import ParseAction, ParsedCommand, parse_command
from pihole_domains.core.domain_service import DomainListService
from pihole_domains.core.models import ListKind, ListType
from pihole_domains.core.protocols import ApiTransport
from pihole_domains.exceptions import PiholeDomainsError, SelectorMissingError

logger = logging.getLogger(__name__)

_SELECTOR_HINT = "Use one of -a, -b, --allow-regex, --allow-wild, --regex or --wild."


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------

@contextmanager
def _open_service(transport: ApiTransport | None) -> Iterator[DomainListService]:
    """Yield a service bound to *transport*, or to a fresh HTTP transport."""
    if transport is not None:
        yield DomainListService(transport)
        return

    from pihole_domains.cli.log_setup import configure_logging
    from pihole_domains.infra.http_transport import HttpxTransport
    from pihole_domains.infra.settings import load_settings

    settings = load_settings()
    configure_logging(debug=settings.debug, log_json=settings.log_json)
    logger.debug("using API at %s", settings.api_url)

    with HttpxTransport(settings) as http_transport:
        yield DomainListService(http_transport)


def _require_selectors(command: ParsedCommand, message: str) -> tuple[ListType, ListKind]:
    if command.list_type is None or command.list_kind is None:
        raise SelectorMissingError(message, hint=_SELECTOR_HINT)
    return command.list_type, command.list_kind


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(command: ParsedCommand, transport: ApiTransport | None) -> int:
    """Display one list and stop, whatever else was on the command line."""
    list_type, kind = _require_selectors(
        command, "Unable to display list. Please specify a list type and kind.",
    )
    with _open_service(transport) as service:
        report = service.list_domains(list_type, kind)
    render_list(report)
    return exit_codes.SUCCESS


def _handle_batch(command: ParsedCommand, transport: ApiTransport | None) -> int:
    """Add or remove the parsed batch."""
    list_type, kind = _require_selectors(
        command, "Unable to modify domains. Please specify a list type and kind.",
    )

    with _open_service(transport) as service:
        if command.add_mode:
            add_report = service.add(command.batch, list_type, kind, command.comment)
            render_add(add_report, verbose=command.verbose)
        else:
            if command.comment is not None:
                logger.debug("comment ignored when removing domains")
            remove_report = service.remove(command.batch, list_type, kind)
            render_remove(remove_report, verbose=command.verbose)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    transport: ApiTransport | None = None,
) -> int:
    """Run the pihole-domains CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    transport:
        Optional pre-built transport.  When ``None``, an HTTP transport is
        created from the environment the first time one is needed.

    Returns
    -------
    int
        OS process exit code.
    """
    tokens = sys.argv[1:] if argv is None else argv
    result = parse_command(tokens)
    command = result.command

    if result.action is ParseAction.HELP:
        print_usage(command)
        return exit_codes.SUCCESS

    if result.action is ParseAction.LIST:
        return _handle_list(command, transport)

    if not command.batch:
        print_usage(command)
        return exit_codes.SUCCESS

    return _handle_batch(command, transport)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PiholeDomainsError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
