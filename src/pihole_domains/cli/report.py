"""Rendering of operation reports and usage text.

All display-related logic lives here — no parsing, no network calls.
Every user-supplied value passes through :func:`escape` because regex
entries routinely contain square brackets.
"""

from __future__ import annotations

import json

from pihole_domains.cli.console import console, escape
from pihole_domains.core.command_parser import ParsedCommand
from pihole_domains.core.models import AddReport, DomainRecord, ListReport, RemoveReport
from pihole_domains.core.reconciler import format_timestamp

PROG = "pihole-domains"

TICK = "\\[[green]✓[/green]]"
CROSS = "\\[[red]✗[/red]]"
INFO = "\\[i]"


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------

def render_usage(command: ParsedCommand) -> str:
    """Build the help text, tailored to the selector flag last seen."""
    flag = f"{command.flag} " if command.flag else ""
    if command.list_type is not None and command.list_kind is not None:
        summary = (
            f"{command.list_type.value.capitalize()} one or more "
            f"{command.list_kind.value} domains"
        )
    else:
        summary = "Add or remove one or more domains in the allow or deny list"

    return "\n".join(
        (
            f"Usage: {PROG} {flag}[options] <domain> <domain2 ...>",
            f"Example: '{PROG} {flag}site.com', or '{PROG} {flag}site1.com site2.com'",
            summary,
            "",
            "Lists:",
            "  -a, allowlist         Exact allowlist",
            "  -b, denylist          Exact denylist",
            "  --allow-regex         Regex allowlist",
            "  --allow-wild          Regex allowlist, domain and all subdomains",
            "  --regex               Regex denylist",
            "  --wild, wildcard      Regex denylist, domain and all subdomains",
            "",
            "Options:",
            "  -d, --delmode         Remove domain(s)",
            "  -q, --quiet           Make output less verbose",
            "  -h, --help            Show this help dialog",
            "  -l, --list            Display domains",
            '  --comment "text"      Add a comment to the domain. If adding multiple '
            "domains the same comment will be used for all",
        )
    )


def print_usage(command: ParsedCommand) -> None:
    console.print(escape(render_usage(command)))


# ---------------------------------------------------------------------------
# Operation reports
# ---------------------------------------------------------------------------

def _domain_line(domain: str) -> str:
    return f"    - [blue]{escape(domain)}[/blue]"


def render_add(report: AddReport, *, verbose: bool = True) -> None:
    """Print added and rejected domains; silent when *verbose* is off."""
    if not verbose:
        return

    added = report.added
    if added:
        console.print(f"  {TICK} Added {len(added)} domain(s):")
        for result in added:
            console.print(_domain_line(result.domain))

    failed = report.failed
    if failed:
        console.print(f"  {CROSS} Failed to add {len(failed)} domain(s):")
        for result in failed:
            console.print(_domain_line(result.domain))
            console.print(f"      {escape(result.reason or '')}")


def render_remove(report: RemoveReport, *, verbose: bool = True) -> None:
    """Print removed domains; a batch-level error is shown even when quiet."""
    if report.error is not None:
        console.print(f"  {CROSS} Failed to remove domain(s):")
        console.print(f"      {escape(report.error)}")
        return

    if not verbose:
        return

    removed = report.removed
    console.print(f"  {TICK} Removed {len(removed)} domain(s):")
    for result in removed:
        console.print(_domain_line(result.domain))


def _record_lines(record: DomainRecord) -> list[str]:
    groups = json.dumps(list(record.groups))
    return [
        _domain_line(record.domain),
        f"      Comment: {escape(record.comment or '')}",
        f"      Groups: {escape(groups)}",
        f"      Added: {format_timestamp(record.date_added)}",
        f"      Last modified: {format_timestamp(record.date_modified)}",
    ]


def render_list(report: ListReport) -> None:
    name = f"{report.list_kind.value} {report.list_type.value}list"
    if not report:
        console.print(f"  {INFO} No domains found in the {name}")
        return

    console.print(f"  {TICK} Found {len(report)} domain(s) in the {name}:")
    for record in report.records:
        for line in _record_lines(record):
            console.print(line)
