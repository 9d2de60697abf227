"""Process exit codes returned by :func:`pihole_domains.cli.app.main`.

Batch results never change the code: a domain the API rejected is
reported on stdout and the run still exits with :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Usage shown, nothing to do, or the API call completed."""

GENERAL_ERROR: int = 1
"""A PiholeDomainsError stopped the run (bad comment, no selector, auth, transport)."""

UNEXPECTED_ERROR: int = 2
"""Anything else reached the ``cli()`` boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
