"""Credential resolution for API login.

Lookup order: configured password, then the CLI app-password file when
it is readable, then an interactive questionary prompt.  questionary is
imported lazily so that non-interactive paths never need it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from pihole_domains.exceptions import AuthError, EnvironmentError
from pihole_domains.infra.settings import Settings

logger = logging.getLogger(__name__)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _read_password_file(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        logger.debug("password file %s not usable: %s", path, exc)
        return None
    return content or None


def _require_tty(what: str) -> None:
    if not sys.stdin.isatty():
        raise AuthError(
            f"The API requires a {what} but no terminal is available to ask for it.",
            hint="Set PIHOLE_PASSWORD or make PIHOLE_PASSWORD_FILE readable.",
        )


def resolve_password(settings: Settings) -> str:
    """Return the password to log in with.

    Raises
    ------
    AuthError
        When no password is configured and stdin is not a terminal, or
        the prompt is cancelled.
    """
    if settings.password is not None:
        return settings.password.get_secret_value()

    from_file = _read_password_file(settings.password_file)
    if from_file is not None:
        logger.debug("using app password from %s", settings.password_file)
        return from_file

    _require_tty("password")
    questionary = _import_questionary()
    answer: str | None = questionary.password("Enter your Pi-hole password:").ask()
    if answer is None:
        raise AuthError("Password prompt cancelled.")
    return answer


def prompt_totp() -> int:
    """Ask for a two-factor code."""
    _require_tty("two-factor code")
    questionary = _import_questionary()
    answer: str | None = questionary.text(
        "Enter your two-factor authentication code:",
        validate=lambda text: text.strip().isdigit() or "Digits only.",
    ).ask()
    if answer is None:
        raise AuthError("Two-factor prompt cancelled.")
    return int(answer.strip())
