"""Infrastructure layer — external system integration.

This layer wraps all interaction with the HTTP API, the environment
and the terminal prompt.  Every raw third-party exception must be
caught here and re-raised as a
:class:`~pihole_domains.exceptions.PiholeDomainsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from pihole_domains.infra.credentials import prompt_totp, resolve_password
from pihole_domains.infra.http_transport import HttpxTransport
from pihole_domains.infra.settings import Settings, load_settings

__all__: list[str] = [
    "HttpxTransport",
    "Settings",
    "load_settings",
    "prompt_totp",
    "resolve_password",
]
