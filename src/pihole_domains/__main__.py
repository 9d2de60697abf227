"""Allow ``python -m pihole_domains`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pihole_domains`` behaves identically to the
``pihole-domains`` console script.
"""

from __future__ import annotations

from pihole_domains.cli.app import cli

if __name__ == "__main__":
    cli()
