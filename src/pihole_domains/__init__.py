"""pihole-domains — allow/deny list management for the Pi-hole API.

Parses command-line domain batches and drives the REST API through a
strict core / infra / cli layering.
"""

from pihole_domains.version import __version__

__all__: list[str] = ["__version__"]
