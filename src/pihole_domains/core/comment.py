"""Comment validation.

Comments are attached verbatim to every domain of an add batch, so the
character set is restricted before anything reaches the network.
"""

from __future__ import annotations

import re

from pihole_domains.exceptions import InvalidCommentError

_DISALLOWED = re.compile(r"[^a-zA-Z0-9_#:/.,\- ]")

ALLOWED_CHARACTERS = "letters, digits, space and _ # : / . , -"


def validate_comment(text: str) -> str:
    """Return *text* unchanged, or raise :class:`InvalidCommentError`."""
    if _DISALLOWED.search(text):
        raise InvalidCommentError(
            "Found invalid characters in domain comment!",
            hint=f"Comments may only contain {ALLOWED_CHARACTERS}.",
        )
    return text
