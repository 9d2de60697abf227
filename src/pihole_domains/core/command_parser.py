"""Command-line token parsing.

The CLI grammar is positional and order-sensitive (selectors apply to
the domains that follow them, ``-h`` and ``-l`` act the moment they are
read), which argparse cannot express.  Tokens are therefore consumed
left to right by a small state machine.

Parsing never terminates the process: it returns a :class:`ParseResult`
whose :class:`ParseAction` tells the driver what to do next.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from pihole_domains.core.comment import validate_comment
from pihole_domains.core.models import DomainBatch, ListKind, ListType
from pihole_domains.core.normalizer import DomainBatchBuilder


class ParseAction(str, Enum):
    CONTINUE = "continue"
    HELP = "help"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class Selector:
    """Fixed (type, kind, wildcard) combination bound to one flag."""

    flag: str
    list_type: ListType
    list_kind: ListKind
    wildcard: bool = False


_ALLOW = Selector("-a", ListType.ALLOW, ListKind.EXACT)
_DENY = Selector("-b", ListType.DENY, ListKind.EXACT)
_ALLOW_REGEX = Selector("--allow-regex", ListType.ALLOW, ListKind.REGEX)
_ALLOW_WILD = Selector("--allow-wild", ListType.ALLOW, ListKind.REGEX, wildcard=True)
_DENY_REGEX = Selector("--regex", ListType.DENY, ListKind.REGEX)
_DENY_WILD = Selector("--wild", ListType.DENY, ListKind.REGEX, wildcard=True)

SELECTORS: dict[str, Selector] = {
    "-a": _ALLOW,
    "allowlist": _ALLOW,
    "-b": _DENY,
    "denylist": _DENY,
    "--allow-regex": _ALLOW_REGEX,
    "allow-regex": _ALLOW_REGEX,
    "--allow-wild": _ALLOW_WILD,
    "allow-wild": _ALLOW_WILD,
    "--regex": _DENY_REGEX,
    "regex": _DENY_REGEX,
    "--wild": _DENY_WILD,
    "wildcard": _DENY_WILD,
}

DELMODE_FLAGS = frozenset({"-d", "--delmode"})
QUIET_FLAGS = frozenset({"-q", "--quiet"})
HELP_FLAGS = frozenset({"-h", "--help"})
LIST_FLAGS = frozenset({"-l", "--list"})
COMMENT_FLAG = "--comment"


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """Everything the driver needs, fixed once parsing completes."""

    list_type: ListType | None = None
    list_kind: ListKind | None = None
    wildcard: bool = False
    add_mode: bool = True
    verbose: bool = True
    comment: str | None = None
    batch: DomainBatch = DomainBatch()
    flag: str | None = None
    """The selector flag last seen, echoed back in usage text."""

    @property
    def has_selectors(self) -> bool:
        return self.list_type is not None and self.list_kind is not None


@dataclass(frozen=True, slots=True)
class ParseResult:
    action: ParseAction
    command: ParsedCommand


class _ParseState:
    """Mutable accumulator for one pass over the tokens."""

    def __init__(self) -> None:
        self.selector: Selector | None = None
        self.add_mode = True
        self.verbose = True
        self.comment: str | None = None
        self.batch = DomainBatchBuilder()

    @property
    def wildcard(self) -> bool:
        return self.selector is not None and self.selector.wildcard

    def freeze(self) -> ParsedCommand:
        selector = self.selector
        return ParsedCommand(
            list_type=selector.list_type if selector else None,
            list_kind=selector.list_kind if selector else None,
            wildcard=self.wildcard,
            add_mode=self.add_mode,
            verbose=self.verbose,
            comment=self.comment,
            batch=self.batch.build(),
            flag=selector.flag if selector else None,
        )


def parse_command(tokens: Sequence[str]) -> ParseResult:
    """Parse *tokens* into a :class:`ParseResult`.

    Raises
    ------
    InvalidCommentError
        As soon as a ``--comment`` argument fails validation.
    """
    state = _ParseState()
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token in SELECTORS:
            state.selector = SELECTORS[token]
        elif token in DELMODE_FLAGS:
            state.add_mode = False
        elif token in QUIET_FLAGS:
            state.verbose = False
        elif token in HELP_FLAGS:
            return ParseResult(ParseAction.HELP, state.freeze())
        elif token in LIST_FLAGS:
            return ParseResult(ParseAction.LIST, state.freeze())
        elif token == COMMENT_FLAG:
            # A trailing --comment with nothing after it yields an empty comment.
            raw = tokens[index + 1] if index + 1 < len(tokens) else ""
            state.comment = validate_comment(raw)
            index += 1
        else:
            state.batch.add(token, wildcard=state.wildcard)
        index += 1

    return ParseResult(ParseAction.CONTINUE, state.freeze())
