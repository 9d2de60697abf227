"""Tests for comment validation and domain normalization.

Both are pure functions — no mocking required.
"""

from __future__ import annotations

import pytest

from pihole_domains.core.comment import validate_comment
from pihole_domains.core.normalizer import (
    DomainBatchBuilder,
    normalize_domain,
    wildcard_to_regex,
)
from pihole_domains.exceptions import InvalidCommentError


# ---------------------------------------------------------------------------
# Comment validator
# ---------------------------------------------------------------------------

class TestValidateComment:
    @pytest.mark.parametrize(
        "comment",
        [
            "",
            "blocked by admin",
            "ticket #42: see https://example.com/a,b",
            "snake_case-and-dashes 1.2.3",
        ],
    )
    def test_accepts_allowed_characters(self, comment: str) -> None:
        assert validate_comment(comment) == comment

    @pytest.mark.parametrize(
        "comment",
        ["quote\"d", "semi;colon", "dollar$", "tab\there", "ümlaut", "new\nline", "a&b"],
    )
    def test_rejects_disallowed_characters(self, comment: str) -> None:
        with pytest.raises(InvalidCommentError, match="invalid characters"):
            validate_comment(comment)

    def test_rejection_carries_hint(self) -> None:
        with pytest.raises(InvalidCommentError) as exc_info:
            validate_comment("bad!")
        assert exc_info.value.hint is not None


# ---------------------------------------------------------------------------
# Domain normalizer
# ---------------------------------------------------------------------------

class TestNormalizeDomain:
    @pytest.mark.parametrize(
        "domain",
        ["example.com", "sub.example.co.uk", "^ad[0-9]+\\.", "not a domain"],
    )
    def test_passthrough_without_wildcard(self, domain: str) -> None:
        assert normalize_domain(domain) == domain
        assert normalize_domain(domain, wildcard=False) == domain

    def test_wildcard_example(self) -> None:
        assert normalize_domain("example.com", wildcard=True) == "(\\.|^)example\\.com$"

    @pytest.mark.parametrize("domain", ["a.b.c.d", "localhost", "x..y"])
    def test_wildcard_escapes_every_dot(self, domain: str) -> None:
        expected = "(\\.|^)" + domain.replace(".", "\\.") + "$"
        assert wildcard_to_regex(domain) == expected


class TestDomainBatchBuilder:
    def test_builds_ordered_batch(self) -> None:
        builder = DomainBatchBuilder()
        builder.add("b.com")
        builder.add("a.com", wildcard=True)
        batch = builder.build()
        assert batch.domains == ("b.com", "(\\.|^)a\\.com$")

    def test_len_tracks_additions(self) -> None:
        builder = DomainBatchBuilder()
        assert len(builder) == 0
        builder.add("a.com")
        builder.add("a.com")
        assert len(builder) == 2

    def test_build_snapshot_is_independent(self) -> None:
        builder = DomainBatchBuilder()
        builder.add("a.com")
        first = builder.build()
        builder.add("b.com")
        assert first.domains == ("a.com",)
