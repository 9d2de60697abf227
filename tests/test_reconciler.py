"""Tests for response reconciliation (core/reconciler.py).

Payloads mirror what the API actually returns; no transport involved.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from pihole_domains.core.models import DomainBatch, ListKind, ListType, Outcome
from pihole_domains.core.reconciler import (
    DUPLICATE_DOMAIN_ERROR,
    DUPLICATE_DOMAIN_MESSAGE,
    TIMESTAMP_FORMAT,
    describe_api_error,
    format_timestamp,
    reconcile_add,
    reconcile_list,
    reconcile_remove,
    translate_error,
)
from pihole_domains.exceptions import BatchLevelApiError, UnexpectedResponseError


def _add_response(success: list[str], errors: list[tuple[str, str]]) -> dict:
    return {
        "processed": {
            "success": [{"item": item} for item in success],
            "errors": [{"item": item, "error": error} for item, error in errors],
        },
        "took": 0.01,
    }


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

class TestTranslateError:
    def test_duplicate_message_rewritten(self) -> None:
        assert translate_error(DUPLICATE_DOMAIN_ERROR) == DUPLICATE_DOMAIN_MESSAGE

    def test_other_messages_verbatim(self) -> None:
        assert translate_error("Invalid domain") == "Invalid domain"

    def test_near_match_not_rewritten(self) -> None:
        assert translate_error(DUPLICATE_DOMAIN_ERROR + ".") != DUPLICATE_DOMAIN_MESSAGE


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------

class TestReconcileAdd:
    def test_success_and_duplicate(self) -> None:
        report = reconcile_add(
            _add_response(["a.com"], [("b.com", DUPLICATE_DOMAIN_ERROR)]),
        )
        assert [(r.domain, r.outcome) for r in report.added] == [("a.com", Outcome.ADDED)]
        assert len(report.failed) == 1
        failed = report.failed[0]
        assert failed.domain == "b.com"
        assert failed.outcome is Outcome.ADD_FAILED
        assert failed.reason == "Domain already in the specified list"

    def test_other_error_passes_through(self) -> None:
        report = reconcile_add(_add_response([], [("x", "Invalid domain")]))
        assert report.failed[0].reason == "Invalid domain"

    def test_silently_dropped_domain_produces_nothing(self) -> None:
        # Three domains requested, the API only mentions one.
        report = reconcile_add(_add_response(["a.com"], []))
        assert len(report.results) == 1

    def test_empty_arrays(self) -> None:
        report = reconcile_add(_add_response([], []))
        assert report.results == ()

    def test_top_level_error_raises(self) -> None:
        with pytest.raises(BatchLevelApiError, match="Unauthorized") as exc_info:
            reconcile_add(
                {"error": {"key": "unauthorized", "message": "Unauthorized", "hint": None}},
            )
        assert exc_info.value.hint is None

    def test_missing_processed_block(self) -> None:
        with pytest.raises(UnexpectedResponseError):
            reconcile_add({"took": 0.1})

    def test_malformed_payload(self) -> None:
        with pytest.raises(UnexpectedResponseError):
            reconcile_add({"processed": {"success": [{"nope": 1}]}})

    def test_non_object_payload(self) -> None:
        with pytest.raises(UnexpectedResponseError):
            reconcile_add(["a.com"])


# ---------------------------------------------------------------------------
# Remove
# ---------------------------------------------------------------------------

class TestReconcileRemove:
    _BATCH = DomainBatch(domains=("a.com", "b.com", "c.com"))

    def test_null_error_removes_whole_batch(self) -> None:
        report = reconcile_remove({"error": None}, self._BATCH)
        assert report.error is None
        assert [r.domain for r in report.removed] == ["a.com", "b.com", "c.com"]
        assert all(r.outcome is Outcome.REMOVED for r in report.results)

    def test_empty_body_removes_whole_batch(self) -> None:
        report = reconcile_remove({}, self._BATCH)
        assert len(report.removed) == 3

    def test_empty_string_error_is_ignored(self) -> None:
        report = reconcile_remove({"error": ""}, self._BATCH)
        assert len(report.removed) == 3

    def test_string_error_fails_whole_batch(self) -> None:
        report = reconcile_remove({"error": "some failure"}, self._BATCH)
        assert report.error == "some failure"
        assert report.results == ()
        assert report.removed == ()

    def test_object_error_is_described(self) -> None:
        report = reconcile_remove(
            {"error": {"key": "bad_request", "message": "Invalid request", "hint": "x"}},
            self._BATCH,
        )
        assert report.error == "Invalid request (x)"


class TestDescribeApiError:
    def test_string(self) -> None:
        assert describe_api_error("boom") == "boom"

    def test_key_only(self) -> None:
        assert describe_api_error({"key": "unauthorized"}) == "unauthorized"

    def test_unknown_object_is_compact_json(self) -> None:
        assert describe_api_error({"code": 3}) == '{"code":3}'


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

class TestReconcileList:
    def test_records_parsed(self) -> None:
        report = reconcile_list(
            {
                "domains": [
                    {
                        "domain": "a.com",
                        "comment": "note",
                        "groups": [0, 2],
                        "date_added": 1700000000,
                        "date_modified": 1700000100,
                        "id": 7,
                        "enabled": True,
                    },
                ],
            },
            ListType.DENY,
            ListKind.EXACT,
        )
        assert len(report) == 1
        record = report.records[0]
        assert record.domain == "a.com"
        assert record.comment == "note"
        assert record.groups == (0, 2)
        assert record.date_added == 1700000000
        assert report.list_type is ListType.DENY

    def test_empty_list(self) -> None:
        report = reconcile_list({"domains": []}, ListType.ALLOW, ListKind.REGEX)
        assert not report

    def test_error_raises(self) -> None:
        with pytest.raises(BatchLevelApiError):
            reconcile_list({"error": {"message": "nope"}}, ListType.ALLOW, ListKind.REGEX)


class TestFormatTimestamp:
    def test_matches_local_time(self) -> None:
        expected = datetime.fromtimestamp(1700000000).strftime(TIMESTAMP_FORMAT)
        assert format_timestamp(1700000000) == expected

    def test_none_is_unknown(self) -> None:
        assert format_timestamp(None) == "unknown"
