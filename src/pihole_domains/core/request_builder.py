"""Batch request construction.

Pure data transformation: domain batch + selectors → :class:`ApiRequest`.
No network I/O and no domain validation happen here.

Add and remove use different shapes: add is homogeneous
(one type/kind/comment for the whole batch), while the API's batch
delete takes a heterogeneous array with type and kind per element.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, TypeAdapter

from pihole_domains.core.models import DomainBatch, ListKind, ListType
from pihole_domains.core.wire import AddDomainsRequest, BatchDeleteItem

_BATCH_DELETE_ADAPTER: TypeAdapter[list[BatchDeleteItem]] = TypeAdapter(list[BatchDeleteItem])


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """A transport-agnostic description of one API call."""

    method: Literal["GET", "POST"]
    path: str
    body: BaseModel | list[BatchDeleteItem] | None = None

    def json_body(self) -> Any:
        """Serialize :attr:`body` into JSON-compatible Python objects."""
        if self.body is None:
            return None
        if isinstance(self.body, BaseModel):
            return self.body.model_dump(mode="json")
        return _BATCH_DELETE_ADAPTER.dump_python(self.body, mode="json")


def list_path(list_type: ListType, kind: ListKind) -> str:
    return f"domains/{list_type.value}/{kind.value}"


def build_add_request(
    batch: DomainBatch,
    list_type: ListType,
    kind: ListKind,
    comment: str | None = None,
) -> ApiRequest:
    """``POST domains/{type}/{kind}`` with one shared comment."""
    body = AddDomainsRequest(domain=list(batch.domains), comment=comment)
    return ApiRequest(method="POST", path=list_path(list_type, kind), body=body)


def build_remove_request(
    batch: DomainBatch,
    list_type: ListType,
    kind: ListKind,
) -> ApiRequest:
    """``POST domains:batchDelete`` with one element per domain."""
    items = [
        BatchDeleteItem(item=domain, type=list_type, kind=kind)
        for domain in batch.domains
    ]
    return ApiRequest(method="POST", path="domains:batchDelete", body=items)


def build_list_request(list_type: ListType, kind: ListKind) -> ApiRequest:
    """``GET domains/{type}/{kind}`` — no body."""
    return ApiRequest(method="GET", path=list_path(list_type, kind))
