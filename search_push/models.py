"""Value types shared by the dispatcher, submitter and reporter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from .client import SearchClient
    from .logs import LogSink

DEFAULT_BATCH_SIZE = 10

POST_BATCH = "post_batch"
DELETE_BATCH = "delete_batch"
DELETE_PAGES = "delete_pages"

Page = Dict[str, Any]


@dataclass(frozen=True)
class Endpoint:
    """Location of one remote operation."""

    uri: str


@dataclass(frozen=True)
class ClientResponse:
    """Status and decoded body returned by a client call."""

    status_code: int
    body: Any = None


@dataclass(frozen=True)
class FailedItem:
    """One item the remote service (or a rejected request) did not accept."""

    title: Optional[str]
    url: Optional[str]
    error: Any = None
    item: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> "FailedItem":
        """Build from a page/failure mapping or a bare URL string."""

        if isinstance(raw, Mapping):
            return cls(title=raw.get("title"), url=raw.get("url"), error=raw.get("error"), item=raw)
        return cls(title=None, url=None if raw is None else str(raw), item=raw)


@dataclass(frozen=True)
class SubmissionOutcome:
    """Interpreted result of one batch request."""

    status_code: Optional[int]
    accepted: Optional[int] = None
    total: Optional[int] = None
    failed: Tuple[FailedItem, ...] = ()
    body: Any = None
    readable: bool = True

    @property
    def rejected(self) -> bool:
        return not self.readable or self.status_code is None or self.status_code >= 400

    @classmethod
    def from_response(cls, response: Any, count_key: str) -> "SubmissionOutcome":
        """Read status, counts and the ``failed`` list from a client response.

        A status that is not an integer is kept as ``None`` and a ``failed``
        entry that is not a list marks the response unreadable; both make the
        batch count as rejected. Counts and failures are only read from
        accepted responses with a mapping body.
        """

        status = getattr(response, "status_code", None)
        if isinstance(status, bool) or not isinstance(status, int):
            status = None
        body = getattr(response, "body", None)

        if status is None or status >= 400 or not isinstance(body, Mapping):
            return cls(status_code=status, body=body)

        failed = body.get("failed") or ()
        if not isinstance(failed, (list, tuple)):
            return cls(status_code=status, body=body, readable=False)

        return cls(
            status_code=status,
            accepted=body.get(count_key),
            total=body.get("total"),
            failed=tuple(FailedItem.from_raw(item) for item in failed),
            body=body,
        )


@dataclass(frozen=True)
class BatchConfiguration:
    """Collaborators and batching policy handed to the dispatcher.

    ``log``, ``client`` and ``paths`` default to ``None`` so a partial
    configuration can be built; the dispatcher rejects it on construction.
    """

    log: Optional["LogSink"] = None
    client: Optional["SearchClient"] = None
    paths: Optional[Mapping[str, Endpoint]] = None
    batch_size: Optional[int] = DEFAULT_BATCH_SIZE


__all__ = [
    "DEFAULT_BATCH_SIZE",
    "POST_BATCH",
    "DELETE_BATCH",
    "DELETE_PAGES",
    "Page",
    "Endpoint",
    "ClientResponse",
    "FailedItem",
    "SubmissionOutcome",
    "BatchConfiguration",
]
