"""Queue pushes and deletes, flushing each queue as one bulk request.

The dispatcher owns two FIFO lists. Appending and the threshold check happen
without an ``await`` in between, and a full batch is sliced off the live list
before the request is awaited, so producers may keep enqueueing while a
submission is in flight.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .errors import ConfigurationError, ValidationError
from .models import (
    DEFAULT_BATCH_SIZE,
    DELETE_BATCH,
    DELETE_PAGES,
    POST_BATCH,
    BatchConfiguration,
    Page,
    SubmissionOutcome,
)
from .submitter import BatchSubmitter, resolve_uri

REQUIRED_FIELDS = ("log", "client", "paths")


def _drain(queue: List[Any], count: int) -> List[Any]:
    batch = queue[:count]
    del queue[:count]
    return batch


def _coerce_url(url: Any) -> Optional[str]:
    if isinstance(url, Mapping):
        url = url.get("url")
    return str(url) if url else None


class Dispatcher:
    """Batching front end for the remote search-push service."""

    def __init__(self, config: Optional[BatchConfiguration]) -> None:
        if config is None:
            raise ConfigurationError("A BatchConfiguration is required")

        missing = [name for name in REQUIRED_FIELDS if getattr(config, name, None) is None]
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

        batch_size = config.batch_size if config.batch_size is not None else DEFAULT_BATCH_SIZE
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise ConfigurationError(f"batch_size must be a positive integer, got {batch_size!r}")

        self.log = config.log
        self.client = config.client
        self.paths = config.paths
        self.batch_size = batch_size
        self.submitter = BatchSubmitter(self.client, self.paths, self.log)

        self.pending_pushes: List[Page] = []
        self.pending_deletes: List[str] = []

    async def push_page(self, page: Page) -> None:
        """Queue ``page``; submits a full batch when the threshold is reached."""

        self.pending_pushes.append(page)
        if len(self.pending_pushes) >= self.batch_size:
            resolve_uri(self.paths, POST_BATCH)
            await self.submitter.submit_push(_drain(self.pending_pushes, self.batch_size))

    async def delete_page(self, url: Any = None) -> None:
        """Queue a URL (or a page record carrying one) for batched deletion."""

        resolved = _coerce_url(url)
        if not resolved:
            raise ValidationError("url is required")

        self.pending_deletes.append(resolved)
        if len(self.pending_deletes) >= self.batch_size:
            resolve_uri(self.paths, DELETE_BATCH)
            await self.submitter.submit_delete(_drain(self.pending_deletes, self.batch_size))

    async def delete_pages(self, type: Any = None, date: Any = None) -> Optional[int]:
        """Delete every indexed page of ``type`` since ``date`` in one request.

        Returns the count reported by the service, or ``None`` when the request
        failed or the reply carried no count (logged, not raised).
        """

        missing = [name for name, value in (("type", type), ("date", date)) if not value]
        if missing:
            raise ValidationError(f"Missing required arguments: {', '.join(missing)}")

        uri = resolve_uri(self.paths, DELETE_PAGES)
        try:
            response = await self.client.delete_pages(uri, {"type": type, "date": date})
        except Exception as exc:
            self.log.error(f"[SEARCH-PUSH-ERROR] Failed to delete pages of type {type}", {"err": repr(exc)})
            return None

        outcome = SubmissionOutcome.from_response(response, "deleted")
        if outcome.rejected:
            self.log.error(
                f"[SEARCH-PUSH-ERROR] Could not delete pages of type {type} since {date}: "
                f"status={outcome.status_code} body={outcome.body}"
            )
            return None

        body = outcome.body if isinstance(outcome.body, Mapping) else {}
        deleted = body.get("deleted", body.get("count"))
        if deleted is None:
            self.log.warn(
                f"[SEARCH-PUSH-WARN] Delete of pages of type {type} since {date} was accepted "
                f"without a count: body={outcome.body}"
            )
            return None
        self.log.info(f"[SEARCH-PUSH] Deleted {deleted} pages of type {body.get('type', type)} since {date}")
        return deleted

    async def flush(self) -> None:
        """Submit whatever remains in either queue, regardless of size.

        Endpoints for both non-empty queues are checked before either is
        drained, so a missing path leaves both queues intact.
        """

        if self.pending_pushes:
            resolve_uri(self.paths, POST_BATCH)
        if self.pending_deletes:
            resolve_uri(self.paths, DELETE_BATCH)

        pushes = _drain(self.pending_pushes, len(self.pending_pushes))
        deletes = _drain(self.pending_deletes, len(self.pending_deletes))

        if pushes:
            await self.submitter.submit_push(pushes)
        if deletes:
            await self.submitter.submit_delete(deletes)


__all__ = ["Dispatcher", "REQUIRED_FIELDS"]
