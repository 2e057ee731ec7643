"""Turn a drained queue slice into one bulk request and interpret the reply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from .errors import ConfigurationError
from .models import DELETE_BATCH, POST_BATCH, SubmissionOutcome
from .reporter import OutcomeReporter


@dataclass(frozen=True)
class _Route:
    path: str
    method: str
    count_key: str
    action: str
    noun: str


PUSH_ROUTE = _Route(path=POST_BATCH, method="post_batch", count_key="stored", action="push", noun="Pushed")
DELETE_ROUTE = _Route(path=DELETE_BATCH, method="delete_batch", count_key="removed", action="delete", noun="Removed")


def resolve_uri(paths: Mapping[str, Any], name: str) -> str:
    """Return the URI configured for ``name`` or raise ``ConfigurationError``."""

    endpoint = paths.get(name)
    if endpoint is None:
        raise ConfigurationError(f"No endpoint configured for '{name}'")
    uri = endpoint.get("uri") if isinstance(endpoint, Mapping) else getattr(endpoint, "uri", endpoint)
    if not uri:
        raise ConfigurationError(f"Endpoint '{name}' has no uri")
    return str(uri)


class BatchSubmitter:
    """Submit push and delete batches; absorb and log every remote failure."""

    def __init__(self, client: Any, paths: Mapping[str, Any], log: Any) -> None:
        self.client = client
        self.paths = paths
        self.log = log
        self._reporters: Dict[str, OutcomeReporter] = {
            route.action: OutcomeReporter(log, route.action) for route in (PUSH_ROUTE, DELETE_ROUTE)
        }

    async def submit_push(self, batch: Sequence[Any]) -> Optional[SubmissionOutcome]:
        return await self._submit(PUSH_ROUTE, batch)

    async def submit_delete(self, batch: Sequence[Any]) -> Optional[SubmissionOutcome]:
        return await self._submit(DELETE_ROUTE, batch)

    async def _submit(self, route: _Route, batch: Sequence[Any]) -> Optional[SubmissionOutcome]:
        uri = resolve_uri(self.paths, route.path)
        reporter = self._reporters[route.action]
        body = list(batch)

        try:
            response = await getattr(self.client, route.method)(uri, body)
        except Exception as exc:
            self.log.error(
                f"[SEARCH-PUSH-ERROR] Failed to {route.action} batch of {len(body)} pages",
                {"err": repr(exc)},
            )
            return None

        outcome = SubmissionOutcome.from_response(response, route.count_key)
        if outcome.rejected:
            self.log.error(
                f"[SEARCH-PUSH-ERROR] Could not {route.action} batch: "
                f"status={outcome.status_code} body={outcome.body}"
            )
            reporter.report(body, "error")
            return outcome

        self.log.debug(f"[SEARCH-PUSH] {route.noun} {outcome.accepted}/{outcome.total} pages")
        reporter.report(outcome.failed)
        return outcome


__all__ = ["PUSH_ROUTE", "DELETE_ROUTE", "BatchSubmitter", "resolve_uri"]
