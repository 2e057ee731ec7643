"""Per-item failure reporting through the log sink."""

from __future__ import annotations

import json
from typing import Any, Iterable

from .models import FailedItem

SEVERITIES = ("warn", "error")


class OutcomeReporter:
    """Emit one log event per failed item at a chosen severity."""

    def __init__(self, log: Any, action: str) -> None:
        self.log = log
        self.action = action

    def report(self, items: Iterable[Any], severity: str = "warn") -> int:
        """Log every item in ``items``; returns how many were logged."""

        if severity not in SEVERITIES:
            raise ValueError(f"Unsupported severity: {severity!r}")

        emit = getattr(self.log, severity)
        count = 0
        for raw in items:
            failed = raw if isinstance(raw, FailedItem) else FailedItem.from_raw(raw)
            message = (
                f"[SEARCH-PUSH-{severity.upper()}] Failed to {self.action} page "
                f"({failed.title}) with url: {failed.url}"
            )
            if failed.error is not None:
                emit(message, {"err": json.dumps(failed.error, default=str)})
            else:
                emit(message)
            count += 1
        return count


__all__ = ["SEVERITIES", "OutcomeReporter"]
