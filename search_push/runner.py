"""Entry point wiring configuration, the HTTP client and the dispatcher."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

from .client import SearchPushClient
from .config import SearchPushSettings, build_paths, parse_args, resolve_settings
from .dispatcher import Dispatcher
from .errors import SearchPushError
from .logs import LoggingSink, configure_logging, get_sink
from .models import BatchConfiguration
from .sources import iter_pages, iter_urls


def _build_client(settings: SearchPushSettings) -> SearchPushClient:
    return SearchPushClient(
        base_url=settings.url,
        api_key=settings.api_key,
        verify_tls=settings.verify_tls,
        timeout=settings.timeout,
    )


def _check_inputs(settings: SearchPushSettings) -> None:
    for path in (settings.pages, settings.delete_urls):
        if path is not None and not Path(path).is_file():
            raise SystemExit(f"[error] input file not found: {path}")


def _dry_run(settings: SearchPushSettings, log: LoggingSink) -> Dict[str, int]:
    counts = {"pages": 0, "deletes": 0}
    if settings.pages is not None:
        counts["pages"] = sum(1 for _ in iter_pages(settings.pages))
    if settings.delete_urls is not None:
        counts["deletes"] = sum(1 for _ in iter_urls(settings.delete_urls))
    log.info(f"[SEARCH-PUSH] (dry-run) parsed {counts['pages']} pages and {counts['deletes']} urls to delete")
    return counts


async def run(settings: SearchPushSettings, client: Optional[SearchPushClient] = None) -> Dict[str, int]:
    """Push, delete and purge as requested, then flush both queues."""

    log = get_sink()
    _check_inputs(settings)
    if settings.dry_run:
        return _dry_run(settings, log)

    client = client or _build_client(settings)
    counts = {"pages": 0, "deletes": 0}
    try:
        dispatcher = Dispatcher(
            BatchConfiguration(
                log=log,
                client=client,
                paths=build_paths(settings.api_prefix),
                batch_size=settings.batch_size,
            )
        )

        if settings.pages is not None:
            for page in iter_pages(settings.pages):
                await dispatcher.push_page(page)
                counts["pages"] += 1

        if settings.delete_urls is not None:
            for url in iter_urls(settings.delete_urls):
                await dispatcher.delete_page(url)
                counts["deletes"] += 1

        await dispatcher.flush()

        if settings.purge_type and settings.purge_date:
            await dispatcher.delete_pages(settings.purge_type, settings.purge_date)
    finally:
        client.close()

    log.info(f"[SEARCH-PUSH] Done. queued pages={counts['pages']} deletes={counts['deletes']}")
    return counts


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for pushing and deleting pages."""

    args = parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings.log_level)
    try:
        asyncio.run(run(settings))
    except SearchPushError as exc:
        raise SystemExit(f"[error] {exc}") from exc


__all__ = ["main", "run"]
