"""Configuration helpers for the search-push runner."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .models import DEFAULT_BATCH_SIZE, DELETE_BATCH, DELETE_PAGES, POST_BATCH, Endpoint
from .secrets import secrets_section

_PUSH_SECRETS = secrets_section("search_push")

DEFAULT_URL = os.getenv("SEARCH_PUSH_URL", _PUSH_SECRETS.get("url", "http://localhost:3000"))
DEFAULT_API_KEY: Optional[str] = os.getenv("SEARCH_PUSH_API_KEY", _PUSH_SECRETS.get("api_key")) or None
DEFAULT_VERIFY_TLS = bool(_PUSH_SECRETS.get("verify_tls", True))
DEFAULT_API_PREFIX = _PUSH_SECRETS.get("api_prefix", "/api/v1")
DEFAULT_BATCH = int(os.getenv("SEARCH_PUSH_BATCH_SIZE", str(_PUSH_SECRETS.get("batch_size", DEFAULT_BATCH_SIZE))))
DEFAULT_TIMEOUT = float(os.getenv("SEARCH_PUSH_TIMEOUT", str(_PUSH_SECRETS.get("timeout", 30))))
DEFAULT_LOG_LEVEL = os.getenv("SEARCH_PUSH_LOG_LEVEL", "INFO")

ENDPOINT_SUFFIXES: Dict[str, str] = {
    POST_BATCH: "/batch",
    DELETE_BATCH: "/batch/delete",
    DELETE_PAGES: "/pages",
}


@dataclass(frozen=True)
class SearchPushSettings:
    """Resolved runtime settings for the runner."""

    url: str
    api_key: Optional[str]
    verify_tls: bool
    api_prefix: str
    batch_size: int
    timeout: float
    log_level: str
    pages: Optional[Path]
    delete_urls: Optional[Path]
    purge_type: Optional[str]
    purge_date: Optional[str]
    dry_run: bool


def build_paths(prefix: str = DEFAULT_API_PREFIX) -> Dict[str, Endpoint]:
    """Map each remote operation name to its endpoint under ``prefix``."""

    prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
    return {name: Endpoint(uri=f"{prefix}{suffix}") for name, suffix in ENDPOINT_SUFFIXES.items()}


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the runner."""

    parser = argparse.ArgumentParser(
        description="Push page records to, and delete them from, the search-push service in batches.",
    )
    parser.add_argument("--pages", type=Path, help="JSON or NDJSON file of page records to index")
    parser.add_argument("--delete-urls", type=Path, help="JSON list or newline-separated URLs to remove")
    parser.add_argument("--purge-type", help="delete every page of this type (needs --purge-date)")
    parser.add_argument("--purge-date", help="delete pages older than this date (needs --purge-type)")
    parser.add_argument("--url", default=DEFAULT_URL)
    parser.add_argument("--api-key", default=DEFAULT_API_KEY)
    parser.add_argument("--api-prefix", default=DEFAULT_API_PREFIX)
    parser.add_argument("--verify-tls", action=argparse.BooleanOptionalAction, default=DEFAULT_VERIFY_TLS)
    parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL)
    parser.add_argument("--dry-run", action="store_true")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if bool(args.purge_type) != bool(args.purge_date):
        parser.error("--purge-type and --purge-date must be given together")
    return args


def resolve_settings(args: Optional[argparse.Namespace] = None) -> SearchPushSettings:
    """Return immutable settings from parsed arguments."""

    args = args or parse_args([])
    return SearchPushSettings(
        url=args.url,
        api_key=args.api_key or None,
        verify_tls=bool(args.verify_tls),
        api_prefix=args.api_prefix,
        batch_size=int(args.batch_size),
        timeout=float(args.timeout),
        log_level=str(args.log_level),
        pages=args.pages,
        delete_urls=args.delete_urls,
        purge_type=args.purge_type,
        purge_date=args.purge_date,
        dry_run=bool(args.dry_run),
    )


__all__ = [
    "DEFAULT_URL",
    "DEFAULT_API_KEY",
    "DEFAULT_VERIFY_TLS",
    "DEFAULT_API_PREFIX",
    "DEFAULT_BATCH",
    "DEFAULT_TIMEOUT",
    "DEFAULT_LOG_LEVEL",
    "ENDPOINT_SUFFIXES",
    "SearchPushSettings",
    "build_paths",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
