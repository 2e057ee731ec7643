"""Readers for the page and URL files consumed by the runner."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable


def _first_char(path: Path) -> str:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if stripped:
                return stripped[0]
    return ""


def iter_pages(path: Path) -> Iterable[Dict[str, Any]]:
    """Yield page records from a JSON list, a single JSON object or NDJSON."""

    first = _first_char(path)
    if not first:
        return

    if first == "[":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        for item in data:
            if isinstance(item, dict):
                yield item
        return

    with path.open("r", encoding="utf-8") as handle:
        text = handle.read()
    try:
        data = json.loads(text)
    except ValueError:
        data = None
    if isinstance(data, dict):
        yield data
        return

    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        record = json.loads(line)
        if isinstance(record, dict):
            yield record


def iter_urls(path: Path) -> Iterable[str]:
    """Yield URLs from a JSON list (strings or page records) or one per line."""

    if _first_char(path) == "[":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        for item in data:
            url = item.get("url") if isinstance(item, dict) else item
            if url:
                yield str(url)
        return

    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if line and not line.startswith("#"):
                yield line


__all__ = ["iter_pages", "iter_urls"]
