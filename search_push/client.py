"""HTTP client for the search-push bulk endpoints."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional, Protocol

import requests

from .models import ClientResponse, Page


class SearchClient(Protocol):
    """Remote capabilities consumed by the dispatcher."""

    async def post_batch(self, uri: str, body: List[Page]) -> ClientResponse: ...

    async def delete_batch(self, uri: str, body: List[str]) -> ClientResponse: ...

    async def delete_pages(self, uri: str, body: Dict[str, Any]) -> ClientResponse: ...


class SearchPushClient:
    """Thin wrapper around ``requests.Session``; blocking calls run on a worker thread."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        verify_tls: bool = True,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.verify = bool(verify_tls)
        self.timeout = timeout

        if api_key:
            self.session.headers["Authorization"] = f"ApiKey {api_key}"

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    def _send(self, method: str, path: str, body: Any) -> ClientResponse:
        response = self.session.request(
            method,
            self._url(path),
            data=json.dumps(body, ensure_ascii=False),
            timeout=self.timeout,
            verify=self.verify,
        )
        try:
            payload = response.json()
        except ValueError:
            payload = response.text or None
        return ClientResponse(status_code=response.status_code, body=payload)

    async def post_batch(self, uri: str, body: List[Page]) -> ClientResponse:
        return await asyncio.to_thread(self._send, "POST", uri, body)

    async def delete_batch(self, uri: str, body: List[str]) -> ClientResponse:
        return await asyncio.to_thread(self._send, "DELETE", uri, body)

    async def delete_pages(self, uri: str, body: Dict[str, Any]) -> ClientResponse:
        return await asyncio.to_thread(self._send, "DELETE", uri, body)

    def close(self) -> None:
        self.session.close()


__all__ = ["SearchClient", "SearchPushClient"]
