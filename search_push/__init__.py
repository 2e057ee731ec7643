"""Batching dispatcher for a remote search-push indexing service."""

from .dispatcher import Dispatcher
from .errors import ConfigurationError, SearchPushError, ValidationError
from .models import BatchConfiguration, ClientResponse, Endpoint

__all__ = [
    "Dispatcher",
    "BatchConfiguration",
    "ClientResponse",
    "Endpoint",
    "ConfigurationError",
    "SearchPushError",
    "ValidationError",
]
