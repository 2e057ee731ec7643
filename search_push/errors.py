"""Exception hierarchy for the search-push dispatcher."""

from __future__ import annotations


class SearchPushError(Exception):
    """Base class for errors surfaced to callers of the dispatcher."""


class ConfigurationError(SearchPushError):
    """A required collaborator or endpoint is missing from the configuration."""


class ValidationError(SearchPushError):
    """A required call argument is missing or empty."""


__all__ = ["SearchPushError", "ConfigurationError", "ValidationError"]
