"""Credentials and endpoint overrides read from a gitignored JSON file.

The file holds one object per tool, e.g. ``{"search_push": {"api_key": ...}}``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

SECRETS_FILENAME = "local_secrets.json"
SECRETS_ENV_VAR = "LOCAL_SECRETS_FILE"

PathLike = Union[str, Path]


def secrets_path(path: Optional[PathLike] = None) -> Path:
    """Explicit ``path``, then ``$LOCAL_SECRETS_FILE``, then the repository root."""

    if path:
        return Path(path).expanduser()
    from_env = os.getenv(SECRETS_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return Path(__file__).resolve().parents[1] / SECRETS_FILENAME


def load_local_secrets(path: Optional[PathLike] = None) -> Dict[str, Any]:
    target = secrets_path(path)
    if not target.is_file():
        return {}
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def secrets_section(name: str, path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Return the ``name`` object of the secrets file; ``{}`` if absent or not an object."""

    section = load_local_secrets(path).get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["SECRETS_FILENAME", "SECRETS_ENV_VAR", "secrets_path", "load_local_secrets", "secrets_section"]
