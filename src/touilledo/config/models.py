"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, touilledo.toml only contains
overrides. A fresh install needs nothing at all; the store URL usually comes
from ``TOUILLEDO_URL``.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_URL = "redis://localhost:6379/0"
DEFAULT_KEY = "touilledo_db"


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    key: str = DEFAULT_KEY
    socket_timeout: float = 5.0
    socket_connect_timeout: float = 5.0
