"""Shared pytest fixtures and test helpers for touilledo tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import redis
from click.testing import CliRunner

from tests.fakes import FakeRedis
from touilledo.config.models import DEFAULT_KEY
from touilledo.infrastructure.store import TodoStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Empty in-memory store; the todo key has never been written."""
    return FakeRedis()


@pytest.fixture
def store(fake_redis: FakeRedis) -> TodoStore:
    """Gateway over the fake store, using the default key."""
    return TodoStore(fake_redis)


@pytest.fixture
def _isolated_store(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_redis: FakeRedis
) -> None:
    """Route every client the CLI opens to ``fake_redis``.

    Also clears ``TOUILLEDO_*`` variables and changes CWD to an empty temp
    directory so no real config or store is discovered. Use via
    ``@pytest.mark.usefixtures("_isolated_store")`` on command test classes.
    """
    for var in (
        "TOUILLEDO_URL",
        "TOUILLEDO_CONFIG",
        "TOUILLEDO_STORE__KEY",
        "TOUILLEDO_JSON_OUTPUT",
        "TOUILLEDO_QUIET",
        "TOUILLEDO_VERBOSE",
        "TOUILLEDO_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    def from_url(cls: type[redis.Redis], url: str, **kwargs: Any) -> FakeRedis:
        fake_redis.url = url  # type: ignore[attr-defined]
        return fake_redis

    monkeypatch.setattr(redis.Redis, "from_url", classmethod(from_url))


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def seed(fake_redis: FakeRedis, *items: tuple[bool, str], key: str = DEFAULT_KEY) -> None:
    """Store a document holding ``(done, label)`` items, bypassing the gateway."""
    doc = {"items": [{"done": done, "label": label} for done, label in items]}
    fake_redis.data[key] = json.dumps(doc).encode("utf-8")


def stored(fake_redis: FakeRedis, key: str = DEFAULT_KEY) -> dict[str, Any]:
    """Decode the raw document currently held by the fake store."""
    return json.loads(fake_redis.data[key])
