"""In-memory test doubles for the key-value store."""

from __future__ import annotations

import redis


class FakeRedis:
    """
    Minimal stand-in for ``redis.Redis`` (bytes mode).

    - GET / SET / DELETE over a dict, values stored as bytes
    - Records every SET for "nothing was written" assertions
    - ``fail_on`` makes the named commands raise ``redis.ConnectionError``
    """

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.writes: list[tuple[str, bytes]] = []
        self.fail_on: set[str] = set()
        self.closed = False

    def _maybe_fail(self, command: str) -> None:
        if command in self.fail_on:
            raise redis.ConnectionError(f"Error 111 connecting to localhost:6379 ({command})")

    def get(self, key: str) -> bytes | None:
        self._maybe_fail("get")
        return self.data.get(key)

    def set(self, key: str, value: str | bytes) -> bool:
        self._maybe_fail("set")
        raw = value.encode("utf-8") if isinstance(value, str) else value
        self.data[key] = raw
        self.writes.append((key, raw))
        return True

    def delete(self, *keys: str) -> int:
        self._maybe_fail("delete")
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    def close(self) -> None:
        self.closed = True
