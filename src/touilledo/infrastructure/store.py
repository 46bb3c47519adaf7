"""TodoStore — whole-document persistence of a TaskList in Redis.

The entire list lives as one JSON string under a single key. Every save
overwrites that key; there are no field-level updates and no expiry.

The Redis client is an explicit handle passed in by the caller (normally the
CLI's :class:`AppContext`, which opens it once per process). Two invocations
racing on load → mutate → save can lose one update; the store only offers
atomic get/set of an opaque blob.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import redis
from pydantic import ValidationError

from touilledo.config.models import DEFAULT_KEY
from touilledo.domain.tasks import TaskList

if TYPE_CHECKING:
    from touilledo.config.settings import TodoSettings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The store cannot be reached, authenticated against, read, or written.

    Attributes:
        code: ``STORE_UNAVAILABLE`` or ``NOT_INITIALIZED`` (key never written).
    """

    def __init__(self, message: str, *, code: str = "STORE_UNAVAILABLE") -> None:
        super().__init__(message)
        self.code = code


class FormatError(Exception):
    """The stored value is not a task-list document."""


class TodoStore:
    """Gateway between a :class:`TaskList` and one Redis key.

    Usage::

        store = TodoStore.from_url("redis://localhost:6379/0")
        todos = store.load()
        todos.add("buy milk")
        store.save(todos)
    """

    def __init__(self, client: redis.Redis, *, key: str = DEFAULT_KEY) -> None:
        self._client = client
        self.key = key

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        key: str = DEFAULT_KEY,
        socket_timeout: float | None = None,
        socket_connect_timeout: float | None = None,
    ) -> TodoStore:
        """Open a client for *url* (``redis://``, ``rediss://`` or ``unix://``)."""
        try:
            client = redis.Redis.from_url(
                url,
                decode_responses=False,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_connect_timeout,
            )
        except ValueError as exc:
            raise StorageError(f"Invalid store URL {url!r}: {exc}") from exc
        return cls(client, key=key)

    @classmethod
    def from_settings(cls, settings: TodoSettings) -> TodoStore:
        return cls.from_url(
            settings.url,
            key=settings.store.key,
            socket_timeout=settings.store.socket_timeout,
            socket_connect_timeout=settings.store.socket_connect_timeout,
        )

    # ------------------------------------------------------------------
    # Document operations
    # ------------------------------------------------------------------

    def load(self) -> TaskList:
        """Read and decode the whole list.

        Raises:
            StorageError: the read failed, or the key has never been written.
            FormatError: the stored value does not decode into a TaskList.
        """
        try:
            raw = self._client.get(self.key)
        except redis.RedisError as exc:
            raise StorageError(f"Cannot retrieve todo list: {exc}") from exc

        if raw is None:
            raise StorageError(
                f"No todo list stored under {self.key!r}; run 'touilledo clear' to create one",
                code="NOT_INITIALIZED",
            )

        try:
            todos = TaskList.from_json(raw)
        except ValidationError as exc:
            raise FormatError(f"Cannot decode todo list: {exc}") from exc

        logger.debug("Loaded %d item(s) from %s", len(todos), self.key)
        return todos

    def save(self, todos: TaskList) -> None:
        """Overwrite the stored document with *todos* (no expiry).

        Raises:
            StorageError: the write failed.
        """
        payload = todos.to_json()
        try:
            self._client.set(self.key, payload)
        except redis.RedisError as exc:
            raise StorageError(f"Cannot save todo list: {exc}") from exc
        logger.debug("Saved %d item(s) to %s", len(todos), self.key)

    def clear(self) -> None:
        """Replace the stored document with an empty list.

        The key is overwritten rather than deleted, so a following
        :meth:`load` returns an empty list instead of ``NOT_INITIALIZED``.
        """
        self.save(TaskList())

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the client's connections."""
        self._client.close()
