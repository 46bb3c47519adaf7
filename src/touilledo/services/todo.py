"""TodoService — the load → mutate → save pipelines behind every command.

Each call loads the whole list fresh from the store, applies at most one
mutation, and writes the whole list back only if that mutation happened.
Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from touilledo.domain.ids import BadIdError, parse_item_id
from touilledo.domain.tasks import TaskList
from touilledo.infrastructure.store import FormatError, StorageError
from touilledo.services.base import BaseService
from touilledo.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _item_payload(index: int, todos: TaskList) -> dict[str, Any]:
    item = todos.get(index)
    return {"index": index, "done": item.done, "label": item.label}


def _bad_id(op: str, exc: BadIdError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="BAD_ID",
            message="Bad todo id",
            fatal=False,
            detail={"id": exc.raw},
        ),
    )


class TodoService(BaseService):
    """List, add, toggle, delete and clear to-do items."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_items(self) -> ServiceResult:
        """Load the list without writing anything back."""
        op = "list"
        try:
            todos = self._store.load()
        except (StorageError, FormatError) as exc:
            return self._store_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(todos),
                "pending": todos.pending_count,
                "done": todos.done_count,
                "items": [_item_payload(i, todos) for i in range(len(todos))],
            },
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, label: str) -> ServiceResult:
        """Append a pending item and persist the list."""
        op = "add"
        warnings: list[str] = []
        if not label.strip():
            warnings.append("Added an item with an empty label")

        try:
            todos = self._store.load()
            todos.add(label)
            self._store.save(todos)
        except (StorageError, FormatError) as exc:
            return self._store_failure(op, exc)

        index = len(todos) - 1
        logger.debug("Added item %d", index)
        return ServiceResult(
            ok=True,
            op=op,
            data={**_item_payload(index, todos), "count": len(todos)},
            warnings=warnings,
        )

    def toggle_item(self, raw_id: str) -> ServiceResult:
        """Flip the done flag of the item addressed by *raw_id*.

        A bad id yields a non-fatal ``BAD_ID`` result and nothing is saved.
        """
        op = "done"
        try:
            todos = self._store.load()
            try:
                index = parse_item_id(raw_id, todos)
            except BadIdError as exc:
                return _bad_id(op, exc)
            todos.toggle_done(index)
            self._store.save(todos)
        except (StorageError, FormatError) as exc:
            return self._store_failure(op, exc)

        logger.debug("Toggled item %d", index)
        return ServiceResult(ok=True, op=op, data=_item_payload(index, todos))

    def delete_item(self, raw_id: str) -> ServiceResult:
        """Remove the item addressed by *raw_id*; later ids shift down by one.

        A bad id yields a non-fatal ``BAD_ID`` result and nothing is saved.
        """
        op = "delete"
        try:
            todos = self._store.load()
            try:
                index = parse_item_id(raw_id, todos)
            except BadIdError as exc:
                return _bad_id(op, exc)
            removed = todos.get(index)
            todos.remove(index)
            self._store.save(todos)
        except (StorageError, FormatError) as exc:
            return self._store_failure(op, exc)

        logger.debug("Removed item %d", index)
        return ServiceResult(
            ok=True,
            op=op,
            data={"index": index, "label": removed.label, "count": len(todos)},
        )

    def clear_items(self) -> ServiceResult:
        """Overwrite the stored document with an empty list.

        Does not read first, so it also initializes a store that has never
        been written.
        """
        op = "clear"
        try:
            self._store.clear()
        except StorageError as exc:
            return self._store_failure(op, exc)

        return ServiceResult(ok=True, op=op, data={"count": 0})
