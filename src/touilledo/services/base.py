"""BaseService — abstract foundation for touilledo services.

Every service receives a :class:`TodoStore` at construction time. Store and
format failures raised by the gateway are converted to failed
:class:`ServiceResult` values here, at the service boundary.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from touilledo.infrastructure.store import FormatError, StorageError
from touilledo.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from touilledo.infrastructure.store import TodoStore

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class TodoService(BaseService):
            def add_item(self, label: str) -> ServiceResult:
                try:
                    todos = self._store.load()
                    ...
                except (StorageError, FormatError) as exc:
                    return self._store_failure("add", exc)
    """

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    @staticmethod
    def _store_failure(op: str, exc: StorageError | FormatError) -> ServiceResult:
        return store_failure(op, exc)


def store_failure(op: str, exc: StorageError | FormatError) -> ServiceResult:
    """Wrap a gateway exception in a fatal failed result."""
    code = exc.code if isinstance(exc, StorageError) else "BAD_FORMAT"
    logger.debug("%s failed with %s: %s", op, code, exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=str(exc)),
    )
