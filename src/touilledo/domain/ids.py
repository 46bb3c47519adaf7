"""Position-index ids typed by users on the command line.

An id is the decimal position of an item in the current list. Parsing and
range checking collapse into one ``BadIdError`` so callers never need to
tell a typo from a stale index.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touilledo.domain.tasks import TaskList

ID_PATTERN = re.compile(r"^[0-9]+$")


class BadIdError(ValueError):
    """User-supplied id is not a number or addresses no item."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Bad todo id: {raw!r}")
        self.raw = raw


def parse_item_id(raw: str, task_list: TaskList) -> int:
    """Parse *raw* and check it addresses an item of *task_list*.

    Raises:
        BadIdError: non-numeric, signed, or out-of-range input.
    """
    text = raw.strip()
    if not ID_PATTERN.match(text):
        raise BadIdError(raw)
    index = int(text)
    try:
        task_list.get(index)
    except IndexError:
        raise BadIdError(raw) from None
    return index
