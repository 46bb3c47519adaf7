"""Task-list model: items, index-addressed mutations, and text rendering.

A ``TaskList`` is the whole persisted unit. Items have no stable id; the
0-based position in ``items`` *is* the identifier shown to users.

.. warning::

   Position ids shift. Removing item ``k`` moves every later item down by
   one, so an index captured before a removal may address a different item
   (or nothing) afterwards. Callers must re-read the list before reusing an
   index.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

STRIKE = "\u0336"


def strike(text: str) -> str:
    """Overlay a combining long stroke on every character of *text*."""
    return "".join(f"{char}{STRIKE}" for char in text)


class TaskItem(BaseModel):
    """A single to-do entry."""

    model_config = ConfigDict(strict=True)

    done: bool = False
    label: str

    def toggle(self) -> None:
        """Flip the done flag in place."""
        self.done = not self.done


def format_item(index: int, item: TaskItem) -> str:
    """Render one item as ``[index] label`` (label struck through when done)."""
    label = strike(item.label) if item.done else item.label
    return f"[{index}] {label}"


class TaskList(BaseModel):
    """Ordered collection of TaskItems, serialized as one JSON document.

    Wire shape: ``{"items": [{"done": bool, "label": str}, ...]}``.
    """

    model_config = ConfigDict(strict=True)

    items: list[TaskItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items_as_empty(cls, value: Any) -> Any:
        """Documents written for an empty list may carry ``"items": null``."""
        return [] if value is None else value

    # ------------------------------------------------------------------
    # Collection protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.items)

    @property
    def done_count(self) -> int:
        return sum(1 for item in self.items if item.done)

    @property
    def pending_count(self) -> int:
        return len(self.items) - self.done_count

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            msg = f"task index {index} out of range [0, {len(self.items)})"
            raise IndexError(msg)

    def add(self, label: str) -> None:
        """Append a pending item labelled *label*."""
        self.items.append(TaskItem(done=False, label=label))

    def get(self, index: int) -> TaskItem:
        """Return the live item at *index* (mutations through it persist).

        Negative indices are rejected rather than counted from the end.
        """
        self._check_index(index)
        return self.items[index]

    def toggle_done(self, index: int) -> None:
        """Flip the done flag of the item at *index*."""
        self.get(index).toggle()

    def remove(self, index: int) -> None:
        """Delete the item at *index*; every later item's index drops by one."""
        self._check_index(index)
        del self.items[index]

    # ------------------------------------------------------------------
    # Rendering and serialization
    # ------------------------------------------------------------------

    def render(self) -> str:
        """One newline-terminated line per item, in insertion order."""
        return "".join(f"{format_item(i, item)}\n" for i, item in enumerate(self.items))

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, raw: str | bytes) -> TaskList:
        """Parse a stored document.

        Raises:
            pydantic.ValidationError: if *raw* is not a task-list document.
        """
        return cls.model_validate_json(raw)
