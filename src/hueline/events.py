"""Buffer lifecycle events consumed by the syntax engine.

Offsets follow the buffer's notification contract:
- TEXT_ADDED and LOADED carry offsets into the buffer *after* the edit.
- TEXT_DELETED and PRE_CHANGE carry offsets into the buffer *before* it.
- TEXT_CHANGED marks an in-place rewrite that keeps the length.

Thread Safety:
BufferEvent is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class BufferEventType(Enum):
    """Kinds of buffer notifications, in the order a buffer emits them."""

    PRE_CHANGE = auto()  # Buffer is about to mutate
    TEXT_DELETED = auto()
    TEXT_ADDED = auto()
    LOADED = auto()  # Whole-buffer load, behaves like an insert
    TEXT_CHANGED = auto()  # Same-length rewrite


@dataclass(frozen=True, slots=True)
class BufferEvent:
    """A single buffer notification.

    Attributes:
        type: What happened
        buffer: The buffer that emitted the event
        start: Start offset (inclusive)
        end: End offset (exclusive)

    """

    type: BufferEventType
    buffer: Any
    start: int = 0
    end: int = 0

    @property
    def length(self) -> int:
        """Number of characters the event covers."""
        return self.end - self.start

    def __repr__(self) -> str:
        return f"BufferEvent({self.type.name}, {self.start}:{self.end})"


__all__ = ["BufferEvent", "BufferEventType"]
