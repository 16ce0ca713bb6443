"""Buffer boundary for the syntax engine.

The engine only needs three things from a buffer: the current text, its
length, and an ordered stream of lifecycle events. BufferSource describes
that contract. TextBuffer is a small reference implementation backed by an
immutable ``str``; editors with their own storage implement the protocol
instead.

Thread Safety:
    TextBuffer is single-writer. Edits and listener dispatch happen on the
    caller's thread. Readers on other threads see a consistent snapshot
    because ``text`` is replaced, never mutated in place.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from hueline.errors import ContractError
from hueline.events import BufferEvent, BufferEventType

BufferListener = Callable[[BufferEvent], None]


class BufferSource(Protocol):
    """Protocol for buffers the syntax engine can follow."""

    @property
    def text(self) -> str:
        """Current buffer contents."""
        ...

    def __len__(self) -> int: ...

    def subscribe(self, listener: BufferListener) -> None:
        """Register a listener for lifecycle events."""
        ...

    def unsubscribe(self, listener: BufferListener) -> None:
        """Remove a previously registered listener."""
        ...


class TextBuffer:
    """String-backed buffer that emits lifecycle events.

    Every edit emits PRE_CHANGE first, then applies the change, then emits
    the event describing it. Listeners run in subscription order.

    Usage:
        >>> buf = TextBuffer("int x;")
        >>> buf.insert(0, "const ")
        >>> buf.text
        'const int x;'

    """

    __slots__ = ("_text", "_listeners")

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._listeners: list[BufferListener] = []

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def subscribe(self, listener: BufferListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: BufferListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def load(self, text: str) -> None:
        """Replace the whole buffer.

        A non-empty buffer is first cleared with a TEXT_DELETED event, then
        the new contents arrive as LOADED.
        """
        self._emit(BufferEventType.PRE_CHANGE, 0, len(self._text))
        if self._text:
            old_length = len(self._text)
            self._text = ""
            self._emit(BufferEventType.TEXT_DELETED, 0, old_length)
        self._text = text
        self._emit(BufferEventType.LOADED, 0, len(text))

    def insert(self, offset: int, text: str) -> None:
        """Insert text before offset."""
        self._check_range(offset, offset)
        if not text:
            return
        self._emit(BufferEventType.PRE_CHANGE, offset, offset)
        self._text = self._text[:offset] + text + self._text[offset:]
        self._emit(BufferEventType.TEXT_ADDED, offset, offset + len(text))

    def delete(self, start: int, end: int) -> None:
        """Delete the characters in [start, end)."""
        self._check_range(start, end)
        if start == end:
            return
        self._emit(BufferEventType.PRE_CHANGE, start, end)
        self._text = self._text[:start] + self._text[end:]
        self._emit(BufferEventType.TEXT_DELETED, start, end)

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace [start, end) with text.

        Same-length replacements are reported as TEXT_CHANGED; anything else
        becomes a delete followed by an insert.
        """
        self._check_range(start, end)
        if len(text) != end - start:
            self.delete(start, end)
            self.insert(start, text)
            return
        if not text:
            return
        self._emit(BufferEventType.PRE_CHANGE, start, end)
        self._text = self._text[:start] + text + self._text[end:]
        self._emit(BufferEventType.TEXT_CHANGED, start, end)

    def _check_range(self, start: int, end: int) -> None:
        if start < 0 or end < start or end > len(self._text):
            msg = f"Edit range outside buffer of length {len(self._text)}"
            raise ContractError(msg, start, end)

    def _emit(self, event_type: BufferEventType, start: int, end: int) -> None:
        event = BufferEvent(event_type, self, start, end)
        for listener in tuple(self._listeners):
            listener(event)


__all__ = ["BufferListener", "BufferSource", "TextBuffer"]
