"""Adornment protocol for overlay classifiers.

An adornment is a secondary classifier layered over the tokenizer's
output. The engine asks each adornment first; the first one to return a
StyleRecord for an offset wins, otherwise the base classification is used.

Adornments keep their own state and update it from the same buffer
notifications the engine receives. They read the buffer text directly and
must never wait on the background tokenizer: the engine calls them while it
may itself be waiting.

Example:
    >>> class TrailingSpaces:
    ...     name = "trailing-spaces"
    ...
    ...     def __init__(self, buffer):
    ...         self._buffer = buffer
    ...
    ...     def query(self, offset):
    ...         text = self._buffer.text
    ...         if text[offset] == " " and text[offset + 1 : offset + 2] in ("", "\\n"):
    ...             return StyleRecord(ColorCategory.NORMAL, ColorCategory.ERROR)
    ...         return None
    ...
    ...     def notify(self, event):
    ...         pass
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hueline.colors import StyleRecord
    from hueline.events import BufferEvent


@runtime_checkable
class Adornment(Protocol):
    """Protocol for overlay classifiers.

    Attributes:
        name: Unique name within a registry (e.g., "rainbow-brackets")

    Thread Safety:
        ``query`` and ``notify`` are called from the engine owner's thread
        only. Adornments never run on the scan thread.
    """

    name: str

    def query(self, offset: int) -> StyleRecord | None:
        """Return an override for offset, or None to defer.

        Args:
            offset: Character offset, always inside the buffer

        Returns:
            StyleRecord to display, or None to fall through
        """
        ...

    def notify(self, event: BufferEvent) -> None:
        """Update internal state after a buffer event."""
        ...
