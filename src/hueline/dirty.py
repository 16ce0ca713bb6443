"""Dirty-range tracking for incremental recomputation.

Two cursors describe the work still pending:

- ``processed``: leftmost offset a scan must start from
- ``target``: rightmost offset a scan must reach

Edits only ever widen the range. When a scan finishes, the range is reset
to the "nothing pending" sentinel (``processed = length - 1``,
``target = 0``), which deliberately inverts the cursors so the next
``mark_dirty`` call collapses straight onto the new edit.

"""

from __future__ import annotations


class DirtyRange:
    """Accumulated [processed, target] span awaiting classification."""

    __slots__ = ("processed", "target", "_touched")

    def __init__(self, processed: int = 0, target: int = 0) -> None:
        self.processed = processed
        self.target = target
        self._touched = False

    @classmethod
    def initial(cls, length: int) -> DirtyRange:
        """Fully dirty range for a freshly loaded buffer."""
        return cls(0, max(length - 1, 0))

    def mark_dirty(self, start: int, end: int) -> None:
        """Widen the range to cover [start, end]. Never narrows."""
        self.processed = min(self.processed, start)
        self.target = max(self.target, end)
        self._touched = True

    def shift(self, offset: int, delta: int) -> None:
        """Carry ``target`` along with text inserted or removed at offset.

        ``delta`` is positive for an insertion and negative for a deletion
        of ``-delta`` characters starting at offset. ``processed`` needs no
        adjustment: the edit itself is marked dirty right after.
        """
        if self.target < offset:
            return
        self.target = max(offset, self.target + delta)

    def clamp(self, length: int) -> None:
        """Clamp both cursors into [0, length - 1] after a resize."""
        last = max(length - 1, 0)
        self.processed = max(0, min(self.processed, last))
        self.target = max(0, min(self.target, last))

    def reset(self, length: int) -> None:
        """Enter the "nothing pending" state after a completed scan."""
        self.processed = max(length - 1, 0)
        self.target = 0

    def is_clean(self, length: int) -> bool:
        """True when no scan is pending for a buffer of this length."""
        if not self._touched:
            return True
        return self.target == 0 and self.processed == max(length - 1, 0)

    def __repr__(self) -> str:
        return f"DirtyRange(processed={self.processed}, target={self.target})"


__all__ = ["DirtyRange"]
