"""Per-character classification storage.

ClassificationStore holds one StyleRecord per buffer character. Its shape
follows the buffer: the engine inserts or erases entries synchronously with
each edit notification, and the tokenizer fills entries inside the range it
was asked to scan.

Thread Safety:
    Not internally locked. Shape changes happen only while no scan is in
    flight; scans write only inside their own range; readers wait for the
    scan to finish before reading.

"""

from __future__ import annotations

from collections.abc import Iterator

from hueline.colors import DEFAULT_STYLE, StyleRecord
from hueline.errors import ContractError


class ClassificationStore:
    """Dense sequence of StyleRecord, index-aligned with buffer characters."""

    __slots__ = ("_records",)

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ContractError("Store length must be non-negative", 0, length)
        self._records: list[StyleRecord] = [DEFAULT_STYLE] * length

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, offset: int) -> StyleRecord:
        return self._records[offset]

    def __setitem__(self, offset: int, style: StyleRecord) -> None:
        self._records[offset] = style

    def __iter__(self) -> Iterator[StyleRecord]:
        return iter(self._records)

    def resize(self, length: int) -> None:
        """Pad with default records or chop the tail to reach length."""
        if length < 0:
            raise ContractError("Store length must be non-negative", 0, length)
        current = len(self._records)
        if length > current:
            self._records.extend([DEFAULT_STYLE] * (length - current))
        elif length < current:
            del self._records[length:]

    def insert_default(self, offset: int, count: int) -> None:
        """Insert count default records before offset."""
        if offset < 0 or count < 0 or offset > len(self._records):
            raise ContractError("Insert outside store bounds", offset, offset + count)
        self._records[offset:offset] = [DEFAULT_STYLE] * count

    def erase(self, start: int, end: int) -> None:
        """Remove the records in [start, end)."""
        self._check(start, end)
        del self._records[start:end]

    def fill(self, start: int, end: int, style: StyleRecord) -> None:
        """Set every record in [start, end) to style.

        The range is clipped to the store; an empty or inverted range is
        a no-op.
        """
        end = min(end, len(self._records))
        if start >= end:
            return
        self._records[start:end] = [style] * (end - start)

    def snapshot(self, start: int = 0, end: int | None = None) -> tuple[StyleRecord, ...]:
        """Copy of the records in [start, end)."""
        if end is None:
            end = len(self._records)
        self._check(start, end)
        return tuple(self._records[start:end])

    def _check(self, start: int, end: int) -> None:
        if start < 0 or end < start or end > len(self._records):
            msg = f"Range outside store of length {len(self._records)}"
            raise ContractError(msg, start, end)


__all__ = ["ClassificationStore"]
