"""Incremental background syntax engine.

Syntax follows one buffer and keeps a StyleRecord for every character of
it. Each edit notification reshapes the classification store on the
caller's thread, widens the dirty range, and relaunches a single background
scan over everything still dirty. Lookups wait for that scan, consult the
adornments, then fall back to the store.

Concurrency model:
    The owner thread is the only one that changes the store's shape, and it
    interrupts the running scan before every change. The scan is the only
    writer of store contents, and readers wait for it to finish before
    reading. No lock is needed: the buffer's single-writer edit stream
    already serializes everything.

Usage:
    >>> buffer = TextBuffer()
    >>> engine = Syntax(buffer, SyntaxConfig(keywords=frozenset({"int"})))
    >>> buffer.load("int x = 42;")
    >>> engine.query_style_at(0).foreground
    <ColorCategory.KEYWORD: 3>

"""

from __future__ import annotations

from concurrent.futures import Executor
from threading import Event
from typing import TYPE_CHECKING

from hueline.adornments.registry import AdornmentRegistry, create_default_registry
from hueline.colors import DEFAULT_STYLE, StyleRecord
from hueline.config import SyntaxConfig, get_syntax_config
from hueline.dirty import DirtyRange
from hueline.errors import ContractError, StoreMismatchError
from hueline.events import BufferEvent, BufferEventType
from hueline.profiling import ScanAccumulator, get_scan_accumulator
from hueline.scheduler import BackgroundScheduler, SerialExecutor
from hueline.store import ClassificationStore
from hueline.tokenizer import Tokenizer, scan_bounds
from hueline.utils.logger import get_logger

if TYPE_CHECKING:
    from hueline.buffer import BufferSource

logger = get_logger(__name__)

_INSERT_EVENTS = frozenset({BufferEventType.TEXT_ADDED, BufferEventType.LOADED})


class Syntax:
    """Classification engine bound to a single buffer.

    Args:
        buffer: Buffer to follow; the engine subscribes to its events
        config: Keyword/identifier sets (context default when None)
        executor: Task-execution facility for scans; scans run inline
            when None
        adornments: Overlay registry (rainbow brackets when None; pass an
            empty AdornmentRegistry to disable overlays)

    Thread Safety:
        All public methods belong to the owner thread. Only the scan job
        runs elsewhere.

    """

    __slots__ = (
        "_buffer",
        "_config",
        "_tokenizer",
        "_store",
        "_dirty",
        "_scheduler",
        "_adornments",
        "_accumulator",  # Captured on the owner thread for the next scan
    )

    def __init__(
        self,
        buffer: BufferSource,
        config: SyntaxConfig | None = None,
        *,
        executor: Executor | None = None,
        adornments: AdornmentRegistry | None = None,
    ) -> None:
        self._buffer = buffer
        self._config = config if config is not None else get_syntax_config()
        self._tokenizer = Tokenizer(self._config)

        length = len(buffer)
        self._store = ClassificationStore(length)
        self._dirty = DirtyRange.initial(length)
        self._scheduler = BackgroundScheduler(executor or SerialExecutor(), self._update_syntax)
        self._adornments = (
            adornments if adornments is not None else create_default_registry(buffer)
        )
        self._accumulator: ScanAccumulator | None = None

        buffer.subscribe(self.notify)
        if length:
            self.request_recompute(0, length)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> BufferSource:
        return self._buffer

    @property
    def config(self) -> SyntaxConfig:
        return self._config

    @property
    def store(self) -> ClassificationStore:
        """The base classification store (without adornments)."""
        return self._store

    @property
    def adornments(self) -> AdornmentRegistry:
        return self._adornments

    @property
    def processed_char(self) -> int:
        return self._dirty.processed

    @property
    def target_char(self) -> int:
        return self._dirty.target

    @property
    def is_clean(self) -> bool:
        """True when no scan is pending or running."""
        return not self._scheduler.busy and self._dirty.is_clean(len(self._store))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def query_style_at(self, offset: int) -> StyleRecord:
        """Style to display at offset.

        Waits for any in-flight scan, then asks the adornments, then the
        store. Offsets past the buffer, or past the scan cursor while work
        is still pending, get the default style.

        Raises:
            ContractError: If offset is negative
        """
        if offset < 0:
            raise ContractError("Offset must be non-negative", offset, offset)
        self.wait()
        return self._lookup(offset)

    def styles(self, start: int, end: int) -> list[StyleRecord]:
        """Styles for every offset in [start, end), after one wait."""
        if start < 0 or end < start:
            raise ContractError("Invalid style range", start, end)
        self.wait()
        return [self._lookup(offset) for offset in range(start, end)]

    def _lookup(self, offset: int) -> StyleRecord:
        if offset >= len(self._store) or self._dirty.processed < offset:
            return DEFAULT_STYLE
        style = self._adornments.query(offset)
        if style is not None:
            return style
        return self._store[offset]

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def wait(self) -> None:
        """Block until the in-flight scan (if any) completes."""
        self._scheduler.wait()

    def interrupt(self) -> None:
        """Cancel the in-flight scan and wait for it to exit."""
        self._scheduler.interrupt()

    def request_recompute(self, start: int, end: int) -> None:
        """Mark [start, end] dirty and rescan everything still dirty.

        The new scan covers the accumulated dirty range, not only this
        request, and replaces any scan already running.

        Raises:
            ContractError: If start is negative or end < start
        """
        if start < 0 or end < start:
            raise ContractError("Invalid recompute range", start, end)

        self._scheduler.interrupt()
        self._dirty.mark_dirty(start, end)

        length = len(self._buffer)
        self._store.resize(length)
        self._dirty.clamp(length)

        self._accumulator = get_scan_accumulator()
        self._scheduler.submit()

    def _update_syntax(self, stop: Event) -> None:
        text = self._buffer.text
        if len(text) != len(self._store):
            raise StoreMismatchError(len(self._store), len(text))

        start, end = scan_bounds(text, self._dirty.processed, self._dirty.target)
        # Visible progress even if this scan is interrupted
        self._dirty.processed = start

        covered = self._tokenizer.scan(
            text,
            self._store,
            start,
            end,
            stop=stop,
            accumulator=self._accumulator,
        )
        if covered is None:
            return
        self._dirty.reset(len(text))

    # ------------------------------------------------------------------
    # Edit events
    # ------------------------------------------------------------------

    def notify(self, event: BufferEvent) -> None:
        """Apply a buffer lifecycle event.

        Reshapes the store synchronously, queues a rescan, then forwards the
        event to the adornments.

        Raises:
            StoreMismatchError: If the store no longer matches the buffer
        """
        if event.buffer is not self._buffer:
            logger.debug("Ignoring %r from another buffer", event)
            return

        event_type = event.type
        if event_type is BufferEventType.PRE_CHANGE:
            self.interrupt()
        elif event_type is BufferEventType.TEXT_DELETED:
            self.interrupt()
            self._store.erase(event.start, event.end)
            self._check_shape()
            self._dirty.shift(event.start, -event.length)
            self.request_recompute(event.start, event.end)
        elif event_type in _INSERT_EVENTS:
            self.interrupt()
            self._store.insert_default(event.start, event.length)
            self._check_shape()
            self._dirty.shift(event.start, event.length)
            self.request_recompute(event.start, event.end)
        elif event_type is BufferEventType.TEXT_CHANGED:
            self.interrupt()
            self.request_recompute(event.start, event.end)

        self._adornments.notify(event)

    def _check_shape(self) -> None:
        buffer_length = len(self._buffer)
        if len(self._store) != buffer_length:
            raise StoreMismatchError(len(self._store), buffer_length)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Stop any scan and detach from the buffer."""
        self.interrupt()
        self._buffer.unsubscribe(self.notify)

    def __enter__(self) -> Syntax:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["Syntax"]
