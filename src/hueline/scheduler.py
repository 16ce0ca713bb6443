"""Background scheduling for tokenizer scans.

The task-execution facility is any ``concurrent.futures.Executor``: the
engine only needs ``submit(fn, *args) -> Future`` and ``Future.result()``.
The executor is owned by the caller and may be shared between engines.

BackgroundScheduler keeps at most one job in flight per engine and gives
the owner two blocking primitives:

- ``wait()``: block until the in-flight job finishes.
- ``interrupt()``: raise the stop flag, block until the job notices and
  returns, then lower the flag.

The job polls the flag itself; nothing is preempted.

Thread Safety:
    ``submit``, ``wait`` and ``interrupt`` are called from the owner's
    thread only. The stop Event is the single piece of state shared with
    the job.

"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future
from threading import Event
from typing import Any

from hueline.utils.logger import get_logger

logger = get_logger(__name__)


class SerialExecutor(Executor):
    """Executor that runs each job inline on the submitting thread.

    Used when no worker threads are available: every scan completes inside
    ``submit`` and ``wait`` becomes a no-op. Job exceptions are stored on
    the returned Future, exactly as a thread pool would.
    """

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future[Any]:
        future: Future[Any] = Future()
        if not future.set_running_or_notify_cancel():
            return future
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
        return future


class BackgroundScheduler:
    """Runs one job at a time on an external executor.

    Args:
        executor: Task-execution facility
        job: Callable receiving the stop Event; must poll it regularly

    """

    __slots__ = ("_executor", "_job", "_stop", "_future")

    def __init__(self, executor: Executor, job: Callable[[Event], None]) -> None:
        self._executor = executor
        self._job = job
        self._stop = Event()
        self._future: Future[None] | None = None

    @property
    def busy(self) -> bool:
        """True while a submitted job has not been collected."""
        return self._future is not None and not self._future.done()

    @property
    def stop_event(self) -> Event:
        return self._stop

    def submit(self) -> None:
        """Interrupt any running job, then launch a fresh one."""
        self.interrupt()
        self._future = self._executor.submit(self._job, self._stop)

    def wait(self) -> None:
        """Block until the in-flight job completes.

        Re-raises any exception the job raised. No-op when idle.
        """
        future = self._future
        if future is None:
            return
        try:
            future.result()
        finally:
            if future.done():
                self._future = None

    def interrupt(self) -> None:
        """Stop the in-flight job and wait for it to exit.

        After this returns nothing is in flight and the stop flag is clear.
        """
        if self._future is None:
            return
        if not self._future.done():
            logger.debug("Interrupting in-flight scan")
        self._stop.set()
        try:
            self.wait()
        finally:
            self._stop.clear()


__all__ = ["BackgroundScheduler", "SerialExecutor"]
