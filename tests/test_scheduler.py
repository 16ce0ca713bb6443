"""Tests for hueline.scheduler — one-job-in-flight background execution.

These tests use real threads: the interrupt contract only matters when the
job runs somewhere else.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from hueline.scheduler import BackgroundScheduler, SerialExecutor


class TestSerialExecutor:
    def test_runs_inline(self) -> None:
        calls: list[int] = []
        future = SerialExecutor().submit(calls.append, 1)
        assert future.done()
        assert calls == [1]

    def test_returns_result(self) -> None:
        assert SerialExecutor().submit(lambda a, b: a + b, 2, b=3).result() == 5

    def test_exception_stored_on_future(self) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        future = SerialExecutor().submit(boom)
        assert isinstance(future.exception(), RuntimeError)
        with pytest.raises(RuntimeError, match="boom"):
            future.result()


class TestSerialScheduling:
    def test_job_receives_stop_event(self) -> None:
        seen: list[threading.Event] = []
        scheduler = BackgroundScheduler(SerialExecutor(), seen.append)
        scheduler.submit()
        assert seen == [scheduler.stop_event]
        assert not scheduler.busy

    def test_wait_when_idle_is_noop(self) -> None:
        scheduler = BackgroundScheduler(SerialExecutor(), lambda stop: None)
        scheduler.wait()
        scheduler.interrupt()
        assert not scheduler.busy

    def test_wait_reraises_job_error_once(self) -> None:
        def failing(stop: threading.Event) -> None:
            raise ValueError("scan failed")

        scheduler = BackgroundScheduler(SerialExecutor(), failing)
        scheduler.submit()
        with pytest.raises(ValueError, match="scan failed"):
            scheduler.wait()
        scheduler.wait()  # Already collected


class TestThreadedScheduling:
    def test_interrupt_stops_running_job(self, pool: ThreadPoolExecutor) -> None:
        started = threading.Event()
        observed: list[bool] = []

        def job(stop: threading.Event) -> None:
            started.set()
            stop.wait(timeout=5.0)
            observed.append(stop.is_set())

        scheduler = BackgroundScheduler(pool, job)
        scheduler.submit()
        assert started.wait(timeout=5.0)
        assert scheduler.busy

        scheduler.interrupt()

        assert observed == [True]
        assert not scheduler.busy
        assert not scheduler.stop_event.is_set()

    def test_wait_blocks_until_done(self, pool: ThreadPoolExecutor) -> None:
        release = threading.Event()
        finished: list[bool] = []

        def job(stop: threading.Event) -> None:
            release.wait(timeout=5.0)
            finished.append(True)

        scheduler = BackgroundScheduler(pool, job)
        scheduler.submit()
        release.set()
        scheduler.wait()
        assert finished == [True]
        assert not scheduler.busy

    def test_submit_replaces_running_job(self, pool: ThreadPoolExecutor) -> None:
        started = threading.Event()
        log: list[str] = []
        lock = threading.Lock()

        def job(stop: threading.Event) -> None:
            with lock:
                log.append("start")
            started.set()
            stop.wait(timeout=5.0)
            with lock:
                log.append("stopped" if stop.is_set() else "finished")

        scheduler = BackgroundScheduler(pool, job)
        scheduler.submit()
        assert started.wait(timeout=5.0)

        started.clear()
        scheduler.submit()
        assert started.wait(timeout=5.0)
        # First job was interrupted before the second began
        assert log[:3] == ["start", "stopped", "start"]

        scheduler.interrupt()
        assert log == ["start", "stopped", "start", "stopped"]

    def test_interrupt_before_job_starts(self) -> None:
        # Occupy the only worker so the scheduled job is still queued
        gate = threading.Event()
        ran: list[bool] = []
        with ThreadPoolExecutor(max_workers=1) as executor:
            executor.submit(gate.wait, 5.0)

            def job(stop: threading.Event) -> None:
                ran.append(stop.is_set())

            scheduler = BackgroundScheduler(executor, job)
            scheduler.submit()
            threading.Timer(0.05, gate.set).start()
            scheduler.interrupt()

        assert ran == [True]
