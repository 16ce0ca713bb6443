"""Shared fixtures for hueline tests."""

from __future__ import annotations

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

import pytest

from hueline import reset_syntax_config


@pytest.fixture
def pool() -> Iterator[ThreadPoolExecutor]:
    """Single-worker pool standing in for the editor's thread pool."""
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        yield executor
    finally:
        executor.shutdown(wait=True)


@pytest.fixture(autouse=True)
def _clean_default_config() -> Iterator[None]:
    yield
    reset_syntax_config()
