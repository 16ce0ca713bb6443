"""Benchmark incremental re-tokenization vs a full scan.

Compares the engine's per-edit rescan (O(line)) with classifying the whole
buffer for small edits in a large file.

Run with:
    pytest benchmarks/benchmark_incremental.py -v --benchmark-only
"""

import pytest

from hueline import AdornmentRegistry, Syntax, TextBuffer
from hueline.store import ClassificationStore
from hueline.tokenizer import Tokenizer


@pytest.mark.benchmark(group="scan-incremental")
def test_benchmark_single_char_edit(benchmark, large_source, cpp_config):
    """Benchmark a 1-char insert followed by its delete in a large buffer."""
    buffer = TextBuffer(large_source)
    engine = Syntax(buffer, cpp_config, adornments=AdornmentRegistry())
    offset = min(50_000, len(large_source) - 1)

    def edit():
        buffer.insert(offset, "x")
        buffer.delete(offset, offset + 1)
        engine.wait()

    benchmark(edit)


@pytest.mark.benchmark(group="scan-incremental")
def test_benchmark_full_scan(benchmark, large_source, cpp_config):
    """Benchmark a full scan of the large buffer (baseline for ratio)."""
    tokenizer = Tokenizer(cpp_config)
    store = ClassificationStore(len(large_source))

    def full_scan():
        tokenizer.tokenize(large_source, store, 0, len(large_source))

    benchmark(full_scan)


@pytest.mark.benchmark(group="adornments")
def test_benchmark_rainbow_rescan(benchmark, large_source, cpp_config):
    """Benchmark an edit with the default rainbow-bracket overlay attached."""
    buffer = TextBuffer(large_source)
    engine = Syntax(buffer, cpp_config)

    def edit():
        buffer.insert(0, "(")
        buffer.delete(0, 1)
        engine.wait()

    benchmark(edit)
