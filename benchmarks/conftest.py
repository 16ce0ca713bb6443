"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from hueline import SyntaxConfig, get_language


@pytest.fixture
def cpp_config() -> SyntaxConfig:
    return get_language("cpp").config()


@pytest.fixture
def large_source() -> str:
    """Generate a large C++ source file (~120KB)."""
    functions = []
    for i in range(1000):
        functions.append(f"""
// Function {i}
int compute_{i}(const std::vector<int>& values) {{
    int total = {i};
    for (size_t j = 0; j < values.size(); ++j) {{
        total += values[j] * 2; // accumulate
    }}
    printf("done %d\\n", total);
    return total;
}}
""")
    return "".join(functions)
