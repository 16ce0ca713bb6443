"""Re-tokenize only the touched line — O(line) not O(buffer)."""

from hueline import Syntax, TextBuffer, get_language, profiled_scan

lines = [f"int value_{i} = {i}; // line {i}" for i in range(1000)]
buffer = TextBuffer("\n".join(lines))
engine = Syntax(buffer, get_language("cpp").config())

# User types "return " at the start of line 500
offset = sum(len(line) + 1 for line in lines[:500])

with profiled_scan() as metrics:
    buffer.insert(offset, "return ")
    engine.wait()

print("Buffer size:", len(buffer))
print("Scan summary:", metrics.summary())
print("Style at edit:", engine.query_style_at(offset))
