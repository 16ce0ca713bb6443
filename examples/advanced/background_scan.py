"""Scan on a worker thread — edits return at once, lookups wait."""

from concurrent.futures import ThreadPoolExecutor

from hueline import Syntax, TextBuffer, get_language

source = "uniform vec4 color;\nvoid main() { gl_FragColor = color; }\n" * 5000

with ThreadPoolExecutor(max_workers=1) as pool:
    buffer = TextBuffer()
    with Syntax(buffer, get_language("glsl").config(), executor=pool) as engine:
        buffer.load(source)  # Returns immediately; the scan runs on the pool
        buffer.insert(0, "// header\n")  # Interrupts the first scan and restarts
        print("Clean before wait:", engine.is_clean)
        print("First style:", engine.query_style_at(0))  # Blocks on the scan
        print("Clean after wait:", engine.is_clean)
