"""
hueline — Incremental background syntax classification for Python

Keeps a color category for every character of a live, editable buffer.
Edits re-tokenize only the lines they touch, on a background executor,
and can be interrupted safely when the next keystroke arrives.

Quick Start:
    >>> from hueline import Syntax, SyntaxConfig, TextBuffer
    >>> buffer = TextBuffer()
    >>> engine = Syntax(buffer, SyntaxConfig(keywords=frozenset({"return"})))
    >>> buffer.load("return 42; // done")
    >>> engine.query_style_at(0)
    StyleRecord(KEYWORD, NONE)

Background scans:
    >>> from concurrent.futures import ThreadPoolExecutor
    >>> pool = ThreadPoolExecutor(max_workers=1)
    >>> engine = Syntax(buffer, executor=pool)
    >>> buffer.insert(0, "x = 1\\n")   # returns immediately
    >>> engine.query_style_at(4)       # waits for the scan
    StyleRecord(NUMBER, NONE)

Zero runtime dependencies.
"""

from hueline.adornments import (
    Adornment,
    AdornmentRegistry,
    AdornmentRegistryBuilder,
    RainbowBrackets,
    create_default_registry,
)
from hueline.buffer import BufferSource, TextBuffer
from hueline.colors import DEFAULT_STYLE, ColorCategory, StyleRecord, unique_color
from hueline.config import (
    SyntaxConfig,
    get_syntax_config,
    reset_syntax_config,
    set_syntax_config,
    syntax_config_context,
)
from hueline.dirty import DirtyRange
from hueline.errors import AdornmentError, ContractError, HuelineError, StoreMismatchError
from hueline.events import BufferEvent, BufferEventType
from hueline.languages import Language, get_language, language_for_path
from hueline.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from hueline.scheduler import BackgroundScheduler, SerialExecutor
from hueline.store import ClassificationStore
from hueline.syntax import Syntax
from hueline.tokenizer import DELIMITERS, Tokenizer, classify_token, scan_bounds

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Engine
    "Syntax",
    # Styles
    "ColorCategory",
    "StyleRecord",
    "DEFAULT_STYLE",
    "unique_color",
    # Components
    "ClassificationStore",
    "DirtyRange",
    "Tokenizer",
    "classify_token",
    "scan_bounds",
    "DELIMITERS",
    "BackgroundScheduler",
    "SerialExecutor",
    # Adornments
    "Adornment",
    "AdornmentRegistry",
    "AdornmentRegistryBuilder",
    "RainbowBrackets",
    "create_default_registry",
    # Buffer boundary
    "BufferSource",
    "TextBuffer",
    "BufferEvent",
    "BufferEventType",
    # Configuration (ContextVar-based default)
    "SyntaxConfig",
    "get_syntax_config",
    "set_syntax_config",
    "reset_syntax_config",
    "syntax_config_context",
    # Languages
    "Language",
    "get_language",
    "language_for_path",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "HuelineError",
    "ContractError",
    "StoreMismatchError",
    "AdornmentError",
]
