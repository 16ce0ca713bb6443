"""Flat token classifier for hueline.

Scans a line-aligned range of the buffer, splits it into tokens on a fixed
delimiter set, classifies each token and writes the result into the
classification store. There is no grammar and no token list: every token
is classified and written as soon as it is found.

Scan window:
1. Walk back from ``start`` over the current token to a delimiter, then
   back to the previous newline, so a token is never entered midway. When
   ``start`` sits on a newline the walk begins one character earlier, since
   splitting or joining lines changes the line above too.
2. Extend ``end`` forward to the next newline, so a line is never cut in
   half (line comments and strings need the whole line).

Per token, in order:
1. Spaces before the token become WHITESPACE.
2. Keyword, identifier, number, bracket run, or normal text.
3. A token opening with a quote is extended to the closing quote on the
   same line and becomes STRING.
4. ``//`` inside the token turns the rest of the line into COMMENT.

Known limitation:
    Comment detection looks at the first ``/`` inside the delimiter-bounded
    token only. A token such as ``"http://host"`` or ``a//b`` therefore
    starts a comment mid-token, and ``a/b//c`` does not start one at all.

Thread Safety:
    Tokenizer holds only its frozen SyntaxConfig. ``tokenize`` reads an
    immutable ``str`` snapshot and writes inside its own scan window, so one
    instance can serve a background thread while the owner waits.

"""

from __future__ import annotations

from threading import Event
from typing import TYPE_CHECKING

from hueline.colors import (
    COMMENT_STYLE,
    DEFAULT_STYLE,
    IDENTIFIER_STYLE,
    KEYWORD_STYLE,
    NORMAL_STYLE,
    NUMBER_STYLE,
    PARENTHESIS_STYLE,
    STRING_STYLE,
    WHITESPACE_STYLE,
    StyleRecord,
)
from hueline.utils.logger import get_logger

if TYPE_CHECKING:
    from hueline.config import SyntaxConfig
    from hueline.profiling import ScanAccumulator
    from hueline.store import ClassificationStore

logger = get_logger(__name__)

DELIMITERS = frozenset(" \t.\n;(){}=:")

_DIGITS = frozenset("0123456789")
_BRACKETS = frozenset("{}()[]")
_QUOTES = frozenset("\"'")


def classify_token(token: str, config: SyntaxConfig) -> StyleRecord:
    """Classify a single token.

    Priority: keyword, identifier, number (ASCII digits only), bracket run,
    normal. Keywords win over identifiers when a word is in both sets.

    Args:
        token: Non-empty token text
        config: Keyword/identifier sets and case handling

    Returns:
        StyleRecord for every character of the token
    """
    if config.case_insensitive:
        token = token.lower()

    if token in config.keywords:
        return KEYWORD_STYLE
    if token in config.identifiers:
        return IDENTIFIER_STYLE
    if _DIGITS.issuperset(token):
        return NUMBER_STYLE
    if _BRACKETS.issuperset(token):
        return PARENTHESIS_STYLE
    return NORMAL_STYLE


def scan_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Extend [start, end] to whole lines.

    Args:
        text: Buffer contents
        start: Leftmost dirty offset
        end: Rightmost dirty offset

    Returns:
        (scan_start, scan_end) where scan_start sits on a newline or at 0
        and scan_end sits on a newline or at len(text)
    """
    length = len(text)
    if length == 0:
        return 0, 0

    pos = max(0, min(start, length - 1))

    # A newline inserted or removed here also changes the line before it
    if pos > 0 and text[pos] == "\n":
        pos -= 1

    # Back to the previous delimiter
    while pos > 0 and text[pos] not in DELIMITERS:
        pos -= 1

    # Back to the previous line
    while pos > 0 and text[pos] != "\n":
        pos -= 1

    end = max(pos, min(end, length))
    line_end = text.find("\n", end)
    if line_end == -1:
        line_end = length
    return pos, line_end


def _skip_delimiters(text: str, pos: int, stop: int) -> int:
    while pos < stop and text[pos] in DELIMITERS:
        pos += 1
    return pos


def _find_delimiter(text: str, pos: int, stop: int) -> int:
    while pos < stop and text[pos] not in DELIMITERS:
        pos += 1
    return pos


def _find_string_end(text: str, first: int) -> int:
    """Offset just past the closing quote, or -1 if the line ends first."""
    quote = text[first]
    length = len(text)
    pos = first + 1
    while pos < length:
        char = text[pos]
        if char == quote:
            return pos + 1
        if char == "\n":
            return -1
        # Escaped quote does not close the string
        if char == "\\" and pos + 1 < length and text[pos + 1] == quote:
            pos += 1
        pos += 1
    return -1


def _find_line_end(text: str, pos: int) -> int:
    line_end = text.find("\n", pos)
    return len(text) if line_end == -1 else line_end


class Tokenizer:
    """Line-aligned incremental tokenizer.

    Usage:
        >>> store = ClassificationStore(len(text))
        >>> Tokenizer(config).tokenize(text, store, 0, len(text))
        (0, 10)

    """

    __slots__ = ("_config",)

    def __init__(self, config: SyntaxConfig) -> None:
        self._config = config

    @property
    def config(self) -> SyntaxConfig:
        return self._config

    def tokenize(
        self,
        text: str,
        store: ClassificationStore,
        start: int,
        end: int,
        *,
        stop: Event | None = None,
        accumulator: ScanAccumulator | None = None,
    ) -> tuple[int, int] | None:
        """Classify every line touching [start, end] and write it to store.

        Args:
            text: Buffer contents; must have the same length as store
            store: Classification store to write into
            start: Leftmost dirty offset
            end: Rightmost dirty offset
            stop: Cancellation flag, polled once per token
            accumulator: Optional profiling accumulator

        Returns:
            The (scan_start, scan_end) range covered, or None if the scan
            observed the stop flag and returned early.
        """
        scan_start, scan_end = scan_bounds(text, start, end)
        return self.scan(
            text, store, scan_start, scan_end, stop=stop, accumulator=accumulator
        )

    def scan(
        self,
        text: str,
        store: ClassificationStore,
        scan_start: int,
        scan_end: int,
        *,
        stop: Event | None = None,
        accumulator: ScanAccumulator | None = None,
    ) -> tuple[int, int] | None:
        """Run the token loop over bounds already aligned by scan_bounds."""
        logger.debug("Updating syntax: start=%d, end=%d", scan_start, scan_end)

        config = self._config
        pos = scan_start
        tokens = 0

        while pos < scan_end:
            if stop is not None and stop.is_set():
                if accumulator is not None:
                    accumulator.record_cancel(tokens)
                return None

            first = _skip_delimiters(text, pos, scan_end)
            self._mark_gap(text, store, pos, first)
            if first >= scan_end:
                pos = first
                break

            last = _find_delimiter(text, first, scan_end)
            store.fill(first, last, classify_token(text[first:last], config))
            tokens += 1
            next_pos = last

            if text[first] in _QUOTES:
                string_end = _find_string_end(text, first)
                if string_end != -1:
                    store.fill(first, string_end, STRING_STYLE)
                    next_pos = string_end

            slash = text.find("/", first, last)
            if slash != -1 and slash + 1 < len(text) and text[slash + 1] == "/":
                line_end = _find_line_end(text, slash)
                store.fill(slash, line_end, COMMENT_STYLE)
                next_pos = max(next_pos, line_end)

            pos = next_pos

        covered_end = max(pos, scan_end)
        if covered_end < len(text):
            # Closing newline; it may have been rewritten in place
            store[covered_end] = DEFAULT_STYLE
        if accumulator is not None:
            accumulator.record_scan(covered_end - scan_start, tokens)
        return scan_start, covered_end

    @staticmethod
    def _mark_gap(text: str, store: ClassificationStore, start: int, end: int) -> None:
        # Spaces are whitespace; other delimiters drop any stale style
        for offset in range(start, end):
            store[offset] = WHITESPACE_STYLE if text[offset] == " " else DEFAULT_STYLE


__all__ = ["DELIMITERS", "Tokenizer", "classify_token", "scan_bounds"]
