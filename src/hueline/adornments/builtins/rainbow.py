"""Rainbow bracket adornment.

Colors each matched ``()``, ``[]`` and ``{}`` pair by nesting depth using
the unique palette; brackets without a partner (or closed by the wrong
kind) get an error background.

The bracket map is rebuilt from the buffer text after every content event.
Brackets inside strings and comments are matched too: the adornment does not
read the tokenizer's output.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from hueline.colors import ColorCategory, StyleRecord, unique_color
from hueline.events import BufferEventType

if TYPE_CHECKING:
    from hueline.buffer import BufferSource
    from hueline.events import BufferEvent

_BRACKET_RE = re.compile(r"[()\[\]{}]")
_PAIRS = {")": "(", "]": "[", "}": "{"}

UNMATCHED_STYLE = StyleRecord(ColorCategory.NORMAL, ColorCategory.ERROR)


def match_brackets(text: str) -> dict[int, StyleRecord]:
    """Map every bracket offset in text to its display style."""
    styles: dict[int, StyleRecord] = {}
    stack: list[tuple[int, str]] = []

    for match in _BRACKET_RE.finditer(text):
        offset = match.start()
        char = match.group()
        opener = _PAIRS.get(char)
        if opener is None:
            stack.append((offset, char))
        elif stack and stack[-1][1] == opener:
            open_offset, _ = stack.pop()
            style = StyleRecord(unique_color(len(stack)))
            styles[open_offset] = style
            styles[offset] = style
        else:
            styles[offset] = UNMATCHED_STYLE

    for open_offset, _ in stack:
        styles[open_offset] = UNMATCHED_STYLE
    return styles


class RainbowBrackets:
    """Depth-colored bracket overlay for one buffer."""

    name = "rainbow-brackets"

    __slots__ = ("_buffer", "_styles")

    def __init__(self, buffer: BufferSource) -> None:
        self._buffer = buffer
        self._styles = match_brackets(buffer.text)

    def query(self, offset: int) -> StyleRecord | None:
        return self._styles.get(offset)

    def notify(self, event: BufferEvent) -> None:
        if event.buffer is not self._buffer or event.type is BufferEventType.PRE_CHANGE:
            return
        self._styles = match_brackets(self._buffer.text)
