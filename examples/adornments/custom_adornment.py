"""Add your own overlay in ~15 lines — flag trailing spaces."""

from hueline import (
    AdornmentRegistryBuilder,
    BufferEvent,
    ColorCategory,
    RainbowBrackets,
    StyleRecord,
    Syntax,
    TextBuffer,
)

TRAILING = StyleRecord(ColorCategory.NORMAL, ColorCategory.ERROR)


class TrailingSpaces:
    name = "trailing-spaces"

    def __init__(self, buffer: TextBuffer) -> None:
        self._buffer = buffer

    def query(self, offset: int) -> StyleRecord | None:
        text = self._buffer.text
        if text[offset] == " " and text[offset:].split("\n", 1)[0].strip() == "":
            return TRAILING
        return None

    def notify(self, event: BufferEvent) -> None:
        pass  # Reads the live text on every query


buffer = TextBuffer("f(x)   \ng(y)")
registry = (
    AdornmentRegistryBuilder()
    .register(TrailingSpaces(buffer))
    .register(RainbowBrackets(buffer))
    .build()
)
engine = Syntax(buffer, adornments=registry)

for offset, char in enumerate(buffer.text):
    print(offset, repr(char), engine.query_style_at(offset))
