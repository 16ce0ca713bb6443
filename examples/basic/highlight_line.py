"""Classify a line of C in 4 lines — inline scans, no threads."""

from hueline import Syntax, TextBuffer, get_language

buffer = TextBuffer('int main() { return printf("hi"); } // entry')
engine = Syntax(buffer, get_language("cpp").config())

for char, style in zip(buffer.text, engine.styles(0, len(buffer)), strict=True):
    print(repr(char), style.foreground.name, style.background.name)
