"""Tests for hueline.syntax — the incremental engine and its edit adapter."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from hueline import (
    DEFAULT_STYLE,
    AdornmentRegistry,
    AdornmentRegistryBuilder,
    BufferEvent,
    BufferEventType,
    ColorCategory,
    ContractError,
    StoreMismatchError,
    StyleRecord,
    Syntax,
    SyntaxConfig,
    TextBuffer,
    syntax_config_context,
)

KEYWORDS = SyntaxConfig(keywords=frozenset({"int", "return"}))
NO_ADORNMENTS = AdornmentRegistry()


def _fg(engine: Syntax, start: int = 0, end: int | None = None) -> list[ColorCategory]:
    if end is None:
        end = len(engine.buffer)
    return [style.foreground for style in engine.styles(start, end)]


def _fresh(text: str, config: SyntaxConfig = KEYWORDS) -> list[ColorCategory]:
    engine = Syntax(TextBuffer(text), config, adornments=NO_ADORNMENTS)
    return _fg(engine)


class _FixedOverlay:
    """Adornment that overrides a single offset."""

    name = "fixed"

    def __init__(self, offset: int, style: StyleRecord) -> None:
        self.offset = offset
        self.style = style
        self.events: list[BufferEvent] = []

    def query(self, offset: int) -> StyleRecord | None:
        return self.style if offset == self.offset else None

    def notify(self, event: BufferEvent) -> None:
        self.events.append(event)


# ---------------------------------------------------------------------------
# Construction and lookups
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_initial_buffer_is_classified(self) -> None:
        engine = Syntax(TextBuffer("int x;"), KEYWORDS, adornments=NO_ADORNMENTS)
        assert engine.query_style_at(0).foreground is ColorCategory.KEYWORD
        assert engine.is_clean
        assert (engine.processed_char, engine.target_char) == (5, 0)

    def test_empty_buffer(self) -> None:
        engine = Syntax(TextBuffer(), KEYWORDS)
        assert len(engine.store) == 0
        assert engine.is_clean
        assert engine.query_style_at(0) is DEFAULT_STYLE

    def test_uses_context_default_config(self) -> None:
        config = SyntaxConfig(keywords=frozenset({"let"}))
        with syntax_config_context(config):
            engine = Syntax(TextBuffer("let"))
        assert engine.config is config
        assert engine.query_style_at(0).foreground is ColorCategory.KEYWORD

    def test_default_adornments_are_rainbow_brackets(self) -> None:
        engine = Syntax(TextBuffer("f(x)"))
        assert engine.adornments.names == ("rainbow-brackets",)


class TestLookup:
    def test_offset_past_end_is_default(self) -> None:
        engine = Syntax(TextBuffer("int"), KEYWORDS)
        assert engine.query_style_at(3) is DEFAULT_STYLE
        assert engine.query_style_at(100) is DEFAULT_STYLE

    def test_negative_offset_rejected(self) -> None:
        engine = Syntax(TextBuffer("int"), KEYWORDS)
        with pytest.raises(ContractError):
            engine.query_style_at(-1)

    def test_styles_range(self) -> None:
        engine = Syntax(TextBuffer("int 5"), KEYWORDS, adornments=NO_ADORNMENTS)
        assert _fg(engine, 3, 5) == [ColorCategory.WHITESPACE, ColorCategory.NUMBER]

    def test_styles_range_rejects_inverted(self) -> None:
        engine = Syntax(TextBuffer("int"), KEYWORDS)
        with pytest.raises(ContractError):
            engine.styles(2, 1)


# ---------------------------------------------------------------------------
# Edit events
# ---------------------------------------------------------------------------


class TestEditEvents:
    def test_load_classifies_buffer(self) -> None:
        buffer = TextBuffer()
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.load("return 1;")
        assert len(engine.store) == len(buffer)
        assert _fg(engine, 0, 6) == [ColorCategory.KEYWORD] * 6

    def test_reload_replaces_content(self) -> None:
        buffer = TextBuffer("int a")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.load("7")
        assert len(engine.store) == 1
        assert engine.query_style_at(0).foreground is ColorCategory.NUMBER

    def test_insert_restyles_token(self) -> None:
        buffer = TextBuffer("in x")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        assert engine.query_style_at(0).foreground is ColorCategory.NORMAL
        buffer.insert(2, "t")
        assert _fg(engine, 0, 3) == [ColorCategory.KEYWORD] * 3

    def test_adding_comment_marker(self) -> None:
        buffer = TextBuffer("x = 5 foo")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.insert(6, "// ")
        assert _fg(engine, 6) == [ColorCategory.COMMENT] * 6
        assert engine.query_style_at(4).foreground is ColorCategory.NUMBER

    def test_removing_comment_marker_restyles_rest_of_line(self) -> None:
        buffer = TextBuffer("a // int b")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.delete(2, 4)
        assert buffer.text == "a  int b"
        assert _fg(engine, 3, 6) == [ColorCategory.KEYWORD] * 3

    def test_splitting_a_line_restyles_both_halves(self) -> None:
        buffer = TextBuffer("intx")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.insert(3, "\n")
        assert _fg(engine) == _fresh("int\nx")

    def test_joining_lines(self) -> None:
        buffer = TextBuffer("re\nturn")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.delete(2, 3)
        assert _fg(engine) == [ColorCategory.KEYWORD] * 6

    def test_same_length_replace_is_text_changed(self) -> None:
        buffer = TextBuffer("x = 1")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        events: list[BufferEventType] = []
        buffer.subscribe(lambda event: events.append(event.type))

        buffer.replace(4, 5, "y")

        assert BufferEventType.TEXT_CHANGED in events
        assert engine.query_style_at(4).foreground is ColorCategory.NORMAL

    def test_last_char_rewritten_as_newline(self) -> None:
        buffer = TextBuffer("int")
        engine = Syntax(buffer, KEYWORDS, adornments=NO_ADORNMENTS)
        buffer.replace(2, 3, "\n")
        assert engine.store[2] is DEFAULT_STYLE
        assert _fg(engine) == _fresh("in\n")

    def test_delete_then_insert_restores_length(self) -> None:
        buffer = TextBuffer("0123456789abc")
        engine = Syntax(buffer, KEYWORDS)
        buffer.delete(3, 7)
        buffer.insert(3, "wxyz")
        engine.wait()
        assert len(engine.store) == len(buffer) == 13

    def test_events_from_other_buffers_are_ignored(self) -> None:
        buffer = TextBuffer("int")
        engine = Syntax(buffer, KEYWORDS)
        other = TextBuffer("abcdef")
        engine.notify(BufferEvent(BufferEventType.TEXT_ADDED, other, 0, 6))
        assert len(engine.store) == 3

    def test_store_mismatch_is_fatal(self) -> None:
        buffer = TextBuffer("int")
        engine = Syntax(buffer, KEYWORDS)
        with pytest.raises(StoreMismatchError):
            engine.notify(BufferEvent(BufferEventType.LOADED, buffer, 0, 5))

    def test_close_detaches_from_buffer(self) -> None:
        buffer = TextBuffer("int")
        with Syntax(buffer, KEYWORDS) as engine:
            pass
        buffer.insert(0, "xx")
        assert len(engine.store) == 3


# ---------------------------------------------------------------------------
# Recompute requests
# ---------------------------------------------------------------------------


class TestRequestRecompute:
    @pytest.mark.parametrize(("start", "end"), [(-1, 0), (5, 2)])
    def test_invalid_range_rejected(self, start: int, end: int) -> None:
        engine = Syntax(TextBuffer("int x = 1;"), KEYWORDS)
        with pytest.raises(ContractError):
            engine.request_recompute(start, end)

    def test_idempotent(self) -> None:
        engine = Syntax(TextBuffer('int a = "s"; // c\nreturn 2;'), KEYWORDS)
        engine.request_recompute(0, 10)
        first = engine.store.snapshot()
        engine.request_recompute(0, 10)
        engine.wait()
        assert engine.store.snapshot() == first

    def test_full_recompute_is_deterministic(self) -> None:
        text = "int main() { return 0; } // end\nx = 'c';"
        engine = Syntax(TextBuffer(text), KEYWORDS)
        before = engine.store.snapshot()
        for _ in range(3):
            engine.request_recompute(0, len(text))
        engine.wait()
        assert engine.store.snapshot() == before

    def test_interrupt_leaves_range_pending(self, pool: ThreadPoolExecutor) -> None:
        buffer = TextBuffer("int x;\n" * 2000)
        engine = Syntax(buffer, KEYWORDS, executor=pool)
        engine.interrupt()
        # Either the scan finished or its range is still owed
        assert engine.is_clean or engine.target_char > 0
        engine.request_recompute(0, 0)
        engine.wait()
        assert engine.is_clean


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------


class TestOverlayPrecedence:
    @pytest.mark.parametrize("text", ["int x = 1234567", "// comment here", '"string here"'])
    def test_overlay_wins_at_its_offset(self, text: str) -> None:
        override = StyleRecord(ColorCategory.UNIQUE_3, ColorCategory.ERROR)
        registry = AdornmentRegistryBuilder().register(_FixedOverlay(10, override)).build()
        engine = Syntax(TextBuffer(text), KEYWORDS, adornments=registry)

        assert engine.query_style_at(10) is override
        assert engine.query_style_at(9) is engine.store[9]

    def test_overlay_receives_events(self) -> None:
        overlay = _FixedOverlay(0, StyleRecord())
        buffer = TextBuffer("a")
        Syntax(buffer, KEYWORDS, adornments=AdornmentRegistryBuilder().register(overlay).build())
        buffer.insert(1, "b")
        assert [e.type for e in overlay.events] == [
            BufferEventType.PRE_CHANGE,
            BufferEventType.TEXT_ADDED,
        ]

    def test_rainbow_brackets_through_engine(self) -> None:
        buffer = TextBuffer("f(a[0])")
        engine = Syntax(buffer, KEYWORDS)
        assert engine.query_style_at(1).foreground is ColorCategory.UNIQUE_0
        assert engine.query_style_at(3).foreground is ColorCategory.UNIQUE_1
        assert engine.query_style_at(5).foreground is ColorCategory.UNIQUE_1
        assert engine.query_style_at(6).foreground is ColorCategory.UNIQUE_0

        buffer.delete(6, 7)
        assert engine.query_style_at(1).background is ColorCategory.ERROR


# ---------------------------------------------------------------------------
# Background execution
# ---------------------------------------------------------------------------


class TestBackgroundEngine:
    def test_threaded_matches_serial(self, pool: ThreadPoolExecutor) -> None:
        text = "int a = 1; // one\nreturn a;\n" * 200
        buffer = TextBuffer(text)
        engine = Syntax(buffer, KEYWORDS, executor=pool, adornments=NO_ADORNMENTS)
        assert _fg(engine) == _fresh(text)

    def test_rapid_edits_stay_consistent(self, pool: ThreadPoolExecutor) -> None:
        buffer = TextBuffer("int value = 10; // note\n" * 500)
        engine = Syntax(buffer, KEYWORDS, executor=pool, adornments=NO_ADORNMENTS)

        for i in range(50):
            offset = (i * 97) % len(buffer)
            buffer.insert(offset, "return ")
            buffer.delete(offset // 2, offset // 2 + 3)

        engine.wait()
        assert len(engine.store) == len(buffer)
        assert _fg(engine) == _fresh(buffer.text)

    def test_delete_insert_during_scan(self, pool: ThreadPoolExecutor) -> None:
        buffer = TextBuffer("x" * 50_000)
        engine = Syntax(buffer, KEYWORDS, executor=pool)
        # The initial scan may still be running; the edits must interrupt it
        buffer.delete(3, 7)
        buffer.insert(3, "abcd")
        engine.wait()
        assert len(engine.store) == len(buffer) == 50_000
