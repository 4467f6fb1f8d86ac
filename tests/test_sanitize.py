"""Tests for the sanitizer."""

import pytest
from textformat.codes import ESCAPE
from textformat.sanitize import clean, scrub
from textformat.tokenizer import PatternEngineError

SAMPLES = [
    "",
    "§cRed §lbold§r plain",
    "§zodd §§c and §",
    "\x1b[31mansi\x1b[0m §cmixed",
    "pua\ue000\uf8ff here",
    "esc\x1b alone",
    "a\ud800b",
    "\x1b(B\x1b[1;31mcolored",
]


class TestScrub:
    def test_bytes_invalid_utf8(self):
        assert scrub(b"ab\xffc") == "ab\ufffdc"

    def test_bytes_valid(self):
        assert scrub("§cHi".encode("utf-8")) == "§cHi"

    def test_lone_surrogate(self):
        assert scrub("a\ud800b") == "a\ufffdb"


class TestClean:
    def test_removes_format(self):
        assert clean("§cRed §lBold§r") == "Red Bold"

    def test_stray_escape_marker(self):
        assert clean("§cRed §zx") == "Red zx"
        assert clean("end§") == "end"

    def test_keep_format(self):
        assert clean("§cRed\x1b[0m", remove_format=False) == "§cRed"

    def test_keep_format_keeps_stray_marker(self):
        assert clean("§z", remove_format=False) == "§z"

    def test_ansi(self):
        assert clean("\x1b[31mhi\x1b[0m") == "hi"
        assert clean("\x1b[1;31mhi") == "hi"
        assert clean("\x1b(Bhi") == "hi"

    def test_stray_esc(self):
        assert clean("a\x1bb") == "ab"

    def test_pua(self):
        assert clean("a\ue000b\uf8ffc") == "abc"

    def test_non_pua_kept(self):
        assert clean("한글 \u2603 \uf900") == "한글 \u2603 \uf900"

    def test_bytes_input(self):
        assert clean(b"\xa7c\xff ok") == "\ufffdc\ufffd ok"

    def test_idempotent(self):
        for s in SAMPLES:
            once = clean(s)
            assert clean(once) == once

    def test_no_marker_or_pua(self):
        for s in SAMPLES:
            out = clean(s)
            assert ESCAPE not in out
            assert "\x1b" not in out
            assert not any(0xE000 <= ord(c) <= 0xF8FF for c in out)

    def test_output_is_valid_utf8(self):
        for s in SAMPLES:
            clean(s).encode("utf-8")

    def test_propagates_engine_error(self, monkeypatch):
        class BrokenPattern:
            def sub(self, repl, text):
                raise MemoryError

        monkeypatch.setattr("textformat.sanitize._PUA_RE", BrokenPattern())
        with pytest.raises(PatternEngineError):
            clean("x")
