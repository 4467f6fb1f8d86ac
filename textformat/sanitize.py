"""Sanitizer — strip format codes, ANSI control sequences and unsafe characters."""

from __future__ import annotations

import re

from textformat.codes import CODE_CLASS, ESCAPE
from textformat.tokenizer import guarded

SUBSTITUTE = "\ufffd"

_SURROGATE_RE = re.compile("[\ud800-\udfff]")
# Private use area characters might break the console
_PUA_RE = re.compile("[\ue000-\uf8ff]")
_TOKEN_RE = re.compile(f"{re.escape(ESCAPE)}{CODE_CLASS}")
_CONTROL_RE = re.compile(r"\x1b[(\]\[][0-9;\[(]*[Bm]")


def scrub(data: str | bytes) -> str:
    """Return valid text, replacing invalid UTF-8 or lone surrogates."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return guarded(_SURROGATE_RE.sub, SUBSTITUTE, data)


def clean(text: str | bytes, remove_format: bool = True) -> str:
    """Clean the string of format codes, ANSI escape codes and invalid characters.

    Always returns valid text. With ``remove_format`` the § codes are removed
    too, along with any stray § left behind.
    """
    text = scrub(text)
    text = guarded(_PUA_RE.sub, "", text)
    if remove_format:
        text = guarded(_TOKEN_RE.sub, "", text).replace(ESCAPE, "")
    return guarded(_CONTROL_RE.sub, "", text).replace("\x1b", "")
