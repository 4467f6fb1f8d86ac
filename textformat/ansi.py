"""ANSI converter — § format codes → ANSI escape sequences.

Supports: 16 classic colors, 24-bit truecolor for the rest of the palette,
bold/strikethrough/underline/italic. Obfuscated has no terminal equivalent.
"""

from __future__ import annotations

import re

from textformat.codes import FormatCode, Kind
from textformat.tokenizer import guarded, segments

_ESC = "\033["
_RESET = f"{_ESC}0m"

_SGR_RE = re.compile(r"\033\[[0-9;]*m")


def _sequence(code: FormatCode) -> str | None:
    """Resolve a format code to an ANSI escape sequence."""
    if code.sgr:
        return f"{_ESC}{code.sgr}m"
    if code.rgb is not None:
        r, g, b = code.rgb
        return f"{_ESC}38;2;{r};{g};{b}m"
    return None


def to_ansi(text: str) -> str:
    """Convert § format codes to ANSI escape sequences.

    A trailing reset is appended if formatting is still active at the end,
    so the terminal is left clean.
    """
    out: list[str] = []
    active = False
    for seg in segments(text):
        code = seg.code
        if code is None:
            out.append(seg.text)
        elif code.kind is Kind.RESET:
            out.append(_RESET)
            active = False
        else:
            seq = _sequence(code)
            if seq is not None:
                out.append(seq)
                active = True
    if active:
        out.append(_RESET)
    return "".join(out)


def strip_ansi(text: str) -> str:
    """Remove all ANSI SGR escape sequences from text."""
    return guarded(_SGR_RE.sub, "", text)
