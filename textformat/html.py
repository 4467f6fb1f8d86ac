"""HTML converter — replay format tokens as correctly nested <span> markup."""

from __future__ import annotations

from textformat.codes import Kind
from textformat.tokenizer import segments

CLOSE_SPAN = "</span>"


def to_html(text: str) -> str:
    """Return an HTML-formatted string with colors and styles.

    Every color or style opens a span; a reset closes all open spans, and
    any still open at the end are closed. Obfuscated emits nothing.
    Literal text is not HTML-escaped.
    """
    out: list[str] = []
    open_spans = 0
    for seg in segments(text):
        code = seg.code
        if code is None:
            out.append(seg.text)
        elif code.kind is Kind.RESET:
            out.append(CLOSE_SPAN * open_spans)
            open_spans = 0
        elif code.html:
            out.append(code.html)
            open_spans += 1
    out.append(CLOSE_SPAN * open_spans)
    return "".join(out)
