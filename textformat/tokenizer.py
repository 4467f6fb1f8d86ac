"""Tokenizer — split § formatted text into literal and format token segments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, TypeVar

from textformat.codes import CODE_CLASS, ESCAPE, TOKENS, FormatCode

_TOKEN_RE = re.compile(f"({re.escape(ESCAPE)}{CODE_CLASS})")

T = TypeVar("T")


class PatternEngineError(ValueError):
    """The regex engine failed while matching."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Pattern engine error: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class Segment:
    """A literal run (code is None) or a single format token."""

    text: str
    code: FormatCode | None = None

    @property
    def is_token(self) -> bool:
        return self.code is not None


def guarded(func: Callable[..., T], *args: object) -> T:
    """Run a regex call, raising matcher failures as PatternEngineError."""
    try:
        return func(*args)
    except re.error as exc:
        raise PatternEngineError(f"Invalid pattern: {exc}") from exc
    except RecursionError as exc:
        raise PatternEngineError("Recursion limit reached") from exc
    except MemoryError as exc:
        raise PatternEngineError("Out of memory while matching") from exc


def tokenize(text: str) -> list[str]:
    """Split the string by format tokens.

    Tokens are kept as their own items and empty literal runs are dropped,
    so ``"".join(tokenize(text)) == text`` always holds.
    """
    parts = guarded(_TOKEN_RE.split, text)
    return [p for p in parts if p]


def segments(text: str) -> list[Segment]:
    """Tokenize and resolve each token against the code table."""
    result = []
    for i, part in enumerate(guarded(_TOKEN_RE.split, text)):
        if not part:
            continue
        # split() with one capture group puts matches at odd indices
        code = TOKENS.get(part) if i % 2 else None
        result.append(Segment(part, code))
    return result
