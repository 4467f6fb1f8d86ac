"""Base format injection — keep a base color/style across embedded resets."""

from __future__ import annotations

import logging

from textformat.codes import COLORS, RESET, STYLES
from textformat.tokenizer import tokenize

log = logging.getLogger(__name__)


class InvalidBaseFormat(ValueError):
    """A base format contained something other than color and style tokens."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f'Unexpected base format token "{token}", expected only color and format tokens'
        )
        self.token = token


def add_base(base_format: str, text: str) -> str:
    """Add base formatting to the string.

    The base format is inserted at the start and directly after every RESET,
    so a reset returns to the base color (e.g. blue for a NOTICE log line)
    rather than the terminal default.

        add_base("§c", "Hello")         -> "§r§cHello"
        add_base("§c", "Hello §rWorld") -> "§r§cHello §r§cWorld"

    Applying a base format to the output a second time combines the formats
    of both calls; the result is not idempotent.
    """
    for part in tokenize(base_format):
        if part not in COLORS and part not in STYLES:
            log.debug("Rejected base format %r at token %r", base_format, part)
            raise InvalidBaseFormat(part)
    prefix = RESET + base_format
    return prefix + text.replace(RESET, prefix)
