"""Encoder — expand placeholder shorthand (``&c``) into § format codes."""

from __future__ import annotations

import re

from textformat.codes import CODE_CLASS, ESCAPE
from textformat.tokenizer import guarded


def colorize(text: str, placeholder: str = "&") -> str:
    """Replace ``placeholder + code`` with ``§ + code``.

    Only valid codes are converted; ``&z`` and a lone ``&`` are left as-is.
    The placeholder is matched literally and must not be empty.
    """
    if not placeholder:
        raise ValueError("placeholder must not be empty")
    pattern = re.compile(f"{re.escape(placeholder)}({CODE_CLASS})")
    return guarded(pattern.sub, lambda m: ESCAPE + m.group(1), text)
