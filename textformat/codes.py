"""Format code table — § escape codes, palette and styles.

Single source of truth for every other module: the tokenizer grammar, the
base format validation and the HTML/ANSI renderers all read from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

ESCAPE = "\u00a7"  # §
EOL = "\n"

# Code characters the tokenizer splits on
CODE_CLASS = "[0-9a-gk-or]"


class Kind(Enum):
    COLOR = "color"
    STYLE = "style"
    RESET = "reset"


@dataclass(frozen=True)
class FormatCode:
    """One format code: its character, name, kind, HTML markup and SGR parameter."""

    char: str
    name: str
    kind: Kind
    html: str = ""
    rgb: tuple[int, int, int] | None = None
    sgr: str = ""

    @property
    def token(self) -> str:
        return ESCAPE + self.char


def _color(
    char: str, name: str, hex_rgb: str, sgr: str = "", quoted: bool = False
) -> FormatCode:
    digits = hex_rgb if len(hex_rgb) == 6 else "".join(c * 2 for c in hex_rgb)
    rgb = (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    style = f"color:#{hex_rgb}"
    html = f'<span style="{style}">' if quoted else f"<span style={style}>"
    return FormatCode(char, name, Kind.COLOR, html, rgb, sgr)


# ── Palette ──────────────────────────────────────────────────────

_COLORS = [
    _color("0", "black", "000", "30"),
    _color("1", "dark_blue", "00A", "34"),
    _color("2", "dark_green", "0A0", "32"),
    _color("3", "dark_aqua", "0AA", "36"),
    _color("4", "dark_red", "A00", "31"),
    _color("5", "dark_purple", "A0A", "35"),
    _color("6", "gold", "FA0", "33"),
    _color("7", "gray", "AAA", "37"),
    _color("8", "dark_gray", "555", "90"),
    _color("9", "blue", "55F", "94"),
    _color("a", "green", "5F5", "92"),
    _color("b", "aqua", "5FF", "96"),
    _color("c", "red", "F55", "91"),
    _color("d", "light_purple", "F5F", "95"),
    _color("e", "yellow", "FF5", "93"),
    _color("f", "white", "FFF", "97"),
    _color("g", "minecoin_gold", "DDD605", quoted=True),
    # Material colors; outside CODE_CLASS, so never split out by the tokenizer
    _color("h", "material_quartz", "EACACA", quoted=True),
    _color("i", "material_iron", "CECAC8", quoted=True),
    _color("j", "material_netherite", "443A3B", quoted=True),
    _color("p", "material_emerald", "47A036", quoted=True),
    _color("q", "material_diamond", "2CBAA8", quoted=True),
    _color("t", "material_lapis", "21497B", quoted=True),
    _color("u", "material_amethyst", "9A5C6C", quoted=True),
    _color("v", "material_resin", "EB7114", quoted=True),
]

# Obfuscated has no HTML or terminal equivalent
_STYLES = [
    FormatCode("k", "obfuscated", Kind.STYLE),
    FormatCode("l", "bold", Kind.STYLE, "<span style=font-weight:bold>", sgr="1"),
    FormatCode("m", "strikethrough", Kind.STYLE, "<span style=text-decoration:line-through>", sgr="9"),
    FormatCode("n", "underline", Kind.STYLE, "<span style=text-decoration:underline>", sgr="4"),
    FormatCode("o", "italic", Kind.STYLE, "<span style=font-style:italic>", sgr="3"),
]

_RESET = FormatCode("r", "reset", Kind.RESET, sgr="0")

CODES: MappingProxyType[str, FormatCode] = MappingProxyType(
    {c.char: c for c in [*_COLORS, *_STYLES, _RESET]}
)
TOKENS: MappingProxyType[str, FormatCode] = MappingProxyType(
    {c.token: c for c in CODES.values()}
)
COLORS: MappingProxyType[str, FormatCode] = MappingProxyType({c.token: c for c in _COLORS})
STYLES: MappingProxyType[str, FormatCode] = MappingProxyType({c.token: c for c in _STYLES})

# ── Token constants ──────────────────────────────────────────────

BLACK = ESCAPE + "0"
DARK_BLUE = ESCAPE + "1"
DARK_GREEN = ESCAPE + "2"
DARK_AQUA = ESCAPE + "3"
DARK_RED = ESCAPE + "4"
DARK_PURPLE = ESCAPE + "5"
GOLD = ESCAPE + "6"
GRAY = ESCAPE + "7"
DARK_GRAY = ESCAPE + "8"
BLUE = ESCAPE + "9"
GREEN = ESCAPE + "a"
AQUA = ESCAPE + "b"
RED = ESCAPE + "c"
LIGHT_PURPLE = ESCAPE + "d"
YELLOW = ESCAPE + "e"
WHITE = ESCAPE + "f"
MINECOIN_GOLD = ESCAPE + "g"
MATERIAL_QUARTZ = ESCAPE + "h"
MATERIAL_IRON = ESCAPE + "i"
MATERIAL_NETHERITE = ESCAPE + "j"
MATERIAL_EMERALD = ESCAPE + "p"
MATERIAL_DIAMOND = ESCAPE + "q"
MATERIAL_LAPIS = ESCAPE + "t"
MATERIAL_AMETHYST = ESCAPE + "u"
MATERIAL_RESIN = ESCAPE + "v"

OBFUSCATED = ESCAPE + "k"
BOLD = ESCAPE + "l"
STRIKETHROUGH = ESCAPE + "m"
UNDERLINE = ESCAPE + "n"
ITALIC = ESCAPE + "o"

RESET = ESCAPE + "r"


def lookup(char: str) -> FormatCode | None:
    """Return the format code for a code character, or None if unknown."""
    return CODES.get(char)


def kind_of(token: str) -> Kind | None:
    code = TOKENS.get(token)
    return code.kind if code is not None else None


def is_color(token: str) -> bool:
    return token in COLORS


def is_style(token: str) -> bool:
    return token in STYLES
