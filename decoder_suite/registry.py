"""
Scheme Registry - the static catalog of supported transforms.

Each scheme carries a display name, whether it can be reversed, and two
presentation hints (icon, description) that the engine never reads.
"""

from enum import Enum
from typing import List, NamedTuple

from .errors import UnknownSchemeError


class Scheme(Enum):
    """Stable machine keys for every supported transform."""
    MORSE = "morse"
    BINARY = "binary"
    HEX = "hex"
    LEETSPEAK = "leetspeak"
    PIG_LATIN = "piglatin"
    BRAILLE = "braille"
    BASE64 = "base64"
    ROT13 = "rot13"
    ASCII_ART = "ascii"
    UNICODE = "unicode"
    NATO = "nato"
    EMOJI = "emoji"
    CAESAR = "caesar"
    URL = "url"
    HTML = "html"

    @property
    def display_name(self) -> str:
        return SCHEME_INFO[self].display_name

    @property
    def supports_reverse(self) -> bool:
        return SCHEME_INFO[self].supports_reverse


class SchemeInfo(NamedTuple):
    display_name: str
    supports_reverse: bool
    icon: str
    description: str


SCHEME_INFO = {
    Scheme.MORSE: SchemeInfo("Morse Code", True, "dot.radiowaves.right", "Convert text to Morse code"),
    Scheme.BINARY: SchemeInfo("Binary", True, "number", "Convert text to binary"),
    Scheme.HEX: SchemeInfo("Hexadecimal", False, "hexagon", "Convert text to hexadecimal"),
    Scheme.LEETSPEAK: SchemeInfo("Leetspeak", False, "textformat.abc", "Convert text to Leetspeak"),
    Scheme.PIG_LATIN: SchemeInfo("Pig Latin", False, "textformat", "Convert text to Pig Latin"),
    Scheme.BRAILLE: SchemeInfo("Braille", False, "circle.grid.3x3", "Convert text to Braille patterns"),
    Scheme.BASE64: SchemeInfo("Base64", True, "doc.text", "Convert text to Base64"),
    Scheme.ROT13: SchemeInfo("ROT13", True, "rotate.right", "Rotate text by 13 positions"),
    Scheme.ASCII_ART: SchemeInfo("ASCII Art", False, "textformat.alt", "Convert text to ASCII art"),
    Scheme.UNICODE: SchemeInfo("Unicode", False, "character", "Convert to Unicode code points"),
    Scheme.NATO: SchemeInfo("NATO Phonetic", False, "airplane", "Spell text with the NATO alphabet"),
    Scheme.EMOJI: SchemeInfo("Emoji", False, "face.smiling", "Swap characters for emoji"),
    Scheme.CAESAR: SchemeInfo("Caesar Cipher", True, "lock.rotation", "Shift letters by a fixed amount"),
    Scheme.URL: SchemeInfo("URL Encoding", True, "link", "Percent-encode text for URLs"),
    Scheme.HTML: SchemeInfo("HTML Entities", True, "chevron.left.forwardslash.chevron.right", "Escape text as HTML entities"),
}


def all_schemes() -> List[Scheme]:
    """Every scheme in display order."""
    return list(Scheme)


def supports_reverse(scheme: Scheme) -> bool:
    return SCHEME_INFO[scheme].supports_reverse


def scheme_info(scheme: Scheme) -> SchemeInfo:
    return SCHEME_INFO[scheme]


def scheme_from_name(name: str) -> Scheme:
    """
    Resolve a scheme from its machine key ("morse") or its display
    name ("Morse Code"). Matching is case-insensitive.
    """
    wanted = name.strip().lower()
    for scheme, info in SCHEME_INFO.items():
        if wanted in (scheme.value, info.display_name.lower()):
            return scheme
    raise UnknownSchemeError(name)
