"""
Codec implementations, one strategy class per scheme.

Every codec registers itself into CODEC_REGISTRY through @register_codec.
Encode-only codecs inherit the default decode, which refuses the request.
"""

import base64
import binascii
import re
from abc import ABC, abstractmethod
from typing import Dict
from urllib.parse import quote

from .errors import MalformedEncodedInput, UnsupportedReverseConversion
from .log import log_warn
from .models import ConversionOptions
from .registry import Scheme
from .tables import (
    ASCII_ART_GLYPHS,
    BRAILLE_TABLE,
    EMOJI_TABLE,
    HTML_ENTITIES,
    HTML_ENTITIES_REVERSE,
    LEETSPEAK_TABLE,
    MORSE_REVERSE,
    MORSE_TABLE,
    NATO_TABLE,
    URL_QUERY_SAFE,
)

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class SchemeCodec(ABC):
    """Abstract base class that all codecs must implement."""

    scheme: Scheme

    @abstractmethod
    def encode(self, text: str, options: ConversionOptions) -> str:
        pass

    def decode(self, text: str, options: ConversionOptions) -> str:
        raise UnsupportedReverseConversion(self.scheme)


CODEC_REGISTRY: Dict[Scheme, SchemeCodec] = {}


def register_codec(cls):
    """Decorator to auto-register codecs."""
    codec = cls()
    CODEC_REGISTRY[codec.scheme] = codec
    return cls


def _fold(char: str) -> str:
    """Upper-case one character, unless that would turn it into several."""
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _rotate_letters(text: str, shift: int) -> str:
    """Shift ASCII letters within their own case alphabet; leave the rest alone."""
    result = []
    for char in text:
        if 'a' <= char <= 'z':
            result.append(chr((ord(char) - ord('a') + shift) % 26 + ord('a')))
        elif 'A' <= char <= 'Z':
            result.append(chr((ord(char) - ord('A') + shift) % 26 + ord('A')))
        else:
            result.append(char)
    return ''.join(result)

# ==========================================
#  REVERSIBLE SCHEMES
# ==========================================

@register_codec
class MorseCodec(SchemeCodec):
    """
    International Morse code.

    Letters are case-folded; characters missing from the table become an
    empty token, which shows up as an extra space between neighbours.
    """

    scheme = Scheme.MORSE
    _SPACE_RUN = re.compile(r" {2,}")

    def encode(self, text: str, options: ConversionOptions) -> str:
        return " ".join(MORSE_TABLE.get(_fold(char), "") for char in text)

    def decode(self, text: str, options: ConversionOptions) -> str:
        chars = []
        for token in text.split(" "):
            if not token:
                # Blank tokens come from the space separating two words
                chars.append(" ")
            else:
                chars.append(MORSE_REVERSE.get(token, "?"))
        return self._SPACE_RUN.sub(" ", "".join(chars))


@register_codec
class BinaryCodec(SchemeCodec):
    """
    Code points as base-2 groups, at least 8 digits wide.

    Characters beyond U+00FF simply produce longer groups.
    """

    scheme = Scheme.BINARY

    def encode(self, text: str, options: ConversionOptions) -> str:
        return " ".join(f"{ord(char):08b}" for char in text)

    def decode(self, text: str, options: ConversionOptions) -> str:
        chars = []
        for group in text.split():
            if any(bit not in "01" for bit in group):
                continue
            value = int(group, 2)
            if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                continue
            chars.append(chr(value))
        return "".join(chars)


@register_codec
class Base64Codec(SchemeCodec):
    scheme = Scheme.BASE64

    def encode(self, text: str, options: ConversionOptions) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, text: str, options: ConversionOptions) -> str:
        try:
            raw = base64.b64decode(text.strip(), validate=True)
            return raw.decode("utf-8")
        except (binascii.Error, ValueError) as e:
            # UnicodeDecodeError is a ValueError subclass
            log_warn(f"Base64 decode failed: {e}")
            raise MalformedEncodedInput(self.scheme, str(e)) from e


@register_codec
class Rot13Codec(SchemeCodec):
    """
    ROT13 substitution cipher.

    ROT13 is its own inverse: encode and decode are the same operation.
    """

    scheme = Scheme.ROT13

    def encode(self, text: str, options: ConversionOptions) -> str:
        return _rotate_letters(text, 13)

    def decode(self, text: str, options: ConversionOptions) -> str:
        return _rotate_letters(text, 13)


@register_codec
class CaesarCodec(SchemeCodec):
    """Caesar cipher; the shift comes from ConversionOptions.caesar_shift."""

    scheme = Scheme.CAESAR

    def encode(self, text: str, options: ConversionOptions) -> str:
        return _rotate_letters(text, options.caesar_shift)

    def decode(self, text: str, options: ConversionOptions) -> str:
        return _rotate_letters(text, -options.caesar_shift)


@register_codec
class UrlCodec(SchemeCodec):
    scheme = Scheme.URL
    _ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")

    @staticmethod
    def _decode_run(match) -> str:
        """Decode a run of %XX escapes; bytes that are not valid UTF-8 keep their escape text."""
        escaped = match.group(0)
        raw = bytes.fromhex(escaped.replace("%", ""))
        pieces = []
        start = 0
        while start < len(raw):
            try:
                pieces.append(raw[start:].decode("utf-8"))
                break
            except UnicodeDecodeError as e:
                bad_start, bad_end = start + e.start, start + e.end
                pieces.append(raw[start:bad_start].decode("utf-8"))
                # Each byte spans three characters of escape text
                pieces.append(escaped[bad_start * 3:bad_end * 3])
                start = bad_end
        return "".join(pieces)

    def encode(self, text: str, options: ConversionOptions) -> str:
        return quote(text, safe=URL_QUERY_SAFE)

    def decode(self, text: str, options: ConversionOptions) -> str:
        # Broken escapes such as "%zz" or "%FF" are left in place
        return self._ESCAPE_RUN.sub(self._decode_run, text)


@register_codec
class HtmlCodec(SchemeCodec):
    """
    Named HTML entities for a fixed set of characters.

    Decoding is a single left-to-right pass that prefers the longest entity
    at each position, so already-decoded text is never scanned twice.
    """

    scheme = Scheme.HTML
    _ENTITY_PATTERN = re.compile(
        "|".join(re.escape(entity) for entity in sorted(HTML_ENTITIES_REVERSE, key=len, reverse=True))
    )

    def encode(self, text: str, options: ConversionOptions) -> str:
        return "".join(HTML_ENTITIES.get(char, char) for char in text)

    def decode(self, text: str, options: ConversionOptions) -> str:
        return self._ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES_REVERSE[match.group(0)], text)

# ==========================================
#  ENCODE-ONLY SCHEMES
# ==========================================

@register_codec
class HexCodec(SchemeCodec):
    scheme = Scheme.HEX

    def encode(self, text: str, options: ConversionOptions) -> str:
        return " ".join(f"{ord(char):02X}" for char in text)


@register_codec
class LeetspeakCodec(SchemeCodec):
    scheme = Scheme.LEETSPEAK

    def encode(self, text: str, options: ConversionOptions) -> str:
        return "".join(LEETSPEAK_TABLE.get(char, char) for char in text)


@register_codec
class PigLatinCodec(SchemeCodec):
    """
    Word-based Pig Latin.

    Input is lower-cased and split on spaces; the consonant cluster before
    the first vowel moves to the end, followed by "ay". Not reversible
    without a dictionary.
    """

    scheme = Scheme.PIG_LATIN
    VOWELS = "aeiou"

    def _translate(self, word: str) -> str:
        for index, char in enumerate(word):
            if char in self.VOWELS:
                return word[index:] + word[:index] + "ay"
        return word + "ay"

    def encode(self, text: str, options: ConversionOptions) -> str:
        words = [word for word in text.lower().split(" ") if word]
        return " ".join(self._translate(word) for word in words)


@register_codec
class BrailleCodec(SchemeCodec):
    """Grade 1 Braille letters (U+2800 block); other characters pass through."""

    scheme = Scheme.BRAILLE

    def encode(self, text: str, options: ConversionOptions) -> str:
        return "".join(BRAILLE_TABLE.get(char, char) for char in text)


@register_codec
class AsciiArtCodec(SchemeCodec):
    """
    Block letters for A-E only.

    Every character, drawn or not, becomes its own piece and the pieces
    are stacked with newlines.
    """

    scheme = Scheme.ASCII_ART

    def encode(self, text: str, options: ConversionOptions) -> str:
        return "\n".join(ASCII_ART_GLYPHS.get(char.upper(), char) for char in text)


@register_codec
class UnicodeCodec(SchemeCodec):
    scheme = Scheme.UNICODE

    def encode(self, text: str, options: ConversionOptions) -> str:
        return " ".join(f"U+{ord(char):04X}" for char in text)


@register_codec
class NatoCodec(SchemeCodec):
    scheme = Scheme.NATO

    def encode(self, text: str, options: ConversionOptions) -> str:
        return " ".join(NATO_TABLE.get(_fold(char), _fold(char)) for char in text)


@register_codec
class EmojiCodec(SchemeCodec):
    scheme = Scheme.EMOJI

    def encode(self, text: str, options: ConversionOptions) -> str:
        return "".join(EMOJI_TABLE.get(_fold(char), _fold(char)) for char in text)
