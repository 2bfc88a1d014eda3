"""
Codec Engine entry points.

transform() dispatches a scheme to its registered codec; encode() and
decode() are thin wrappers that pin the direction.
"""

from dataclasses import replace
from typing import Optional

from .errors import UnsupportedReverseConversion
from .models import ConversionOptions
from .registry import Scheme, supports_reverse
from .transforms import CODEC_REGISTRY, SchemeCodec


def get_codec(scheme: Scheme) -> SchemeCodec:
    return CODEC_REGISTRY[scheme]


def transform(scheme: Scheme, text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Run one scheme over text.

    Args:
        scheme: Scheme to apply
        text: Input text (may be empty)
        options: Direction and Caesar shift (default: encode, shift 3)

    Returns:
        The converted text

    Raises:
        UnsupportedReverseConversion: decode asked of an encode-only scheme
        MalformedEncodedInput: Base64 input could not be decoded
    """
    if options is None:
        options = ConversionOptions()

    if options.reverse and not supports_reverse(scheme):
        raise UnsupportedReverseConversion(scheme)

    if not text:
        return ""

    codec = get_codec(scheme)
    if options.reverse:
        return codec.decode(text, options)
    return codec.encode(text, options)


def encode(scheme: Scheme, text: str, options: Optional[ConversionOptions] = None) -> str:
    options = replace(options, reverse=False) if options else ConversionOptions()
    return transform(scheme, text, options)


def decode(scheme: Scheme, text: str, options: Optional[ConversionOptions] = None) -> str:
    options = replace(options, reverse=True) if options else ConversionOptions(reverse=True)
    return transform(scheme, text, options)
