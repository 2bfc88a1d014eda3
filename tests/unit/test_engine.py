"""
Unit tests for engine dispatch and ConversionOptions.
"""

import pytest

from decoder_suite.engine import decode, encode, get_codec, transform
from decoder_suite.errors import InvalidOptionError, UnsupportedReverseConversion
from decoder_suite.models import ConversionOptions
from decoder_suite.registry import Scheme, all_schemes, supports_reverse


class TestConversionOptions:
    """Tests for option validation."""

    def test_defaults(self):
        options = ConversionOptions()
        assert options.reverse is False
        assert options.caesar_shift == 3

    @pytest.mark.parametrize("shift", [0, 26, -1, 100])
    def test_shift_out_of_range(self, shift):
        """Test that shifts outside [1, 25] raise InvalidOptionError."""
        with pytest.raises(InvalidOptionError, match="caesar_shift must be between 1 and 25"):
            ConversionOptions(caesar_shift=shift)

    def test_shift_must_be_integer(self):
        with pytest.raises(InvalidOptionError):
            ConversionOptions(caesar_shift=True)

    def test_boundaries_accepted(self):
        assert ConversionOptions(caesar_shift=1).caesar_shift == 1
        assert ConversionOptions(caesar_shift=25).caesar_shift == 25

    def test_clamped(self):
        assert ConversionOptions.clamped(caesar_shift=40).caesar_shift == 25
        assert ConversionOptions.clamped(caesar_shift=-3).caesar_shift == 1
        assert ConversionOptions.clamped(reverse=True, caesar_shift=7) == ConversionOptions(True, 7)


class TestTransform:
    """Tests for the transform entry point."""

    def test_default_options_encode(self):
        assert transform(Scheme.MORSE, "SOS") == "... --- ..."

    def test_reverse_flag_selects_decode(self):
        assert transform(Scheme.BASE64, "SGk=", ConversionOptions(reverse=True)) == "Hi"

    def test_decode_pig_latin_unsupported(self):
        """Test that decoding an encode-only scheme raises."""
        with pytest.raises(UnsupportedReverseConversion) as excinfo:
            decode(Scheme.PIG_LATIN, "ellohay")
        assert excinfo.value.scheme is Scheme.PIG_LATIN
        assert "Pig Latin does not support decoding" in str(excinfo.value)

    @pytest.mark.parametrize("scheme", [s for s in all_schemes() if not supports_reverse(s)])
    def test_every_encode_only_scheme_refuses_decode(self, scheme):
        with pytest.raises(UnsupportedReverseConversion):
            transform(scheme, "abc", ConversionOptions(reverse=True))

    def test_unsupported_reverse_checked_before_empty_input(self):
        with pytest.raises(UnsupportedReverseConversion):
            decode(Scheme.HEX, "")

    @pytest.mark.parametrize("scheme", list(Scheme))
    def test_empty_text_is_a_no_op(self, scheme):
        assert encode(scheme, "") == ""

    def test_encode_overrides_reverse_flag(self):
        options = ConversionOptions(reverse=True, caesar_shift=5)
        assert encode(Scheme.CAESAR, "abc", options) == "fgh"
        assert decode(Scheme.CAESAR, "fgh", ConversionOptions(caesar_shift=5)) == "abc"

    def test_get_codec(self):
        assert get_codec(Scheme.ROT13).scheme is Scheme.ROT13


class TestRoundTrips:
    """Decode(encode(x)) for reversible schemes on their supported characters."""

    @pytest.mark.parametrize("text", ["SOS", "HELLO WORLD", "CODE 42"])
    def test_morse(self, text):
        assert decode(Scheme.MORSE, encode(Scheme.MORSE, text)) == text

    @pytest.mark.parametrize("scheme", [Scheme.BINARY, Scheme.BASE64, Scheme.ROT13, Scheme.CAESAR, Scheme.URL, Scheme.HTML])
    @pytest.mark.parametrize("text", ["Hello, World!", "a < b & \"c\" > 'd'", "50% off: 3+4=7?"])
    def test_exact_inverse(self, scheme, text):
        options = ConversionOptions(caesar_shift=11)
        assert decode(scheme, encode(scheme, text, options), options) == text
