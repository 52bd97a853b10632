"""
Tests unitaires du décodage d'un en-tête TLV.
"""

import pytest

from der_sig_parser.api import decode_element
from der_sig_parser.exception.exceptions import (
    DerDecodeError,
    IndefiniteLengthUnsupported,
    LengthOverflow,
    TruncatedContent,
    TruncatedHeader,
    TruncatedLength,
    UnsupportedLongFormTag,
)
from der_sig_parser.model.models import TAG_INTEGER, TAG_SEQUENCE, TagClass


class TestDecodeElement:
    """Décodage d'un seul élément."""

    def test_short_form_sequence(self):
        element, consumed = decode_element(bytes([0x30, 0x05, 0x01, 0x02, 0x03, 0x04, 0x05]))

        assert element.tag_number == TAG_SEQUENCE
        assert element.tag_class == TagClass.UNIVERSAL
        assert element.constructed is True
        assert element.header_length == 2
        assert element.content_length == 5
        assert consumed == 7

    def test_integer(self):
        element, consumed = decode_element(bytes([0x02, 0x01, 0xFF]))

        assert element.tag_number == TAG_INTEGER
        assert element.constructed is False
        assert bytes(element.raw_content) == b"\xFF"
        assert consumed == 3

    def test_two_byte_long_form(self, tlv):
        data = tlv(0x04, b"\x11" * 300)
        element, consumed = decode_element(data)

        assert data[:4] == b"\x04\x82\x01\x2C"
        assert element.header_length == 4
        assert element.content_length == 300
        assert consumed == len(data)

    def test_offset_and_depth_are_recorded(self):
        element, _ = decode_element(bytes([0x05, 0x00]), depth=3, offset=1234)

        assert element.depth == 3
        assert element.offset == 1234
        assert element.end == 1236

    @pytest.mark.parametrize(
        "byte, tag_class, constructed, number",
        [
            (0x60, TagClass.APPLICATION, True, 0),
            (0xA3, TagClass.CONTEXT, True, 3),
            (0x81, TagClass.CONTEXT, False, 1),
            (0xC2, TagClass.PRIVATE, False, 2),
        ],
    )
    def test_tag_classes(self, byte, tag_class, constructed, number):
        element, _ = decode_element(bytes([byte, 0x00]))

        assert element.tag_class == tag_class
        assert element.constructed is constructed
        assert element.tag_number == number

    def test_raw_content_is_a_view_on_the_input(self):
        data = bytearray([0x04, 0x03, 0x01, 0x02, 0x03])
        element, _ = decode_element(data)

        assert isinstance(element.raw_content, memoryview)
        data[2] = 0x09
        assert element.raw_content[0] == 0x09

    def test_trailing_bytes_are_not_consumed(self):
        element, consumed = decode_element(bytes([0x02, 0x01, 0x2A, 0xFF, 0xFF]))

        assert consumed == 3
        assert bytes(element.raw_content) == b"\x2A"


class TestDecodeElementErrors:
    """Chaque défaut d'en-tête se traduit par une erreur typée, jamais un crash."""

    @pytest.mark.parametrize("data", [b"", b"\x30"])
    def test_truncated_header(self, data):
        with pytest.raises(TruncatedHeader):
            decode_element(data)

    def test_long_form_tag(self):
        with pytest.raises(UnsupportedLongFormTag):
            decode_element(bytes([0x1F, 0x81, 0x00]))

    def test_indefinite_length(self):
        with pytest.raises(IndefiniteLengthUnsupported):
            decode_element(bytes([0x30, 0x80, 0x00, 0x00]))

    def test_truncated_length(self):
        with pytest.raises(TruncatedLength):
            decode_element(bytes([0x30, 0x82, 0x01]))

    def test_length_overflow(self):
        data = bytes([0x04, 0x89]) + b"\xFF" * 9
        with pytest.raises(LengthOverflow):
            decode_element(data)

    def test_eight_octet_length_is_not_an_overflow(self):
        data = bytes([0x04, 0x88]) + b"\xFF" * 8
        with pytest.raises(TruncatedContent):
            decode_element(data)

    @pytest.mark.parametrize(
        "data",
        [
            bytes([0x30, 0xFF]),
            bytes([0x30, 0x82, 0xFF, 0xFF, 0xFF]),
            bytes([0x30, 0x05, 0x01]),
        ],
    )
    def test_truncated_content(self, data):
        with pytest.raises(DerDecodeError):
            decode_element(data)

    def test_error_carries_offset(self):
        with pytest.raises(TruncatedContent) as info:
            decode_element(bytes([0x04, 0x10, 0x00]), offset=77)

        assert info.value.offset == 77


class TestRoundTrip:
    """L'étendue décodée correspond exactement à l'étendue encodée."""

    @pytest.mark.parametrize("size", [0, 1, 127, 128, 255, 256, 4000])
    def test_span_matches_encoding(self, tlv, size):
        payload = bytes(i % 251 for i in range(size))
        prefix = b"\x00\x01\x02"
        encoded = tlv(0x04, payload)
        buffer = prefix + encoded + b"\xEE\xEE"

        element, consumed = decode_element(memoryview(buffer)[len(prefix):], offset=len(prefix))

        assert consumed == len(encoded)
        start = element.offset + element.header_length
        assert buffer[start : start + element.content_length] == bytes(element.raw_content) == payload

    def test_every_truncation_is_reported(self, tlv):
        encoded = tlv(0x30, tlv(0x02, b"\x01") + tlv(0x04, b"\x00" * 200))
        for cut in range(len(encoded)):
            with pytest.raises(DerDecodeError):
                decode_element(encoded[:cut])
