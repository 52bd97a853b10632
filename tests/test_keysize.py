"""
Tests de l'heuristique de taille de clé (dernier OCTET STRING).
"""

from der_sig_parser.api import estimate_key_size


class TestEstimateKeySize:
    def test_sequence_of_256_byte_octet_string(self, tlv):
        data = tlv(0x30, tlv(0x04, b"\x00" * 256))
        assert estimate_key_size(data) == 2048

    def test_last_element_wins_regardless_of_depth(self, tlv):
        data = tlv(0x30, tlv(0x04, b"\x00" * 16) + tlv(0x30, tlv(0x30, tlv(0x04, b"\x00" * 512))))
        assert estimate_key_size(data) == 4096

    def test_last_element_not_octet_string(self, tlv):
        data = tlv(0x30, tlv(0x04, b"\x00" * 256) + tlv(0x02, b"\x01"))
        assert estimate_key_size(data) == 0

    def test_octet_string_followed_by_deeper_element(self, tlv):
        data = tlv(0x30, tlv(0x04, b"\x00" * 256) + tlv(0x30, tlv(0x05)))
        assert estimate_key_size(data) == 0

    def test_context_tag_four_is_not_an_octet_string(self, tlv):
        data = tlv(0x30, tlv(0x84, b"\x00" * 256))
        assert estimate_key_size(data) == 0

    def test_empty_and_malformed(self):
        assert estimate_key_size(b"") == 0
        assert estimate_key_size(b"\x30\x82\xFF\xFF") == 0

    def test_pkcs7_signature(self, pkcs7_signature):
        assert estimate_key_size(pkcs7_signature) == 2048

    def test_signature_block(self, signature_block):
        assert estimate_key_size(signature_block) == 2048
