"""
Tests de l'extraction des attributs de DN (commonName, countryName, …).
"""

import pytest

from der_sig_parser.api import extract_fields
from der_sig_parser.model.models import ValidationResult

OID_CN = bytes([0x55, 0x04, 0x03])
OID_C = bytes([0x55, 0x04, 0x06])
OID_L = bytes([0x55, 0x04, 0x07])
OID_O = bytes([0x55, 0x04, 0x0A])
OID_EMAIL = bytes([0x2A, 0x86, 0x48, 0x86, 0xF7, 0x0D, 0x01, 0x09, 0x01])


class TestValidationResult:
    def test_complete(self):
        v = ValidationResult(
            has_common_name=True,
            has_country_name=True,
            has_locality_name=True,
            has_organization_name=True,
            has_email_address=True,
            common_name="Test CA",
            country_name="US",
            locality_name="Test City",
            organization_name="Test Org",
            email_address="test@example.com",
        )
        assert v.is_valid

    def test_incomplete(self):
        assert not ValidationResult(has_common_name=True, common_name="Test CA").is_valid
        assert not ValidationResult().is_valid


class TestExtractFields:
    def test_full_name(self, signer_name_der):
        v = extract_fields(signer_name_der)

        assert v.is_valid
        assert v.common_name == "Test CA"
        assert v.country_name == "FR"
        assert v.locality_name == "Paris"
        assert v.organization_name == "Test Org"
        assert v.email_address == "test@example.com"

    @pytest.mark.parametrize(
        "oid, attr, value",
        [
            (OID_CN, "common_name", "Test CA"),
            (OID_C, "country_name", "US"),
            (OID_EMAIL, "email_address", "test@example.com"),
        ],
    )
    def test_single_attribute(self, rdn, oid, attr, value):
        v = extract_fields(rdn(oid, value))

        assert getattr(v, f"has_{attr}") is True
        assert getattr(v, attr) == value
        assert not v.is_valid

    def test_order_and_depth_do_not_matter(self, tlv, rdn):
        data = tlv(
            0x30,
            rdn(OID_EMAIL, "a@b.c", tag=0x16)
            + tlv(0xA0, tlv(0x30, rdn(OID_O, "Org") + tlv(0x30, rdn(OID_L, "Lyon"))))
            + rdn(OID_CN, "CN")
            + tlv(0x31, tlv(0x31, rdn(OID_C, "FR"))),
        )
        v = extract_fields(data)

        assert v.is_valid
        assert (v.common_name, v.country_name, v.locality_name) == ("CN", "FR", "Lyon")

    def test_last_occurrence_wins(self, tlv, rdn):
        data = tlv(0x30, rdn(OID_CN, "premier") + tlv(0x30, rdn(OID_CN, "second")))
        assert extract_fields(data).common_name == "second"

    def test_value_must_be_the_following_sibling(self, tlv):
        # OID dernier de sa SEQUENCE : l'élément suivant est hors de la région
        data = tlv(0x30, tlv(0x30, tlv(0x06, OID_CN)) + tlv(0x0C, b"pas un frere"))
        assert not extract_fields(data).has_common_name

    def test_constructed_value_is_ignored(self, tlv):
        data = tlv(0x30, tlv(0x06, OID_CN) + tlv(0x30, tlv(0x0C, b"imbrique")))
        assert not extract_fields(data).has_common_name

    def test_empty_value_is_ignored(self, tlv):
        data = tlv(0x30, tlv(0x06, OID_CN) + tlv(0x0C, b""))
        assert not extract_fields(data).has_common_name

    def test_unmatched_oids_are_ignored(self, tlv):
        data = tlv(0x30, tlv(0x06, bytes([0x55, 0x04, 0x0B])) + tlv(0x0C, b"OU"))
        assert extract_fields(data) == ValidationResult()

    def test_bmp_string_value(self, tlv):
        data = tlv(0x30, tlv(0x06, OID_CN) + tlv(0x1E, "Société".encode("utf-16-be")))
        assert extract_fields(data).common_name == "Société"

    def test_undecodable_sibling_is_ignored(self, tlv):
        data = tlv(0x30, tlv(0x06, OID_CN) + bytes([0x0C, 0x20, 0x41]))
        assert not extract_fields(data).has_common_name

    @pytest.mark.parametrize("data", [b"", b"\x30", b"\x30\xFF", b"\x30\x82\xFF\xFF\xFF", b"\xFF\xFF"])
    def test_malformed_input_never_raises(self, data):
        assert not extract_fields(data).is_valid

    def test_values_found_before_a_broken_region_are_kept(self, tlv, rdn):
        data = tlv(0x30, rdn(OID_CN, "garde") + bytes([0x30, 0x10, 0x00]))
        assert extract_fields(data).common_name == "garde"
