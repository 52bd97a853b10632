"""
Fixtures communes : encodeur TLV minimal et certificats / signatures PKCS#7
générés à la volée avec `cryptography`.
"""

import datetime as dt

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import Encoding, pkcs7
from cryptography.x509.oid import NameOID

OID_CN = bytes([0x55, 0x04, 0x03])
OID_C = bytes([0x55, 0x04, 0x06])
OID_L = bytes([0x55, 0x04, 0x07])
OID_O = bytes([0x55, 0x04, 0x0A])
OID_EMAIL = bytes([0x2A, 0x86, 0x48, 0x86, 0xF7, 0x0D, 0x01, 0x09, 0x01])


def encode_tlv(tag: int, content: bytes = b"", long2: bool = False) -> bytes:
    """Encode un TLV (longueur minimale, ou forcée sur 0x82 + 2 octets)."""
    n = len(content)
    if long2:
        return bytes([tag, 0x82]) + n.to_bytes(2, "big") + content
    if n < 0x80:
        return bytes([tag, n]) + content
    size = n.to_bytes((n.bit_length() + 7) // 8, "big")
    return bytes([tag, 0x80 | len(size)]) + size + content


def encode_rdn(oid: bytes, value: str, tag: int = 0x0C) -> bytes:
    # SET { SEQUENCE { OID, valeur } }
    return encode_tlv(0x31, encode_tlv(0x30, encode_tlv(0x06, oid) + encode_tlv(tag, value.encode())))


@pytest.fixture
def tlv():
    return encode_tlv


@pytest.fixture
def rdn():
    return encode_rdn


@pytest.fixture
def signer_name_der() -> bytes:
    """Name X.501 portant les 5 attributs attendus (SEQUENCE courte)."""
    return encode_tlv(
        0x30,
        encode_rdn(OID_C, "FR", tag=0x13)
        + encode_rdn(OID_L, "Paris")
        + encode_rdn(OID_O, "Test Org")
        + encode_rdn(OID_CN, "Test CA")
        + encode_rdn(OID_EMAIL, "test@example.com", tag=0x16),
    )


@pytest.fixture
def signature_block(signer_name_der) -> bytes:
    """SEQUENCE 0x30 0x82 : Name complet + OCTET STRING de 256 octets."""
    return encode_tlv(0x30, signer_name_der + encode_tlv(0x04, b"\xAB" * 256), long2=True)


@pytest.fixture(scope="session")
def signer():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "FR"),
            x509.NameAttribute(NameOID.LOCALITY_NAME, "Paris"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Test Org"),
            x509.NameAttribute(NameOID.COMMON_NAME, "Test Signer"),
            x509.NameAttribute(NameOID.EMAIL_ADDRESS, "signer@example.com"),
        ]
    )
    now = dt.datetime.now(dt.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - dt.timedelta(days=1))
        .not_valid_after(now + dt.timedelta(days=30))
        .sign(key, hashes.SHA256())
    )
    return key, cert


@pytest.fixture(scope="session")
def pkcs7_signature(signer) -> bytes:
    """Signature PKCS#7 détachée, sans attributs signés : finit par l'OCTET STRING."""
    key, cert = signer
    return (
        pkcs7.PKCS7SignatureBuilder()
        .set_data(b"contenu de l'image signee")
        .add_signer(cert, key, hashes.SHA256())
        .sign(
            Encoding.DER,
            [pkcs7.PKCS7Options.DetachedSignature, pkcs7.PKCS7Options.NoAttributes],
        )
    )
