from __future__ import annotations

from typing import List, Optional

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from pydantic import BaseModel, Field

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.crypto.helper import carve_certificates
from der_sig_parser.model.models import SignatureMatch
from der_sig_parser.parser.tlv import BytesLike
from der_sig_parser.signature.keysize import estimate_key_size


class CertificateSummary(BaseModel):
    """Résumé d'un certificat extrait du bloc de signature (affichage seul)."""

    subject: str
    issuer: str
    serial_number: str = Field(examples=["5A3F09"])
    public_key_bits: Optional[int] = None

    @classmethod
    def from_certificate(cls, cert: x509.Certificate) -> "CertificateSummary":
        try:
            bits = getattr(cert.public_key(), "key_size", None)
        except UnsupportedAlgorithm:
            bits = None
        return cls(
            subject=cert.subject.rfc4514_string(),
            issuer=cert.issuer.rfc4514_string(),
            serial_number=f"{cert.serial_number:X}",
            public_key_bits=bits,
        )


class SignatureReport(BaseModel):
    """
    Modèle typé du résultat d'analyse d'un fichier signé.
    """

    offset: int
    size: int
    valid: bool
    common_name: Optional[str] = None  # 2.5.4.3
    country_name: Optional[str] = None  # 2.5.4.6
    locality_name: Optional[str] = None  # 2.5.4.7
    organization_name: Optional[str] = None  # 2.5.4.10
    email_address: Optional[str] = None  # 1.2.840.113549.1.9.1
    key_size: int = Field(
        0,
        description="Taille estimée d'après l'OCTET STRING final (0 si indéterminée)",
        examples=[2048],
    )
    certificates: List[CertificateSummary] = Field(default_factory=list)

    # -------------------------
    # Construction depuis SignatureMatch
    @classmethod
    def from_match(
        cls,
        match: SignatureMatch,
        limits: DecodeLimits = DEFAULT_LIMITS,
        carve_from: Optional[BytesLike] = None,
    ) -> "SignatureReport":
        """
        `carve_from` : bloc où chercher les certificats (par défaut le bloc
        retenu lui-même, voir locator.enclosing_block).
        """
        v = match.validation
        block = match.full_bytes if carve_from is None else carve_from
        return cls(
            offset=match.offset,
            size=match.size,
            valid=v.is_valid,
            common_name=v.common_name if v.has_common_name else None,
            country_name=v.country_name if v.has_country_name else None,
            locality_name=v.locality_name if v.has_locality_name else None,
            organization_name=v.organization_name if v.has_organization_name else None,
            email_address=v.email_address if v.has_email_address else None,
            key_size=estimate_key_size(match.full_bytes, limits=limits),
            certificates=[
                CertificateSummary.from_certificate(c)
                for c in carve_certificates(block, limits=limits)
            ],
        )
