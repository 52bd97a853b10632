import logging

from cryptography import x509
from cryptography.hazmat.primitives import hashes

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.model.models import TAG_SEQUENCE, Element
from der_sig_parser.parser.tlv import BytesLike, as_view
from der_sig_parser.parser.walker import walk

logger = logging.getLogger(__name__)


def carve_certificates(data: BytesLike, limits: DecodeLimits = DEFAULT_LIMITS) -> list[x509.Certificate]:
    """
    Extrait les certificats X.509 contenus dans un bloc de signature DER.

    Chaque SEQUENCE codée avec une longueur longue sur 2 octets (0x30 0x82,
    taille typique d'un certificat) est proposée au chargeur DER de
    `cryptography`. Déduplique via fingerprint SHA-256. Aucune vérification
    de chaîne ni de signature n'est faite ici.
    """
    view = as_view(data)
    candidates: list[Element] = []

    def collect(element: Element) -> None:
        if element.is_universal(TAG_SEQUENCE) and element.constructed and element.header_length == 4:
            candidates.append(element)

    walk(view, collect, limits=limits)

    out: list[x509.Certificate] = []
    seen: set[bytes] = set()
    for element in candidates:
        chunk = bytes(view[element.offset : element.end])
        try:
            cert = x509.load_der_x509_certificate(chunk)
        except ValueError as exc:
            # faux positif (SignedData, SignerInfo, TBSCertificate…)
            logger.debug("Offset %d: pas un certificat (%s)", element.offset, exc)
            continue
        fp = cert.fingerprint(hashes.SHA256())
        if fp not in seen:
            out.append(cert)
            seen.add(fp)
    return out
