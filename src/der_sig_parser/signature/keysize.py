from __future__ import annotations

from typing import Optional

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.model.models import TAG_OCTET_STRING, Element
from der_sig_parser.parser.tlv import BytesLike
from der_sig_parser.parser.walker import walk


def estimate_key_size(data: BytesLike, limits: DecodeLimits = DEFAULT_LIMITS) -> int:
    """
    Taille de clé estimée (bits) d'après le dernier élément du parcours.

    Heuristique : une structure de signature (SignerInfo PKCS#7 / Authenticode)
    se termine normalement par l'OCTET STRING de la signature, dont la taille
    est celle du module RSA. Si le dernier élément visité (toutes profondeurs
    confondues) n'est pas un OCTET STRING universel, on retourne 0. Ce n'est
    en aucun cas une information cryptographique fiable.
    """
    last: Optional[Element] = None

    def remember(element: Element) -> None:
        nonlocal last
        last = element

    walk(data, remember, limits=limits)
    if last is not None and last.is_universal(TAG_OCTET_STRING):
        return last.content_length * 8
    return 0
