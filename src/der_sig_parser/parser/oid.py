from __future__ import annotations

import logging
from typing import List

from der_sig_parser.exception.exceptions import MalformedOid
from der_sig_parser.parser.tlv import BytesLike, as_view

logger = logging.getLogger(__name__)


def decode_oid(content: BytesLike, strict: bool = False) -> str:
    """
    Décode le contenu DER d'un OBJECT IDENTIFIER en notation pointée.

    Contenu vide -> "". Si le dernier sous-identifiant ne se termine pas
    (bit de continuation sur le dernier octet), l'arc partiel est abandonné
    et on retourne les arcs déjà décodés ; `strict=True` lève MalformedOid.
    """
    try:
        return _decode_arcs(as_view(content))
    except MalformedOid as exc:
        if strict:
            raise
        logger.debug("%s (décodage partiel: %r)", exc, exc.partial)
        return exc.partial


def _decode_arcs(view: memoryview) -> str:
    if len(view) == 0:
        return ""

    arcs: List[int] = []
    value = 0
    pending = False
    for b in view:
        value = (value << 7) | (b & 0x7F)
        pending = True
        if b & 0x80 == 0:
            if not arcs:
                # 1er sous-identifiant = 40 * arc1 + arc2, arc1 dans {0, 1, 2} (X.690 8.19.4).
                # Il est lu en base 128 comme les autres, et non comme un seul octet
                # coupé en b // 40, b % 40 : 0x78 0x01 donne 2.40.1 et pas 3.0.1.
                first = min(value // 40, 2)
                arcs += [first, value - 40 * first]
            else:
                arcs.append(value)
            value = 0
            pending = False

    if pending:
        raise MalformedOid(
            "OBJECT IDENTIFIER tronqué: sous-identifiant non terminé",
            partial=".".join(str(a) for a in arcs),
        )
    return ".".join(str(a) for a in arcs)
