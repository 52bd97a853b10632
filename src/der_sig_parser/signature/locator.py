from __future__ import annotations

import logging
from typing import Iterator, Optional

from der_sig_parser.config import DEFAULT_LIMITS, SEQUENCE_MARKER, DecodeLimits
from der_sig_parser.exception.exceptions import DerDecodeError, NoSignatureFound
from der_sig_parser.model.models import Element, SignatureMatch
from der_sig_parser.parser.tlv import as_view, decode_element
from der_sig_parser.parser.walker import walk
from der_sig_parser.signature.fields import extract_fields

logger = logging.getLogger(__name__)


def _iter_candidates(buffer, marker: bytes, stop: Optional[int] = None) -> Iterator[int]:
    """
    Offsets du marqueur, du plus à droite au plus à gauche, tous < `stop`.

    bytes / bytearray / mmap exposent `rfind` : recherche native sans copie.
    Pour une simple memoryview, on balaye octet par octet.
    """
    width = len(marker)
    finder = getattr(buffer, "rfind", None)

    if finder is None:
        view = as_view(buffer)
        last = len(view) - width if stop is None else min(len(view) - width, stop - 1)
        for i in range(last, -1, -1):
            if view[i : i + width] == marker:
                yield i
        return

    end = len(buffer) if stop is None else min(len(buffer), stop + width - 1)
    while end >= width:
        i = finder(marker, 0, end)
        if i < 0:
            return
        yield i
        # prochain candidat : commence au plus tard en i - 1
        end = i + width - 1


def locate_signature(
    buffer,
    marker: bytes = SEQUENCE_MARKER,
    limits: DecodeLimits = DEFAULT_LIMITS,
) -> SignatureMatch:
    """
    Recherche à rebours une structure ASN.1 de signature dans `buffer`.

    Chaque occurrence du marqueur (SEQUENCE + longueur longue sur 2 octets)
    est décodée ; le candidat n'est retenu que si la structure décode ET
    contient les 5 attributs de DN attendus. Le premier candidat retenu en
    partant de la fin (donc le plus à droite) gagne : c'est une heuristique,
    pas une garantie d'avoir « la » signature si plusieurs blocs plausibles
    se recouvrent.

    Lève NoSignatureFound si aucun candidat ne convient.
    """
    view = as_view(buffer)
    tried = 0

    for i in _iter_candidates(buffer, marker):
        tried += 1
        try:
            _, consumed = decode_element(view[i:], 0, i)
        except DerDecodeError as exc:
            logger.debug("Candidat %d rejeté: %s", i, exc)
            continue

        full_bytes = view[i : i + consumed]
        validation = extract_fields(full_bytes, limits=limits)
        if not validation.is_valid:
            logger.debug("Candidat %d rejeté: attributs de DN incomplets", i)
            continue

        logger.info("Signature trouvée à l'offset %d (%d octets, %d candidat(s) examiné(s))", i, consumed, tried)
        return SignatureMatch(offset=i, full_bytes=full_bytes, validation=validation)

    raise NoSignatureFound(f"Aucune signature valide trouvée ({tried} candidat(s) examiné(s))")


def enclosing_block(
    buffer,
    match: SignatureMatch,
    marker: bytes = SEQUENCE_MARKER,
    limits: DecodeLimits = DEFAULT_LIMITS,
) -> memoryview:
    """
    Bloc englobant le plus externe de `match` (ContentInfo PKCS#7 typiquement).

    Le candidat retenu par locate_signature est souvent le SignerInfo, qui ne
    porte que l'émetteur et le numéro de série : les certificats sont dans
    le SignedData autour. On poursuit donc la recherche du marqueur à gauche
    de `match.offset` et on garde le candidat le plus à gauche qui décode,
    couvre toute la plage de `match` et dont l'arbre atteint `match` comme
    élément. À défaut, retourne `match.full_bytes`.
    """
    view = as_view(buffer)
    block = match.full_bytes
    match_end = match.offset + match.size

    for i in _iter_candidates(buffer, marker, stop=match.offset):
        try:
            _, consumed = decode_element(view[i:], 0, i)
        except DerDecodeError:
            continue
        if i + consumed < match_end:
            continue

        candidate = view[i : i + consumed]
        if _reaches(candidate, i, match, limits):
            block = candidate
            logger.debug("Bloc englobant à l'offset %d (%d octets)", i, consumed)
    return block


def _reaches(block: memoryview, base_offset: int, match: SignatureMatch, limits: DecodeLimits) -> bool:
    found = False

    def visit(element: Element) -> None:
        nonlocal found
        if element.offset == match.offset and element.total_length == match.size:
            found = True

    walk(block, visit, base_offset=base_offset, limits=limits)
    return found
