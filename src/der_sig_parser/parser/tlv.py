from __future__ import annotations

from typing import Tuple, Union

from der_sig_parser.config import MAX_CONTENT_LENGTH
from der_sig_parser.exception.exceptions import (
    IndefiniteLengthUnsupported,
    LengthOverflow,
    TruncatedContent,
    TruncatedHeader,
    TruncatedLength,
    UnsupportedLongFormTag,
)
from der_sig_parser.model.models import TAG_LONG_FORM, Element, TagClass

BytesLike = Union[bytes, bytearray, memoryview]


def as_view(data) -> memoryview:
    """Vue octet par octet sur n'importe quel buffer (bytes, bytearray, mmap…)."""
    view = data if isinstance(data, memoryview) else memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


# ---------------------------------------------------------------------------
# Décodage d'un en-tête TLV (tag court + longueur courte/longue)
def decode_element(window: BytesLike, depth: int = 0, offset: int = 0) -> Tuple[Element, int]:
    """
    Décode exactement un élément TLV au début de `window`.

    `offset` est la position absolue de `window[0]` dans le buffer d'origine ;
    elle n'est utilisée que pour renseigner l'élément et les erreurs.

    Retourne (élément, octets consommés = en-tête + contenu).
    """
    view = as_view(window)
    n = len(view)
    if n < 2:
        raise TruncatedHeader(
            f"En-tête tronqué à l'offset {offset}: {n} octet(s) disponible(s)", offset
        )

    tag_byte = view[0]
    tag_class = TagClass((tag_byte & 0xC0) >> 6)
    constructed = bool(tag_byte & 0x20)
    tag_number = tag_byte & 0x1F
    if tag_number == TAG_LONG_FORM:
        raise UnsupportedLongFormTag(
            f"Tag en forme longue non supporté à l'offset {offset} (0x{tag_byte:02X})",
            offset,
        )

    length_byte = view[1]
    header_length = 2
    if length_byte & 0x80 == 0:
        # forme courte
        content_length = length_byte
    else:
        count = length_byte & 0x7F
        if count == 0:
            raise IndefiniteLengthUnsupported(
                f"Longueur indéfinie non supportée à l'offset {offset}", offset
            )
        if n < header_length + count:
            raise TruncatedLength(
                f"Longueur tronquée à l'offset {offset}: {count} octet(s) annoncé(s), "
                f"{n - header_length} disponible(s)",
                offset,
            )
        content_length = 0
        for b in view[header_length : header_length + count]:
            content_length = (content_length << 8) | b
            if content_length > MAX_CONTENT_LENGTH:
                raise LengthOverflow(
                    f"Longueur hors limites à l'offset {offset} ({count} octets de longueur)",
                    offset,
                )
        header_length += count

    if content_length > n - header_length:
        raise TruncatedContent(
            f"Contenu tronqué à l'offset {offset}: {content_length} octet(s) déclaré(s), "
            f"{n - header_length} disponible(s)",
            offset,
        )

    total = header_length + content_length
    element = Element(
        tag_class=tag_class,
        tag_number=tag_number,
        constructed=constructed,
        depth=depth,
        offset=offset,
        header_length=header_length,
        content_length=content_length,
        raw_content=view[header_length:total],
    )
    return element, total
