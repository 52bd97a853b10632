from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.exception.exceptions import (
    DerDecodeError,
    RecursionLimitExceeded,
    TooManyElements,
)
from der_sig_parser.model.models import Element, WalkFailure, WalkResult
from der_sig_parser.parser.tlv import BytesLike, as_view, decode_element

logger = logging.getLogger(__name__)

Visitor = Callable[[Element], None]


def walk(
    data: BytesLike,
    visitor: Visitor,
    depth: int = 0,
    base_offset: int = 0,
    limits: DecodeLimits = DEFAULT_LIMITS,
) -> WalkResult:
    """
    Parcours en profondeur, dans l'ordre du document, d'une région d'octets.

    `visitor` est appelé pour chaque élément, avant ses enfants. Une erreur de
    décodage arrête la région courante seulement : elle est consignée dans le
    WalkResult retourné, jamais levée. Les régions englobantes continuent.
    """
    result = WalkResult()
    _walk_region(as_view(data), visitor, depth, base_offset, limits, result)
    return result


def _walk_region(
    region: memoryview,
    visitor: Visitor,
    depth: int,
    base_offset: int,
    limits: DecodeLimits,
    result: WalkResult,
) -> None:
    pos = 0
    count = 0
    n = len(region)

    while pos < n:
        absolute = base_offset + pos
        if count >= limits.max_elements:
            _fail(
                result,
                depth,
                absolute,
                region[pos:],
                TooManyElements(
                    f"Plus de {limits.max_elements} éléments dans la région "
                    f"commençant à l'offset {base_offset}",
                    absolute,
                ),
            )
            return

        try:
            element, consumed = decode_element(region[pos:], depth, absolute)
        except DerDecodeError as exc:
            # sans traceback : pas de cycle qui retiendrait des vues sur le buffer
            _fail(result, depth, absolute, region[pos:], exc.with_traceback(None))
            return

        if element.constructed and depth >= limits.max_depth:
            _fail(
                result,
                depth,
                absolute,
                region[pos:],
                RecursionLimitExceeded(
                    f"Profondeur maximale {limits.max_depth} atteinte à l'offset {absolute}",
                    absolute,
                ),
            )
            return

        count += 1
        result.elements_visited += 1
        visitor(element)

        # raw_content est déjà borné par decode_element à la fenêtre du parent
        if element.constructed and element.content_length > 0:
            _walk_region(
                element.raw_content,
                visitor,
                depth + 1,
                absolute + element.header_length,
                limits,
                result,
            )

        pos += consumed


def _fail(result: WalkResult, depth: int, offset: int, remainder: memoryview, exc: Exception) -> None:
    logger.debug("Région abandonnée (profondeur %d, offset %d): %s", depth, offset, exc)
    result.failures.append(WalkFailure(depth=depth, offset=offset, error=exc, remainder=remainder))


def iter_elements(
    data: BytesLike,
    base_offset: int = 0,
    limits: DecodeLimits = DEFAULT_LIMITS,
) -> Tuple[List[Element], WalkResult]:
    """Variante pratique : collecte tous les éléments dans l'ordre du document."""
    elements: List[Element] = []
    result = walk(data, elements.append, base_offset=base_offset, limits=limits)
    return elements, result
