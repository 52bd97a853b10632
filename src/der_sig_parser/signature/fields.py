from __future__ import annotations

import logging
from typing import Dict, Optional

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.model.models import TAG_OBJECT_ID, Element, ValidationResult
from der_sig_parser.parser.helper import decode_text
from der_sig_parser.parser.oid import decode_oid
from der_sig_parser.parser.tlv import BytesLike
from der_sig_parser.parser.walker import walk
from der_sig_parser.registry.oids import (
    OID_COMMON_NAME,
    OID_COUNTRY_NAME,
    OID_EMAIL_ADDRESS,
    OID_LOCALITY_NAME,
    OID_ORGANIZATION_NAME,
)

logger = logging.getLogger(__name__)

# OID d'attribut -> nom du champ de ValidationResult
CERTIFICATE_ATTRIBUTES: Dict[str, str] = {
    OID_COMMON_NAME: "common_name",
    OID_COUNTRY_NAME: "country_name",
    OID_LOCALITY_NAME: "locality_name",
    OID_ORGANIZATION_NAME: "organization_name",
    OID_EMAIL_ADDRESS: "email_address",
}


class FieldExtractor:
    """
    Visiteur qui repère les OID d'attributs de DN et capture la valeur de
    l'élément frère qui suit immédiatement chaque OID.

    L'accumulateur n'appartient qu'à une seule instance / un seul parcours ;
    le résultat est figé en ValidationResult par `result()`.
    """

    def __init__(self):
        self._values: Dict[str, str] = {}
        self._pending: Optional[Element] = None
        self._pending_field: Optional[str] = None

    def __call__(self, element: Element) -> None:
        pending, attr = self._pending, self._pending_field
        self._pending = self._pending_field = None

        if pending is not None and self._is_value_of(pending, element):
            value = decode_text(element.tag_number, element.raw_content)
            # la dernière occurrence rencontrée l'emporte
            self._values[attr] = value
            logger.debug("%s = %r (offset %d)", attr, value, element.offset)

        if element.is_universal(TAG_OBJECT_ID) and not element.constructed and element.content_length > 0:
            attr = CERTIFICATE_ATTRIBUTES.get(decode_oid(element.raw_content))
            if attr is not None:
                self._pending, self._pending_field = element, attr

    @staticmethod
    def _is_value_of(oid: Element, candidate: Element) -> bool:
        # frère immédiat : même profondeur, commence là où l'OID se termine
        return (
            candidate.depth == oid.depth
            and candidate.offset == oid.end
            and not candidate.constructed
            and candidate.content_length > 0
        )

    def result(self) -> ValidationResult:
        kwargs = {}
        for attr, value in self._values.items():
            kwargs[attr] = value
            kwargs[f"has_{attr}"] = True
        return ValidationResult(**kwargs)


def extract_fields(data: BytesLike, limits: DecodeLimits = DEFAULT_LIMITS) -> ValidationResult:
    """
    Parcourt `data` et retourne les attributs trouvés. Ne lève jamais : une
    région mal formée est simplement ignorée, l'absence d'un attribut se lit
    dans les booléens `has_*`.
    """
    extractor = FieldExtractor()
    walk(data, extractor, limits=limits)
    return extractor.result()
