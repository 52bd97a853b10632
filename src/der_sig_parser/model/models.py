from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

# Numéros de tags universels utilisés par le décodeur / formateur
TAG_BOOLEAN = 1
TAG_INTEGER = 2
TAG_BIT_STRING = 3
TAG_OCTET_STRING = 4
TAG_NULL = 5
TAG_OBJECT_ID = 6
TAG_REAL = 9
TAG_ENUMERATED = 10
TAG_UTF8_STRING = 12
TAG_SEQUENCE = 16
TAG_SET = 17
TAG_NUMERIC_STRING = 18
TAG_PRINTABLE_STRING = 19
TAG_T61_STRING = 20
TAG_IA5_STRING = 22
TAG_UTC_TIME = 23
TAG_GENERALIZED_TIME = 24
TAG_VISIBLE_STRING = 26
TAG_UNIVERSAL_STRING = 28
TAG_BMP_STRING = 30

# Valeur réservée : numéro de tag en forme longue
TAG_LONG_FORM = 31


class TagClass(IntEnum):
    UNIVERSAL = 0
    APPLICATION = 1
    CONTEXT = 2
    PRIVATE = 3


@dataclass(frozen=True)
class Element:
    """
    Unité TLV décodée.

    `raw_content` est une vue (memoryview) sur le buffer d'origine : aucune
    copie n'est faite, quelle que soit la taille du fichier.
    """

    tag_class: TagClass
    tag_number: int
    constructed: bool
    depth: int
    offset: int  # position absolue de l'octet de tag
    header_length: int
    content_length: int
    raw_content: memoryview = field(repr=False, compare=False)

    @property
    def total_length(self) -> int:
        return self.header_length + self.content_length

    @property
    def end(self) -> int:
        return self.offset + self.total_length

    def is_universal(self, tag_number: int) -> bool:
        return self.tag_class == TagClass.UNIVERSAL and self.tag_number == tag_number


@dataclass(frozen=True)
class ValidationResult:
    """Présence (et valeur) des 5 attributs de DN attendus d'un signataire."""

    has_common_name: bool = False
    has_country_name: bool = False
    has_locality_name: bool = False
    has_organization_name: bool = False
    has_email_address: bool = False
    common_name: str = ""
    country_name: str = ""
    locality_name: str = ""
    organization_name: str = ""
    email_address: str = ""

    @property
    def is_valid(self) -> bool:
        return (
            self.has_common_name
            and self.has_country_name
            and self.has_locality_name
            and self.has_organization_name
            and self.has_email_address
        )


@dataclass(frozen=True)
class SignatureMatch:
    offset: int
    full_bytes: memoryview = field(repr=False, compare=False)
    validation: ValidationResult

    @property
    def size(self) -> int:
        return len(self.full_bytes)


@dataclass(frozen=True)
class WalkFailure:
    """Arrêt du décodage d'une région (les éléments déjà visités restent valides)."""

    depth: int
    offset: int  # position absolue où le décodage s'est arrêté
    error: Exception
    remainder: memoryview = field(repr=False, compare=False)


@dataclass
class WalkResult:
    elements_visited: int = 0
    failures: List[WalkFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures
