from __future__ import annotations

from typing import Optional


class DerSigError(Exception):
    """Erreur générique du parseur de signatures DER."""


# ---------------------------------------------------------------------------
# Décodage d'un en-tête TLV
class DerDecodeError(DerSigError):
    """Structure ASN.1 mal formée à une position donnée."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class TruncatedHeader(DerDecodeError):
    """Moins de 2 octets disponibles pour lire tag + longueur."""


class UnsupportedLongFormTag(DerDecodeError):
    """Numéro de tag en forme longue (0x1F) non supporté."""


class IndefiniteLengthUnsupported(DerDecodeError):
    """Longueur indéfinie (BER 0x80) non supportée."""


class TruncatedLength(DerDecodeError):
    """Octets de longueur annoncés mais absents."""


class LengthOverflow(DerDecodeError):
    """Longueur déclarée au-delà de 2**64 - 1."""


class TruncatedContent(DerDecodeError):
    """Contenu déclaré plus long que les octets disponibles."""


class MalformedOid(DerDecodeError):
    """OBJECT IDENTIFIER dont le dernier sous-identifiant ne se termine pas."""

    def __init__(self, message: str, partial: str = ""):
        super().__init__(message)
        self.partial = partial


# ---------------------------------------------------------------------------
# Parcours de l'arbre
class DerWalkError(DerSigError):
    """Limite de parcours atteinte dans une région."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class RecursionLimitExceeded(DerWalkError):
    """Imbrication au-delà de la profondeur maximale."""


class TooManyElements(DerWalkError):
    """Trop d'éléments frères dans une même région."""


# ---------------------------------------------------------------------------
# Recherche de signature / fichiers
class DerSignatureError(DerSigError):
    """Signature invalide ou introuvable."""


class NoSignatureFound(DerSignatureError):
    """Aucun candidat ne décode ET ne contient les 5 attributs requis."""


class DerFileError(DerSigError):
    """Fichier illisible ou inutilisable."""


class FileTooSmall(DerFileError):
    """Fichier trop petit pour contenir une structure ASN.1."""
