from __future__ import annotations

from dataclasses import dataclass

# Bornes de parcours (défense contre les structures forgées)
MAX_RECURSION_DEPTH = 50
MAX_ELEMENTS_PER_LEVEL = 10000

# SEQUENCE (0x30) + longueur longue sur 2 octets (0x82)
SEQUENCE_MARKER = b"\x30\x82"

# Plus grande longueur représentable (entier non signé 64 bits)
MAX_CONTENT_LENGTH = (1 << 64) - 1

MIN_FILE_SIZE = 4
DEFAULT_OUTPUT_FILE = "signature.der"


@dataclass(frozen=True)
class DecodeLimits:
    max_depth: int = MAX_RECURSION_DEPTH
    max_elements: int = MAX_ELEMENTS_PER_LEVEL


DEFAULT_LIMITS = DecodeLimits()
