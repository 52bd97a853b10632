from __future__ import annotations

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.file.loader import PathLike, load_file
from der_sig_parser.parser.oid import decode_oid
from der_sig_parser.parser.tlv import decode_element
from der_sig_parser.signature.fields import extract_fields
from der_sig_parser.signature.keysize import estimate_key_size
from der_sig_parser.signature.locator import enclosing_block, locate_signature
from der_sig_parser.type.signature_report import SignatureReport

__all__ = [
    "analyze",
    "analyze_file",
    "decode_element",
    "decode_oid",
    "enclosing_block",
    "estimate_key_size",
    "extract_fields",
    "locate_signature",
]


def analyze(buffer, limits: DecodeLimits = DEFAULT_LIMITS) -> SignatureReport:
    """Localise la signature dans `buffer` et retourne le rapport typé."""
    match = locate_signature(buffer, limits=limits)
    block = enclosing_block(buffer, match, limits=limits)
    return SignatureReport.from_match(match, limits=limits, carve_from=block)


def analyze_file(path: PathLike, limits: DecodeLimits = DEFAULT_LIMITS) -> SignatureReport:
    with load_file(path) as data:
        return analyze(data, limits=limits)
