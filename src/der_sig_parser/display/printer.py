from __future__ import annotations

from typing import List, Tuple

from der_sig_parser.config import DEFAULT_LIMITS, DecodeLimits
from der_sig_parser.model.models import Element, ValidationResult
from der_sig_parser.parser.formatter import describe_element
from der_sig_parser.parser.helper import hex_preview
from der_sig_parser.parser.tlv import BytesLike
from der_sig_parser.parser.walker import walk

SEPARATOR = "=" * 40


# ---------------------------------------------------------------------------
# Résumé de validation
def format_validation(validation: ValidationResult, key_size: int = 0) -> List[str]:
    lines = ["Signature Validation:"]
    fields = (
        ("Common Name", validation.has_common_name, validation.common_name),
        ("Country Name", validation.has_country_name, validation.country_name),
        ("Locality Name", validation.has_locality_name, validation.locality_name),
        ("Organization Name", validation.has_organization_name, validation.organization_name),
        ("Email Address", validation.has_email_address, validation.email_address),
    )
    for name, present, value in fields:
        line = f"  {name}: {str(present).lower()}"
        if present and value:
            line += f" ({value})"
        lines.append(line)

    if validation.is_valid:
        lines.append("✓ Valid signature - all required fields present")
    else:
        lines.append("✗ Invalid signature - missing required fields")
    lines.append(format_key_size(key_size))
    return lines


def format_key_size(key_size: int) -> str:
    if key_size > 0:
        return f"Key size calculation: {key_size} bits"
    return "Key size calculation: N/A (no OCTET STRING found as final element)"


# ---------------------------------------------------------------------------
# Arbre façon `openssl asn1parse`
def format_element(element: Element) -> str:
    name, content = describe_element(element)
    kind = "cons" if element.constructed else "prim"
    line = (
        f"{element.offset:>7}:d={element.depth} hl={element.header_length} "
        f"l={element.content_length} {kind}: {name}"
    )
    if content:
        line += f"  {content}"
    return line


def format_tree(data: BytesLike, base_offset: int = 0, limits: DecodeLimits = DEFAULT_LIMITS) -> List[str]:
    """
    Une ligne par élément, dans l'ordre du document. Les régions qui ne
    décodent pas sont rendues en hex dump à leur profondeur.
    """
    rows: List[Tuple[int, str]] = []
    result = walk(
        data,
        lambda e: rows.append((e.offset, format_element(e))),
        base_offset=base_offset,
        limits=limits,
    )
    for failure in result.failures:
        rows.append(
            (
                failure.offset,
                f"{'  ' * failure.depth}[HEX DUMP @{failure.offset}] ({failure.error}): "
                f"{hex_preview(failure.remainder)}",
            )
        )
    # l'ordre du document est l'ordre croissant des offsets
    rows.sort(key=lambda row: row[0])
    return [line for _, line in rows]
