from __future__ import annotations

import json
from typing import Tuple

from der_sig_parser.model.models import (
    TAG_BIT_STRING,
    TAG_BMP_STRING,
    TAG_BOOLEAN,
    TAG_ENUMERATED,
    TAG_GENERALIZED_TIME,
    TAG_IA5_STRING,
    TAG_INTEGER,
    TAG_NULL,
    TAG_NUMERIC_STRING,
    TAG_OBJECT_ID,
    TAG_OCTET_STRING,
    TAG_PRINTABLE_STRING,
    TAG_REAL,
    TAG_SEQUENCE,
    TAG_SET,
    TAG_T61_STRING,
    TAG_UNIVERSAL_STRING,
    TAG_UTC_TIME,
    TAG_UTF8_STRING,
    TAG_VISIBLE_STRING,
    Element,
    TagClass,
)
from der_sig_parser.parser.helper import (
    decode_text,
    hex_preview,
    to_datetime_asn1,
    to_signed_int,
)
from der_sig_parser.parser.oid import decode_oid
from der_sig_parser.parser.tlv import BytesLike, as_view
from der_sig_parser.registry.oids import oid_name
from der_sig_parser.registry.registry import get_formatter, register

UNIVERSAL_NAMES = {
    TAG_BOOLEAN: "BOOLEAN",
    TAG_INTEGER: "INTEGER",
    TAG_BIT_STRING: "BIT STRING",
    TAG_OCTET_STRING: "OCTET STRING",
    TAG_NULL: "NULL",
    TAG_OBJECT_ID: "OBJECT IDENTIFIER",
    TAG_REAL: "REAL",
    TAG_ENUMERATED: "ENUMERATED",
    TAG_UTF8_STRING: "UTF8String",
    TAG_NUMERIC_STRING: "NumericString",
    TAG_PRINTABLE_STRING: "PrintableString",
    TAG_T61_STRING: "T61String",
    TAG_IA5_STRING: "IA5String",
    TAG_UTC_TIME: "UTCTime",
    TAG_GENERALIZED_TIME: "GeneralizedTime",
    TAG_VISIBLE_STRING: "VisibleString",
    TAG_UNIVERSAL_STRING: "UniversalString",
    TAG_BMP_STRING: "BMPString",
}

# Usage habituel des tags contextuels dans un certificat X.509
CONTEXT_HINTS = {
    0: "version/keyUsage",
    1: "issuerUniqueID/subjectAltName",
    2: "subjectUniqueID",
    3: "extensions",
}


# ---------------------------------------------------------------------------
# Noms de tags
def tag_name(tag_number: int, tag_class: TagClass = TagClass.UNIVERSAL, constructed: bool = False) -> str:
    if tag_class == TagClass.APPLICATION:
        return f"APPLICATION [{tag_number}]"
    if tag_class == TagClass.CONTEXT:
        hint = CONTEXT_HINTS.get(tag_number)
        return f"CONTEXT [{tag_number}] ({hint})" if hint else f"CONTEXT [{tag_number}]"
    if tag_class == TagClass.PRIVATE:
        return f"PRIVATE [{tag_number}]"

    if constructed:
        if tag_number == TAG_SEQUENCE:
            return "SEQUENCE"
        if tag_number == TAG_SET:
            return "SET"
        return f"CONSTRUCTED [{tag_number}]"
    return UNIVERSAL_NAMES.get(tag_number, f"PRIMITIVE [{tag_number}]")


# ---------------------------------------------------------------------------
# Contenu des primitives universelles
def format_content(tag_number: int, content: BytesLike) -> str:
    view = as_view(content)
    formatter = get_formatter(tag_number)
    if formatter is None:
        return hex_preview(view)
    return formatter(view)


def describe_element(element: Element) -> Tuple[str, str]:
    """(nom du tag, contenu formaté) pour l'affichage d'un nœud."""
    name = tag_name(element.tag_number, element.tag_class, element.constructed)
    content = ""
    if (
        element.tag_class == TagClass.UNIVERSAL
        and not element.constructed
        and element.content_length > 0
    ):
        content = format_content(element.tag_number, element.raw_content)
    return name, content


@register(TAG_BOOLEAN)
def _format_boolean(content: memoryview) -> str:
    if len(content) == 1:
        return "FALSE" if content[0] == 0 else "TRUE"
    return content.hex()


@register(TAG_INTEGER)
def _format_integer(content: memoryview) -> str:
    if len(content) <= 8:
        return f"{to_signed_int(content)} (0x{content.hex().upper()})"
    # grands entiers (modules RSA, numéros de série…) -> hex
    return hex_preview(content)


@register(TAG_ENUMERATED)
def _format_enumerated(content: memoryview) -> str:
    return f"ENUM({to_signed_int(content)})"


@register(TAG_BIT_STRING)
def _format_bit_string(content: memoryview) -> str:
    if len(content) == 0:
        return ""
    return f"unused bits: {content[0]}, data: {hex_preview(content[1:])}"


@register(TAG_OCTET_STRING)
def _format_octet_string(content: memoryview) -> str:
    return hex_preview(content)


@register(TAG_NULL)
def _format_null(content: memoryview) -> str:
    return ""


@register(TAG_OBJECT_ID)
def _format_oid(content: memoryview) -> str:
    oid = decode_oid(content)
    name = oid_name(oid)
    return f"{oid} ({name})" if name else oid


@register(
    TAG_UTF8_STRING,
    TAG_NUMERIC_STRING,
    TAG_PRINTABLE_STRING,
    TAG_T61_STRING,
    TAG_IA5_STRING,
    TAG_VISIBLE_STRING,
)
def _format_string(content: memoryview) -> str:
    return json.dumps(decode_text(TAG_UTF8_STRING, content), ensure_ascii=False)


@register(TAG_BMP_STRING)
def _format_bmp_string(content: memoryview) -> str:
    return json.dumps(decode_text(TAG_BMP_STRING, content), ensure_ascii=False)


@register(TAG_UNIVERSAL_STRING)
def _format_universal_string(content: memoryview) -> str:
    return json.dumps(decode_text(TAG_UNIVERSAL_STRING, content), ensure_ascii=False)


@register(TAG_UTC_TIME, TAG_GENERALIZED_TIME)
def _format_time(content: memoryview) -> str:
    text = decode_text(TAG_UTF8_STRING, content)
    quoted = json.dumps(text, ensure_ascii=False)
    parsed = to_datetime_asn1(text)
    return f"{quoted} ({parsed.isoformat()})" if parsed else quoted
