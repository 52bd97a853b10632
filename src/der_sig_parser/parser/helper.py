# -----------------------------
# Helpers de conversion
from datetime import datetime, timezone
from typing import Optional

from der_sig_parser.model.models import TAG_BMP_STRING, TAG_UNIVERSAL_STRING

HEX_PREVIEW_BYTES = 32


def to_signed_int(content: memoryview) -> int:
    """Entier big-endian en complément à deux (INTEGER / ENUMERATED)."""
    return int.from_bytes(content, "big", signed=True)


def hex_preview(content: memoryview, limit: int = HEX_PREVIEW_BYTES) -> str:
    if len(content) > limit:
        return f"{content[:limit].hex()}... ({len(content)} bytes)"
    return content.hex()


def decode_text(tag: int, content: memoryview) -> str:
    if tag == TAG_BMP_STRING:
        return bytes(content).decode("utf-16-be", errors="replace")
    if tag == TAG_UNIVERSAL_STRING:
        return bytes(content).decode("utf-32-be", errors="replace")
    return bytes(content).decode("utf-8", errors="replace")


def to_datetime_asn1(s: Optional[str]) -> Optional[datetime]:
    """UTCTime (YYMMDDHHMM[SS]Z) ou GeneralizedTime (YYYYMMDDHHMMSS[.f]Z)."""
    if not s or not s.endswith("Z"):
        return None
    body = s[:-1]
    formats = {
        10: "%y%m%d%H%M",
        12: "%y%m%d%H%M%S",
        14: "%Y%m%d%H%M%S",
    }
    if "." in body:
        fmt = "%Y%m%d%H%M%S.%f"
    else:
        fmt = formats.get(len(body))
        if fmt is None:
            return None
    try:
        dt = datetime.strptime(body, fmt).replace(tzinfo=timezone.utc)
    except ValueError:
        return None
    # RFC 5280 : UTCTime YY >= 50 -> 19YY
    if fmt.startswith("%y") and dt.year >= 2050:
        dt = dt.replace(year=dt.year - 100)
    return dt
