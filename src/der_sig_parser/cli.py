"""Recherche et affiche la signature ASN.1 (0x30 0x82) ajoutée en fin de fichier"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from der_sig_parser.config import DEFAULT_OUTPUT_FILE
from der_sig_parser.display.printer import SEPARATOR, format_tree, format_validation
from der_sig_parser.exception.exceptions import DerFileError, NoSignatureFound
from der_sig_parser.file.loader import load_file, save_bytes
from der_sig_parser.signature.locator import enclosing_block, locate_signature
from der_sig_parser.type.signature_report import SignatureReport

logger = logging.getLogger(__name__)


def logging_level(string: str) -> int:
    """Convertit une chaîne en niveau de logging"""
    if string.isnumeric():
        return int(string)
    level = getattr(logging, string.upper(), None)
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"invalid log level {string}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="der-sig-parser",
        description="Search for ASN.1 structures (0x30 0x82) from end of file backwards",
    )
    parser.add_argument("file", help="file to analyze")
    parser.add_argument("-s", "--save", action="store_true",
                        help=f"save ASN.1 structure to file (default: {DEFAULT_OUTPUT_FILE})")
    parser.add_argument("-o", "--output", help="output file to save the ASN.1 structure")
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    parser.add_argument("-l", "--level", type=logging_level, default=logging.WARNING,
                        help="set logging level")
    return parser


def _run(data, args: argparse.Namespace) -> int:
    try:
        match = locate_signature(data)
    except NoSignatureFound as exc:
        logger.error("%s", exc)
        return 1

    report = SignatureReport.from_match(match, carve_from=enclosing_block(data, match))
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        lines: List[str] = [
            f"Valid ASN.1 signature found at offset {match.offset}",
            f"Structure size: {match.size} bytes",
            SEPARATOR,
        ]
        lines += format_validation(match.validation, report.key_size)
        lines.append(SEPARATOR)
        lines += format_tree(match.full_bytes, match.offset)
        if report.certificates:
            lines.append(SEPARATOR)
            lines.append("Embedded certificates:")
            for cert in report.certificates:
                bits = f", {cert.public_key_bits} bits" if cert.public_key_bits else ""
                lines.append(f"  - {cert.subject} (serial {cert.serial_number}{bits})")
                lines.append(f"    issuer: {cert.issuer}")
        lines.append(SEPARATOR)
        print("\n".join(lines))

    if args.save or args.output:
        filename = args.output or DEFAULT_OUTPUT_FILE
        try:
            save_bytes(match.full_bytes, filename)
        except DerFileError as exc:
            logger.error("%s", exc)
            return 1
        print(f"ASN.1 structure saved to: {filename}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée du programme"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(format="[%(levelname)s] %(name)s: %(message)s", level=args.level)

    if not args.json:
        print(f"Analyzing file: {args.file}")
        print(SEPARATOR)
    try:
        with load_file(args.file) as data:
            return _run(data, args)
    except DerFileError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
