"""Command-line front end for the SHA-2 digests.

Usage:
    python sha2_cli.py "message"               # SHA-256 of the UTF-8 text
    python sha2_cli.py -b 512 "message"        # SHA-512
    python sha2_cli.py -f path/to/file         # hash raw file bytes
    python sha2_cli.py --all "Hello, World!"   # all four variants
    python sha2_cli.py --check                 # run the known-answer vectors

The resulting hex digest is printed to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from errors import SHA2Error
from sha2 import compute_digest
from variants import VARIANTS
from vectors import check_vectors, load_vectors


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute SHA-224/256/384/512 digests")
    parser.add_argument("message", nargs="?", help="Message text to hash")
    parser.add_argument("-f", "--file", help="Hash the raw bytes of this file instead")
    parser.add_argument(
        "-b",
        "--bits",
        type=int,
        choices=sorted(VARIANTS),
        default=256,
        help="Digest size in bits (default: 256)",
    )
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the message text (default: utf-8)")
    parser.add_argument("--all", action="store_true", help="Print the digest for every variant")
    parser.add_argument(
        "--check",
        nargs="?",
        const="",
        metavar="VECTORS",
        help="Verify the known-answer vectors (optionally from a YAML file) and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _run_check(path: str) -> int:
    results = check_vectors(load_vectors(path or None))
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        text = result.vector.text or "(empty)"
        print(f"[{status}] SHA-{result.vector.bits} {text!r}")
        if not result.passed:
            print(f"  Expected: {result.vector.expected}")
            print(f"  Got:      {result.actual}")

    failed = sum(1 for r in results if not r.passed)
    print(f"Overall: {len(results) - failed}/{len(results)} passed")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.check is not None:
        try:
            return _run_check(args.check)
        except (OSError, SHA2Error) as e:
            sys.stderr.write(f"Error loading vectors: {e}\n")
            return 1

    if (args.message is None) == (args.file is None):
        parser.print_usage(sys.stderr)
        sys.stderr.write("error: give exactly one of a message or --file\n")
        return 1

    if args.file is not None:
        try:
            with open(args.file, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    else:
        try:
            data = args.message.encode(args.encoding)
        except (LookupError, UnicodeEncodeError) as e:
            sys.stderr.write(f"Cannot encode message as {args.encoding}: {e}\n")
            return 1

    try:
        if args.all:
            for bits in sorted(VARIANTS):
                print(f"SHA-{bits}:\t{compute_digest(data, bits)}")
        else:
            print(compute_digest(data, args.bits))
    except SHA2Error as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
