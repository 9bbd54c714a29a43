"""Record the working registers after every compression round of a message.

For one message and variant, this script:
1. Pads the message and builds each block's message schedule
2. Runs the compression loop while tracking registers a..h at each round
3. Saves the trace to YAML

Usage:
    python trace_rounds.py "abc"                    # SHA-256, prints YAML
    python trace_rounds.py "abc" --bits 512         # SHA-512
    python trace_rounds.py -f message.bin -o trace.yaml
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Dict, List, Optional, Union

import yaml

from compress import compress_block_tracked, update_hash_state
from sha2 import as_message_bytes, sha2_after, sha2_before
from variants import VARIANTS, VariantSpec, get_variant


def _hex_word(word: int, spec: VariantSpec) -> str:
    return format(word, f"0{2 * spec.byte_width}x")


def trace_message(message: bytes, variant: Union[int, VariantSpec]) -> Dict:
    """Build a YAML-ready trace of every block and round for `message`."""
    spec = get_variant(variant)
    message = as_message_bytes(message)
    state, schedules = sha2_before(message, spec)

    blocks: List[Dict] = []
    for block_idx, ws in enumerate(schedules):
        working, states = compress_block_tracked(state, ws, spec)
        state = update_hash_state(state, working, spec)
        blocks.append(
            {
                "block_index": block_idx,
                "schedule": [_hex_word(w, spec) for w in ws],
                "rounds": [
                    {
                        "round_index": round_idx,
                        "registers": dict(zip("abcdefgh", (_hex_word(x, spec) for x in registers))),
                    }
                    for round_idx, registers in enumerate(states)
                ],
            }
        )

    return {
        "variant": spec.name,
        "rounds": spec.rounds,
        "message_hex": message.hex(),
        "message_length_bits": len(message) * 8,
        "digest_hex": sha2_after(state, spec),
        "blocks": blocks,
    }


def write_trace(document: Dict, path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(document, f, default_flow_style=False, sort_keys=False)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trace the SHA-2 working registers after every compression round"
    )
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
    parser.add_argument("-o", "--output", help="Write the YAML trace here instead of stdout")
    args = parser.parse_args(argv)

    if (args.message is None) == (args.file is None):
        parser.error("give exactly one of a message or --file")

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

    document = trace_message(data, args.bits)

    if args.output:
        write_trace(document, args.output)
        print(f"Wrote {len(document['blocks'])} block(s) of {document['variant']} rounds to {args.output}")
    else:
        yaml.dump(document, sys.stdout, default_flow_style=False, sort_keys=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
