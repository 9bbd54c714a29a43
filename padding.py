"""Message padding and block splitting (FIPS 180-4, sections 5.1 and 5.2).

For a message of L bits the padded message is:

    message || 1 || 0...0 || L

where the zero run is the shortest one that makes the total length a
multiple of the block size, after the length field is appended. The length
field is 64 bits wide for 32-bit-word variants (512-bit blocks) and 128 bits
wide for 64-bit-word variants (1024-bit blocks).

Messages here are always whole bytes, so the single `1` bit and the first
seven zero bits are appended together as the byte 0x80.
"""

from __future__ import annotations

from typing import List

from errors import UnsupportedInputLength
from variants import VariantSpec


def encode_length(bit_length: int, spec: VariantSpec) -> bytes:
    """Encode the message bit length as the big-endian trailing length field."""
    if bit_length < 0:
        raise ValueError(f"Message bit length must be non-negative, got {bit_length}")
    if bit_length >> spec.length_field_bits:
        raise UnsupportedInputLength(bit_length, spec.length_field_bits)
    return bit_length.to_bytes(spec.length_field_bytes, byteorder="big")


def padded_length_bits(bit_length: int, spec: VariantSpec) -> int:
    """Smallest multiple of the block size that holds L + 1 + length-field bits."""
    needed = bit_length + 1 + spec.length_field_bits
    return -(-needed // spec.block_bits) * spec.block_bits


def pad_message(message: bytes, spec: VariantSpec) -> bytes:
    """Pad `message` so its length is a multiple of `spec.block_bytes`."""
    length_field = encode_length(len(message) * 8, spec)

    padded = bytearray(message)
    padded.append(0x80)

    # Zero bytes until the length field lands exactly on a block boundary.
    zeros = -(len(padded) + spec.length_field_bytes) % spec.block_bytes
    padded.extend(bytes(zeros))

    padded.extend(length_field)
    return bytes(padded)


def split_into_blocks(padded: bytes, spec: VariantSpec) -> List[bytes]:
    """Split a padded message into consecutive `spec.block_bytes` blocks."""
    size = spec.block_bytes
    if not padded or len(padded) % size != 0:
        raise ValueError(
            f"Padded message length must be a positive multiple of {size} bytes, got {len(padded)}"
        )
    return [bytes(padded[i : i + size]) for i in range(0, len(padded), size)]
