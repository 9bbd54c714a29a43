"""Message schedule W[0..R-1] for one block (FIPS 180-4, 6.2.2 / 6.4.2, step 1).

The first 16 words are the block itself, read big-endian. The remaining
R - 16 words (48 for SHA-224/256, 64 for SHA-384/512) follow the recurrence

    W[t] = W[t-16] + s0(W[t-15]) + W[t-7] + s1(W[t-2])

with the sigma rotation amounts taken from the variant.
"""

from __future__ import annotations

from typing import List, Sequence

from variants import VariantSpec


def init_message_schedule(block: bytes, spec: VariantSpec) -> List[int]:
    """Read the 16 native words W[0..15] of `block`."""
    if len(block) != spec.block_bytes:
        raise ValueError(f"Expected {spec.block_bytes}-byte block, got {len(block)}")

    n = spec.byte_width
    return [int.from_bytes(block[n * i : n * (i + 1)], byteorder="big") for i in range(16)]


def expand_message_schedule(w: Sequence[int], spec: VariantSpec) -> List[int]:
    """Expand W[0..15] to the full `spec.rounds`-word schedule.

    Only the first 16 words of `w` are used; the input is not modified.
    """
    if len(w) < 16:
        raise ValueError(f"Message schedule must contain at least 16 words, got {len(w)}")

    ops = spec.words
    r0, r1, r2, r3, r4, r5 = spec.schedule_rotations

    schedule = list(w[:16])
    for t in range(16, spec.rounds):
        x = schedule[t - 15]
        s0 = ops.bxor(ops.bxor(ops.rotr(x, r0), ops.rotr(x, r1)), ops.shr(x, r2))
        y = schedule[t - 2]
        s1 = ops.bxor(ops.bxor(ops.rotr(y, r3), ops.rotr(y, r4)), ops.shr(y, r5))
        schedule.append(ops.add(ops.add(ops.add(schedule[t - 16], s0), schedule[t - 7]), s1))

    return schedule


def build_message_schedule(block: bytes, spec: VariantSpec) -> List[int]:
    return expand_message_schedule(init_message_schedule(block, spec), spec)
