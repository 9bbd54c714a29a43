"""SHA-224/256/384/512 built from the stages in this repository.

This module provides:

- `compute_digest(message: bytes, variant) -> str`: the lowercase hex digest
  of `message` for `variant` (224, 256, 384, 512 or a `VariantSpec`).
- `sha224`, `sha256`, `sha384`, `sha512`: shorthands for the above.
- `sha2_before` / `sha2_after`: the work done before and after the
  compression loop, for callers that want to drive `compress_block`
  themselves.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union

from compress import compress_block, compress_block_tracked, update_hash_state
from padding import pad_message, split_into_blocks
from schedule import build_message_schedule
from variants import HashState, VariantSpec, get_variant

logger = logging.getLogger(__name__)

Variant = Union[int, VariantSpec]


def as_message_bytes(message: bytes) -> bytes:
    """Copy a bytes-like `message` into `bytes`.

    Only objects supporting the buffer protocol are accepted; `int` and `str`
    raise `TypeError` instead of being coerced.
    """
    if isinstance(message, str):
        raise TypeError("Strings must be encoded before hashing")
    return memoryview(message).tobytes()


def format_digest(state: Sequence[int], spec: VariantSpec) -> str:
    """Render the first `spec.output_words` words of `state` as lowercase hex."""
    width = 2 * spec.byte_width
    return "".join(format(word, f"0{width}x") for word in state[: spec.output_words])


def digest_bytes(state: Sequence[int], spec: VariantSpec) -> bytes:
    """Serialize the first `spec.output_words` words of `state` big-endian."""
    return b"".join(word.to_bytes(spec.byte_width, byteorder="big") for word in state[: spec.output_words])


def sha2_before(message: bytes, spec: VariantSpec) -> Tuple[HashState, List[List[int]]]:
    """Prepare all inputs needed before compression.

    This performs:
    - Initialization of the hash state from the variant's initial value.
    - Padding of the message.
    - Splitting into blocks.
    - Building the message schedule for each block.

    With this, a custom compression pipeline looks like:

        state, schedules = sha2_before(data, SHA256)
        for ws in schedules:
            state = update_hash_state(state, my_compress(state, ws), SHA256)
        digest = sha2_after(state, SHA256)
    """
    blocks = split_into_blocks(pad_message(message, spec), spec)
    logger.debug("%s: %d-byte message padded to %d block(s)", spec.name, len(message), len(blocks))
    return spec.initial_hash, [build_message_schedule(block, spec) for block in blocks]


def sha2_after(final_state: Sequence[int], spec: VariantSpec) -> str:
    """Finalize the hex digest from the state left after the last block."""
    return format_digest(final_state, spec)


def _final_state(message: bytes, spec: VariantSpec) -> HashState:
    state, schedules = sha2_before(message, spec)
    # Blocks are chained in order; each fold consumes the previous state.
    for ws in schedules:
        state = update_hash_state(state, compress_block(state, ws, spec), spec)
    return state


def compute_digest(message: bytes, variant: Variant) -> str:
    """Compute the hex digest of `message` with the selected SHA-2 variant.

    Example:
        >>> compute_digest(b"abc", 256)
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    spec = get_variant(variant)
    return sha2_after(_final_state(as_message_bytes(message), spec), spec)


def compute_digest_bytes(message: bytes, variant: Variant) -> bytes:
    """Like `compute_digest`, returning the raw digest bytes."""
    spec = get_variant(variant)
    return digest_bytes(_final_state(as_message_bytes(message), spec), spec)


def compute_text_digest(text: str, variant: Variant, encoding: str = "utf-8") -> str:
    """Hash the `encoding` bytes of `text`."""
    return compute_digest(text.encode(encoding), variant)


def sha2_with_tracking(message: bytes, variant: Variant) -> Tuple[str, List[List[HashState]]]:
    """Compute a digest while recording the working registers after each round.

    Returns:
        (digest_hex, states_per_block)
        where states_per_block[block_idx][round_idx] is the (a, ..., h) tuple
        after that round
    """
    spec = get_variant(variant)
    state, schedules = sha2_before(as_message_bytes(message), spec)
    all_states: List[List[HashState]] = []

    for ws in schedules:
        working, history = compress_block_tracked(state, ws, spec)
        all_states.append(history)
        state = update_hash_state(state, working, spec)

    return sha2_after(state, spec), all_states


def sha224(data: bytes) -> str:
    return compute_digest(data, 224)


def sha256(data: bytes) -> str:
    return compute_digest(data, 256)


def sha384(data: bytes) -> str:
    return compute_digest(data, 384)


def sha512(data: bytes) -> str:
    return compute_digest(data, 512)
