"""SHA-2 compression: the round function, the per-block loop and the fold.

Given the working registers `(a, b, c, d, e, f, g, h)`, the round constant
`k` and the message schedule word `w`, one round computes:

    S1    = (e >>> r0) ^ (e >>> r1) ^ (e >>> r2)
    ch    = (e & f) ^ (~e & g)
    temp1 = h + S1 + ch + k + w

    S0    = (a >>> r3) ^ (a >>> r4) ^ (a >>> r5)
    maj   = (a & b) ^ (a & c) ^ (b & c)
    temp2 = S0 + maj

    a' = temp1 + temp2
    e' = d + temp1

    b' = a
    c' = b
    d' = c
    f' = e
    g' = f
    h' = g

The rotation amounts come from `VariantSpec.compression_rotations`
(6/11/25/2/13/22 for 32-bit words, 14/18/41/28/34/39 for 64-bit words).
All additions are performed modulo 2**w.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from variants import HashState, VariantSpec


def compression(state: Sequence[int], w: int, k: int, spec: VariantSpec) -> HashState:
    """Perform one compression round.

    Parameters
    ----------
    state : sequence of 8 ints
        Working registers `a..h` before the round.
    w : int
        Message schedule word `w[t]`.
    k : int
        Round constant `k[t]`.
    spec : VariantSpec
        Supplies the word width and rotation amounts.

    Returns
    -------
    (a, b, c, d, e, f, g, h) : tuple[int, ...]
        Working registers after the round.
    """
    ops = spec.words
    r0, r1, r2, r3, r4, r5 = spec.compression_rotations
    a, b, c, d, e, f, g, h = state

    s1 = ops.bxor(ops.bxor(ops.rotr(e, r0), ops.rotr(e, r1)), ops.rotr(e, r2))
    ch = ops.bxor(ops.band(e, f), ops.band(ops.bnot(e), g))
    temp1 = ops.add(ops.add(ops.add(ops.add(h, s1), ch), k), w)

    s0 = ops.bxor(ops.bxor(ops.rotr(a, r3), ops.rotr(a, r4)), ops.rotr(a, r5))
    maj = ops.bxor(ops.bxor(ops.band(a, b), ops.band(a, c)), ops.band(b, c))
    temp2 = ops.add(s0, maj)

    return (ops.add(temp1, temp2), a, b, c, ops.add(d, temp1), e, f, g)


def _check_block_inputs(state: Sequence[int], ws: Sequence[int], spec: VariantSpec) -> None:
    if len(state) != 8:
        raise ValueError(f"Expected 8 working registers, got {len(state)}")
    if len(ws) != spec.rounds:
        raise ValueError(f"{spec.name} expects {spec.rounds} message schedule words, got {len(ws)}")


def compress_block(state: Sequence[int], ws: Sequence[int], spec: VariantSpec) -> HashState:
    """Run all `spec.rounds` compression rounds for one block.

    Parameters
    ----------
    state : sequence of 8 ints
        Initial working registers (the current hash state).
    ws : sequence of int
        The block's message schedule `w[0..R-1]`.

    Returns
    -------
    (a, b, c, d, e, f, g, h) : tuple[int, ...]
        Final working registers after all rounds.
    """
    _check_block_inputs(state, ws, spec)

    registers: HashState = tuple(state)
    for t in range(spec.rounds):
        registers = compression(registers, ws[t], spec.round_constants[t], spec)
    return registers


def compress_block_tracked(
    state: Sequence[int], ws: Sequence[int], spec: VariantSpec
) -> Tuple[HashState, List[HashState]]:
    """Like `compress_block`, also returning the registers after every round."""
    _check_block_inputs(state, ws, spec)

    registers: HashState = tuple(state)
    history: List[HashState] = []
    for t in range(spec.rounds):
        registers = compression(registers, ws[t], spec.round_constants[t], spec)
        history.append(registers)
    return registers, history


def update_hash_state(prev_state: Sequence[int], working: Sequence[int], spec: VariantSpec) -> HashState:
    """Fold the working registers into the chaining value.

        H_{i+1}[j] = (H_i[j] + working[j]) mod 2**w,  j = 0..7

    All eight words are folded for every variant; truncated variants only
    drop words when the digest is rendered.
    """
    add = spec.words.add
    return tuple(add(h, x) for h, x in zip(prev_state, working))
