"""SHA-2 variant parameters (FIPS 180-4, sections 4.2, 5.3 and 6).

Each digest size is a data record, not a code path: the engine in
`sha2.py` reads everything it needs (word width, round count, rotation
amounts, initial hash value, round constants, output length) from a
`VariantSpec`.

SHA-224 and SHA-256 share the 32-bit round constants and rotation amounts
and differ only in their initial hash value and the number of output words.
SHA-384 and SHA-512 relate the same way over 64-bit words.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from errors import InvalidVariant
from words import WORD32, WORD64, WordOps


# Round constants k[0..63]: first 32 bits of the fractional parts of the
# cube roots of the first 64 primes.
K32: Tuple[int, ...] = (
    0x428A2F98,
    0x71374491,
    0xB5C0FBCF,
    0xE9B5DBA5,
    0x3956C25B,
    0x59F111F1,
    0x923F82A4,
    0xAB1C5ED5,
    0xD807AA98,
    0x12835B01,
    0x243185BE,
    0x550C7DC3,
    0x72BE5D74,
    0x80DEB1FE,
    0x9BDC06A7,
    0xC19BF174,
    0xE49B69C1,
    0xEFBE4786,
    0x0FC19DC6,
    0x240CA1CC,
    0x2DE92C6F,
    0x4A7484AA,
    0x5CB0A9DC,
    0x76F988DA,
    0x983E5152,
    0xA831C66D,
    0xB00327C8,
    0xBF597FC7,
    0xC6E00BF3,
    0xD5A79147,
    0x06CA6351,
    0x14292967,
    0x27B70A85,
    0x2E1B2138,
    0x4D2C6DFC,
    0x53380D13,
    0x650A7354,
    0x766A0ABB,
    0x81C2C92E,
    0x92722C85,
    0xA2BFE8A1,
    0xA81A664B,
    0xC24B8B70,
    0xC76C51A3,
    0xD192E819,
    0xD6990624,
    0xF40E3585,
    0x106AA070,
    0x19A4C116,
    0x1E376C08,
    0x2748774C,
    0x34B0BCB5,
    0x391C0CB3,
    0x4ED8AA4A,
    0x5B9CCA4F,
    0x682E6FF3,
    0x748F82EE,
    0x78A5636F,
    0x84C87814,
    0x8CC70208,
    0x90BEFFFA,
    0xA4506CEB,
    0xBEF9A3F7,
    0xC67178F2,
)

# Round constants k[0..79]: first 64 bits of the fractional parts of the
# cube roots of the first 80 primes.
K64: Tuple[int, ...] = (
    0x428A2F98D728AE22,
    0x7137449123EF65CD,
    0xB5C0FBCFEC4D3B2F,
    0xE9B5DBA58189DBBC,
    0x3956C25BF348B538,
    0x59F111F1B605D019,
    0x923F82A4AF194F9B,
    0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242,
    0x12835B0145706FBE,
    0x243185BE4EE4B28C,
    0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F,
    0x80DEB1FE3B1696B1,
    0x9BDC06A725C71235,
    0xC19BF174CF692694,
    0xE49B69C19EF14AD2,
    0xEFBE4786384F25E3,
    0x0FC19DC68B8CD5B5,
    0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275,
    0x4A7484AA6EA6E483,
    0x5CB0A9DCBD41FBD4,
    0x76F988DA831153B5,
    0x983E5152EE66DFAB,
    0xA831C66D2DB43210,
    0xB00327C898FB213F,
    0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2,
    0xD5A79147930AA725,
    0x06CA6351E003826F,
    0x142929670A0E6E70,
    0x27B70A8546D22FFC,
    0x2E1B21385C26C926,
    0x4D2C6DFC5AC42AED,
    0x53380D139D95B3DF,
    0x650A73548BAF63DE,
    0x766A0ABB3C77B2A8,
    0x81C2C92E47EDAEE6,
    0x92722C851482353B,
    0xA2BFE8A14CF10364,
    0xA81A664BBC423001,
    0xC24B8B70D0F89791,
    0xC76C51A30654BE30,
    0xD192E819D6EF5218,
    0xD69906245565A910,
    0xF40E35855771202A,
    0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8,
    0x1E376C085141AB53,
    0x2748774CDF8EEB99,
    0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63,
    0x4ED8AA4AE3418ACB,
    0x5B9CCA4F7763E373,
    0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC,
    0x78A5636F43172F60,
    0x84C87814A1F0AB72,
    0x8CC702081A6439EC,
    0x90BEFFFA23631E28,
    0xA4506CEBDE82BDE9,
    0xBEF9A3F7B2C67915,
    0xC67178F2E372532B,
    0xCA273ECEEA26619C,
    0xD186B8C721C0C207,
    0xEADA7DD6CDE0EB1E,
    0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA,
    0x0A637DC5A2C898A6,
    0x113F9804BEF90DAE,
    0x1B710B35131C471B,
    0x28DB77F523047D84,
    0x32CAAB7B40C72493,
    0x3C9EBE0A15C9BEBC,
    0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6,
    0x597F299CFC657E2A,
    0x5FCB6FAB3AD6FAEC,
    0x6C44198C4A475817,
)

# Sigma rotation/shift amounts, fixed per word width.
#   schedule:    s0 = (x >>> r0) ^ (x >>> r1) ^ (x >> r2)
#                s1 = (x >>> r3) ^ (x >>> r4) ^ (x >> r5)
#   compression: S1 = (e >>> r0) ^ (e >>> r1) ^ (e >>> r2)
#                S0 = (a >>> r3) ^ (a >>> r4) ^ (a >>> r5)
SCHEDULE_ROTATIONS_32 = (7, 18, 3, 17, 19, 10)
SCHEDULE_ROTATIONS_64 = (1, 8, 7, 19, 61, 6)
COMPRESSION_ROTATIONS_32 = (6, 11, 25, 2, 13, 22)
COMPRESSION_ROTATIONS_64 = (14, 18, 41, 28, 34, 39)

HashState = Tuple[int, int, int, int, int, int, int, int]


@dataclass(frozen=True)
class VariantSpec:
    """Immutable description of one SHA-2 variant."""

    name: str
    bits: int
    words: WordOps
    rounds: int
    output_words: int
    schedule_rotations: Tuple[int, ...]
    compression_rotations: Tuple[int, ...]
    initial_hash: HashState
    round_constants: Tuple[int, ...]

    def __post_init__(self) -> None:
        width = self.words.width
        if len(self.initial_hash) != 8:
            raise ValueError(f"{self.name}: expected 8 initial hash words, got {len(self.initial_hash)}")
        if len(self.round_constants) != self.rounds:
            raise ValueError(
                f"{self.name}: expected {self.rounds} round constants, got {len(self.round_constants)}"
            )
        if not 0 < self.output_words <= 8:
            raise ValueError(f"{self.name}: output word count must be 1..8, got {self.output_words}")
        for word in self.initial_hash + self.round_constants:
            if not 0 <= word <= self.words.mask:
                raise ValueError(f"{self.name}: constant {word:#x} does not fit in {width} bits")
        for amounts in (self.schedule_rotations, self.compression_rotations):
            if len(amounts) != 6 or not all(0 < r < width for r in amounts):
                raise ValueError(f"{self.name}: rotation amounts {amounts} invalid for {width}-bit words")

    @property
    def word_bits(self) -> int:
        return self.words.width

    @property
    def byte_width(self) -> int:
        return self.words.byte_width

    @property
    def block_bits(self) -> int:
        # 16 words per block: 512 bits for 32-bit words, 1024 for 64-bit.
        return 16 * self.word_bits

    @property
    def block_bytes(self) -> int:
        return self.block_bits // 8

    @property
    def length_field_bits(self) -> int:
        return 2 * self.word_bits

    @property
    def length_field_bytes(self) -> int:
        return self.length_field_bits // 8

    @property
    def digest_bytes(self) -> int:
        return self.output_words * self.byte_width

    @property
    def digest_hex_length(self) -> int:
        return 2 * self.digest_bytes


SHA224 = VariantSpec(
    name="SHA-224",
    bits=224,
    words=WORD32,
    rounds=64,
    output_words=7,
    schedule_rotations=SCHEDULE_ROTATIONS_32,
    compression_rotations=COMPRESSION_ROTATIONS_32,
    # Second 32 bits of the fractional parts of the square roots of the
    # 9th through 16th primes.
    initial_hash=(
        0xC1059ED8,
        0x367CD507,
        0x3070DD17,
        0xF70E5939,
        0xFFC00B31,
        0x68581511,
        0x64F98FA7,
        0xBEFA4FA4,
    ),
    round_constants=K32,
)

SHA256 = VariantSpec(
    name="SHA-256",
    bits=256,
    words=WORD32,
    rounds=64,
    output_words=8,
    schedule_rotations=SCHEDULE_ROTATIONS_32,
    compression_rotations=COMPRESSION_ROTATIONS_32,
    # First 32 bits of the fractional parts of the square roots of the first
    # 8 primes 2..19.
    initial_hash=(
        0x6A09E667,
        0xBB67AE85,
        0x3C6EF372,
        0xA54FF53A,
        0x510E527F,
        0x9B05688C,
        0x1F83D9AB,
        0x5BE0CD19,
    ),
    round_constants=K32,
)

SHA384 = VariantSpec(
    name="SHA-384",
    bits=384,
    words=WORD64,
    rounds=80,
    output_words=6,
    schedule_rotations=SCHEDULE_ROTATIONS_64,
    compression_rotations=COMPRESSION_ROTATIONS_64,
    # First 64 bits of the fractional parts of the square roots of the 9th
    # through 16th primes.
    initial_hash=(
        0xCBBB9D5DC1059ED8,
        0x629A292A367CD507,
        0x9159015A3070DD17,
        0x152FECD8F70E5939,
        0x67332667FFC00B31,
        0x8EB44A8768581511,
        0xDB0C2E0D64F98FA7,
        0x47B5481DBEFA4FA4,
    ),
    round_constants=K64,
)

SHA512 = VariantSpec(
    name="SHA-512",
    bits=512,
    words=WORD64,
    rounds=80,
    output_words=8,
    schedule_rotations=SCHEDULE_ROTATIONS_64,
    compression_rotations=COMPRESSION_ROTATIONS_64,
    # First 64 bits of the fractional parts of the square roots of the first
    # 8 primes 2..19.
    initial_hash=(
        0x6A09E667F3BCC908,
        0xBB67AE8584CAA73B,
        0x3C6EF372FE94F82B,
        0xA54FF53A5F1D36F1,
        0x510E527FADE682D1,
        0x9B05688C2B3E6C1F,
        0x1F83D9ABFB41BD6B,
        0x5BE0CD19137E2179,
    ),
    round_constants=K64,
)

VARIANTS: Dict[int, VariantSpec] = {spec.bits: spec for spec in (SHA224, SHA256, SHA384, SHA512)}


def get_variant(variant: Union[int, VariantSpec]) -> VariantSpec:
    """Resolve a digest size in bits (224, 256, 384, 512) to its `VariantSpec`.

    An already-resolved `VariantSpec` is returned unchanged. Anything else
    raises `InvalidVariant`.
    """
    if isinstance(variant, VariantSpec):
        return variant
    # bool is an int subclass; True/False are never a digest size.
    if isinstance(variant, bool) or not isinstance(variant, int):
        raise InvalidVariant(variant)
    try:
        return VARIANTS[variant]
    except KeyError:
        raise InvalidVariant(variant) from None
