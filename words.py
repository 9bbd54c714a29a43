"""Fixed-width word arithmetic for SHA-2.

SHA-224/256 work on 32-bit words and SHA-384/512 on 64-bit words. Every
operation here reduces its result modulo 2**width, so additions wrap exactly
like unsigned machine words:

    add(x, y)   = (x + y) mod 2**w
    rotr(x, n)  = (x >>> n)
    shr(x, n)   = (x >> n)
    bnot(x)     = ~x restricted to w bits
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordOps:
    """Arithmetic on unsigned words of a fixed bit `width`."""

    width: int
    mask: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width not in (32, 64):
            raise ValueError(f"Word width must be 32 or 64 bits, got {self.width}")
        object.__setattr__(self, "mask", (1 << self.width) - 1)

    @property
    def byte_width(self) -> int:
        return self.width // 8

    def add(self, x: int, y: int) -> int:
        return (x + y) & self.mask

    def rotr(self, x: int, n: int) -> int:
        """Right-rotate `x` by `n` bits, 0 < n < width."""
        x &= self.mask
        return ((x >> n) | (x << (self.width - n))) & self.mask

    def shr(self, x: int, n: int) -> int:
        return (x & self.mask) >> n

    def band(self, x: int, y: int) -> int:
        return x & y & self.mask

    def bxor(self, x: int, y: int) -> int:
        return (x ^ y) & self.mask

    def bnot(self, x: int) -> int:
        return ~x & self.mask


WORD32 = WordOps(32)
WORD64 = WordOps(64)
