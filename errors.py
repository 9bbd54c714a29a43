"""Exceptions raised by the SHA-2 modules."""

from __future__ import annotations


class SHA2Error(ValueError):
    """Base class for SHA-2 failures."""


class InvalidVariant(SHA2Error):
    """Requested digest size is not one of 224, 256, 384 or 512."""

    def __init__(self, bits: object) -> None:
        super().__init__(f"Invalid SHA-2 bit length: {bits!r} (expected 224, 256, 384 or 512)")
        self.bits = bits


class UnsupportedInputLength(SHA2Error):
    """Message bit length does not fit in the variant's length field."""

    def __init__(self, bit_length: int, field_bits: int) -> None:
        super().__init__(
            f"Message length {bit_length} bits does not fit in a {field_bits}-bit length field"
        )
        self.bit_length = bit_length
        self.field_bits = field_bits


class VectorFileError(SHA2Error):
    """Known-answer vector file is not valid YAML or has the wrong shape."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
