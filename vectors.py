"""Known-answer vectors for the SHA-2 variants.

The vectors live in `known_vectors.yaml` next to this module:

    messages:
      - text: "abc"
        digests:
          256: "ba7816bf..."

Each message text is hashed as UTF-8.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

import yaml

from errors import VectorFileError
from sha2 import compute_text_digest
from variants import get_variant

logger = logging.getLogger(__name__)

DEFAULT_VECTORS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "known_vectors.yaml")


@dataclass(frozen=True)
class KnownVector:
    text: str
    bits: int
    expected: str


@dataclass(frozen=True)
class VectorResult:
    vector: KnownVector
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.vector.expected


def load_vectors(path: Optional[str] = None) -> List[KnownVector]:
    """Load known-answer vectors from a YAML file (the bundled one by default).

    Raises `VectorFileError` for unparsable or malformed files and
    `InvalidVariant` for a digest keyed by an unsupported bit length.
    """
    path = path or DEFAULT_VECTORS_PATH
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise VectorFileError(path, f"invalid YAML: {e}") from e

    if data is None:
        return []
    if not isinstance(data, dict):
        raise VectorFileError(path, f"expected a mapping at the top level, got {type(data).__name__}")
    messages = data.get("messages") or []
    if not isinstance(messages, list):
        raise VectorFileError(path, "'messages' must be a list")

    vectors: List[KnownVector] = []
    for idx, entry in enumerate(messages):
        if not isinstance(entry, dict):
            raise VectorFileError(path, f"message #{idx} must be a mapping, got {type(entry).__name__}")
        text = entry.get("text")
        text = "" if text is None else str(text)
        digests = entry.get("digests") or {}
        if not isinstance(digests, dict):
            raise VectorFileError(path, f"message #{idx}: 'digests' must be a mapping")

        for bits, expected in digests.items():
            try:
                bits = int(bits)
            except (TypeError, ValueError):
                raise VectorFileError(path, f"message #{idx}: digest key {bits!r} is not a bit length") from None
            if not isinstance(expected, str):
                raise VectorFileError(path, f"message #{idx}: SHA-{bits} digest must be a string")
            # Raises InvalidVariant for unsupported bit lengths.
            spec = get_variant(bits)
            vectors.append(KnownVector(text=text, bits=spec.bits, expected=expected.lower()))
    return vectors


def check_vectors(vectors: Optional[Sequence[KnownVector]] = None) -> List[VectorResult]:
    """Hash every vector and compare against its expected digest."""
    if vectors is None:
        vectors = load_vectors()

    results = [VectorResult(vector=v, actual=compute_text_digest(v.text, v.bits)) for v in vectors]
    failed = sum(1 for r in results if not r.passed)
    logger.info("Checked %d known-answer vectors, %d failed", len(results), failed)
    return results
