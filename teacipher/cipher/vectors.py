"""Published 32-round TEA reference vectors (big-endian word order)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .block_codec import words_to_bytes


@dataclass(frozen=True)
class KnownVector:
    name: str
    key: Tuple[int, int, int, int]
    plaintext: Tuple[int, int]
    ciphertext: Tuple[int, int]
    rounds: int = 32

    def as_bytes(self) -> Tuple[bytes, bytes, bytes]:
        """Return (key, plaintext, ciphertext) as raw bytes."""
        return (
            words_to_bytes(self.key),
            words_to_bytes(self.plaintext),
            words_to_bytes(self.ciphertext),
        )


KNOWN_VECTORS: List[KnownVector] = [
    KnownVector(
        name="zero-key-zero-block",
        key=(0x00000000, 0x00000000, 0x00000000, 0x00000000),
        plaintext=(0x00000000, 0x00000000),
        ciphertext=(0x41EA3A0A, 0x94BAA940),
    ),
    KnownVector(
        name="counting-key",
        key=(0x00112233, 0x44556677, 0x8899AABB, 0xCCDDEEFF),
        plaintext=(0x01020304, 0x05060708),
        ciphertext=(0xDEB1C0A2, 0x7E745DB3),
    ),
]
