"""TEA round function over a single 64-bit block.

The block is two unsigned 32-bit words ``(y, z)`` and the key four words
``(k0, k1, k2, k3)``. All arithmetic wraps modulo 2**32. Both transforms are
pure: they return a new tuple and never touch their arguments.
"""
from __future__ import annotations

import numbers
import struct
from typing import Sequence, Tuple

from .errors import MalformedBlock, MalformedKey

DELTA = 0x9E3779B9
MASK32 = 0xFFFFFFFF

WORDS_IN_BLOCK = 2
WORDS_IN_KEY = 4

Block = Tuple[int, int]


def bytes_to_words(data: bytes) -> Tuple[int, ...]:
    """Split big-endian bytes into unsigned 32-bit words."""
    return struct.unpack(">" + "I" * (len(data) // 4), data)


def words_to_bytes(words: Sequence[int]) -> bytes:
    """Pack unsigned 32-bit words as big-endian bytes."""
    return struct.pack(">" + "I" * len(words), *(int(w) & MASK32 for w in words))


def is_word(value: object) -> bool:
    """True for integers other than bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check(block: Sequence[int], key: Sequence[int]) -> None:
    if len(block) != WORDS_IN_BLOCK:
        raise MalformedBlock(f"block must have {WORDS_IN_BLOCK} words, got {len(block)}")
    if not all(is_word(w) for w in block):
        raise MalformedBlock("block words must be integers")
    if len(key) != WORDS_IN_KEY:
        raise MalformedKey(f"key must have {WORDS_IN_KEY} words, got {len(key)}")
    if not all(is_word(k) for k in key):
        raise MalformedKey("key words must be integers")


def encrypt_words(block: Sequence[int], key: Sequence[int], rounds: int) -> Block:
    """Forward transform of one block."""
    _check(block, key)
    y, z = int(block[0]) & MASK32, int(block[1]) & MASK32
    k0, k1, k2, k3 = (int(k) & MASK32 for k in key)

    total = 0
    for _ in range(rounds):
        total = (total + DELTA) & MASK32
        y = (y + ((((z << 4) + k0) ^ (z + total) ^ ((z >> 5) + k1)))) & MASK32
        z = (z + ((((y << 4) + k2) ^ (y + total) ^ ((y >> 5) + k3)))) & MASK32
    return y, z


def decrypt_words(block: Sequence[int], key: Sequence[int], rounds: int) -> Block:
    """Inverse transform of one block."""
    _check(block, key)
    y, z = int(block[0]) & MASK32, int(block[1]) & MASK32
    k0, k1, k2, k3 = (int(k) & MASK32 for k in key)

    total = (DELTA * rounds) & MASK32
    for _ in range(rounds):
        z = (z - ((((y << 4) + k2) ^ (y + total) ^ ((y >> 5) + k3)))) & MASK32
        y = (y - ((((z << 4) + k0) ^ (z + total) ^ ((z >> 5) + k1)))) & MASK32
        total = (total - DELTA) & MASK32
    return y, z
