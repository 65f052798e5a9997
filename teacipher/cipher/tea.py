"""TEA block cipher facade.

``TEACipher`` is the object a chaining-mode driver plugs in: it reports fixed
``keysize()``/``blocksize()`` values and transforms exactly one 8-byte block
per ``encrypt``/``decrypt`` call. It keeps no IV, chaining state or padding;
those belong to the driver.

Example::

    cipher = TEACipher.new(b"0123456789abcdef")
    ct = cipher.encrypt(b"8 bytes!")
    assert cipher.decrypt(ct) == b"8 bytes!"
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional, Sequence

from .block_codec import Block, bytes_to_words, decrypt_words, encrypt_words, words_to_bytes
from .errors import InvalidBlockLength, InvalidRounds
from .key_schedule import KEY_SIZE, KeyInput, KeySchedule

DEFAULT_ROUNDS = 32
BLOCK_SIZE = 8


class BlockCipher:
    """Single-block cipher contract expected by chaining-mode drivers."""

    @classmethod
    def keysize(cls) -> int:  # pragma: no cover
        raise NotImplementedError

    @classmethod
    def blocksize(cls) -> int:  # pragma: no cover
        raise NotImplementedError

    def encrypt(self, plaintext_block: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError

    def decrypt(self, ciphertext_block: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError


def _validate_rounds(rounds: object) -> int:
    if isinstance(rounds, bool) or not isinstance(rounds, numbers.Integral):
        raise InvalidRounds(f"rounds must be a positive integer, got {type(rounds).__name__}")
    if rounds < 1:
        raise InvalidRounds(f"rounds must be a positive integer, got {rounds}")
    return int(rounds)


def _as_block_bytes(data: bytes, what: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidBlockLength(f"{what} must be {BLOCK_SIZE} bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) != BLOCK_SIZE:
        raise InvalidBlockLength(f"{what} size must be {BLOCK_SIZE} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class TEACipher(BlockCipher):
    """Immutable TEA instance bound to one key and one round count."""
    schedule: KeySchedule
    rounds: int = DEFAULT_ROUNDS

    KEY_SIZE = KEY_SIZE
    BLOCK_SIZE = BLOCK_SIZE

    def __post_init__(self):
        if not isinstance(self.schedule, KeySchedule):
            object.__setattr__(self, "schedule", KeySchedule.coerce(self.schedule))
        object.__setattr__(self, "rounds", _validate_rounds(self.rounds))

    @classmethod
    def new(cls, key: KeyInput, rounds: Optional[int] = None) -> "TEACipher":
        """Create a cipher from a 16-byte key or four key words.

        ``rounds`` defaults to 32 when omitted or ``None``.
        """
        schedule = KeySchedule.coerce(key)
        return cls(schedule=schedule, rounds=DEFAULT_ROUNDS if rounds is None else rounds)

    @classmethod
    def keysize(cls) -> int:
        return KEY_SIZE

    @classmethod
    def blocksize(cls) -> int:
        return BLOCK_SIZE

    def encrypt(self, plaintext_block: bytes) -> bytes:
        """Encrypt exactly ``blocksize()`` bytes."""
        words = bytes_to_words(_as_block_bytes(plaintext_block, "plain_text"))
        return words_to_bytes(self.encrypt_block(words))

    def decrypt(self, ciphertext_block: bytes) -> bytes:
        """Decrypt exactly ``blocksize()`` bytes."""
        words = bytes_to_words(_as_block_bytes(ciphertext_block, "cipher_text"))
        return words_to_bytes(self.decrypt_block(words))

    def encrypt_block(self, words: Sequence[int]) -> Block:
        return encrypt_words(words, self.schedule, self.rounds)

    def decrypt_block(self, words: Sequence[int]) -> Block:
        return decrypt_words(words, self.schedule, self.rounds)
