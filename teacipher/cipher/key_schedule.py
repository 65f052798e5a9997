"""Normalization of a 128-bit TEA key into four 32-bit words."""
from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from .block_codec import MASK32, WORDS_IN_KEY, bytes_to_words, is_word, words_to_bytes
from .errors import InvalidKeyElement, InvalidKeyLength, InvalidKeyShape, InvalidKeyType

KEY_SIZE = 16

KeyInput = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray, "KeySchedule"]


def _is_word_sequence(value: object) -> bool:
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    return isinstance(value, (SequenceABC, np.ndarray))


@dataclass(frozen=True)
class KeySchedule:
    """Four unsigned 32-bit key words, in order.

    Every construction path, including ``KeySchedule(words=...)``, checks
    the word count and element types and stores a tuple reduced modulo 2**32.
    """
    words: Tuple[int, int, int, int]

    def __post_init__(self):
        if not _is_word_sequence(self.words):
            raise InvalidKeyShape(
                f"key must be a sequence of {WORDS_IN_KEY} integers, got {type(self.words).__name__}"
            )
        words = list(self.words)
        if len(words) != WORDS_IN_KEY:
            raise InvalidKeyShape(f"key must have {WORDS_IN_KEY} elements, got {len(words)}")
        for i, w in enumerate(words):
            if not is_word(w):
                raise InvalidKeyElement(
                    f"each key element must be a 32-bit integer; element {i} is {type(w).__name__}"
                )
        object.__setattr__(self, "words", tuple(int(w) & MASK32 for w in words))

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray, memoryview]) -> "KeySchedule":
        """Decode a 16-byte buffer as four big-endian words."""
        raw = bytes(raw)
        if len(raw) != KEY_SIZE:
            raise InvalidKeyLength(f"key must be {KEY_SIZE} bytes long, got {len(raw)}")
        return cls(words=bytes_to_words(raw))

    @classmethod
    def from_words(cls, words: Sequence[int]) -> "KeySchedule":
        """Accept four integers; each is reduced modulo 2**32."""
        return cls(words=words)

    @classmethod
    def coerce(cls, key: KeyInput) -> "KeySchedule":
        """Build a schedule from whichever key representation the caller holds."""
        if isinstance(key, KeySchedule):
            return key
        if isinstance(key, (bytes, bytearray, memoryview)):
            return cls.from_bytes(key)
        if _is_word_sequence(key):
            return cls.from_words(key)
        raise InvalidKeyType(
            f"key must be a {KEY_SIZE}-byte buffer or a sequence of {WORDS_IN_KEY} integers, "
            f"got {type(key).__name__}"
        )

    def to_bytes(self) -> bytes:
        return words_to_bytes(self.words)

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        # Key material stays out of reprs and tracebacks.
        return "KeySchedule(<redacted>)"
