"""Tiny Encryption Algorithm (TEA) block cipher primitive.

Research / education only. TEA has known related-key weaknesses; do NOT use
it to protect real data.
"""

from .cipher.errors import (
    TEAError,
    InvalidKeyType,
    InvalidKeyLength,
    InvalidKeyShape,
    InvalidKeyElement,
    InvalidRounds,
    InvalidBlockLength,
    MalformedBlock,
    MalformedKey,
)
from .cipher.block_codec import DELTA, encrypt_words, decrypt_words
from .cipher.key_schedule import KEY_SIZE, KeySchedule
from .cipher.tea import BLOCK_SIZE, DEFAULT_ROUNDS, BlockCipher, TEACipher

__version__ = "0.1.0"

__all__ = [
    "TEAError",
    "InvalidKeyType",
    "InvalidKeyLength",
    "InvalidKeyShape",
    "InvalidKeyElement",
    "InvalidRounds",
    "InvalidBlockLength",
    "MalformedBlock",
    "MalformedKey",
    "DELTA",
    "encrypt_words",
    "decrypt_words",
    "KEY_SIZE",
    "KeySchedule",
    "BLOCK_SIZE",
    "DEFAULT_ROUNDS",
    "BlockCipher",
    "TEACipher",
]
