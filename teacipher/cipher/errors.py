"""Exceptions raised by the TEA primitive.

Every error is an input-contract violation detected before any round of the
cipher runs. They all derive from ``ValueError`` so callers that already
guard cipher calls with ``except ValueError`` keep working.
"""
from __future__ import annotations


class TEAError(ValueError):
    """Base class for all TEA validation failures."""


class InvalidKeyType(TEAError):
    """Key is neither a raw byte buffer nor a sequence of words."""


class InvalidKeyLength(TEAError):
    """Raw key buffer is not exactly 16 bytes."""


class InvalidKeyShape(TEAError):
    """Key word sequence does not have exactly 4 elements."""


class InvalidKeyElement(TEAError):
    """A key word is not an integer."""


class InvalidRounds(TEAError):
    """Round count is not a positive integer."""


class InvalidBlockLength(TEAError):
    """Plaintext/ciphertext block is not exactly 8 bytes."""


class MalformedBlock(TEAError):
    """Word-level block does not have exactly 2 words."""


class MalformedKey(TEAError):
    """Word-level key does not have exactly 4 words."""
