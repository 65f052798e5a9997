import numpy as np
import pytest

from teacipher.cipher.block_codec import (
    DELTA,
    MASK32,
    bytes_to_words,
    decrypt_words,
    encrypt_words,
    words_to_bytes,
)
from teacipher.cipher.errors import MalformedBlock, MalformedKey
from teacipher.cipher.vectors import KNOWN_VECTORS


def test_delta_constant():
    assert DELTA == 0x9E3779B9


@pytest.mark.parametrize("vec", KNOWN_VECTORS, ids=lambda v: v.name)
def test_known_vectors_forward(vec):
    assert encrypt_words(vec.plaintext, vec.key, vec.rounds) == vec.ciphertext


@pytest.mark.parametrize("vec", KNOWN_VECTORS, ids=lambda v: v.name)
def test_known_vectors_inverse(vec):
    assert decrypt_words(vec.ciphertext, vec.key, vec.rounds) == vec.plaintext


def test_single_round_matches_hand_computation():
    y, z = 0x01234567, 0x89ABCDEF
    k0, k1, k2, k3 = 1, 2, 3, 4
    s = DELTA
    y2 = (y + ((((z << 4) + k0) ^ (z + s) ^ ((z >> 5) + k1)))) & MASK32
    z2 = (z + ((((y2 << 4) + k2) ^ (y2 + s) ^ ((y2 >> 5) + k3)))) & MASK32
    assert encrypt_words((y, z), (k0, k1, k2, k3), 1) == (y2, z2)


def test_transform_does_not_mutate_inputs():
    block = [0x11111111, 0x22222222]
    key = [5, 6, 7, 8]
    out = encrypt_words(block, key, 32)
    assert block == [0x11111111, 0x22222222]
    assert key == [5, 6, 7, 8]
    assert isinstance(out, tuple)


def test_outputs_are_32_bit():
    y, z = encrypt_words((MASK32, MASK32), (MASK32,) * 4, 32)
    assert 0 <= y <= MASK32
    assert 0 <= z <= MASK32


@pytest.mark.parametrize("block", [(), (1,), (1, 2, 3)])
def test_malformed_block(block):
    with pytest.raises(MalformedBlock):
        encrypt_words(block, (0, 0, 0, 0), 32)
    with pytest.raises(MalformedBlock):
        decrypt_words(block, (0, 0, 0, 0), 32)


@pytest.mark.parametrize("key", [(0, 0, 0), (0, 0, 0, 0, 0)])
def test_malformed_key(key):
    with pytest.raises(MalformedKey):
        encrypt_words((0, 0), key, 32)
    with pytest.raises(MalformedKey):
        decrypt_words((0, 0), key, 32)


def test_word_conversion_is_big_endian():
    assert bytes_to_words(b"\x01\x02\x03\x04\x05\x06\x07\x08") == (0x01020304, 0x05060708)
    assert words_to_bytes((0x41EA3A0A, 0x94BAA940)) == bytes.fromhex("41ea3a0a94baa940")


@pytest.mark.parametrize("block", [(1.5, 2), (1, "x"), (None, 0), (True, 0)])
def test_non_integer_block_words(block):
    with pytest.raises(MalformedBlock):
        encrypt_words(block, (0, 0, 0, 0), 32)
    with pytest.raises(MalformedBlock):
        decrypt_words(block, (0, 0, 0, 0), 32)


def test_non_integer_key_words():
    with pytest.raises(MalformedKey):
        encrypt_words((0, 0), (0, 0, 0.5, 0), 32)


def test_numpy_words_do_not_overflow():
    block = np.array([0x01020304, 0x05060708], dtype=np.uint32)
    key = np.array([0x00112233, 0x44556677, 0x8899AABB, 0xCCDDEEFF], dtype=np.uint32)
    assert encrypt_words(block, key, 32) == (0xDEB1C0A2, 0x7E745DB3)
