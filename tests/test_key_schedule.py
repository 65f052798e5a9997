import numpy as np
import pytest

from teacipher.cipher.errors import (
    InvalidKeyElement,
    InvalidKeyLength,
    InvalidKeyShape,
    InvalidKeyType,
    TEAError,
)
from teacipher.cipher.key_schedule import KeySchedule


def test_from_bytes_splits_big_endian_words():
    raw = bytes.fromhex("00112233445566778899aabbccddeeff")
    ks = KeySchedule.from_bytes(raw)
    assert ks.words == (0x00112233, 0x44556677, 0x8899AABB, 0xCCDDEEFF)
    assert ks.to_bytes() == raw
    assert len(ks) == 4
    assert list(ks) == list(ks.words)


def test_from_bytes_accepts_bytearray_and_memoryview():
    raw = bytes(range(16))
    assert KeySchedule.from_bytes(bytearray(raw)) == KeySchedule.from_bytes(raw)
    assert KeySchedule.from_bytes(memoryview(raw)) == KeySchedule.from_bytes(raw)


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_from_bytes_rejects_wrong_length(length):
    with pytest.raises(InvalidKeyLength):
        KeySchedule.from_bytes(b"\x00" * length)


def test_from_words_preserves_order():
    ks = KeySchedule.from_words([4, 3, 2, 1])
    assert ks.words == (4, 3, 2, 1)


def test_from_words_accepts_zero_words():
    assert KeySchedule.from_words([0, 0, 0, 0]).words == (0, 0, 0, 0)


def test_from_words_wraps_out_of_range_integers():
    ks = KeySchedule.from_words([-1, 1 << 32, (1 << 32) + 5, 7])
    assert ks.words == (0xFFFFFFFF, 0, 5, 7)


@pytest.mark.parametrize("words", [[1, 2, 3], [1, 2, 3, 4, 5], []])
def test_from_words_rejects_wrong_count(words):
    with pytest.raises(InvalidKeyShape):
        KeySchedule.from_words(words)


@pytest.mark.parametrize("bad", ["1", 1.0, None, True, b"\x01"])
def test_from_words_rejects_non_integers(bad):
    with pytest.raises(InvalidKeyElement):
        KeySchedule.from_words([1, 2, bad, 4])


def test_coerce_dispatches_on_representation():
    raw = bytes(range(16))
    from_raw = KeySchedule.coerce(raw)
    from_words = KeySchedule.coerce(list(from_raw.words))
    assert from_raw == from_words
    assert KeySchedule.coerce(from_raw) is from_raw
    assert KeySchedule.coerce(tuple(from_raw.words)) == from_raw


@pytest.mark.parametrize("bad", [None, "0123456789abcdef", 12345, {"k": 1}])
def test_coerce_rejects_unsupported_types(bad):
    with pytest.raises(InvalidKeyType):
        KeySchedule.coerce(bad)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        KeySchedule.from_bytes(b"short")
    assert issubclass(InvalidKeyShape, TEAError)


def test_schedule_is_immutable_and_hashable():
    ks = KeySchedule.from_words([1, 2, 3, 4])
    with pytest.raises(AttributeError):
        ks.words = (0, 0, 0, 0)
    assert hash(ks) == hash(KeySchedule.from_words([1, 2, 3, 4]))


def test_repr_hides_key_material():
    ks = KeySchedule.from_words([0xCAFEBABE, 0, 0, 0])
    assert "cafebabe" not in repr(ks).lower()
    assert str(0xCAFEBABE) not in repr(ks)


# ---------------------------------------------------------------------------
# Direct construction
# ---------------------------------------------------------------------------

def test_direct_construction_copies_into_tuple():
    words = [1, 2, 3, 4]
    ks = KeySchedule(words=words)
    words[0] = 99
    assert ks.words == (1, 2, 3, 4)
    assert isinstance(ks.words, tuple)


def test_direct_construction_reduces_words():
    ks = KeySchedule(words=(1 << 40, -1, 0, 5))
    assert ks.words == (0, 0xFFFFFFFF, 0, 5)
    assert ks == KeySchedule.from_words([1 << 40, -1, 0, 5])


@pytest.mark.parametrize("words", [(1, 2, 3), (1, 2, 3, 4, 5), 1234, None])
def test_direct_construction_rejects_bad_shape(words):
    with pytest.raises(InvalidKeyShape):
        KeySchedule(words=words)


def test_direct_construction_rejects_non_integers():
    with pytest.raises(InvalidKeyElement):
        KeySchedule(words=(1, 2, 3.0, 4))


# ---------------------------------------------------------------------------
# Other word sequences
# ---------------------------------------------------------------------------

def test_coerce_accepts_numpy_words():
    arr = np.array([0x00112233, 0x44556677, 0x8899AABB, 0xCCDDEEFF], dtype=np.uint32)
    ks = KeySchedule.coerce(arr)
    assert ks.words == (0x00112233, 0x44556677, 0x8899AABB, 0xCCDDEEFF)
    assert all(type(w) is int for w in ks.words)


def test_coerce_accepts_generic_sequence():
    assert KeySchedule.coerce(range(4)).words == (0, 1, 2, 3)
