"""Tests for the bit-packing encoder."""

import random

import pytest

from base91 import STD_ALPHABET, encode_into, encoded_len


def encode_std(data):
    buf = bytearray(encoded_len(len(data)))
    n = encode_into(buf, data, STD_ALPHABET)
    return bytes(buf[:n])


@pytest.mark.parametrize("data, expected", [
    (b"", b""),
    (b"\x00", b"AA"),
    (b"\xff", b"/C"),
    (b"\x00\x00", b"AAA"),
    (b"test", b"fPNKd"),
    (b"Hello, World!", b'>OwJh>}AQ;r@@Y?F'),
    (b"B\x0f\xce\xeb\x8c\xea\x03\x17\xb8", b"_q5`HJDWEEBB"),
    (b"\x9a\xc1\x00\xe2\t~SO\xd6", b"uEHt{G7T{NQB"),
])
def test_known_vectors(data, expected):
    assert encode_std(data) == expected


def test_thirteen_bit_window():
    """Low 13 bits above 88 consume only 13 bits."""
    # 0x74 0x65 -> low 13 bits = 1396
    out = encode_std(b"te")
    assert out[:2] == b"fP"
    # 3 bits remain after the pair and flush as one symbol
    assert len(out) == 3


def test_fourteen_bit_window():
    """Low 13 bits of 88 or less borrow a 14th bit."""
    # ", " packs to 8236; low 13 bits are 44 so all 14 bits are taken
    out = encode_std(b", ")
    assert out[:2] == b'u"'
    # Nothing is left above bit 14, so the 2-bit tail is zero
    assert out == b'u"A'


def test_flush_single_symbol():
    """A tail of 7 bits or fewer holding a value <= 90 needs one symbol."""
    # "test" leaves 6 bits (value 29) after two pairs
    assert encode_std(b"test")[-1:] == b"d"
    assert len(encode_std(b"test")) == 5


def test_flush_two_symbols_for_short_tail_above_90():
    """A 7-bit tail holding 91 or more still needs two symbols."""
    # The last pair leaves 7 bits holding 107: digits 16 then 1
    out = encode_std(b"\x9a\xc1\x00\xe2\t~SO\xd6")
    assert out[-2:] == b"QB"
    assert len(out) == 12

    out = encode_std(b"B\x0f\xce\xeb\x8c\xea\x03\x17\xb8")
    assert out[-2:] == b"BB"
    assert len(out) == 12


def test_flush_two_symbols_for_full_byte():
    """A tail of 8 or more bits always needs two symbols."""
    assert len(encode_std(b"\x01")) == 2
    assert encode_std(b"\x01") == b"BA"


def test_custom_alphabet(reversed_alphabet):
    data = b"Hello, World!"
    std = encode_std(data)
    buf = bytearray(encoded_len(len(data)))
    n = encode_into(buf, data, reversed_alphabet)
    # Same digits, mirrored symbol table
    mirrored = bytes(STD_ALPHABET.symbols[90 - STD_ALPHABET.lookup(c)] for c in std)
    assert bytes(buf[:n]) == mirrored


def test_output_uses_only_alphabet_symbols():
    data = bytes(range(256)) * 4
    out = encode_std(data)
    assert set(out) <= set(STD_ALPHABET.symbols)


def test_accepts_bytearray_and_memoryview():
    assert encode_std(bytearray(b"test")) == b"fPNKd"
    assert encode_std(memoryview(b"test")) == b"fPNKd"


def test_rejects_text_input():
    with pytest.raises(TypeError):
        encode_into(bytearray(10), "test")


def test_undersized_buffer_raises():
    with pytest.raises(IndexError):
        encode_into(bytearray(4), b"test")


def test_encoded_len_formula():
    assert encoded_len(0) == 0
    assert encoded_len(1) == 2
    assert encoded_len(13) == 16
    assert encoded_len(14) == 18
    assert encoded_len(256) == 316


def test_encoded_len_rejects_negative():
    with pytest.raises(ValueError):
        encoded_len(-1)


def test_encoded_len_is_upper_bound():
    rng = random.Random(91)
    for n in range(0, 300):
        data = bytes(rng.getrandbits(8) for _ in range(n))
        assert len(encode_std(data)) <= encoded_len(n), f"bound exceeded for n={n}"


def test_all_ones_input_stays_within_bound():
    """All-0xff input never borrows a 14th bit."""
    for n in range(1, 100):
        out = encode_std(b"\xff" * n)
        assert len(out) <= encoded_len(n)


def test_all_byte_values():
    data = bytes(range(256))
    out = encode_std(data)
    assert len(out) <= encoded_len(256)
    assert len(out) < len(data) * 4 // 3 + 4, "should beat base64"
