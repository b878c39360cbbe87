import sys

import pytest

from wordbytes.wordops import (
    format_bytes,
    is_big_endian,
    main,
    merge_bytes,
    put_byte,
    word_bytes,
)

MERGE_CASES = [
    (0x89ABCDEF12893456, 0xAB45A2B3AF3F1E67, 0x89ABCDEFAF3F1E67),
    (0x0000000000000000, 0x76543210ABCDEF19, 0x00000000ABCDEF19),
    (0xABCABDEBFEBABDCE, 0x1111111111111111, 0xABCABDEB11111111),
    (0x1111111111111111, 0x1561561561561561, 0x1111111161561561),
    (0x5994A123EF548FE4, 0x4821234561234878, 0x5994A12361234878),
]

PUT_X = 0x123456789ABCDEAB
PUT_ANSWERS = [
    0xFF3456789ABCDEAB,
    0x12FF56789ABCDEAB,
    0x1234FF789ABCDEAB,
    0x123456FF9ABCDEAB,
    0x12345678FFBCDEAB,
    0x123456789AFFDEAB,
    0x123456789ABCFFAB,
    0x123456789ABCDEFF,
]


@pytest.mark.parametrize("x, y, expected", MERGE_CASES)
def test_merge_bytes_cases(x, y, expected):
    assert merge_bytes(x, y) == expected


def test_merge_bytes_resources_example():
    assert merge_bytes(0x89ABCDEF12893456, 0x76543210ABCDEF19) == 0x89ABCDEFABCDEF19


@pytest.mark.parametrize("i, expected", list(enumerate(PUT_ANSWERS)))
def test_put_byte_in_range(i, expected):
    assert put_byte(PUT_X, 0xFF, i) == expected


@pytest.mark.parametrize("i", [-2, -1, 8, 9])
def test_put_byte_out_of_range_is_identity(i):
    assert put_byte(PUT_X, 0xFF, i) == PUT_X


def test_put_byte_resources_examples():
    assert put_byte(0x12345678CDEF3456, 0xAB, 2) == 0x1234AB78CDEF3456
    assert put_byte(0x12345678CDEF3456, 0xAB, 0) == 0xAB345678CDEF3456


def test_put_byte_keeps_original_byte_roundtrip():
    for i in range(8):
        original = (PUT_X >> ((7 - i) * 8)) & 0xFF
        assert put_byte(put_byte(PUT_X, 0x00, i), original, i) == PUT_X


def test_word_bytes_roundtrip():
    value = 0x89ABCDEF12893456
    raw = word_bytes(value)
    assert len(raw) == 8
    assert int.from_bytes(raw, sys.byteorder) == value


def test_is_big_endian_matches_storage_of_one():
    first = word_bytes(1)[0]
    assert (first == 0) == is_big_endian()


def test_format_bytes_matches_word_bytes():
    value = 0x123456789ABCDEAB
    parts = format_bytes(value).split(" ")
    assert len(parts) == 8
    assert bytes(int(p, 16) for p in parts) == word_bytes(value)
    assert all(len(p) == 2 for p in parts)


def test_format_bytes_zero():
    assert format_bytes(0) == " ".join(["00"] * 8)


@pytest.mark.parametrize("bad", [-1, 1 << 64])
def test_word_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        merge_bytes(bad, 0)
    with pytest.raises(ValueError):
        word_bytes(bad)


def test_put_byte_rejects_large_byte():
    with pytest.raises(ValueError):
        put_byte(PUT_X, 0x100, 0)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        put_byte("1", 0, 0)


def test_main_reports_no_errors(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "(!)" not in out
    assert ">> Check 3 - FINISHED" in out
    assert f">> Check 1 - Is Big Endian? {int(is_big_endian())}" in out