import pytest

from dhparams.errors import RandomSourceUnavailable
from dhparams.utils import int_to_bytes, random_bits, set_bit, sha1_bytes, sha1_int

ABC_SHA1 = "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_random_bits_fits_in_requested_bytes():
    for n in (1, 16, 100, 200):
        assert 0 <= random_bits(n) < 1 << (8 * n)


def test_random_bits_reads_big_endian():
    assert random_bits(2, lambda n: b"\x01\x02") == 0x0102
    assert random_bits(3, lambda n: b"\x00\x00\x00") == 0


def test_random_bits_zero_bytes():
    assert random_bits(0) == 0


def test_random_bits_source_failure(flaky_source):
    src = flaky_source(1)
    with pytest.raises(RandomSourceUnavailable):
        random_bits(8, src)
    assert src.calls == 1


def test_random_bits_not_implemented_maps_to_unavailable(flaky_source):
    with pytest.raises(RandomSourceUnavailable):
        random_bits(8, flaky_source(1, exc=NotImplementedError))


def test_random_bits_short_read():
    with pytest.raises(RandomSourceUnavailable):
        random_bits(8, lambda n: b"\x01")


def test_random_bits_negative():
    with pytest.raises(ValueError):
        random_bits(-1)


def test_sha1_known_vector():
    assert sha1_bytes(b"abc").hex() == ABC_SHA1
    assert sha1_int(int.from_bytes(b"abc", "big"), 3) == int(ABC_SHA1, 16)


def test_int_to_bytes_is_fixed_width_and_wraps():
    assert int_to_bytes(1, 4) == b"\x00\x00\x00\x01"
    assert int_to_bytes(0x1FF, 1) == b"\xff"
    assert int_to_bytes(1 << 16, 2) == b"\x00\x00"


def test_bit_helpers():
    n = set_bit(0, 5)
    assert n == 32
    assert set_bit(n, 5) == n
    assert set_bit(n, 0) == 33
