import secrets
from typing import Callable

from cryptography.hazmat.primitives import hashes

from .errors import RandomSourceUnavailable

# Bit width of one SHA-1 output block used when stretching a seed.
HASH_BITS = 160

EntropySource = Callable[[int], bytes]


def random_bits(nbytes: int, source: EntropySource = secrets.token_bytes) -> int:
    """Read *nbytes* secure random bytes as an unsigned big-endian integer."""
    if nbytes < 0:
        raise ValueError("nbytes must be >= 0")
    try:
        data = source(nbytes)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailable(f"entropy source failed: {exc}") from exc
    if data is None or len(data) != nbytes:
        raise RandomSourceUnavailable(f"entropy source returned a short read ({nbytes} bytes wanted)")
    return int.from_bytes(data, "big")


def int_to_bytes(value: int, width: int) -> bytes:
    # seedlen-bit arithmetic: SEED + k wraps modulo 2^(8*width)
    return (value % (1 << (8 * width))).to_bytes(width, "big")


def sha1_bytes(data: bytes) -> bytes:
    d = hashes.Hash(hashes.SHA1()); d.update(data); return d.finalize()


def sha1_int(value: int, width: int) -> int:
    """SHA1 of *value* encoded as a *width*-byte string, read back as an integer."""
    return int.from_bytes(sha1_bytes(int_to_bytes(value, width)), "big")


def set_bit(n: int, i: int) -> int:
    return n | (1 << i)
