import secrets

from .config import DEFAULT_PRIMALITY_ROUNDS

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71)

_rand = secrets.SystemRandom()


def _miller_rabin_round(n: int, a: int, d: int, s: int) -> bool:
    """One strong Miller-Rabin round for base a (n > 2 odd, n - 1 = d * 2^s)."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = pow(x, 2, n)
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, rounds: int = DEFAULT_PRIMALITY_ROUNDS) -> bool:
    """
    Miller-Rabin with *rounds* random bases. A composite survives with
    probability at most 4^-rounds, so the default of 50 rounds keeps the
    false-positive rate at or below 2^-100.
    """
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    d = n - 1
    s = (d & -d).bit_length() - 1  # v2(n-1)
    d >>= s
    for _ in range(rounds):
        a = _rand.randrange(2, n - 1)
        if not _miller_rabin_round(n, a, d, s):
            return False
    return True
