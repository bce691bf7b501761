"""
Diffie-Hellman domain parameter generation, RFC 2631 section 2.2.1.

generate_pq() derives (p, q) from a random SEED by SHA-1 stretching so that
anyone holding SEED and counter can recompute them. generate_g() then picks
a generator of the order-q subgroup of Z_p*.
"""
import logging
import random
import secrets
from typing import Optional

from .config import GenerationConfig
from .errors import GenerationExhausted, RandomSourceUnavailable, SelectionExhausted
from .models import DomainParameters, PrimePair
from .primes import is_probable_prime
from .utils import HASH_BITS, EntropySource, random_bits, set_bit, sha1_int

_LOG = logging.getLogger(__name__)


def _check_sizes(m: int, L: int):
    if isinstance(m, bool) or not isinstance(m, int) or isinstance(L, bool) or not isinstance(L, int):
        raise ValueError("m and L must be integers")
    if m < 2:
        raise ValueError("m must be >= 2")
    if L < m:
        raise ValueError("L must be >= m")


def seed_length(m: int) -> int:
    """Byte length of a fresh SEED for an m-bit q."""
    return (m + 7) // 8


def _seed_width(seed: int, m: int) -> int:
    return max(seed_length(m), (seed.bit_length() + 7) // 8)


def derive_q(seed: int, m: int) -> int:
    """q = (U mod 2^m) with the low and high bits set."""
    mp = m // HASH_BITS + 1
    width = _seed_width(seed, m)
    U = 0
    for i in range(mp):
        U += (sha1_int(seed + i, width) ^ sha1_int(seed + mp + i, width)) << (HASH_BITS * i)
    q = U % (1 << m)
    return set_bit(set_bit(q, 0), m - 1)


def derive_p(seed: int, q: int, m: int, L: int, counter: int) -> int:
    """Candidate p for one counter value; (p - 1) is always a multiple of 2q."""
    mp = m // HASH_BITS + 1
    Lp = L // HASH_BITS + 1
    width = _seed_width(seed, m)
    R = seed + 2 * mp + Lp * counter
    V = 0
    for i in range(Lp):
        V += sha1_int(R + i, width) << (HASH_BITS * i)
    W = V % (1 << L)
    X = set_bit(W, L - 1)
    return X - (X % (2 * q)) + 1


def derive_pq(seed: int, m: int, L: int, config: Optional[GenerationConfig] = None) -> Optional[PrimePair]:
    """
    Run the deterministic part of the construction for one SEED.

    Returns None when the q derived from *seed* is composite and raises
    GenerationExhausted when no prime p turns up within the counter bound.
    """
    _check_sizes(m, L)
    if seed < 0:
        raise ValueError("seed must be non-negative")
    config = config or GenerationConfig()

    q = derive_q(seed, m)
    if not is_probable_prime(q, config.primality_rounds):
        return None

    bound = config.counter_bound(L)
    floor = 1 << (L - 1)
    for counter in range(bound):
        p = derive_p(seed, q, m, L, counter)
        if p >= floor and is_probable_prime(p, config.primality_rounds):
            return PrimePair(p=p, q=q, seed=seed, counter=counter)
    raise GenerationExhausted(f"no prime p found for this q within {bound} candidates", attempts=bound)


def _draw_seed(nbytes: int, retries: int, source: EntropySource) -> int:
    for attempt in range(retries + 1):
        try:
            return random_bits(nbytes, source)
        except RandomSourceUnavailable:
            if attempt == retries:
                raise
            _LOG.warning("entropy source failed drawing SEED, retry %d/%d", attempt + 1, retries)


def generate_pq(m: int, L: int, config: Optional[GenerationConfig] = None,
                source: EntropySource = secrets.token_bytes) -> PrimePair:
    """Generate an m-bit prime q and an L-bit prime p with q | p - 1."""
    _check_sizes(m, L)
    config = config or GenerationConfig()
    nbytes = seed_length(m)

    for attempt in range(1, config.max_seed_attempts + 1):
        seed = _draw_seed(nbytes, config.seed_retries, source)
        try:
            pair = derive_pq(seed, m, L, config)
        except GenerationExhausted:
            _LOG.warning("q candidate exhausted after %d p candidates, drawing a new SEED",
                         config.counter_bound(L))
            continue
        if pair is None:
            _LOG.debug("seed attempt %d: q composite", attempt)
            continue
        _LOG.info("found %d-bit q and %d-bit p after %d seed(s), counter=%d",
                  m, L, attempt, pair.counter)
        return pair

    raise GenerationExhausted(f"no (p, q) found within {config.max_seed_attempts} seeds",
                              attempts=config.max_seed_attempts)


def generate_g(p: int, q: int, config: Optional[GenerationConfig] = None,
               rng: Optional[random.Random] = None,
               source: EntropySource = secrets.token_bytes) -> int:
    """
    Pick g = h^((p-1)/q) mod p with g != 1. The pair is trusted to satisfy
    q | p - 1. *rng* defaults to a fresh generator seeded from *source*;
    g is public so it need not be a CSPRNG.
    """
    if p < 3 or q < 1:
        raise ValueError("p must be >= 3 and q >= 1")
    config = config or GenerationConfig()
    if rng is None:
        rng = random.Random(random_bits(32, source))

    j = (p - 1) // q
    for _ in range(config.max_selection_draws):
        h = rng.randrange(p - 1)
        if h == 0:
            continue
        g = pow(h, j, p)
        if g != 1:
            return g
    raise SelectionExhausted(f"no generator found in {config.max_selection_draws} draws",
                             draws=config.max_selection_draws)


def generate_domain_parameters(m: int, L: int, config: Optional[GenerationConfig] = None,
                               source: EntropySource = secrets.token_bytes,
                               rng: Optional[random.Random] = None) -> DomainParameters:
    pair = generate_pq(m, L, config, source)
    g = generate_g(pair.p, pair.q, config, rng, source)
    return DomainParameters(p=pair.p, q=pair.q, g=g)
