import random
import secrets

import pytest

from dhparams import GenerationConfig, generate_pq


class FlakySource:
    """Entropy source that fails a fixed number of times before delivering."""

    def __init__(self, failures, exc=OSError, fallback=secrets.token_bytes):
        self.failures = failures
        self.exc = exc
        self.fallback = fallback
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc("entropy pool unavailable")
        return self.fallback(n)


def seeded_source(seed):
    rand = random.Random(seed)
    return rand.randbytes


@pytest.fixture
def flaky_source():
    return FlakySource


@pytest.fixture
def small_pair():
    # 607 - 1 = 6 * 101
    return 607, 101


@pytest.fixture(scope="session")
def pair_160_512():
    return generate_pq(160, 512, GenerationConfig())


@pytest.fixture(scope="session")
def pair_32_128():
    return generate_pq(32, 128, source=seeded_source(2631))
