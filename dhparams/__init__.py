from .config import GenerationConfig, load_config
from .dh import derive_pq, generate_domain_parameters, generate_g, generate_pq
from .errors import (
    DHParamsError,
    GenerationExhausted,
    RandomSourceUnavailable,
    SelectionExhausted,
)
from .models import DomainParameters, PrimePair
from .primes import is_probable_prime
from .utils import random_bits

__all__ = [
    "DHParamsError",
    "DomainParameters",
    "GenerationConfig",
    "GenerationExhausted",
    "PrimePair",
    "RandomSourceUnavailable",
    "SelectionExhausted",
    "derive_pq",
    "generate_domain_parameters",
    "generate_g",
    "generate_pq",
    "is_probable_prime",
    "load_config",
    "random_bits",
]
