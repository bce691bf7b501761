import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# 50 Miller-Rabin rounds bound the false-positive rate by 4^-50 = 2^-100.
DEFAULT_PRIMALITY_ROUNDS = 50
DEFAULT_MAX_SEED_ATTEMPTS = 10_000
DEFAULT_SEED_RETRIES = 3
DEFAULT_MAX_SELECTION_DRAWS = 4096


@dataclass
class GenerationConfig:
    primality_rounds: int = DEFAULT_PRIMALITY_ROUNDS
    max_seed_attempts: int = DEFAULT_MAX_SEED_ATTEMPTS
    seed_retries: int = DEFAULT_SEED_RETRIES
    inner_bound: Optional[int] = None  # None -> 4096 * N'
    max_selection_draws: int = DEFAULT_MAX_SELECTION_DRAWS

    def __post_init__(self):
        for name in ("primality_rounds", "max_seed_attempts", "max_selection_draws"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")
        if self.seed_retries < 0:
            raise ValueError("seed_retries must be >= 0")
        if self.inner_bound is not None and self.inner_bound < 1:
            raise ValueError("inner_bound must be >= 1")

    def counter_bound(self, L: int) -> int:
        """Number of p candidates tried per q before a new SEED is drawn."""
        if self.inner_bound is not None:
            return self.inner_bound
        return 4096 * (L // 1024 + 1)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config() -> GenerationConfig:
    load_dotenv()
    return GenerationConfig(
        primality_rounds=_env_int("DHPARAMS_PRIMALITY_ROUNDS", DEFAULT_PRIMALITY_ROUNDS),
        max_seed_attempts=_env_int("DHPARAMS_MAX_SEED_ATTEMPTS", DEFAULT_MAX_SEED_ATTEMPTS),
        seed_retries=_env_int("DHPARAMS_SEED_RETRIES", DEFAULT_SEED_RETRIES),
        inner_bound=_env_int("DHPARAMS_INNER_BOUND", None),
        max_selection_draws=_env_int("DHPARAMS_MAX_SELECTION_DRAWS", DEFAULT_MAX_SELECTION_DRAWS),
    )
