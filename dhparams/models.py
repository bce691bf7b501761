from pydantic import BaseModel, ConfigDict
from typing import Tuple

# Result models


class PrimePair(BaseModel):
    model_config = ConfigDict(frozen=True)

    p: int
    q: int
    seed: int     # SEED the pair was derived from
    counter: int  # p-candidate index that produced p

    def as_tuple(self) -> Tuple[int, int]:
        return self.p, self.q


class DomainParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    p: int
    q: int
    g: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.p, self.q, self.g
