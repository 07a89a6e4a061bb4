"""Random fortune selection."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from fortuner.models import Fortune


class RandomSource:
    """Uniform index draws, either reproducible from a seed or seeded by the OS."""

    def __init__(self, generator: random.Random) -> None:
        self._generator = generator

    @classmethod
    def seeded(cls, seed: int) -> "RandomSource":
        return cls(random.Random(seed))

    @classmethod
    def system(cls) -> "RandomSource":
        return cls(random.SystemRandom())

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "RandomSource":
        return cls.system() if seed is None else cls.seeded(seed)

    def choose_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError("cannot choose from an empty range")
        return self._generator.randrange(count)


def pick_fortune(
    corpus: Sequence[Fortune],
    seed: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Optional[str]:
    """Return the text of one fortune drawn uniformly, or None for an empty corpus."""
    if not corpus:
        return None
    source = rng if rng is not None else RandomSource.from_seed(seed)
    return corpus[source.choose_index(len(corpus))].text
