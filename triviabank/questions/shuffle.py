from __future__ import annotations

import random
from typing import Iterable, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, stop: int, /) -> int: ...


def shuffle_questions(items: Iterable[T], *, rng: RandomSource | None = None) -> list[T]:
    """Return a Fisher-Yates permutation of ``items``; the input is left untouched."""
    shuffled = list(items)
    source = rng if rng is not None else random.Random()
    for index in range(len(shuffled) - 1, 0, -1):
        swap_index = source.randrange(index + 1)
        shuffled[index], shuffled[swap_index] = shuffled[swap_index], shuffled[index]
    return shuffled
