import random
from typing import List, MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that hands out uniform integers in ``[0, n)``.

    ``random.Random`` satisfies this; tests substitute scripted sources.
    """

    def randrange(self, n: int) -> int:
        ...


def default_rng(rng: Optional[RandomSource] = None) -> RandomSource:
    return rng if rng is not None else random.Random()


def shuffle(items: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """In-place Fisher-Yates shuffle driven only by ``rng.randrange``."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def permuted(items, rng: RandomSource) -> List[T]:
    return list(shuffle(list(items), rng))
