import random
from typing import List, MutableSequence, TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """
    In-place uniform shuffle. Walks from the last index down to 1 and swaps
    each slot with a random slot in [0, i].
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def shuffled(items, rng: random.Random) -> List[T]:
    return fisher_yates_shuffle(list(items), rng)
