"""Seeded shuffling helpers."""

from __future__ import annotations

from typing import Any, List, Sequence, TypeVar

from .seeded_random import SeededRandom

T = TypeVar("T")


def shuffle_array(items: Sequence[T] | Any, seed: int) -> List[T]:
    """Return a seeded Fisher-Yates permutation of ``items``.

    The input is copied, never mutated. Anything that is not a list or tuple
    yields an empty list.
    """

    if not isinstance(items, (list, tuple)):
        return []
    rng = SeededRandom(seed)
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def scramble_word(word: str, seed: int) -> str:
    """Shuffle the letters of ``word``; the result may equal the input."""

    return "".join(shuffle_array(list(word or ""), seed))


__all__ = ["shuffle_array", "scramble_word"]
