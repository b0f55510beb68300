"""List algorithms that need randomness, built on the `RandomSource` contract."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

    from spongerand.base import RandomSource

__all__ = ['choice', 'sample', 'shuffle']


def shuffle[T](items: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm.

    Returns:
        The same sequence, for chaining.
    """
    last = len(items) - 1
    for i in range(last):
        j = rng.random_in_range(i, last)
        items[i], items[j] = items[j], items[i]
    return items


def sample[T](items: Sequence[T], k: int, rng: RandomSource) -> list[T]:
    """Draw ``k`` elements without replacement.

    Each draw picks a random index into the shrinking pool and fills the hole
    with the pool's last live element. ``items`` itself is not modified.

    Args:
        items: Population to draw from.
        k: Number of samples, ``0 <= k <= len(items)``.
        rng: Source of random indices.

    Returns:
        A list of ``k`` elements taken from distinct positions of ``items``.

    Raises:
        ValueError: If ``k`` is negative or larger than the population.
    """
    if k < 0:
        msg = f'Sample size must not be negative, got {k}'
        raise ValueError(msg)
    if k > len(items):
        msg = f'Population has only {len(items)} items; cannot take {k} samples'
        raise ValueError(msg)

    pool = list(items)
    result: list[T] = []
    for i in range(k):
        live = len(pool) - i
        j = rng.random_index(live)
        result.append(pool[j])
        pool[j] = pool[live - 1]
    return result


def choice[T](items: Sequence[T], rng: RandomSource) -> T:
    """Return one random element of a non-empty sequence.

    Raises:
        IndexError: If ``items`` is empty.
    """
    if not items:
        msg = 'Cannot choose from an empty sequence'
        raise IndexError(msg)
    return items[rng.random_index(len(items))]
