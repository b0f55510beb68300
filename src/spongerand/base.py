"""Shared generator contract: sponge-hash seeding and exact uniform sampling.

Every generator declares how many 32-bit words of state it needs and how to
load them; `BaseRng` turns an arbitrary seed into exactly that many words with
`sponge_hash`, and derives doubles and unbiased ranged integers from the raw
word stream. Subclasses implement:

- `seed_words_required`: state size in words.
- `_init_state(words)`: load hashed seed words, forcing a non-zero state.
- `_next_word()`: advance the state and return one uniform 32-bit word.
- `_export_state()` / `_import_state(state)`: snapshot support.

Instances are not thread-safe; serialize access to a shared generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Final, Protocol

from spongerand._logging import get_logger
from spongerand.errors import (
    InvalidCountError,
    InvalidRangeError,
    InvalidSeedError,
    InvalidStateError,
    NotSeededError,
)
from spongerand.keccak import sponge_hash

if TYPE_CHECKING:
    from spongerand.state import GeneratorState

__all__ = [
    'MIN_SIGNED_WORD',
    'SEED_CAPACITY_BITS',
    'SEED_WORD_RATE',
    'WORD_MASK',
    'WORD_SPAN',
    'BaseRng',
    'RandomSource',
    'SeedLike',
    'checked_index',
    'checked_words',
    'rejection_bound',
]

logger = get_logger(__name__)

SEED_CAPACITY_BITS: Final = 256
SEED_WORD_RATE: Final = (800 - SEED_CAPACITY_BITS) // 32

WORD_MASK: Final = 0xFFFFFFFF
WORD_SPAN: Final = 1 << 32

MIN_SIGNED_WORD: Final = -(1 << 31)

_INV_2_32: Final = 2.0**-32

type SeedLike = int | Sequence[int]


class RandomSource(Protocol):
    """The sampling operations collaborators may rely on."""

    def random_double(self) -> float: ...

    def random_in_range(self, lower: int, upper: int) -> int: ...

    def random_index(self, count: int) -> int: ...


def rejection_bound(n: int) -> int:
    """Return the largest multiple of ``n`` not exceeding ``2**32``.

    Words at or above the bound are rejected so that ``n * word // bound``
    is exactly uniform over ``range(n)``.

    Args:
        n: Range size, ``1..2**32``.

    Raises:
        ValueError: If ``n`` is outside ``1..2**32``.
    """
    if not 1 <= n <= WORD_SPAN:
        msg = f'Range size must be between 1 and 2**32, got {n}'
        raise ValueError(msg)
    return WORD_SPAN - WORD_SPAN % n


def _seed_words(seed: SeedLike) -> list[int]:
    """Reinterpret a seed as unsigned 32-bit words."""
    if isinstance(seed, int) and not isinstance(seed, bool):
        values: Sequence[object] = (seed,)
    elif isinstance(seed, Sequence) and not isinstance(seed, str | bytes | bytearray):
        values = seed
    else:
        msg = f'expected an int or a sequence of ints, got {type(seed).__name__}'
        raise InvalidSeedError(msg)

    words = []
    for position, value in enumerate(values):
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f'element {position} is {type(value).__name__}, not int'
            raise InvalidSeedError(msg)
        if not MIN_SIGNED_WORD <= value <= WORD_MASK:
            msg = f'element {position} ({value}) does not fit in a 32-bit word'
            raise InvalidSeedError(msg)
        words.append(value & WORD_MASK)
    return words


class BaseRng(ABC):
    """Base class for seedable 32-bit word generators.

    Args:
        seed: Optional seed; when given the generator is seeded immediately,
            otherwise `seed()` must be called before any output is requested.

    Example:
        ```python
        rng = Well1024aRng(seed=12345)
        roll = rng.random_in_range(1, 6)
        ```
    """

    algorithm: ClassVar[str]
    """Registry name of the algorithm."""

    def __init__(self, seed: SeedLike | None = None) -> None:
        self._seeded = False
        if seed is not None:
            self.seed(seed)

    @property
    @abstractmethod
    def seed_words_required(self) -> int:
        """Number of words needed to fully specify the generator state."""

    @abstractmethod
    def _init_state(self, words: list[int]) -> None:
        """Load ``seed_words_required`` hashed words into the state."""

    @abstractmethod
    def _next_word(self) -> int:
        """Advance the state and return one uniform 32-bit word."""

    @abstractmethod
    def _export_state(self) -> GeneratorState:
        """Return a snapshot of the current state."""

    @abstractmethod
    def _import_state(self, state: GeneratorState) -> None:
        """Validate a snapshot and load it into the state."""

    @property
    def is_seeded(self) -> bool:
        """Whether the generator has been seeded or restored."""
        return self._seeded

    def seed(self, seed: SeedLike) -> None:
        """Seed (or reseed) the generator.

        The seed words are hashed with the Keccak-f[800] sponge at a 256-bit
        capacity into exactly `seed_words_required` words. Identical seeds
        always give identical output sequences.

        Args:
            seed: An int or a sequence of ints, each in ``[-2**31, 2**32)``.
                Negative values are read as their two's complement word.

        Raises:
            InvalidSeedError: If the seed cannot be read as 32-bit words.
        """
        words = _seed_words(seed)
        self._init_state(sponge_hash(words, self.seed_words_required, SEED_WORD_RATE))
        self._seeded = True
        logger.debug('rng_seeded', algorithm=self.algorithm, seed_length=len(words))

    def next_word(self) -> int:
        """Return the next uniform word in ``[0, 2**32)``.

        Raises:
            NotSeededError: If the generator has not been seeded.
        """
        if not self._seeded:
            raise NotSeededError(self.algorithm)
        return self._next_word()

    def random_double(self) -> float:
        """Return a float in ``[0.0, 1.0)`` with 32 bits of randomness."""
        return self.next_word() * _INV_2_32

    def random_in_range(self, lower: int, upper: int) -> int:
        """Return an unbiased integer ``N`` with ``lower <= N <= upper``.

        Uses rejection sampling, so the result is exactly uniform when the
        word stream is. At most ``2**32`` distinct values can be drawn, which
        includes the full 32-bit range.

        Raises:
            InvalidRangeError: If ``lower > upper`` or the range holds more
                than ``2**32`` values.
            NotSeededError: If the generator has not been seeded.
        """
        if lower > upper:
            raise InvalidRangeError(lower, upper)
        n = upper - lower + 1
        if n > WORD_SPAN:
            raise InvalidRangeError(lower, upper, f'Range of {n} values exceeds 2**32')

        bound = rejection_bound(n)
        num = self.next_word()
        while num >= bound:
            num = self.next_word()
        return lower + n * num // bound

    def random_index(self, count: int) -> int:
        """Return an integer in ``[0, count)``.

        A count of zero is delegated as the empty range ``(0, -1)`` and
        therefore raises `InvalidRangeError`.

        Raises:
            InvalidCountError: If ``count`` is negative.
            InvalidRangeError: If ``count`` is zero.
        """
        if count < 0:
            raise InvalidCountError(count)
        return self.random_in_range(0, count - 1)

    def snapshot(self) -> GeneratorState:
        """Return an immutable snapshot of the current state.

        Raises:
            NotSeededError: If the generator has not been seeded.
        """
        if not self._seeded:
            raise NotSeededError(self.algorithm)
        return self._export_state()

    def restore(self, state: GeneratorState) -> None:
        """Replace the current state with a snapshot.

        The generator then continues exactly where the snapshotted one left off.

        Raises:
            InvalidStateError: If the snapshot belongs to another algorithm or
                is inconsistent.
        """
        self._import_state(state)
        self._seeded = True
        logger.debug('rng_restored', algorithm=self.algorithm)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(seeded={self._seeded})'


def checked_words(words: Sequence[int], size: int, algorithm: str) -> list[int]:
    """Validate snapshot words and return them as a mutable list."""
    if len(words) != size:
        msg = f'expected {size} words, got {len(words)}'
        raise InvalidStateError(msg, algorithm)
    for position, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            msg = f'word {position} ({word}) does not fit in 32 bits'
            raise InvalidStateError(msg, algorithm)
    return list(words)


def checked_index(index: int, size: int, algorithm: str) -> int:
    """Validate a snapshot buffer position."""
    if not 0 <= index < size:
        msg = f'index {index} outside 0..{size - 1}'
        raise InvalidStateError(msg, algorithm)
    return index
