"""Present a spongerand generator through the standard `random.Random` API.

Only the primitive methods are overridden; everything else the standard
library derives from them (`randint`, `choice`, `shuffle`, `gauss`,
`sample`, ...) works unchanged on top of the wrapped generator.

Usage:
    >>> from spongerand import ChaChaRng
    >>> from spongerand.adapter import GeneratorRandom
    >>> rnd = GeneratorRandom(ChaChaRng(seed=1))
    >>> 1 <= rnd.randint(1, 6) <= 6
    True
"""

from __future__ import annotations

import os
import random
from typing import TYPE_CHECKING, Any, Final

from spongerand.base import MIN_SIGNED_WORD, WORD_MASK, WORD_SPAN
from spongerand.factory import from_state

if TYPE_CHECKING:
    from spongerand.base import BaseRng, SeedLike
    from spongerand.state import GeneratorState

__all__ = ['GeneratorRandom']

ADAPTER_STATE_VERSION: Final = 'spongerand-1'
_ENTROPY_WORDS: Final = 8


def _int_words(value: int) -> list[int]:
    """Split a non-negative int into little-endian 32-bit words."""
    words = []
    while value:
        words.append(value & WORD_MASK)
        value >>= 32
    return words or [0]


def _bytes_words(data: bytes) -> list[int]:
    """Split bytes into little-endian 32-bit words, prefixed by the byte length."""
    padded = data + b'\x00' * (-len(data) % 4)
    return [len(data) & WORD_MASK] + [int.from_bytes(padded[i : i + 4], 'little') for i in range(0, len(padded), 4)]


def _seed_from(a: int | str | bytes | bytearray) -> SeedLike:
    if isinstance(a, int):
        if MIN_SIGNED_WORD <= a < WORD_SPAN:
            return a
        return _int_words(abs(a))
    if isinstance(a, str):
        return _bytes_words(a.encode())
    if isinstance(a, bytes | bytearray):
        return _bytes_words(bytes(a))
    msg = f'The only supported seed types are: None, int, str, bytes, and bytearray, not {type(a).__name__}'
    raise TypeError(msg)


class GeneratorRandom(random.Random):
    """A `random.Random` backed by a spongerand generator.

    Args:
        rng: The generator to draw from. An unseeded generator is seeded
            from ``seed``, or from operating system entropy when ``seed`` is None.
        seed: Optional seed applied to ``rng`` on construction.
    """

    def __init__(self, rng: BaseRng, *, seed: int | str | bytes | bytearray | None = None) -> None:
        self._rng = rng
        super().__init__(seed)

    @property
    def rng(self) -> BaseRng:
        """The wrapped generator."""
        return self._rng

    def seed(self, a: Any = None, version: int = 2) -> None:
        """Seed the wrapped generator.

        ``None`` keeps an already seeded generator and otherwise draws the
        seed from `os.urandom`. Ints outside a single word, ``str``,
        ``bytes`` and ``bytearray`` are split into 32-bit words.
        """
        if a is None:
            if not self._rng.is_seeded:
                self._rng.seed(_bytes_words(os.urandom(4 * _ENTROPY_WORDS)))
        else:
            self._rng.seed(_seed_from(a))
        self.gauss_next = None

    def random(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        return self._rng.random_double()

    def getrandbits(self, k: int, /) -> int:
        """Return a non-negative int with ``k`` random bits."""
        if k < 0:
            msg = 'number of bits must be non-negative'
            raise ValueError(msg)
        words, extra = divmod(k, 32)
        result = 0
        for position in range(words):
            result |= self._rng.next_word() << (32 * position)
        if extra:
            result |= (self._rng.next_word() >> (32 - extra)) << (32 * words)
        return result

    def randbytes(self, n: int) -> bytes:
        """Return ``n`` random bytes, each drawn with ``random_in_range(0, 255)``."""
        return bytes(self._rng.random_in_range(0, 255) for _ in range(n))

    def getstate(self) -> tuple[str, GeneratorState, float | None]:
        """Return the generator snapshot and the cached gaussian value."""
        return ADAPTER_STATE_VERSION, self._rng.snapshot(), self.gauss_next

    def setstate(self, state: tuple[str, GeneratorState, float | None]) -> None:
        """Restore a state returned by `getstate`.

        Raises:
            ValueError: If the state was not produced by this adapter.
            InvalidStateError: If the snapshot does not fit the wrapped generator.
        """
        version, snapshot, gauss_next = state
        if version != ADAPTER_STATE_VERSION:
            msg = f'state with version {version!r} passed to GeneratorRandom.setstate()'
            raise ValueError(msg)
        self._rng.restore(snapshot)
        self.gauss_next = gauss_next

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (from_state(self._rng.snapshot()),), self.getstate()
