"""The WELL1024a generator.

Reference: "Improved Long-Period Generators Based on Linear Recurrences
Modulo 2." F. Panneton, P. L'Ecuyer and M. Matsumoto, 2006.

A compact linear recurrence over 32 words with a period of 2**1024 - 1 and
good equidistribution. It is the default algorithm.
"""

from __future__ import annotations

from typing import Final

from spongerand.base import WORD_MASK, BaseRng, SeedLike, checked_index, checked_words
from spongerand.errors import InvalidStateError
from spongerand.state import GeneratorState, Well1024aState

__all__ = ['Well1024aRng']

STATE_WORDS: Final = 32
_INDEX_MASK: Final = STATE_WORDS - 1


class Well1024aRng(BaseRng):
    """WELL1024a generator with 1024 bits of state."""

    algorithm = 'well1024a'

    def __init__(self, seed: SeedLike | None = None) -> None:
        self._state = [0] * STATE_WORDS
        self._index = 0
        super().__init__(seed)

    @property
    def seed_words_required(self) -> int:
        return STATE_WORDS

    def _init_state(self, words: list[int]) -> None:
        self._state[:] = words
        self._state[0] |= 1  # never all zero
        self._index = 0

    def _next_word(self) -> int:
        state = self._state
        i = self._index
        previous = (i + 31) & _INDEX_MASK
        m1 = state[(i + 3) & _INDEX_MASK]
        m2 = state[(i + 24) & _INDEX_MASK]
        m3 = state[(i + 10) & _INDEX_MASK]

        z0 = state[previous]
        z1 = state[i] ^ m1 ^ (m1 >> 8)
        z2 = m2 ^ ((m2 << 19) & WORD_MASK) ^ m3 ^ ((m3 << 14) & WORD_MASK)
        state[i] = z1 ^ z2
        state[previous] = (
            z0 ^ ((z0 << 11) & WORD_MASK) ^ z1 ^ ((z1 << 7) & WORD_MASK) ^ z2 ^ ((z2 << 13) & WORD_MASK)
        )
        self._index = previous
        return state[previous]

    def _export_state(self) -> Well1024aState:
        return Well1024aState(words=tuple(self._state), index=self._index)

    def _import_state(self, state: GeneratorState) -> None:
        if not isinstance(state, Well1024aState):
            msg = f'expected a Well1024aState, got {type(state).__name__}'
            raise InvalidStateError(msg, self.algorithm)
        words = checked_words(state.words, STATE_WORDS, self.algorithm)
        self._index = checked_index(state.index, STATE_WORDS, self.algorithm)
        self._state = words
