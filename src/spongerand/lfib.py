"""The LFIB4 lagged-Fibonacci generator, proposed by George Marsaglia in 1999.

Each output is the wrapping sum of the words 55, 119 and 179 places back and
the word being replaced, over a 256-word circular buffer. It is fast, with a
period of about 2**287, but needs 8192 bits of seed and generators of this
kind are sensitive to poor initialization; the sponge-hash seeding covers that.
"""

from __future__ import annotations

from typing import Final

from spongerand.base import WORD_MASK, BaseRng, SeedLike, checked_index, checked_words
from spongerand.errors import InvalidStateError
from spongerand.state import GeneratorState, Lfib4State

__all__ = ['Lfib4Rng']

STATE_WORDS: Final = 256
_INDEX_MASK: Final = STATE_WORDS - 1


class Lfib4Rng(BaseRng):
    """LFIB4 generator with 8192 bits of state."""

    algorithm = 'lfib4'

    def __init__(self, seed: SeedLike | None = None) -> None:
        self._state = [0] * STATE_WORDS
        self._index = 0
        super().__init__(seed)

    @property
    def seed_words_required(self) -> int:
        return STATE_WORDS

    def _init_state(self, words: list[int]) -> None:
        self._state[:] = words
        self._state[0] |= 1  # nonzero, with at least one odd word
        self._index = 0

    def _next_word(self) -> int:
        state = self._state
        i = self._index
        word = (
            state[(i - 55) & _INDEX_MASK] + state[(i - 119) & _INDEX_MASK] + state[(i - 179) & _INDEX_MASK] + state[i]
        ) & WORD_MASK
        state[i] = word
        self._index = (i + 1) & _INDEX_MASK
        return word

    def _export_state(self) -> Lfib4State:
        return Lfib4State(words=tuple(self._state), index=self._index)

    def _import_state(self, state: GeneratorState) -> None:
        if not isinstance(state, Lfib4State):
            msg = f'expected an Lfib4State, got {type(state).__name__}'
            raise InvalidStateError(msg, self.algorithm)
        words = checked_words(state.words, STATE_WORDS, self.algorithm)
        self._index = checked_index(state.index, STATE_WORDS, self.algorithm)
        self._state = words
