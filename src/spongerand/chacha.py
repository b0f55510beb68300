"""Generator built on the ChaCha stream cipher.

Reference: "ChaCha, a variant of Salsa20." D. J. Bernstein, 2008.

The seed fills the 8 key words and 2 nonce words of the cipher input; output
is read from the cipher stream one 16-word block at a time. When a block is
used up the input is incremented as one 384-bit number spanning counter,
nonce and key (words 15 down to 4), so the generator has a period of 2**388
words. The four constant words are never touched.

The round count trades speed for quality. It should be a multiple of four;
12 is the default, 8 and 20 are also reasonable.

Note:
    The cipher is used for statistical quality only. This generator makes no
    security claims.
"""

from __future__ import annotations

from typing import Final

from spongerand._logging import get_logger
from spongerand.base import WORD_MASK, BaseRng, SeedLike, checked_words
from spongerand.errors import InvalidStateError
from spongerand.state import ChaChaState, GeneratorState

__all__ = ['DEFAULT_ROUNDS', 'ChaChaRng', 'chacha_block', 'check_rounds']

logger = get_logger(__name__)

BLOCK_WORDS: Final = 16
CONSTANT_WORDS: Final = 4
KEY_WORDS: Final = 8
NONCE_WORDS: Final = 2
DEFAULT_ROUNDS: Final = 12

# "expand 16-byte k"
CONSTANTS: Final = (0x61707865, 0x3120646E, 0x79622D36, 0x6B206574)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & WORD_MASK


def _quarter_round(x: list[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & WORD_MASK
    x[d] = _rotl(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & WORD_MASK
    x[b] = _rotl(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & WORD_MASK
    x[d] = _rotl(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & WORD_MASK
    x[b] = _rotl(x[b] ^ x[c], 7)


def check_rounds(rounds: int) -> int:
    """Validate a round count and return it.

    Raises:
        ValueError: If ``rounds`` is not a positive even number.
    """
    if rounds <= 0 or rounds % 2:
        msg = f'ChaCha rounds must be a positive even number, got {rounds}'
        raise ValueError(msg)
    if rounds % 4:
        logger.warning('chacha_rounds_unusual', rounds=rounds)
    return rounds


def chacha_block(core: list[int], rounds: int) -> list[int]:
    """Run the ChaCha block function on a 16-word input.

    Args:
        core: Cipher input (constants, key, nonce, counter).
        rounds: Number of rounds; applied as ``rounds // 2`` double rounds.

    Returns:
        The 16-word output block.
    """
    x = list(core)
    for _ in range(rounds // 2):
        # columns
        _quarter_round(x, 0, 4, 8, 12)
        _quarter_round(x, 1, 5, 9, 13)
        _quarter_round(x, 2, 6, 10, 14)
        _quarter_round(x, 3, 7, 11, 15)
        # diagonals
        _quarter_round(x, 0, 5, 10, 15)
        _quarter_round(x, 1, 6, 11, 12)
        _quarter_round(x, 2, 7, 8, 13)
        _quarter_round(x, 3, 4, 9, 14)
    return [(word + original) & WORD_MASK for word, original in zip(x, core, strict=True)]


class ChaChaRng(BaseRng):
    """ChaCha stream-cipher generator with 320 bits of seeded state.

    Args:
        seed: Optional seed, see `BaseRng`.
        rounds: Cipher rounds per block; a positive even number.

    Raises:
        ValueError: If ``rounds`` is not a positive even number.
    """

    algorithm = 'chacha'

    def __init__(self, seed: SeedLike | None = None, *, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = check_rounds(rounds)
        self._core = [*CONSTANTS, *([0] * (BLOCK_WORDS - CONSTANT_WORDS))]
        self._output = [0] * BLOCK_WORDS
        self._remaining = 0
        super().__init__(seed)

    @property
    def rounds(self) -> int:
        """Cipher rounds per block."""
        return self._rounds

    @property
    def seed_words_required(self) -> int:
        return KEY_WORDS + NONCE_WORDS

    def _init_state(self, words: list[int]) -> None:
        self._core[CONSTANT_WORDS : CONSTANT_WORDS + KEY_WORDS + NONCE_WORDS] = words
        self._core[14] = 0
        self._core[15] = 0
        self._output = chacha_block(self._core, self._rounds)
        self._remaining = BLOCK_WORDS

    def _increment(self) -> None:
        core = self._core
        position = BLOCK_WORDS - 1
        while True:
            core[position] = (core[position] + 1) & WORD_MASK
            if core[position] or position == CONSTANT_WORDS:
                return
            position -= 1

    def _next_word(self) -> int:
        if self._remaining <= 0:
            self._increment()
            self._output = chacha_block(self._core, self._rounds)
            self._remaining = BLOCK_WORDS
        word = self._output[BLOCK_WORDS - self._remaining]
        self._remaining -= 1
        return word

    def _export_state(self) -> ChaChaState:
        return ChaChaState(rounds=self._rounds, core=tuple(self._core), remaining=self._remaining)

    def _import_state(self, state: GeneratorState) -> None:
        if not isinstance(state, ChaChaState):
            msg = f'expected a ChaChaState, got {type(state).__name__}'
            raise InvalidStateError(msg, self.algorithm)
        if state.rounds != self._rounds:
            msg = f'snapshot uses {state.rounds} rounds, generator uses {self._rounds}'
            raise InvalidStateError(msg, self.algorithm)
        if not 0 <= state.remaining <= BLOCK_WORDS:
            msg = f'remaining count {state.remaining} outside 0..{BLOCK_WORDS}'
            raise InvalidStateError(msg, self.algorithm)
        core = checked_words(state.core, BLOCK_WORDS, self.algorithm)
        if tuple(core[:CONSTANT_WORDS]) != CONSTANTS:
            msg = 'constant words were altered'
            raise InvalidStateError(msg, self.algorithm)
        self._core = core
        self._output = chacha_block(core, self._rounds)
        self._remaining = state.remaining
