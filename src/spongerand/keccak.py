"""Keccak-f[800] permutation and the sponge hash used for seeding.

The permutation works on a 25-word (800-bit) state viewed as a 5x5 grid of
32-bit lanes, where lane ``i`` sits at column ``i % 5`` and row ``i // 5``.
`sponge_hash` wraps it in the usual absorb/squeeze construction with 10*1
padding on whole words.

Usage:
    >>> from spongerand.keccak import sponge_hash
    >>> hex(sponge_hash([], 1, 9)[0])
    '0x56c5094d'

Note:
    This is not a cryptographic library. The hash only spreads seed material
    evenly over generator state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    'ROUNDS',
    'STATE_WORDS',
    'keccak_f800',
    'sponge_hash',
]

STATE_WORDS: Final = 25
"""Number of 32-bit lanes in the permutation state."""

ROUNDS: Final = 22
"""Rounds per permutation; 12 + 2 * log2(32)."""

_MASK: Final = 0xFFFFFFFF

# Round constants, truncated to the low 32 bits.
_ROUND_CONSTANTS: Final = (
    0x00000001,
    0x00008082,
    0x0000808A,
    0x80008000,
    0x0000808B,
    0x80000001,
    0x80008081,
    0x00008009,
    0x0000008A,
    0x00000088,
    0x80008009,
    0x8000000A,
    0x8000808B,
    0x0000008B,
    0x00008089,
    0x00008003,
    0x00008002,
    0x00000080,
    0x0000800A,
    0x8000000A,
    0x80008081,
    0x00008080,
)

# Rho rotation offsets per lane, reduced mod 32.
_ROTATIONS: Final = (
    0, 1, 30, 28, 27,
    4, 12, 6, 23, 20,
    3, 10, 11, 25, 7,
    9, 13, 15, 21, 8,
    18, 2, 29, 24, 14,
)  # fmt: skip

_PADDING_FIRST: Final = 0x00000001
_PADDING_LAST: Final = 0x80000000


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _round(state: list[int], round_constant: int) -> None:
    # theta
    parity = [state[x] ^ state[x + 5] ^ state[x + 10] ^ state[x + 15] ^ state[x + 20] for x in range(5)]
    mix = [parity[(x + 4) % 5] ^ _rotl(parity[(x + 1) % 5], 1) for x in range(5)]
    for i in range(STATE_WORDS):
        state[i] ^= mix[i % 5]

    # rho and pi, into a grid indexed [x][y] as x * 5 + y
    moved = [0] * STATE_WORDS
    for i in range(STATE_WORDS):
        x, y = i % 5, i // 5
        moved[y * 5 + (2 * x + 3 * y) % 5] = _rotl(state[i], _ROTATIONS[i])

    # chi
    for i in range(STATE_WORDS):
        x, y = i % 5, i // 5
        state[i] = moved[x * 5 + y] ^ (~moved[((x + 1) % 5) * 5 + y] & moved[((x + 2) % 5) * 5 + y])

    # iota
    state[0] ^= round_constant


def keccak_f800(state: list[int]) -> None:
    """Apply the full 22-round Keccak-f[800] permutation in place.

    Args:
        state: A list of exactly 25 unsigned 32-bit words.

    Raises:
        ValueError: If the state does not hold 25 words.
    """
    if len(state) != STATE_WORDS:
        msg = f'Keccak-f[800] state must hold {STATE_WORDS} words, got {len(state)}'
        raise ValueError(msg)
    for round_constant in _ROUND_CONSTANTS:
        _round(state, round_constant)


def sponge_hash(words: Sequence[int], output_length: int, word_rate: int) -> list[int]:
    """Hash a word sequence into ``output_length`` words.

    The input is padded with 10*1 padding to a whole number of blocks (an
    input that already fills its last block gets one extra block), absorbed
    ``word_rate`` words at a time, then squeezed out at the same rate.

    Args:
        words: Input words, each in ``[0, 2**32)``. May be empty.
        output_length: Number of words to produce.
        word_rate: Words exchanged per permutation call, ``1..25``.
            Conventionally ``(800 - capacity_bits) // 32``.

    Returns:
        A list of ``output_length`` unsigned 32-bit words.

    Raises:
        ValueError: If ``word_rate`` or ``output_length`` is out of range, or
            an input word does not fit in 32 bits.
    """
    if not 1 <= word_rate <= STATE_WORDS:
        msg = f'Word rate must be between 1 and {STATE_WORDS}, got {word_rate}'
        raise ValueError(msg)
    if output_length < 0:
        msg = f'Output length must be non-negative, got {output_length}'
        raise ValueError(msg)

    padded_length = (len(words) // word_rate + 1) * word_rate
    padded = [0] * padded_length
    for i, word in enumerate(words):
        if not 0 <= word <= _MASK:
            msg = f'Input word {i} does not fit in 32 bits: {word}'
            raise ValueError(msg)
        padded[i] = word
    padded[len(words)] = _PADDING_FIRST
    padded[-1] ^= _PADDING_LAST

    state = [0] * STATE_WORDS
    offset = 0
    for word in padded:
        state[offset] ^= word
        offset += 1
        if offset >= word_rate:
            keccak_f800(state)
            offset = 0

    output: list[int] = []
    offset = 0
    for _ in range(output_length):
        output.append(state[offset])
        offset += 1
        if offset >= word_rate:
            keccak_f800(state)
            offset = 0
    return output
