"""Generator state snapshots and their MessagePack codec.

Snapshots are msgspec tagged unions so that a single decoder can restore any
generator kind. Structs are ``array_like`` for compact encoding:
    ["chacha", rounds, core, remaining]
    ["well1024a", words, index]
    ["lfib4", words, index]

Usage:
    >>> from spongerand import Well1024aRng
    >>> from spongerand.state import decode_state, encode_state
    >>> rng = Well1024aRng(seed=7)
    >>> data = encode_state(rng.snapshot())
    >>> clone = Well1024aRng()
    >>> clone.restore(decode_state(data))
    >>> clone.next_word() == rng.next_word()
    True

Word constraints are enforced on decode; `BaseRng.restore` repeats the checks
for structs built in memory.
"""

from __future__ import annotations

from typing import Annotated

import msgspec

from spongerand.errors import InvalidStateError

__all__ = [
    'ChaChaState',
    'GeneratorState',
    'Lfib4State',
    'Well1024aState',
    'Word',
    'decode_state',
    'encode_state',
]

Word = Annotated[int, msgspec.Meta(ge=0, le=0xFFFFFFFF)]
"""An unsigned 32-bit word."""


class ChaChaState(msgspec.Struct, tag='chacha', array_like=True, frozen=True, gc=False):
    """Snapshot of a `ChaChaRng`.

    Attributes:
        rounds: Cipher rounds per block.
        core: The 16-word cipher input (constants, key, nonce, counter).
        remaining: Unconsumed words of the current output block, 0..16.
    """

    rounds: Annotated[int, msgspec.Meta(gt=0)]
    core: Annotated[tuple[Word, ...], msgspec.Meta(min_length=16, max_length=16)]
    remaining: Annotated[int, msgspec.Meta(ge=0, le=16)]


class Well1024aState(msgspec.Struct, tag='well1024a', array_like=True, frozen=True, gc=False):
    """Snapshot of a `Well1024aRng`.

    Attributes:
        words: The 32-word circular state.
        index: Current position, 0..31.
    """

    words: Annotated[tuple[Word, ...], msgspec.Meta(min_length=32, max_length=32)]
    index: Annotated[int, msgspec.Meta(ge=0, le=31)]


class Lfib4State(msgspec.Struct, tag='lfib4', array_like=True, frozen=True, gc=False):
    """Snapshot of an `Lfib4Rng`.

    Attributes:
        words: The 256-word circular state.
        index: Current position, 0..255.
    """

    words: Annotated[tuple[Word, ...], msgspec.Meta(min_length=256, max_length=256)]
    index: Annotated[int, msgspec.Meta(ge=0, le=255)]


GeneratorState = ChaChaState | Well1024aState | Lfib4State
"""Union of all snapshot variants, discriminated by tag."""

# Decoders are reentrant, so one instance is shared.
_decoder: msgspec.msgpack.Decoder[GeneratorState] = msgspec.msgpack.Decoder(GeneratorState)


def encode_state(state: GeneratorState) -> bytes:
    """Encode a snapshot to MessagePack bytes."""
    return msgspec.msgpack.encode(state)


def decode_state(data: bytes | bytearray | memoryview) -> GeneratorState:
    """Decode MessagePack bytes to a snapshot.

    Args:
        data: Bytes produced by `encode_state`.

    Returns:
        The decoded snapshot variant.

    Raises:
        InvalidStateError: If the bytes are malformed or violate the
            snapshot constraints.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as exc:
        raise InvalidStateError(str(exc)) from exc
