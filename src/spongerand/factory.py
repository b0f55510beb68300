"""Generator factory functions: create_rng, rng_class, from_state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from spongerand._config import Algorithm, _active_config
from spongerand.chacha import ChaChaRng
from spongerand.errors import InvalidStateError
from spongerand.lfib import Lfib4Rng
from spongerand.state import ChaChaState, Lfib4State, Well1024aState
from spongerand.well import Well1024aRng

if TYPE_CHECKING:
    from spongerand.base import BaseRng, SeedLike
    from spongerand.state import GeneratorState

__all__ = ['create_rng', 'from_state', 'rng_class']

_REGISTRY: dict[Algorithm, type[BaseRng]] = {
    Algorithm.CHACHA: ChaChaRng,
    Algorithm.WELL1024A: Well1024aRng,
    Algorithm.LFIB4: Lfib4Rng,
}


def rng_class(algorithm: Algorithm | str) -> type[BaseRng]:
    """Return the generator class for an algorithm.

    Raises:
        ValueError: If the algorithm name is unknown.
    """
    if isinstance(algorithm, str):
        algorithm = Algorithm(algorithm.lower())
    return _REGISTRY[algorithm]


def create_rng(
    algorithm: Algorithm | str | None = None,
    seed: SeedLike | None = None,
    **kwargs: Any,
) -> BaseRng:
    """Create a generator.

    Args:
        algorithm: Algorithm to use. Defaults to the configured algorithm
            (see `spongerand.init`), or WELL1024a.
        seed: Optional seed; the generator is returned unseeded if None.
        **kwargs: Algorithm-specific options, e.g. ``rounds`` for ChaCha.
            ChaCha generators default to the configured round count.

    Returns:
        A new generator instance.

    Example:
        ```python
        rng = create_rng('lfib4', seed=[1, 2, 3])
        rng.random_index(10)
        ```
    """
    config = _active_config()
    resolved = config.algorithm if algorithm is None else algorithm
    cls = rng_class(resolved)
    if cls is ChaChaRng:
        kwargs.setdefault('rounds', config.chacha_rounds)
    return cls(seed, **kwargs)


def from_state(state: GeneratorState) -> BaseRng:
    """Build a generator that continues from a snapshot.

    Raises:
        InvalidStateError: If the snapshot is inconsistent.
    """
    match state:
        case ChaChaState(rounds=rounds):
            try:
                rng: BaseRng = ChaChaRng(rounds=rounds)
            except ValueError as exc:
                raise InvalidStateError(str(exc), ChaChaRng.algorithm) from exc
        case Well1024aState():
            rng = Well1024aRng()
        case Lfib4State():
            rng = Lfib4Rng()
        case _:
            msg = f'not a generator snapshot: {type(state).__name__}'
            raise InvalidStateError(msg)
    rng.restore(state)
    return rng
