"""Library configuration: Algorithm enum, RngConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from spongerand._logging import configure_logging, get_logger
from spongerand.chacha import DEFAULT_ROUNDS, check_rounds

__all__ = [
    'Algorithm',
    'RngConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)


class Algorithm(Enum):
    """Generator algorithm."""

    CHACHA = 'chacha'
    WELL1024A = 'well1024a'
    LFIB4 = 'lfib4'


@dataclass(frozen=True)
class RngConfig:
    """Process-wide defaults for generator construction.

    Attributes:
        algorithm: Algorithm used when none is requested explicitly.
        chacha_rounds: Default round count for ChaCha generators.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    algorithm: Algorithm = Algorithm.WELL1024A
    chacha_rounds: int = DEFAULT_ROUNDS
    log_level: str | None = None


# Global configuration (set by init())
_config: RngConfig | None = None


def _detect_algorithm() -> Algorithm:
    """Detect the default algorithm from the SPONGERAND_ALGORITHM variable."""
    env_algorithm = os.environ.get('SPONGERAND_ALGORITHM', '').lower()
    if not env_algorithm:
        return Algorithm.WELL1024A
    try:
        return Algorithm(env_algorithm)
    except ValueError:
        logger.warning('unknown_algorithm_env', value=env_algorithm, fallback=Algorithm.WELL1024A.value)
        return Algorithm.WELL1024A


def _detect_chacha_rounds() -> int:
    """Detect the ChaCha round count from the SPONGERAND_CHACHA_ROUNDS variable."""
    env_rounds = os.environ.get('SPONGERAND_CHACHA_ROUNDS', '').strip()
    if not env_rounds:
        return DEFAULT_ROUNDS
    try:
        return check_rounds(int(env_rounds))
    except ValueError:
        logger.warning('invalid_chacha_rounds_env', value=env_rounds, fallback=DEFAULT_ROUNDS)
        return DEFAULT_ROUNDS


def init(
    algorithm: Algorithm | str | None = None,
    chacha_rounds: int | None = None,
    log_level: str | None = None,
) -> RngConfig:
    """Initialize the library defaults.

    Args:
        algorithm: Default algorithm. Read from the environment if None.
            Can be Algorithm enum or string ("chacha", "well1024a", "lfib4").
        chacha_rounds: Default ChaCha round count. Read from the environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The RngConfig that was set.

    Raises:
        ValueError: If the algorithm is unknown or the round count invalid.

    Example:
        ```python
        import spongerand

        spongerand.init(algorithm='chacha', chacha_rounds=20, log_level='DEBUG')
        rng = spongerand.create_rng(seed=42)
        ```
    """
    global _config  # noqa: PLW0603

    if algorithm is None:
        resolved_algorithm = _detect_algorithm()
    elif isinstance(algorithm, str):
        resolved_algorithm = Algorithm(algorithm.lower())
    else:
        resolved_algorithm = algorithm

    resolved_rounds = check_rounds(_detect_chacha_rounds() if chacha_rounds is None else chacha_rounds)

    # Configure logging first so the init event is visible
    if log_level is not None:
        configure_logging(log_level)

    _config = RngConfig(
        algorithm=resolved_algorithm,
        chacha_rounds=resolved_rounds,
        log_level=log_level,
    )
    logger.info('config_initialized', algorithm=resolved_algorithm.value, chacha_rounds=resolved_rounds)
    return _config


def get_config() -> RngConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'spongerand not initialized. Call spongerand.init() first.'
        raise RuntimeError(msg)
    return _config


def _active_config() -> RngConfig:
    """Return the initialized configuration, or the defaults."""
    return _config if _config is not None else RngConfig()
