"""spongerand: pluggable pseudo-random number generators.

Three interchangeable generators share one seeding pipeline (a Keccak-f[800]
sponge expands any seed into exactly the state a generator needs) and one
exact-uniform sampling layer (rejection sampling, bias-free for every range
size up to the full 32-bit range).

Flat imports (preferred):
    from spongerand import ChaChaRng, Well1024aRng, Lfib4Rng, create_rng
    from spongerand import shuffle, sample, choice

Submodule imports (for organization):
    from spongerand.keccak import sponge_hash
    from spongerand.state import encode_state, decode_state
    from spongerand.adapter import GeneratorRandom

Example:
    ```python
    from spongerand import Well1024aRng

    rng = Well1024aRng(seed=12345)
    rng.random_double()          # float in [0.0, 1.0)
    rng.random_in_range(1, 6)    # dice roll
    rng.random_index(10)         # int in [0, 10)
    ```

Not a cryptographic library: the generators are chosen for statistical
quality only.
"""

# Config
from spongerand._config import Algorithm, RngConfig, get_config, init

# Logging
from spongerand._logging import configure_logging, get_logger

# Adapter
from spongerand.adapter import GeneratorRandom

# Generators
from spongerand.base import BaseRng, RandomSource, rejection_bound
from spongerand.chacha import ChaChaRng
from spongerand.errors import (
    InvalidCount,
    InvalidCountError,
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    InvalidState,
    InvalidStateError,
    NotSeeded,
    NotSeededError,
)
from spongerand.factory import create_rng, from_state, rng_class
from spongerand.keccak import sponge_hash
from spongerand.lfib import Lfib4Rng

# List algorithms
from spongerand.sequences import choice, sample, shuffle

# Snapshots
from spongerand.state import (
    ChaChaState,
    GeneratorState,
    Lfib4State,
    Well1024aState,
    decode_state,
    encode_state,
)
from spongerand.well import Well1024aRng

__version__ = '0.1.0'

__all__ = [
    # Config
    'Algorithm',
    # Generators
    'BaseRng',
    'ChaChaRng',
    # Snapshots
    'ChaChaState',
    # Adapter
    'GeneratorRandom',
    'GeneratorState',
    # Errors - struct variants
    'InvalidCount',
    # Errors - exception variants
    'InvalidCountError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'InvalidState',
    'InvalidStateError',
    'Lfib4Rng',
    'Lfib4State',
    'NotSeeded',
    'NotSeededError',
    'RandomSource',
    'RngConfig',
    'Well1024aRng',
    'Well1024aState',
    # List algorithms
    'choice',
    # Logging
    'configure_logging',
    'create_rng',
    'decode_state',
    'encode_state',
    'from_state',
    'get_config',
    'get_logger',
    'init',
    'rejection_bound',
    'rng_class',
    'sample',
    'shuffle',
    'sponge_hash',
]
