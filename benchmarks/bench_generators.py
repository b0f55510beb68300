"""Benchmarks for generator primitives.

Run with: pytest benchmarks/ --benchmark-only -v
"""

import pytest
from spongerand import ChaChaRng, GeneratorRandom, Lfib4Rng, Well1024aRng, shuffle, sponge_hash

GENERATORS = [ChaChaRng, Well1024aRng, Lfib4Rng]


# =============================================================================
# Seeding benchmarks
# =============================================================================


class TestSeeding:
    """Benchmark seeding and the sponge hash behind it."""

    def test_sponge_hash(self, benchmark):
        """Benchmark hashing a short seed into 256 words."""
        benchmark(sponge_hash, [1, 2, 3, 4], 256, 17)

    @pytest.mark.parametrize('cls', GENERATORS, ids=lambda cls: cls.algorithm)
    def test_seed(self, benchmark, cls):
        """Benchmark seeding each generator."""
        rng = cls()
        benchmark(rng.seed, [1, 2, 3, 4])


# =============================================================================
# Output benchmarks
# =============================================================================


@pytest.mark.parametrize('cls', GENERATORS, ids=lambda cls: cls.algorithm)
class TestOutput:
    """Benchmark per-call output of each generator."""

    def test_next_word(self, benchmark, cls):
        """Benchmark one raw word."""
        benchmark(cls(seed=1).next_word)

    def test_random_in_range(self, benchmark, cls):
        """Benchmark a die roll."""
        benchmark(cls(seed=1).random_in_range, 1, 6)

    def test_random_double(self, benchmark, cls):
        """Benchmark a double in [0, 1)."""
        benchmark(cls(seed=1).random_double)


# =============================================================================
# Sequence benchmarks
# =============================================================================


class TestSequences:
    """Benchmark list algorithms and the random.Random adapter."""

    def test_shuffle_deck(self, benchmark):
        """Benchmark shuffling a 52 card deck."""
        rng = Well1024aRng(seed=1)
        deck = list(range(52))
        benchmark(shuffle, deck, rng)

    def test_adapter_randint(self, benchmark):
        """Benchmark randint through the adapter."""
        rnd = GeneratorRandom(Lfib4Rng(seed=1))
        benchmark(rnd.randint, 1, 6)
