"""Tests for the LFIB4 lagged-Fibonacci generator."""

from __future__ import annotations

import pytest
from spongerand import InvalidStateError, Lfib4Rng, Lfib4State
from spongerand.keccak import sponge_hash


class TestSeeding:
    """Test state initialization."""

    def test_seed_words_required(self) -> None:
        assert Lfib4Rng().seed_words_required == 256

    def test_state_is_hashed_seed_with_low_bit_set(self) -> None:
        state = Lfib4Rng(seed=[4, 5, 6]).snapshot()
        expected = sponge_hash([4, 5, 6], 256, 17)
        expected[0] |= 1
        assert list(state.words) == expected
        assert state.index == 0


class TestRecurrence:
    """Check the lagged sum on a known state."""

    def test_sums_lagged_words(self) -> None:
        rng = Lfib4Rng()
        rng.restore(Lfib4State(words=tuple(range(256)), index=0))
        # state[201] + state[137] + state[77] + state[0]
        assert rng.next_word() == 415
        # state[202] + state[138] + state[78] + state[1]
        assert rng.next_word() == 419
        state = rng.snapshot()
        assert state.index == 2
        assert state.words[:3] == (415, 419, 2)

    def test_sum_wraps_at_32_bits(self) -> None:
        rng = Lfib4Rng()
        rng.restore(Lfib4State(words=(0xFFFFFFFF,) * 256, index=0))
        assert rng.next_word() == 0xFFFFFFFC

    def test_index_wraps_around(self) -> None:
        rng = Lfib4Rng()
        rng.restore(Lfib4State(words=(1,) * 256, index=255))
        # state[200] + state[136] + state[76] + state[255]
        assert rng.next_word() == 4
        assert rng.snapshot().index == 0

    def test_new_word_feeds_later_outputs(self) -> None:
        rng = Lfib4Rng(seed=9)
        outputs = [rng.next_word() for _ in range(256)]
        assert list(rng.snapshot().words) == outputs


class TestRestore:
    """LFIB4-specific snapshot checks."""

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(InvalidStateError, match='expected 256 words'):
            Lfib4Rng().restore(Lfib4State(words=(1,) * 32, index=0))
