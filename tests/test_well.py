"""Tests for the WELL1024a generator."""

from __future__ import annotations

import pytest
from spongerand import InvalidStateError, Lfib4State, Well1024aRng, Well1024aState
from spongerand.keccak import sponge_hash


class TestSeeding:
    """Test state initialization."""

    def test_seed_words_required(self) -> None:
        assert Well1024aRng().seed_words_required == 32

    def test_state_is_hashed_seed_with_low_bit_set(self) -> None:
        state = Well1024aRng(seed=12345).snapshot()
        expected = sponge_hash([12345], 32, 17)
        expected[0] |= 1
        assert list(state.words) == expected
        assert state.index == 0

    @pytest.mark.parametrize('seed', [0, 1, -1, [0, 0, 0], []])
    def test_state_never_all_zero(self, seed: int | list[int]) -> None:
        words = Well1024aRng(seed=seed).snapshot().words
        assert words[0] & 1 == 1


class TestRecurrence:
    """Check the recurrence against a hand-computed step."""

    def test_first_step_from_known_state(self) -> None:
        rng = Well1024aRng()
        rng.restore(Well1024aState(words=tuple(range(32)), index=0))
        assert rng.next_word() == 0x50C0398E
        state = rng.snapshot()
        assert state.index == 31
        assert state.words[0] == 0x00C28011
        assert state.words[31] == 0x50C0398E
        assert state.words[1:31] == tuple(range(1, 31))

    def test_index_moves_backwards(self) -> None:
        rng = Well1024aRng(seed=3)
        indices = []
        for _ in range(33):
            rng.next_word()
            indices.append(rng.snapshot().index)
        assert indices[:3] == [31, 30, 29]
        assert indices[31] == 0
        assert indices[32] == 31

    def test_output_is_word_at_new_index(self) -> None:
        rng = Well1024aRng(seed=3)
        for _ in range(40):
            word = rng.next_word()
            state = rng.snapshot()
            assert state.words[state.index] == word


class TestRestore:
    """WELL-specific snapshot checks."""

    def test_wrong_snapshot_kind_rejected(self) -> None:
        with pytest.raises(InvalidStateError, match='Well1024aState'):
            Well1024aRng().restore(Lfib4State(words=(0,) * 256, index=0))

    def test_index_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidStateError, match='index 32'):
            Well1024aRng().restore(Well1024aState(words=(1,) * 32, index=32))

    def test_word_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidStateError, match='word 5'):
            Well1024aRng().restore(Well1024aState(words=(1,) * 5 + (2**32,) + (1,) * 26, index=0))
