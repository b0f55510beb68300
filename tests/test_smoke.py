"""Smoke tests for the public package surface."""

from __future__ import annotations

import spongerand


def test_import() -> None:
    assert spongerand.__version__


def test_all_exports_resolve() -> None:
    for name in spongerand.__all__:
        assert hasattr(spongerand, name), name


def test_quickstart() -> None:
    rng = spongerand.create_rng('chacha', seed=[1, 2, 3])
    roll = rng.random_in_range(1, 6)
    assert 1 <= roll <= 6
    deck = spongerand.shuffle(list(range(52)), rng)
    assert sorted(deck) == list(range(52))
