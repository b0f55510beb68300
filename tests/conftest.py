"""Pytest configuration and shared fixtures for spongerand tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from spongerand import ChaChaRng, Lfib4Rng, Well1024aRng
from spongerand._logging import clear_log_hooks

if TYPE_CHECKING:
    from collections.abc import Iterator

    from spongerand import BaseRng

RNG_CLASSES = [ChaChaRng, Well1024aRng, Lfib4Rng]


@pytest.fixture(autouse=True)
def reset_library_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without global config or log hooks."""
    import spongerand._config

    monkeypatch.setattr(spongerand._config, '_config', None)
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture(params=RNG_CLASSES, ids=lambda cls: cls.algorithm)
def rng_class(request: pytest.FixtureRequest) -> type[BaseRng]:
    """Each generator class in turn."""
    return request.param


@pytest.fixture
def seeded_rng(rng_class: type[BaseRng]) -> BaseRng:
    """Each generator, seeded with 12345."""
    return rng_class(seed=12345)
