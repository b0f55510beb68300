"""Tests for logging configuration and hooks."""

from __future__ import annotations

import io
import json
import logging
import os
import subprocess
import sys
from typing import TYPE_CHECKING, Any

import pytest
from spongerand import ChaChaRng, Well1024aRng, init
from spongerand._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def captured() -> Iterator[list[dict[str, Any]]]:
    """Configure DEBUG logging and collect every event dict."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    yield received
    clear_log_hooks()
    configure_logging(level='WARNING', json_output=True)


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured: list[dict[str, Any]]) -> None:
        logger = get_logger('spongerand.test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in captured if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('spongerand.test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_hook_exception_does_not_break_logging(self) -> None:
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        def good_hook(event_dict: dict[str, Any]) -> None:
            calls.append('good')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(good_hook)
        get_logger('spongerand.test').info('Test')
        assert calls == ['good']

    def test_hook_receives_copy_of_event_dict(self, captured: list[dict[str, Any]]) -> None:
        def mutating_hook(event_dict: dict[str, Any]) -> None:
            event_dict['mutated'] = True

        add_log_hook(mutating_hook)
        get_logger('spongerand.test').info('Test')
        assert all('mutated' not in entry for entry in captured)

    def test_level_filters_events(self) -> None:
        calls: list[dict[str, Any]] = []
        configure_logging(level='WARNING')
        add_log_hook(calls.append)
        get_logger('spongerand.test').info('hidden')
        get_logger('spongerand.test').warning('shown')
        assert [entry['event'] for entry in calls] == ['shown']


class TestLibraryEvents:
    """Library operations emit structured events."""

    def test_seed_event(self, captured: list[dict[str, Any]]) -> None:
        Well1024aRng(seed=[1, 2, 3])
        events = [e for e in captured if e.get('event') == 'rng_seeded']
        assert len(events) == 1
        assert events[0]['algorithm'] == 'well1024a'
        assert events[0]['seed_length'] == 3
        assert events[0]['logger'] == 'spongerand.base'

    def test_restore_event(self, captured: list[dict[str, Any]]) -> None:
        rng = Well1024aRng(seed=1)
        Well1024aRng().restore(rng.snapshot())
        assert any(e.get('event') == 'rng_restored' for e in captured)

    def test_unusual_rounds_warning(self, captured: list[dict[str, Any]]) -> None:
        ChaChaRng(rounds=6)
        warnings = [e for e in captured if e.get('event') == 'chacha_rounds_unusual']
        assert warnings[0]['rounds'] == 6
        assert warnings[0]['level'] == 'warning'

    def test_no_event_per_word(self, captured: list[dict[str, Any]]) -> None:
        rng = Well1024aRng(seed=1)
        before = len(captured)
        for _ in range(100):
            rng.random_in_range(1, 6)
        assert len(captured) == before

    def test_init_event(self, captured: list[dict[str, Any]]) -> None:
        init(algorithm='lfib4')
        events = [e for e in captured if e.get('event') == 'config_initialized']
        assert events[0]['algorithm'] == 'lfib4'
        assert events[0]['chacha_rounds'] == 12


class TestConfigureLogging:
    """configure_logging scopes output to the library logger."""

    def test_json_lines_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(level='DEBUG', stream=stream)
        Well1024aRng(seed=5)
        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert any(line['event'] == 'rng_seeded' and line['seed_length'] == 1 for line in lines)

    def test_root_logger_untouched(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(level='DEBUG')
        assert logging.getLogger().handlers == root_handlers
        assert logging.getLogger('spongerand').propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(level='DEBUG')
        handler = configure_logging(level='INFO')
        assert logging.getLogger('spongerand').handlers == [handler]

    def test_foreign_stdlib_record_rendered(self) -> None:
        stream = io.StringIO()
        configure_logging(level='INFO', stream=stream)
        logging.getLogger('spongerand.plain').info('stdlib %s', 'record')
        line = json.loads(stream.getvalue().splitlines()[-1])
        assert line['event'] == 'stdlib record'
        assert line['logger'] == 'spongerand.plain'


class TestUnconfigured:
    """Without configuration the library writes nothing."""

    def test_warning_not_printed(self) -> None:
        code = 'from spongerand import ChaChaRng; ChaChaRng(seed=1, rounds=6)'
        env = {**os.environ, 'PYTHONPATH': os.pathsep.join(p for p in sys.path if p)}
        result = subprocess.run(
            [sys.executable, '-c', code], capture_output=True, text=True, env=env, check=True, timeout=60
        )
        assert result.stderr == ''
        assert result.stdout == ''

    def test_library_logger_has_placeholder_handler(self) -> None:
        code = (
            'import logging, spongerand; '
            "print([type(h).__name__ for h in logging.getLogger('spongerand').handlers])"
        )
        env = {**os.environ, 'PYTHONPATH': os.pathsep.join(p for p in sys.path if p)}
        result = subprocess.run(
            [sys.executable, '-c', code], capture_output=True, text=True, env=env, check=True, timeout=60
        )
        assert result.stdout.strip() == "['NullHandler']"
