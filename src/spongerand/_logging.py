"""Structured logging for spongerand.

Library loggers are structlog wrappers around the stdlib ``spongerand``
logger hierarchy. The stdlib level filter runs first in the chain, so nothing
is emitted until a handler is installed, either by the host application or by
`configure_logging` / ``spongerand.init(log_level=...)``.

`configure_logging` only touches the ``spongerand`` logger: the host's root
logger and its global structlog configuration are left alone. Output goes
through structlog's ProcessorFormatter, so plain stdlib records logged under
``spongerand.*`` are rendered the same way as structlog events.

Events are flat key/value dicts named after what happened (``rng_seeded``,
``rng_restored``, ``config_initialized``). Log hooks receive a copy of every
event that passes the level filter.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

LOGGER_NAME: Final = 'spongerand'

# Silent until a handler is configured; replaced by configure_logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict


def _enrichers() -> list[Any]:
    """Processors that fill in an event, for structlog and stdlib records alike."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        _run_hooks,
    ]


def _event_chain() -> list[Any]:
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_enrichers(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Send spongerand events to a stream.

    Replaces any handler previously installed on the ``spongerand`` logger
    and stops propagation to the root logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
        stream: Destination, stderr by default.

    Returns:
        The installed handler.
    """
    import structlog

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=(stream or sys.stderr).isatty())

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    return handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger for a module of the library.

    Args:
        name: Logger name, usually ``__name__``. Defaults to ``spongerand``.

    Returns:
        A lazily bound structlog BoundLogger.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


# --- Hooks ---


def add_log_hook(hook: LogHook) -> None:
    """Register a callable that receives a copy of each emitted event."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
