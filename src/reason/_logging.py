"""Structured logging for reason.

reason only logs on behalf of replies: `Reply.log()` emits one `reply` event
per call, and with `trace_replies` enabled every `succeed`, `fail` and `warn`
emits a `reply.ok`, `reply.bad` or `reply.warning` debug event. The checks in
`reason.check` never log.

reason is embedded in host applications, so nothing here runs at import
time. `configure_logging` is opt-in (usually through `reason.init(log_level=...)`)
and routes structlog and stdlib records through one `ProcessorFormatter`.
By default it replaces the root logger's handlers; pass
`replace_handlers=False` to add reason's handler next to the host's own.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_HANDLER_NAME = 'reason'

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Structlog processor handing each hook its own copy of the event."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            pass  # a failing hook must not break logging
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _build_handler(json_output: bool) -> logging.Handler:  # noqa: FBT001
    import structlog

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    replace_handlers: bool = True,
) -> None:
    """Route reply events and stdlib records through structlog.

    Args:
        level: Root logging level ("DEBUG", "INFO", ...). Unknown names fall back to INFO.
            `reply.*` trace events are emitted at DEBUG.
        json_output: If True, render JSON lines. If False, use colored console output.
        replace_handlers: If True, remove the root logger's existing handlers
            first. If False, the host application's handlers are kept and
            reason's handler is added alongside them, replacing only a
            handler installed by an earlier call.
    """
    import structlog

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    if replace_handlers:
        root_logger.handlers.clear()
    else:
        for handler in [h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME]:
            root_logger.removeHandler(handler)
    root_logger.addHandler(_build_handler(json_output))
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, e.g. to hand to `Reply.log()`.

    Args:
        name: Logger name. If None, uses the caller's module name.
    """
    import structlog

    return structlog.get_logger(name)


# --- Hooks ---


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a callable that receives a copy of every event dict.

    Useful to forward failed replies (`status == 'bad'`) to an alerting
    system, or to collect `reply.*` trace events. Hooks only run once
    `configure_logging` has installed the processor chain.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
