"""Library configuration: ReasonConfig and initialization."""

from __future__ import annotations

from dataclasses import dataclass

from reason._logging import configure_logging

__all__ = [
    'ReasonConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class ReasonConfig:
    """Configuration for reason.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging untouched.
        json_output: Emit JSON logs when logging is configured, else console output.
        trace_replies: Emit a debug event for every outcome or warning recorded on a Reply.
        replace_handlers: When configuring logging, drop the root logger's existing handlers.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_replies: bool = False
    replace_handlers: bool = True


# Global configuration (set by init())
_config: ReasonConfig | None = None

_DEFAULT_CONFIG = ReasonConfig()


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    trace_replies: bool = False,
    replace_handlers: bool = True,
) -> ReasonConfig:
    """Initialize reason with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging untouched.
        json_output: If True, configured logging renders JSON.
        trace_replies: If True, replies log each state change at debug level.
        replace_handlers: If False, logging setup keeps the host application's root handlers.

    Returns:
        The ReasonConfig that was set.

    Example:
        ```python
        import reason

        # Defaults: no logging setup, no reply tracing
        reason.init()

        # Trace every reply transition to the console
        reason.init(log_level='DEBUG', json_output=False, trace_replies=True)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ReasonConfig(
        log_level=log_level,
        json_output=json_output,
        trace_replies=trace_replies,
        replace_handlers=replace_handlers,
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_output, replace_handlers=replace_handlers)

    return _config


def get_config() -> ReasonConfig:
    """Get the current configuration.

    Returns:
        The current ReasonConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'reason not initialized. Call reason.init() first.'
        raise RuntimeError(msg)
    return _config


def _current_config() -> ReasonConfig:
    """Return the active configuration, or the defaults before init()."""
    return _DEFAULT_CONFIG if _config is None else _config
