"""Reply: the recorded outcome of an operation with side effects.

A reply answers a request whose semantics live elsewhere (copying a file,
writing rows to a database, calling a remote service) and carries:

- A payload of type T, present only when the operation succeeded.
- A status telling whether the operation succeeded, failed, or has not
  recorded an outcome yet.
- The error that caused a failure, if any.
- A human-readable message, never empty for a failed reply.
- Warnings a consumer should keep in mind (deprecations, partial results),
  independent of the status.

Failures are captured as data instead of raised, so an operation can report a
partial failure without unwinding its caller's stack.

Example:
    ```python
    from pathlib import Path
    from reason import Reply

    def copy(source: Path, dest: Path) -> Reply[Path]:
        reply = Reply[Path]()
        try:
            dest.write_bytes(source.read_bytes())
        except OSError as e:
            return reply.fail(e, f'could not copy {source}')
        if source.suffix == '.tmp':
            reply.warn('copying temporary files is deprecated')
        return reply.succeed(dest)

    reply = copy(Path('a.txt'), Path('b.txt'))
    if reply.is_ok():
        print(reply.data)
    else:
        print(reply.message)
    ```
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import msgspec

from reason._config import _current_config
from reason._logging import get_logger
from reason.errors import InvalidArgumentError

__all__ = [
    'MESSAGE_DEFAULT',
    'MESSAGE_INVALID_RESPONSE_DATA',
    'MESSAGE_WARNING_WITHOUT_CAUSE',
    'Reply',
    'ReplySnapshot',
    'Status',
]

MESSAGE_DEFAULT = 'no.additional.information'
MESSAGE_INVALID_RESPONSE_DATA = 'response.data.must.not.be.null'
MESSAGE_WARNING_WITHOUT_CAUSE = 'This reply signaled a warning without a cause, please verify the calling code.'

# Distinguishes fail(cause) from fail(cause, None).
_NO_MESSAGE: Any = object()


class Status(StrEnum):
    """Outcome of the operation a reply answers."""

    OK = 'ok'
    BAD = 'bad'
    UNKNOWN = 'unknown'


class ReplySnapshot(msgspec.Struct, frozen=True):
    """Immutable, serializable view of a reply's diagnostic state.

    The payload is not captured, only whether one is present, since T is not
    required to be serializable.

    Attributes:
        status: The reply's status.
        message: The reply's message, as returned by `Reply.message`.
        error: The error rendered as "<type>: <text>", or None.
        warnings: Warnings in the order they were recorded.
        has_data: Whether the reply holds a payload.
    """

    status: Status
    message: str
    error: str | None = None
    warnings: tuple[str, ...] = ()
    has_data: bool = False

    def to_json(self) -> bytes:
        """Encode this snapshot as JSON."""
        return msgspec.json.encode(self)


def _render_error(error: BaseException | None) -> str | None:
    if error is None:
        return None
    text = str(error)
    name = type(error).__name__
    return f'{name}: {text}' if text.strip() else name


class Reply[T]:
    """Result of a single operation with side effects.

    A new reply has status UNKNOWN. Recording an outcome with `succeed` or
    `fail` overwrites whatever was recorded before (last write wins); warnings
    accumulate independently. Every mutator returns the reply itself so calls
    can be chained:

        reply = Reply[int]().succeed(42).warn('deprecated')

    Replies hold no lock: a reply belongs to the call stack that builds it and
    must be handed off, not shared, across threads or tasks.
    """

    __slots__ = ('_data', '_error', '_message', '_status', '_warnings')

    def __init__(self) -> None:
        self._data: T | None = None
        self._status: Status | None = None
        self._error: BaseException | None = None
        self._message: str | None = None
        self._warnings: list[str] = []

    # --- Accessors ---

    @property
    def data(self) -> T | None:
        """The reply's payload, if any."""
        return self._data

    @property
    def status(self) -> Status:
        """The reply's status, UNKNOWN until an outcome is recorded."""
        return Status.UNKNOWN if self._status is None else self._status

    @property
    def error(self) -> BaseException | None:
        """The root cause of a failure, if any."""
        return self._error

    @property
    def message(self) -> str:
        """Additional information about this reply, MESSAGE_DEFAULT if none was recorded."""
        return MESSAGE_DEFAULT if self._message is None else self._message

    @property
    def warnings(self) -> tuple[str, ...]:
        """Warnings in the order they were recorded."""
        return tuple(self._warnings)

    # --- Mutators ---

    def succeed(self, data: T | None) -> Reply[T]:
        """Signal a successful operation.

        A None payload is not a success: the reply fails instead with an
        `InvalidArgumentError` and MESSAGE_INVALID_RESPONSE_DATA.

        Args:
            data: The operation's payload.

        Returns:
            This reply.
        """
        if data is None:
            return self.fail(InvalidArgumentError(MESSAGE_INVALID_RESPONSE_DATA))
        self._data = data
        self._status = Status.OK
        self._error = None
        self._message = None
        self._trace('reply.ok')
        return self

    def fail(self, error: BaseException | None, message: str | None = _NO_MESSAGE) -> Reply[T]:
        """Signal a failed operation.

        Without `message`, the reply's message is taken from the error's text,
        falling back to MESSAGE_DEFAULT when there is no error or its text is
        blank. An explicit `message` is stored verbatim, even when None or
        blank.

        Args:
            error: The root cause of the failure. May be None.
            message: An explanation of the failure, replacing the error's text.

        Returns:
            This reply.
        """
        self._error = error
        self._status = Status.BAD
        text = '' if error is None else str(error)
        self._message = text if text.strip() else MESSAGE_DEFAULT
        if message is not _NO_MESSAGE:
            self._message = message
        self._trace('reply.bad')
        return self

    def warn(self, message: str | None = None) -> Reply[T]:
        """Record a warning, without changing the reply's status.

        Args:
            message: The cause of the warning. None records
                MESSAGE_WARNING_WITHOUT_CAUSE instead.

        Returns:
            This reply.
        """
        self._warnings.append(MESSAGE_WARNING_WITHOUT_CAUSE if message is None else message)
        self._trace('reply.warning')
        return self

    def ok(self, data: T | None) -> Reply[T]:
        """Alias for `succeed`."""
        return self.succeed(data)

    def bad(self, error: BaseException | None, message: str | None = _NO_MESSAGE) -> Reply[T]:
        """Alias for `fail`."""
        return self.fail(error, message)

    def warning(self, message: str | None = None) -> Reply[T]:
        """Alias for `warn`."""
        return self.warn(message)

    # --- Status queries ---

    def is_ok(self) -> bool:
        """Return True if the operation succeeded."""
        return self._status is Status.OK

    def is_bad(self) -> bool:
        """Return True if the operation failed."""
        return self._status is Status.BAD

    def is_warning(self) -> bool:
        """Return True if any warning was recorded."""
        return bool(self._warnings)

    # --- Diagnostics ---

    def snapshot(self) -> ReplySnapshot:
        """Capture the reply's current diagnostic state."""
        return ReplySnapshot(
            status=self.status,
            message=self.message,
            error=_render_error(self._error),
            warnings=self.warnings,
            has_data=self._data is not None,
        )

    def log(self, logger: Any = None) -> Reply[T]:
        """Emit a structured `reply` event describing this reply.

        OK replies log at info, BAD replies at warning, and replies without an
        outcome at debug.

        Args:
            logger: A structlog logger. Defaults to this module's logger.

        Returns:
            This reply.
        """
        if logger is None:
            logger = get_logger(__name__)
        fields = msgspec.structs.asdict(self.snapshot())
        if self.is_ok():
            logger.info('reply', **fields)
        elif self.is_bad():
            logger.warning('reply', **fields)
        else:
            logger.debug('reply', **fields)
        return self

    def describe(self) -> str:
        """Return a one-line description of the reply for logs and debugging."""
        return f'{type(self).__name__}[stat: {self.status.name}, msg: {self.message}, err: {self._error!r}]'

    def __repr__(self) -> str:
        return self.describe()

    def _trace(self, event: str) -> None:
        if _current_config().trace_replies:
            get_logger(__name__).debug(event, status=str(self.status), message=self.message)
