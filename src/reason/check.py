"""Precondition checks with enumerable root causes.

Provides fail-fast checks that raise `InvalidStateError` with a uniform,
symbolic message when a precondition does not hold:
- render_cause: Encode a cause tag as a lower-case, dot separated string
- require_non_null: Return a value unchanged, or fail if it is None
- require_true: Fail if a condition does not hold

Example:
    ```python
    from reason.check import Cause, require_non_null, require_true

    def transfer(source, target, amount):
        require_non_null(source)
        require_non_null(target, 'transfer.target.required')
        require_true(amount > 0, Cause.CONDITION_NOT_SATISFIED)
        ...
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import overload

from reason.errors import InvalidStateError
from reason.types import CauseTag

__all__ = [
    'Cause',
    'render_cause',
    'require_non_null',
    'require_true',
]


class Cause(Enum):
    """Built-in root cause constants.

    Consumers are not limited to these: any enum member (or other object with
    a `name`) can be passed wherever a cause tag is accepted.
    """

    GENERAL_ERROR = 'general_error'
    """A general processing error, with no further (or unknown) cause."""

    CONDITION_NOT_SATISFIED = 'condition_not_satisfied'
    """An invalid state, from a routine's internal processing or its input parameters."""

    MISSING_DATA = 'missing_data'
    """A required argument was not supplied."""


def render_cause(tag: CauseTag | None) -> str:
    """Encode a cause tag as a string.

    Args:
        tag: The cause tag. None renders as `Cause.GENERAL_ERROR`.

    Returns:
        The tag's name in lower case, with underscores replaced by dots.

    Example:
        ```python
        render_cause(Cause.CONDITION_NOT_SATISFIED)
        # 'condition.not.satisfied'

        render_cause(None)
        # 'general.error'
        ```
    """
    if tag is None:
        tag = Cause.GENERAL_ERROR
    return tag.name.lower().replace('_', '.')


def _failure_message(cause: CauseTag | str | None, default: Cause) -> str:
    # StrEnum members are tags, not messages
    if isinstance(cause, str) and not isinstance(cause, Enum):
        return cause if cause.strip() else render_cause(default)
    return render_cause(default if cause is None else cause)


@overload
def require_non_null[T](value: T | None) -> T: ...


@overload
def require_non_null[T](value: T | None, cause: CauseTag | None) -> T: ...


@overload
def require_non_null[T](value: T | None, cause: str | None) -> T: ...


def require_non_null[T](value: T | None, cause: CauseTag | str | None = None) -> T:
    """Non-null argument check.

    Args:
        value: The argument to check.
        cause: Root cause for the failure. Either a cause tag, rendered with
            `render_cause`, or a free-form message used verbatim. None or a
            blank message falls back to `Cause.MISSING_DATA`.

    Returns:
        The argument itself.

    Raises:
        InvalidStateError: If value is None.

    Example:
        ```python
        require_non_null(42)
        # 42

        require_non_null(None)
        # InvalidStateError: missing.data

        require_non_null(None, 'user.id.required')
        # InvalidStateError: user.id.required
        ```
    """
    if value is None:
        raise InvalidStateError(_failure_message(cause, Cause.MISSING_DATA))
    return value


@overload
def require_true(condition: bool) -> None: ...  # noqa: FBT001


@overload
def require_true(condition: bool, cause: CauseTag | None) -> None: ...  # noqa: FBT001


@overload
def require_true(condition: bool, cause: str | None) -> None: ...  # noqa: FBT001


def require_true(condition: bool, cause: CauseTag | str | None = None) -> None:  # noqa: FBT001
    """Basic truth check.

    Args:
        condition: The condition to test.
        cause: Root cause for the failure. Either a cause tag, rendered with
            `render_cause`, or a free-form message used verbatim. None or a
            blank message falls back to `Cause.CONDITION_NOT_SATISFIED`.

    Raises:
        InvalidStateError: If condition is false.
    """
    if not condition:
        raise InvalidStateError(_failure_message(cause, Cause.CONDITION_NOT_SATISFIED))
