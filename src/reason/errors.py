"""Failure types: dual struct+exception for data-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidArgument',
    'InvalidArgumentError',
    'InvalidState',
    'InvalidStateError',
]


# --- Invalid State ---


class InvalidState(msgspec.Struct, frozen=True, gc=False):
    """A precondition was violated - struct variant for carrying the failure as data."""

    message: str

    def to_exception(self) -> InvalidStateError:
        """Convert to exception for raise-based code."""
        return InvalidStateError(self.message)


class InvalidStateError(RuntimeError):
    """A precondition was violated - exception variant.

    Raised by the `reason.check` functions. The exception text is exactly the
    computed failure message, which encodes the symbolic cause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> InvalidState:
        """Convert to struct for data-based code."""
        return InvalidState(self.message)


# --- Invalid Argument ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """An argument was rejected - struct variant."""

    message: str

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.message)


class InvalidArgumentError(ValueError):
    """An argument was rejected - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for data-based code."""
        return InvalidArgument(self.message)
