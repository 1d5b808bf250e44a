"""Shared types: the cause tag protocol.

A cause tag is anything that yields a symbolic name. The built-in
`reason.check.Cause` enum is one implementation; any `enum.Enum` defined by a
consumer is another:

    >>> from enum import Enum
    >>> from reason.types import CauseTag
    >>>
    >>> class BillingErrors(Enum):
    ...     CARD_DECLINED = 1
    >>>
    >>> isinstance(BillingErrors.CARD_DECLINED, CauseTag)
    True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ['CauseTag']


@runtime_checkable
class CauseTag(Protocol):
    """A symbolic failure category that yields its canonical name."""

    @property
    def name(self) -> str: ...
