"""Tests for the dual struct+exception failure types."""

import msgspec
import pytest
from reason import (
    Cause,
    InvalidArgument,
    InvalidArgumentError,
    InvalidState,
    InvalidStateError,
    Reply,
    render_cause,
    require_true,
)


class TestInvalidState:
    """Tests for InvalidState / InvalidStateError."""

    def test_exception_text_is_message(self):
        """The exception text is exactly the message."""
        e = InvalidStateError('missing.data')
        assert str(e) == 'missing.data'
        assert e.message == 'missing.data'

    def test_is_runtime_error(self):
        """InvalidStateError is a RuntimeError."""
        assert issubclass(InvalidStateError, RuntimeError)
        assert not issubclass(InvalidStateError, ValueError)

    def test_struct_to_exception(self):
        """Struct converts to an exception carrying the same message."""
        e = InvalidState('condition.not.satisfied').to_exception()
        assert isinstance(e, InvalidStateError)
        assert e.message == 'condition.not.satisfied'

    def test_exception_to_struct(self):
        """Exception converts to an equal struct."""
        assert InvalidStateError('x').to_struct() == InvalidState('x')

    def test_raised_check_as_data(self):
        """A raised check failure can be carried as data."""
        with pytest.raises(InvalidStateError) as exc_info:
            require_true(False)  # noqa: FBT003
        struct = exc_info.value.to_struct()
        assert struct.message == render_cause(Cause.CONDITION_NOT_SATISFIED)
        assert msgspec.json.decode(msgspec.json.encode(struct), type=InvalidState) == struct

    def test_struct_is_frozen(self):
        """Structs are immutable."""
        struct = InvalidState('x')
        with pytest.raises(AttributeError):
            struct.message = 'y'  # type: ignore[misc]


class TestInvalidArgument:
    """Tests for InvalidArgument / InvalidArgumentError."""

    def test_is_value_error(self):
        """InvalidArgumentError is a ValueError."""
        assert issubclass(InvalidArgumentError, ValueError)

    def test_round_trip(self):
        """Struct and exception convert into one another."""
        e = InvalidArgument('response.data.must.not.be.null').to_exception()
        assert isinstance(e, InvalidArgumentError)
        assert e.to_struct() == InvalidArgument('response.data.must.not.be.null')

    def test_recorded_for_null_payload(self):
        """A null payload is recorded as an InvalidArgumentError."""
        error = Reply[str]().succeed(None).error
        assert isinstance(error, InvalidArgumentError)
        assert error.to_struct() == InvalidArgument('response.data.must.not.be.null')
