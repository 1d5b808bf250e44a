"""reason: Precondition checks and side-effect replies for Python 3.13+.

Flat imports (preferred):
    from reason import Cause, require_non_null, require_true, render_cause
    from reason import Reply, Status

Submodule imports (for organization):
    from reason.check import Cause, require_non_null
    from reason.reply import Reply, ReplySnapshot
    from reason.errors import InvalidStateError
"""

# Configuration
from reason._config import ReasonConfig, get_config, init

# Precondition checks
from reason.check import Cause, render_cause, require_non_null, require_true

# Errors
from reason.errors import (
    InvalidArgument,
    InvalidArgumentError,
    InvalidState,
    InvalidStateError,
)

# Replies
from reason.reply import (
    MESSAGE_DEFAULT,
    MESSAGE_INVALID_RESPONSE_DATA,
    MESSAGE_WARNING_WITHOUT_CAUSE,
    Reply,
    ReplySnapshot,
    Status,
)
from reason.types import CauseTag

__all__ = [
    # Replies
    'MESSAGE_DEFAULT',
    'MESSAGE_INVALID_RESPONSE_DATA',
    'MESSAGE_WARNING_WITHOUT_CAUSE',
    # Precondition checks
    'Cause',
    'CauseTag',
    # Errors
    'InvalidArgument',
    'InvalidArgumentError',
    'InvalidState',
    'InvalidStateError',
    # Configuration
    'ReasonConfig',
    'Reply',
    'ReplySnapshot',
    'Status',
    'get_config',
    'init',
    'render_cause',
    'require_non_null',
    'require_true',
]
