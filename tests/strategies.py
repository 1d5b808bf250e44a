"""Hypothesis strategies for property-based testing of reason."""

from enum import Enum, StrEnum, auto
from types import SimpleNamespace

from hypothesis import strategies as st
from reason import Cause

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Anything a check or a reply may be handed as a non-null value
payloads = st.one_of(
    integers,
    texts,
    booleans,
    st.floats(allow_nan=False),
    st.lists(st.integers(min_value=-100, max_value=100), max_size=10),
    st.dictionaries(st.text(min_size=1, max_size=10), st.integers(), max_size=5),
)

# Text containing at least one non-whitespace character
non_blank_texts = texts.filter(lambda s: s.strip() != '')

# Whitespace-only text, including the empty string
blank_texts = st.text(alphabet=' \t\n\r', max_size=10)

# -----------------------------------------------------------------------------
# Cause tag strategies
# -----------------------------------------------------------------------------


class MyErrors(Enum):
    """A consumer-defined cause tag enumeration."""

    OOPS_I_FLOPPED = 1
    DISK_FULL = 2


class BillingErrors(StrEnum):
    """A consumer-defined tag enumeration whose members are also strings."""

    CARD_DECLINED = auto()
    ACCOUNT_LOCKED = auto()


builtin_causes = st.sampled_from(list(Cause))

# Enum-style constant names: UPPER_SNAKE_CASE
cause_names = st.from_regex(r'[A-Z][A-Z0-9]*(_[A-Z0-9]+){0,5}', fullmatch=True)

# Any object yielding a name satisfies the CauseTag protocol
custom_causes = cause_names.map(lambda name: SimpleNamespace(name=name))

cause_tags = st.one_of(builtin_causes, custom_causes)

# -----------------------------------------------------------------------------
# Error strategies
# -----------------------------------------------------------------------------

described_errors = non_blank_texts.flatmap(
    lambda text: st.sampled_from([ValueError(text), TypeError(text), RuntimeError(text)])
)

undescribed_errors = blank_texts.map(RuntimeError)
