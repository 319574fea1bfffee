from .combinators import Chain, build, run, run_range
from .kernel import (
    ABSENT,
    PRESENCE_MARKED,
    AbsentValueError,
    ChainContractError,
    Evidence,
    Maybe,
    PartialFn,
    PresenceMarked,
    SentinelValued,
    Strategy,
    Trace,
    constant,
    default_constant,
    identity,
    lookup,
    never,
    single_point,
)
from .structured import attempt, from_schema

__all__ = [
    # Core
    "Maybe",
    "ABSENT",
    "Chain",
    "build",
    "run",
    "run_range",
    # Strategies
    "Strategy",
    "PresenceMarked",
    "SentinelValued",
    "PRESENCE_MARKED",
    # Partial functions
    "PartialFn",
    "constant",
    "default_constant",
    "identity",
    "lookup",
    "never",
    "single_point",
    "attempt",
    "from_schema",
    # Tracing
    "Evidence",
    "Trace",
    # Errors
    "AbsentValueError",
    "ChainContractError",
]
