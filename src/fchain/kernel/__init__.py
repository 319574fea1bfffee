"""Kernel layer - result conventions and chain member vocabulary."""

from fchain.kernel.errors import AbsentValueError, ChainContractError
from fchain.kernel.maybe import ABSENT, Maybe
from fchain.kernel.partial import (
    PartialFn,
    constant,
    default_constant,
    identity,
    lookup,
    never,
    single_point,
)
from fchain.kernel.strategy import PRESENCE_MARKED, PresenceMarked, SentinelValued, Strategy
from fchain.kernel.trace import Evidence, Trace

__all__ = [
    "Maybe",
    "ABSENT",
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
    # Tracing
    "Evidence",
    "Trace",
    # Errors
    "AbsentValueError",
    "ChainContractError",
]
