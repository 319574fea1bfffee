"""Chain builder - static composition of partial functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from fchain.combinators.runner import member_name, run
from fchain.kernel.errors import ChainContractError
from fchain.kernel.strategy import PRESENCE_MARKED, Strategy
from fchain.kernel.trace import Trace

R = TypeVar("R")


@dataclass(frozen=True)
class Chain(Generic[R]):
    """A fixed, ordered list of partial functions behaving as one callable.

    Calling the chain tries each member in order with the call's arguments
    and returns the first non-absent result. Every call starts again from
    the first member; the chain holds no state between calls.

    Attributes:
        fns: Members, in evaluation order
        strategy: Absence convention shared by all members
        name: Label used in trace and log records
        trace: Optional trace every call records into
    """

    fns: tuple[Callable[..., Any], ...] = ()
    strategy: Strategy = PRESENCE_MARKED
    name: str | None = None
    trace: Trace | None = None

    def __post_init__(self) -> None:
        # Detach from the caller's sequence so later edits cannot reach the chain
        object.__setattr__(self, "fns", tuple(self.fns))
        for fn in self.fns:
            if not callable(fn):
                raise ChainContractError(
                    f"Chain members must be callable, got {type(fn).__name__}", fn
                )

    def __call__(self, *args: Any) -> Any:
        return run(
            self.fns,
            *args,
            strategy=self.strategy,
            trace=self.trace,
            name=self.name,
        )

    def __len__(self) -> int:
        return len(self.fns)

    def __iter__(self) -> Iterator[Callable[..., Any]]:
        return iter(self.fns)

    @property
    def __name__(self) -> str:
        if self.name:
            return self.name
        return "chain(" + ", ".join(member_name(fn) for fn in self.fns) + ")"

    def or_else(self, fn: Callable[..., Any]) -> Chain[R]:
        """Return a new chain that falls back to `fn` after every member."""
        return replace(self, fns=self.fns + (fn,))

    def __or__(self, other: Chain[R] | Callable[..., Any]) -> Chain[R]:
        """Concatenate with another chain, or append a single callable.

        Raises:
            ChainContractError: If the other chain uses a different strategy
        """
        if isinstance(other, Chain):
            if other.strategy != self.strategy:
                raise ChainContractError(
                    f"Cannot join {self.strategy.describe()} chain with "
                    f"{other.strategy.describe()} chain",
                    other,
                )
            return replace(self, fns=self.fns + other.fns)
        return self.or_else(other)

    def with_trace(self, trace: Trace | None) -> Chain[R]:
        return replace(self, trace=trace)


def build(
    *fns: Callable[..., Any],
    strategy: Strategy = PRESENCE_MARKED,
    name: str | None = None,
) -> Chain[Any]:
    """Compose partial functions into a single first-match-wins callable.

    Semantics:
        - chain(*args) == f1(*args) if that is present, else f2(*args), ...
        - Absent (or bottom) when every member declines, or when there
          are no members at all
        - Members after the first match are never called

    Args:
        *fns: Partial functions sharing one argument signature and
            one absence convention
        strategy: Absence convention for members and result
        name: Label used in trace and log records

    Returns:
        Chain: Callable with the members' argument signature

    Raises:
        ChainContractError: If a member is not callable

    Example:
        >>> to_text = build(single_point("zero", 0), single_point("one", 1))
        >>> to_text(1).unwrap()
        'one'
    """
    return Chain(fns=tuple(fns), strategy=strategy, name=name)
