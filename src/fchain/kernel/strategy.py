"""Absence conventions for chains.

Every chain evaluates over presence-marked results internally. A strategy
converts each partial function's raw output into a Maybe on the way in,
and converts the chain's final Maybe into the caller's result on the way
out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from fchain.kernel.errors import ChainContractError
from fchain.kernel.maybe import Maybe


class Strategy(Protocol):
    """Protocol for absence conventions."""

    def to_maybe(self, raw: Any) -> Maybe[Any]:
        """Interpret one partial function output.

        Raises:
            ChainContractError: If the output does not follow the convention
        """
        ...

    def from_maybe(self, result: Maybe[Any]) -> Any:
        """Turn the chain's final result into what the caller receives."""
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class PresenceMarked(Strategy):
    """Partial functions return Maybe.Present(value) or Maybe.Absent()."""

    def to_maybe(self, raw: Any) -> Maybe[Any]:
        if not isinstance(raw, Maybe):
            raise ChainContractError(
                f"Expected Maybe from presence-marked partial function, got {type(raw).__name__}",
                raw,
            )
        return raw

    def from_maybe(self, result: Maybe[Any]) -> Maybe[Any]:
        return result

    def describe(self) -> str:
        return "PresenceMarked"


@dataclass(frozen=True)
class SentinelValued(Strategy):
    """Partial functions return bare values; `bottom` means absence.

    A legitimate result equal to `bottom` cannot be told apart from
    absence. Callers must choose a bottom outside the range of real
    results.
    """

    bottom: Any

    def to_maybe(self, raw: Any) -> Maybe[Any]:
        if raw == self.bottom:
            return Maybe.Absent()
        return Maybe.Present(raw)

    def from_maybe(self, result: Maybe[Any]) -> Any:
        return result.value_or(self.bottom)

    def describe(self) -> str:
        return f"SentinelValued({self.bottom!r})"


PRESENCE_MARKED = PresenceMarked()
