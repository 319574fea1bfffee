"""Presence-marked results - the reference absence signal."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from fchain.kernel.errors import AbsentValueError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    The result of one partial function invocation.

    Kinds:
    - present: The function produced a value (which may itself be None)
    - absent: The function declined to produce a result for this input
    """

    kind: Literal["present", "absent"]
    value: T | None = None

    @staticmethod
    def Present(value: Any) -> Maybe[Any]:
        return Maybe(kind="present", value=value)

    @staticmethod
    def Absent() -> Maybe[Any]:
        return Maybe(kind="absent")

    @property
    def is_present(self) -> bool:
        return self.kind == "present"

    @property
    def is_absent(self) -> bool:
        return self.kind == "absent"

    def unwrap(self) -> T:
        if self.kind == "absent":
            raise AbsentValueError("Maybe has no value.")
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self.value if self.kind == "present" else default  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        if self.kind == "absent":
            return self  # type: ignore[return-value]
        return Maybe.Present(func(self.value))  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.kind == "present"


ABSENT: Maybe[Any] = Maybe.Absent()
