"""Schemas that validate and convert raw values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class OutputSchema(Protocol[T]):
    """Protocol for value schemas.

    Schemas validate and transform raw values into structured types.
    """

    def validate(self, value: Any) -> T:
        """Validate and transform the input value.

        Raises:
            Exception: If validation fails
        """
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class CallableSchema(OutputSchema[T]):
    """Schema backed by a callable that raises on invalid input."""

    fn: Callable[[Any], T]
    _description: str | None = None

    def validate(self, value: Any) -> T:
        return self.fn(value)

    def describe(self) -> str:
        if self._description:
            return self._description
        return getattr(self.fn, "__name__", repr(self.fn))


@dataclass(frozen=True)
class PydanticSchema(OutputSchema[M]):
    """Schema backed by a pydantic model."""

    model: type[M]

    def validate(self, value: Any) -> M:
        return self.model.model_validate(value)

    def describe(self) -> str:
        return f"PydanticSchema({self.model.__name__})"
