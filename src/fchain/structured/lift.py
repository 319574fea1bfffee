"""Lift raising callables and schemas into partial functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from fchain.kernel.maybe import Maybe
from fchain.kernel.partial import PartialFn
from fchain.structured.schema import OutputSchema

T = TypeVar("T")


def attempt(
    fn: Callable[..., T],
    exceptions: tuple[type[BaseException], ...] = (ValueError, TypeError),
) -> PartialFn[T]:
    """Turn a callable that raises on bad input into a partial function.

    Any exception listed in `exceptions` becomes Absent. Other exceptions
    propagate unchanged.

    Example:
        >>> decimal = attempt(int)
        >>> decimal("2019").unwrap()
        2019
        >>> decimal("twelve").is_absent
        True
    """
    def _attempt(*args: Any) -> Maybe[T]:
        try:
            return Maybe.Present(fn(*args))
        except exceptions:
            return Maybe.Absent()

    _attempt.__name__ = f"attempt({getattr(fn, '__name__', fn)!s})"
    return _attempt


def from_schema(schema: OutputSchema[T]) -> PartialFn[T]:
    """Partial function that succeeds when `schema` accepts its argument.

    A ValueError from the schema (pydantic's ValidationError included)
    declines the input. A chain of these tries one schema after another.
    """
    _from_schema = attempt(schema.validate, exceptions=(ValueError,))
    _from_schema.__name__ = f"from_schema({schema.describe()})"
    return _from_schema
