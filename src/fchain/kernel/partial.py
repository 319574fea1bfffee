"""Small partial functions used as chain members."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from fchain.kernel.maybe import Maybe

T = TypeVar("T")
R = TypeVar("R")

PartialFn = Callable[..., Maybe[R]]


def identity(x: T) -> T:
    return x


def constant(value: R) -> PartialFn[R]:
    """Always succeed with `value`, whatever the arguments.

    Typically placed last in a chain as a guaranteed fallback.
    """
    def _constant(*args: Any) -> Maybe[R]:
        return Maybe.Present(value)

    _constant.__name__ = f"constant({value!r})"
    return _constant


def default_constant(factory: Callable[[], R]) -> PartialFn[R]:
    """Always succeed with a freshly built `factory()` value."""
    def _default(*args: Any) -> Maybe[R]:
        return Maybe.Present(factory())

    _default.__name__ = f"default_constant({getattr(factory, '__name__', factory)})"
    return _default


def never(*args: Any) -> Maybe[Any]:
    """Decline every input."""
    return Maybe.Absent()


def single_point(value: R, *point: Any) -> PartialFn[R]:
    """Succeed with `value` only when called with exactly `point`.

    Arguments are compared field-wise by equality, so every argument type
    in the chain's signature must support ==.

    Example:
        >>> zero = single_point("zero", 0)
        >>> zero(0)
        Maybe(kind='present', value='zero')
        >>> zero(1)
        Maybe(kind='absent', value=None)
    """
    def _single_point(*args: Any) -> Maybe[R]:
        if args == point:
            return Maybe.Present(value)
        return Maybe.Absent()

    _single_point.__name__ = f"single_point({value!r}, {', '.join(map(repr, point))})"
    return _single_point


def lookup(table: Mapping[Any, R]) -> PartialFn[R]:
    """Exact-match table lookup over a single argument."""
    def _lookup(key: Any) -> Maybe[R]:
        if key in table:
            return Maybe.Present(table[key])
        return Maybe.Absent()

    _lookup.__name__ = f"lookup({len(table)} entries)"
    return _lookup
