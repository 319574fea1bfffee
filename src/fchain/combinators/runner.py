"""Chain runner: first-match-wins evaluation over a runtime sequence."""

# Evaluation satisfies the following laws for any source f1..fn and input x:
#
# 1. First match: the result is the first fi(x) that is not absent,
#    scanning from i = 1; absent/bottom if there is none.
#
# 2. Invocation count: if the first match is at k, exactly f1..fk are
#    called; with no match, exactly n are called.
#
# 3. Empty source: the result is absent/bottom and nothing is called.
#
# 4. Tie-break: when several members would match, the earliest wins and
#    the later ones are never called.


from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from itertools import islice
from typing import Any

from fchain.kernel.errors import ChainContractError
from fchain.kernel.maybe import Maybe
from fchain.kernel.strategy import PRESENCE_MARKED, Strategy
from fchain.kernel.trace import Trace

logger = logging.getLogger(__name__)


def member_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def run(
    source: Iterable[Callable[..., Any]],
    *args: Any,
    strategy: Strategy = PRESENCE_MARKED,
    trace: Trace | None = None,
    name: str | None = None,
) -> Any:
    """Evaluate partial functions from `source` until one succeeds.

    Semantics:
        - Call each member with `args`, strictly in iteration order
        - Return the first result the strategy reads as present
        - Return the strategy's absence value once the source is exhausted
        - Consume the source in a single forward pass; lazy sources are
          not advanced past the matching member

    Args:
        source: Any ordered iterable of partial functions (list, tuple,
            deque, generator, ...)
        *args: Arguments passed to every member
        strategy: Absence convention for members and result
        trace: Optional trace to record evaluation evidence into
        name: Label used in trace and log records

    Returns:
        Maybe under PresenceMarked, or a bare value (possibly bottom)
        under SentinelValued.

    Raises:
        ChainContractError: If a member is not callable or its output
            breaks the strategy
    """
    label = name or "chain"
    begin_id: int | None = None
    if trace is not None:
        begin_id = trace.record(
            "chain_begin",
            info={"name": label, "strategy": strategy.describe()},
        )
        if begin_id is not None:
            trace.push(begin_id)

    invocations = 0
    matched_at: int | None = None
    result: Maybe[Any] = Maybe.Absent()
    try:
        for index, fn in enumerate(source):
            if not callable(fn):
                raise ChainContractError(
                    f"Chain members must be callable, got {type(fn).__name__} at index {index}",
                    fn,
                )
            invocations += 1
            start_time = time.perf_counter()
            try:
                candidate = strategy.to_maybe(fn(*args))
            except Exception as exc:
                if trace is not None:
                    trace.record(
                        "candidate_error",
                        info={"index": index, "fn": member_name(fn), "error": str(exc)},
                        parent_id=begin_id,
                    )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000

            if trace is not None:
                trace.record(
                    "candidate",
                    info={"index": index, "fn": member_name(fn), "matched": candidate.is_present},
                    parent_id=begin_id,
                    duration_ms=duration_ms,
                )

            if candidate.is_present:
                matched_at = index
                result = candidate
                break
    finally:
        if trace is not None and begin_id is not None:
            trace.pop()

    if trace is not None:
        trace.record(
            "chain_end",
            info={"matched": matched_at, "invocations": invocations},
            parent_id=begin_id,
        )

    if matched_at is None:
        logger.debug("%s: no match after %d invocations", label, invocations)
    else:
        logger.debug("%s: matched at index %d", label, matched_at)

    return strategy.from_maybe(result)


def run_range(
    source: Iterable[Callable[..., Any]],
    start: int,
    stop: int | None,
    *args: Any,
    strategy: Strategy = PRESENCE_MARKED,
    trace: Trace | None = None,
    name: str | None = None,
) -> Any:
    """Evaluate only the members at positions [start, stop) of `source`.

    The source is walked forward once; it is neither sliced into a copy
    nor indexed, so any iterable works. A `stop` of None runs to the end.

    Raises:
        ValueError: If start or stop is negative
    """
    if start < 0 or (stop is not None and stop < 0):
        raise ValueError("start and stop must be non-negative")
    return run(
        islice(source, start, stop),
        *args,
        strategy=strategy,
        trace=trace,
        name=name,
    )
