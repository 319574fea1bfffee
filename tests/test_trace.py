"""Test evaluation tracing using pytest."""

import pytest

from fchain import Evidence, Maybe, SentinelValued, Trace, build, run, single_point
from fakes import STRING_TO_NUMBER, CallLog, six_member_results


def test_evidence_creation() -> None:
    """Test basic Evidence creation."""
    evidence = Evidence("chain_begin")
    assert evidence.action == "chain_begin"
    assert evidence.parent_id is None
    assert evidence.info == {}


def test_record_uses_stack_top_as_parent() -> None:
    """Test events recorded after push become children of the pushed event."""
    trace = Trace()
    parent = trace.record("chain_begin")
    trace.push(parent)

    child = trace.record("candidate")
    trace.pop()
    sibling = trace.record("chain_begin")

    events = trace.get_events()
    assert events[child].parent_id == parent
    assert events[sibling].parent_id is None


def test_run_records_candidates_until_match() -> None:
    """Test one candidate event per invoked member, ending at the match."""
    trace = Trace()

    result = run(STRING_TO_NUMBER, "XIV", trace=trace, name="string_to_number")

    assert result.unwrap() == 14
    actions = [ev.action for ev in trace.get_events()]
    assert actions == ["chain_begin", "candidate", "candidate", "candidate", "chain_end"]

    begin = trace.find("chain_begin")[0]
    assert begin.info == {"name": "string_to_number", "strategy": "PresenceMarked"}

    candidates = trace.find("candidate")
    assert [c.info["fn"] for c in candidates] == [
        "decimal_to_number",
        "english_numeral_to_number",
        "roman_to_number",
    ]
    assert [c.info["matched"] for c in candidates] == [False, False, True]
    assert all(c.parent_id == begin.id for c in candidates)
    assert all(c.duration_ms is not None and c.duration_ms >= 0 for c in candidates)

    end = trace.find("chain_end")[0]
    assert end.info == {"matched": 2, "invocations": 3}


def test_trace_counts_match_invocation_law() -> None:
    """Test the trace agrees with the number of members actually called."""
    trace = Trace()
    log = CallLog()

    build(*log.members(six_member_results())).with_trace(trace)()

    assert len(trace.find("candidate")) == log.count == 4
    assert trace.find("chain_end")[0].info == {"matched": 3, "invocations": 4}


def test_trace_no_match() -> None:
    """Test chain_end reports no match after trying every member."""
    trace = Trace()

    run(STRING_TO_NUMBER, "sieben", trace=trace)

    assert trace.find("chain_end")[0].info == {"matched": None, "invocations": 3}


def test_trace_empty_chain() -> None:
    """Test an empty chain records only its begin and end."""
    trace = Trace()

    build(strategy=SentinelValued(0)).with_trace(trace)()

    assert [ev.action for ev in trace.get_events()] == ["chain_begin", "chain_end"]
    assert trace.find("chain_begin")[0].info["strategy"] == "SentinelValued(0)"


def test_nested_chain_builds_tree() -> None:
    """Test a nested chain's events hang under the outer chain."""
    trace = Trace()
    inner = build(single_point("zero", 0), name="inner").with_trace(trace)
    outer = build(inner, single_point("one", 1), name="outer").with_trace(trace)

    assert outer(1).unwrap() == "one"

    begins = trace.find("chain_begin")
    assert [b.info["name"] for b in begins] == ["outer", "inner"]
    outer_id, inner_id = begins[0].id, begins[1].id
    assert begins[1].parent_id == outer_id

    tree = trace.as_tree()
    assert inner_id in tree[outer_id]
    assert tree[None] == [outer_id]


def test_member_error_is_recorded_and_reraised() -> None:
    """Test a raising member is recorded and the stack is unwound."""
    trace = Trace()

    def broken(_: str) -> Maybe[int]:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        run([broken], "x", trace=trace)

    errors = trace.find("candidate_error")
    assert len(errors) == 1
    assert errors[0].info == {"index": 0, "fn": "broken", "error": "boom"}
    assert trace.pop() is None


def test_disabled_trace_records_nothing() -> None:
    """Test a disabled trace leaves results unchanged and stays empty."""
    trace = Trace(enabled=False)

    assert run(STRING_TO_NUMBER, "2019", trace=trace).unwrap() == 2019
    assert len(trace) == 0


def test_clear_resets_ids() -> None:
    """Test clear starts ids again from zero."""
    trace = Trace()
    run(STRING_TO_NUMBER, "2019", trace=trace)

    trace.clear()
    run(STRING_TO_NUMBER, "2019", trace=trace)

    assert trace.get_events()[0].id == 0
