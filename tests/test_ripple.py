"""
test_ripple.py
--------------
Unit tests for RippleSet: the fixed lifetime window of each ripple and
cancellation of pending removals.
"""
import pytest

from ripple import RippleSet


@pytest.fixture
def ripples(loop, params):
    return RippleSet(loop, params)


def test_ripple_present_until_duration_elapses(loop, ripples):
    ripples.add(50, 50)

    loop.advance(999)
    assert len(ripples) == 1
    loop.advance(1)
    assert len(ripples) == 0


def test_ripples_expire_independently(loop, ripples):
    first = ripples.add(0, 0)
    loop.advance(400)
    second = ripples.add(10, 10)

    loop.advance(600)
    assert [r.id for r in ripples] == [second.id]
    assert first.id != second.id

    loop.advance(400)
    assert len(ripples) == 0


def test_ids_are_monotonic(ripples):
    assert [ripples.add(i, i).id for i in range(3)] == [0, 1, 2]


def test_remove_unknown_ripple_is_a_no_op(ripples):
    ripples.add(1, 1)
    ripples.remove(42)
    assert len(ripples) == 1


def test_cancel_pending_keeps_ripples_and_stops_timers(loop, ripples):
    ripples.add(1, 1)
    ripples.add(2, 2)

    assert ripples.cancel_pending() == 2
    assert loop.pending_timers == 0
    loop.advance(5000)
    assert len(ripples) == 2


def test_removal_after_manual_remove_is_harmless(loop, ripples):
    ripple = ripples.add(1, 1)
    ripples.remove(ripple.id)
    loop.advance(1000)
    assert len(ripples) == 0


def test_non_positive_duration_is_rejected(loop, params):
    params["ripple_duration_ms"] = 0
    with pytest.raises(ValueError):
        RippleSet(loop, params)
