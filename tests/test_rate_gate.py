from __future__ import annotations

import threading

import pytest

from flood_control import CheckAbortedError, CheckContext, FloodConfig, RateGate


def test_burst_rejects_check_over_limit(gate, clock):
    results = []
    for _ in range(6):
        results.append(gate.check(123))
        clock.advance(1)

    assert results == [True, True, True, True, True, False]


def test_window_expiry_restores_capacity(gate, clock):
    for _ in range(6):
        gate.check(123)
        clock.advance(1)

    clock.advance(11)

    assert gate.check(123) is True
    assert gate.recorded(123) == 1


def test_users_are_isolated(gate):
    for _ in range(6):
        gate.check(1)

    assert gate.check(1) is False
    assert gate.check(2) is True
    assert gate.recorded(2) == 1


def test_any_int_is_a_valid_key(gate):
    for user_id in (0, -1, -(2**63), 2**63 - 1):
        assert gate.check(user_id) is True
    assert gate.tracked_users() == 4


def test_timestamp_exactly_window_old_is_kept(clock):
    gate = RateGate(FloodConfig(window_sec=10, max_checks=1), clock=clock)
    assert gate.check(7) is True

    clock.advance(10)
    assert gate.check(7) is False
    assert gate.recorded(7) == 2

    clock.advance(0.001)
    # first stamp evicted, count stays at two
    assert gate.check(7) is False
    assert gate.recorded(7) == 2


def test_count_equal_to_max_is_admitted(clock):
    gate = RateGate(FloodConfig(window_sec=60, max_checks=3), clock=clock)

    assert [gate.check(5) for _ in range(3)] == [True, True, True]
    assert gate.check(5) is False


def test_rejection_is_still_recorded(gate, clock):
    for _ in range(5):
        assert gate.check(9) is True

    for expected_count in range(6, 10):
        clock.advance(1)
        assert gate.check(9) is False
        assert gate.recorded(9) == expected_count


def test_rejected_user_stays_rejected_until_window_drains(gate, clock):
    for _ in range(8):
        gate.check(9)
        clock.advance(1)

    # clock is at +8s; the oldest stamps drop out one by one but count stays above max
    clock.advance(3)
    assert gate.check(9) is False

    clock.advance(10)
    assert gate.check(9) is True


def test_empty_history_is_kept_after_eviction(gate, clock):
    gate.check(3)
    clock.advance(100)
    gate.check(4)

    assert gate.recorded(3) == 1
    assert gate.tracked_users() == 2


def test_recorded_does_not_create_entries(gate):
    assert gate.recorded(42) == 0
    assert gate.tracked_users() == 0


def test_zero_max_checks_never_admits(clock):
    gate = RateGate(FloodConfig(window_sec=10, max_checks=0), clock=clock)

    assert gate.check(1) is False
    clock.advance(60)
    assert gate.check(1) is False


def test_zero_window_only_counts_same_instant(clock):
    gate = RateGate(FloodConfig(window_sec=0, max_checks=1), clock=clock)

    assert gate.check(1) is True
    assert gate.check(1) is False
    clock.advance(0.5)
    assert gate.check(1) is True


def test_cancelled_context_leaves_history_unchanged(gate):
    gate.check(11)
    gate.check(11)
    ctx = CheckContext()
    ctx.cancel()

    with pytest.raises(CheckAbortedError) as exc_info:
        gate.check(11, ctx)

    assert exc_info.value.reason == "cancelled"
    assert gate.recorded(11) == 2


def test_cancelled_context_does_not_create_entry(gate):
    ctx = CheckContext()
    ctx.cancel()

    with pytest.raises(CheckAbortedError):
        gate.check(12, ctx)

    assert gate.tracked_users() == 0


def test_expired_deadline_aborts(gate, clock):
    ctx = CheckContext.with_timeout(5, clock=clock)
    assert gate.check(13, ctx) is True

    clock.advance(5)
    with pytest.raises(CheckAbortedError) as exc_info:
        gate.check(13, ctx)

    assert exc_info.value.reason == "deadline exceeded"
    assert gate.recorded(13) == 1


def test_abort_is_logged(gate, caplog):
    ctx = CheckContext()
    ctx.cancel()

    with caplog.at_level("WARNING", logger="flood_control.gate"):
        with pytest.raises(CheckAbortedError):
            gate.check(14, ctx)

    assert "check aborted: user_id=14 reason=cancelled" in caplog.text


def test_concurrent_checks_same_user_never_over_admit():
    gate = RateGate(FloodConfig(window_sec=3600, max_checks=5))
    workers = 50
    barrier = threading.Barrier(workers)
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        ok = gate.check(777)
        with results_lock:
            results.append(ok)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == workers
    assert results.count(True) == 5
    assert gate.recorded(777) == workers


def test_concurrent_checks_different_users_are_independent():
    gate = RateGate(FloodConfig(window_sec=3600, max_checks=3))
    users = list(range(20))
    admitted: dict[int, int] = {u: 0 for u in users}
    lock = threading.Lock()

    def worker(user_id: int) -> None:
        for _ in range(5):
            if gate.check(user_id):
                with lock:
                    admitted[user_id] += 1

    threads = [threading.Thread(target=worker, args=(u,)) for u in users]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(count == 3 for count in admitted.values())
    assert gate.tracked_users() == 20
