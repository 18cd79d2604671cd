import threading

import pytest

from gltoolkit.threads import ConditionSignal, Worker


def test_worker_runs_with_arguments():
    seen = []
    worker = Worker(lambda a, b: seen.append((a, b)) or True, 1, "x", name="w")
    worker.start()
    worker.join()
    assert seen == [(1, "x")]
    assert worker.result is True


def test_worker_result_is_bool_of_return():
    worker = Worker(lambda: 0)
    worker.start()
    worker.join()
    assert worker.result is False


def test_joinable_lifecycle():
    worker = Worker(lambda: True)
    assert worker.is_joinable() is False
    worker.start()
    assert worker.is_joinable() is True
    worker.join()
    assert worker.is_joinable() is False


def test_join_twice_raises():
    worker = Worker(lambda: True)
    worker.start()
    worker.join()
    with pytest.raises(RuntimeError):
        worker.join()


def test_join_before_start_raises():
    with pytest.raises(RuntimeError):
        Worker(lambda: True).join()


def test_independent_worker_cannot_be_joined():
    done = threading.Event()
    worker = Worker(lambda: done.set() or True)
    worker.start(True)
    assert worker.is_joinable() is False
    with pytest.raises(RuntimeError):
        worker.join()
    assert done.wait(5) is True


def test_condition_signal_wakes_waiter():
    signal = ConditionSignal()
    flag = [False]
    outcome = []

    def wait():
        outcome.append(signal.wait_for_condition(lambda: flag[0]))

    waiter = threading.Thread(target=wait)
    waiter.start()
    flag[0] = True
    signal.notify_all()
    waiter.join(5)
    assert waiter.is_alive() is False
    assert outcome == [True]
    result = signal.wait_for_condition(lambda: flag[0])
    assert result is True


def test_condition_signal_notify_one():
    signal = ConditionSignal()
    flag = [False]
    outcome = []
    waiter = threading.Thread(
        target=lambda: outcome.append(signal.wait_for_condition(lambda: flag[0]))
    )
    waiter.start()
    flag[0] = True
    signal.notify_one()
    waiter.join(5)
    assert waiter.is_alive() is False
    assert outcome == [True]


def test_wait_returns_at_once_when_predicate_holds():
    signal = ConditionSignal()
    assert signal.wait_for_condition(lambda: True) is True