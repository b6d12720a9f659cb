import threading

import pytest

from xtoolkit.future import Future, wait_all_futures


def test_get_returns_result():
    future = Future(lambda: 42)
    assert future.get(5) == 42
    assert future.done()


def test_get_reraises_error():
    def boom():
        raise ValueError("bad")

    future = Future(boom)
    with pytest.raises(ValueError, match="bad"):
        future.get(5)
    assert future.done()


def test_get_times_out_while_running():
    gate = threading.Event()
    future = Future(lambda: gate.wait(5))
    with pytest.raises(TimeoutError):
        future.get(0.01)
    assert not future.done()
    gate.set()
    assert future.get(5) is True


def test_wait_all_futures_ignores_errors():
    def boom():
        raise RuntimeError("x")

    futures = [Future(lambda: 1), Future(boom), Future(lambda: 2)]
    wait_all_futures(*futures, timeout=5)
    assert all(f.done() for f in futures)


def test_wait_all_futures_respects_timeout():
    gate = threading.Event()
    slow = Future(lambda: gate.wait(5))
    wait_all_futures(slow, timeout=0.01)
    assert not slow.done()
    gate.set()
    assert slow.get(5) is True