import threading
import time

import pytest

from xtoolkit.sync2 import (
    AtomicBool,
    AtomicDuration,
    AtomicInt,
    AtomicString,
    Mutex,
    Semaphore,
)


def test_atomic_string():
    s = AtomicString()
    assert s.get() == ""
    s.set("a")
    assert s.get() == "a"
    assert s.compare_and_swap("b", "c") is False
    assert s.get() == "a"
    assert s.compare_and_swap("a", "c") is True
    assert s.get() == "c"


def test_atomic_bool():
    b = AtomicBool(True)
    assert b.get() is True
    b.set(False)
    assert b.get() is False
    b.set(True)
    assert b.get() is True


def test_atomic_bool_compare_and_swap():
    b = AtomicBool(False)
    assert b.compare_and_swap(True, False) is False
    assert b.compare_and_swap(False, True) is True
    assert b.get() is True


def test_atomic_int_add_and_swap():
    i = AtomicInt(5)
    assert i.add(3) == 8
    assert i.get() == 8
    assert i.compare_and_swap(7, 1) is False
    assert i.compare_and_swap(8, 1) is True
    assert i.get() == 1


def test_atomic_int_concurrent_adds():
    i = AtomicInt()
    threads = [threading.Thread(target=lambda: [i.add(1) for _ in range(1000)]) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert i.get() == 8000


def test_atomic_duration():
    d = AtomicDuration(1.5)
    assert d.add(0.5) == 2.0
    d.set(3.0)
    assert d.get() == 3.0
    assert d.compare_and_swap(3.0, 4.0) is True
    assert d.get() == 4.0


def test_sema_no_timeout():
    s = Semaphore(1, 0)
    s.acquire()
    released = []

    def release_later():
        time.sleep(0.01)
        released.append(True)
        s.release()

    threading.Thread(target=release_later).start()
    assert s.acquire() is True
    assert released == [True]


def test_sema_timeout():
    s = Semaphore(1, 0.05)
    s.acquire()

    def release_later():
        time.sleep(0.2)
        s.release()

    threading.Thread(target=release_later).start()
    assert s.acquire() is False
    time.sleep(0.3)
    assert s.acquire() is True


def test_sema_try_acquire():
    s = Semaphore(1, 0)
    assert s.try_acquire() is True
    assert s.try_acquire() is False
    s.release()
    assert s.try_acquire() is True


def test_sema_size_and_over_release():
    s = Semaphore(2, 0)
    assert s.size() == 2
    s.acquire()
    assert s.size() == 1
    s.release()
    with pytest.raises(ValueError):
        s.release()


def test_mutex_try_lock_and_unlock():
    m = Mutex()
    assert m.try_lock() is True
    assert m.try_lock() is False
    m.unlock()
    assert m.try_lock() is True
    m.unlock()


def test_mutex_unlock_unlocked_raises():
    m = Mutex()
    with pytest.raises(RuntimeError, match="unlock of unlocked mutex"):
        m.unlock()