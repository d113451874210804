import threading
import time

import pytest

from portkit.osport import (
    INFINITE_DELAY,
    MAX_DELAY,
    Event,
    Mutex,
    Semaphore,
    TaskParameters,
    create_task,
    delay_task,
    get_system_time,
    get_system_time64,
    lsb,
    msb,
    time_compare,
)


def test_infinite_and_max_delay():
    assert INFINITE_DELAY == 0xFFFFFFFF
    assert MAX_DELAY == INFINITE_DELAY // 2
    assert time_compare(INFINITE_DELAY, 0) == -1
    assert time_compare(MAX_DELAY, 0) == MAX_DELAY


@pytest.mark.parametrize("t, d", [(0, 5), (1000, 250), (123456, 1)])
def test_time_compare_difference(t, d):
    assert time_compare(t + d, t) == d
    assert time_compare(t, t + d) == -d


def test_time_compare_across_wrap():
    assert time_compare(4, 0xFFFFFFFF) == 5
    assert time_compare(0xFFFFFFFF, 4) == -5


@pytest.mark.parametrize("x", [0, 0x1234, 0xFFFF, 0xABCDEF])
def test_lsb_msb_recombine(x):
    assert lsb(x) | (msb(x) << 8) == x & 0xFFFF
    assert 0 <= lsb(x) <= 0xFF and 0 <= msb(x) <= 0xFF


def test_task_parameters_defaults():
    params = TaskParameters()
    assert (params.stack_size, params.priority) == (0, 0)


def test_create_task_runs_code_with_arg():
    seen = []
    thread = create_task("worker", seen.append, "payload", TaskParameters())
    thread.join(2)
    assert seen == ["payload"]
    assert thread.name == "worker"


def test_create_task_rejects_non_callable():
    with pytest.raises(TypeError):
        create_task("bad", None, None, None)


def test_delay_task_blocks():
    start = get_system_time64()
    delay_task(30)
    elapsed = get_system_time64() - start
    assert elapsed >= 25


def test_delay_task_negative():
    with pytest.raises(ValueError):
        delay_task(-1)


def test_system_time_monotonic_and_32_bit():
    first = get_system_time64()
    second = get_system_time64()
    assert second >= first
    assert 0 <= get_system_time() <= 0xFFFFFFFF


def test_event_auto_reset():
    event = Event()
    assert event.wait(0) is False
    event.set()
    assert event.wait(0) is True
    assert event.wait(0) is False


def test_event_reset_clears_signal():
    event = Event()
    event.set()
    event.reset()
    assert event.wait(10) is False


def test_event_set_from_isr_signals():
    event = Event()
    assert event.set_from_isr() is False
    assert event.wait(0) is True


def test_event_wakes_infinite_waiter():
    event = Event()
    results = []
    waiter = threading.Thread(target=lambda: results.append(event.wait(INFINITE_DELAY)))
    waiter.start()
    time.sleep(0.02)
    event.set()
    waiter.join(2)
    assert results == [True]
    # The waiter consumed the signal, so the event is back to non-signaled.
    assert event.wait(0) is False


def test_event_wait_times_out():
    event = Event()
    start = time.monotonic()
    assert event.wait(30) is False
    assert time.monotonic() - start >= 0.025


def test_semaphore_counts():
    sem = Semaphore(2)
    assert sem.wait(0) is True
    assert sem.wait(0) is True
    assert sem.wait(0) is False
    sem.release()
    assert sem.wait(10) is True


def test_semaphore_rejects_zero_count():
    with pytest.raises(ValueError):
        Semaphore(0)


def test_semaphore_over_release():
    sem = Semaphore(1)
    with pytest.raises(ValueError):
        sem.release()


def test_mutex_excludes_other_task():
    mutex = Mutex()
    counter = []

    def worker(_):
        with mutex:
            counter.append(1)

    mutex.acquire()
    thread = create_task("locker", worker, None, None)
    time.sleep(0.03)
    assert thread.is_alive() is True
    assert counter == []
    mutex.release()
    thread.join(2)
    assert thread.is_alive() is False
    assert counter == [1]


def test_mutex_is_reentrant():
    mutex = Mutex()
    with mutex as held:
        with mutex:
            assert held is mutex
    with pytest.raises(RuntimeError):
        mutex.release()