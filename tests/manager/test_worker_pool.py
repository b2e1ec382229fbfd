import threading

import pytest

from configmanager import WorkerPool


@pytest.mark.unit
def test_submit_runs_work_on_named_threads():
    pool = WorkerPool(max_workers=2, thread_name_prefix="TestWorker")

    future = pool.submit(lambda: threading.current_thread().name)

    assert future.result(timeout=5).startswith("TestWorker")
    pool.shutdown()


@pytest.mark.unit
def test_finished_work_is_no_longer_in_flight():
    pool = WorkerPool(max_workers=1)

    pool.submit(lambda: None).result(timeout=5)

    assert pool.in_flight() == []
    pool.shutdown()


@pytest.mark.unit
def test_drain_waits_for_running_work():
    pool = WorkerPool(max_workers=1)
    release = threading.Event()
    future = pool.submit(release.wait, 5)

    release.set()

    assert pool.drain(timeout=5) is True
    assert future.done()


@pytest.mark.unit
def test_drain_times_out_and_terminate_cancels_queued_work():
    pool = WorkerPool(max_workers=1)
    release = threading.Event()
    running = pool.submit(release.wait, 5)
    queued = pool.submit(lambda: "never")

    assert pool.drain(timeout=0.1) is False

    # Queued work is cancelled before the running task is released
    threading.Timer(0.2, release.set).start()
    assert pool.terminate(timeout=5) is True
    assert running.result(timeout=5) is True
    assert queued.cancelled()


@pytest.mark.unit
def test_submit_after_drain_raises():
    pool = WorkerPool(max_workers=1)
    pool.drain(timeout=1)

    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


@pytest.mark.unit
def test_workers_are_daemon_threads():
    pool = WorkerPool(max_workers=1)

    assert pool.submit(lambda: threading.current_thread().daemon).result(timeout=5) is True
    pool.shutdown()


@pytest.mark.unit
def test_terminate_abandons_work_that_never_finishes():
    pool = WorkerPool(max_workers=1)
    blocker = threading.Event()
    stuck = pool.submit(blocker.wait)

    assert pool.drain(timeout=0.1) is False
    assert pool.terminate(timeout=0.1) is False
    assert not stuck.done()

    blocker.set()
    assert stuck.result(timeout=5) is True
