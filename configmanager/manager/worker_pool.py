import os
import queue
from concurrent.futures import Executor, Future, wait
from threading import Lock, Semaphore, Thread
from typing import Callable

from loguru import logger


class WorkerPool(Executor):
    """Thread pool that keeps track of in-flight work.

    Workers are daemon threads, so work abandoned after a timed-out shutdown
    does not keep the interpreter alive. Tracking the submitted futures lets
    shutdown wait for them with a bound.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        thread_name_prefix: str = "ConfigManager-Worker",
    ):
        if max_workers is None:
            max_workers = min(32, (os.cpu_count() or 1) + 4)
        if max_workers <= 0:
            raise ValueError("max_workers must be greater than 0")

        self._max_workers = max_workers
        self._thread_name_prefix = thread_name_prefix
        self._work_queue: queue.SimpleQueue = queue.SimpleQueue()
        self._idle = Semaphore(0)
        self._threads: set[Thread] = set()
        self._in_flight: set[Future] = set()
        self._shutdown = False
        self._lock = Lock()

    def submit(self, fn: Callable, /, *args, **kwargs) -> Future:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new futures after shutdown")

            future = Future()
            self._work_queue.put((future, fn, args, kwargs))
            self._in_flight.add(future)
            self._adjust_thread_count()
        future.add_done_callback(self._discard)
        return future

    def _adjust_thread_count(self) -> None:
        # An idle worker will pick the item up
        if self._idle.acquire(timeout=0):
            return

        if len(self._threads) < self._max_workers:
            thread = Thread(
                target=self._worker,
                name=f"{self._thread_name_prefix}_{len(self._threads)}",
                daemon=True,
            )
            thread.start()
            self._threads.add(thread)

    def _worker(self) -> None:
        while True:
            item = self._work_queue.get()
            if item is None:
                # Wake the next worker
                self._work_queue.put(None)
                return

            future, fn, args, kwargs = item
            if future.set_running_or_notify_cancel():
                try:
                    result = fn(*args, **kwargs)
                except BaseException as exc:
                    future.set_exception(exc)
                else:
                    future.set_result(result)
            del item, future
            self._idle.release()

    def _discard(self, future: Future) -> None:
        with self._lock:
            self._in_flight.discard(future)

    def in_flight(self) -> list[Future]:
        with self._lock:
            return list(self._in_flight)

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        with self._lock:
            self._shutdown = True
            queued = self._take_queued() if cancel_futures else []
            self._work_queue.put(None)
            threads = list(self._threads)

        # Cancelling runs done callbacks, which take the lock
        for future in queued:
            future.cancel()
        if queued:
            logger.debug(f"Cancelled {len(queued)} queued tasks")

        if wait:
            for thread in threads:
                thread.join()

    def _take_queued(self) -> list[Future]:
        queued = []
        while True:
            try:
                item = self._work_queue.get_nowait()
            except queue.Empty:
                return queued
            if item is not None:
                queued.append(item[0])

    def drain(self, timeout: float) -> bool:
        """Stop accepting work and wait up to ``timeout`` seconds for in-flight work.

        Returns:
            True if all work finished in time
        """
        self.shutdown(wait=False)
        _, not_done = wait(self.in_flight(), timeout=timeout)
        return not not_done

    def terminate(self, timeout: float) -> bool:
        """Cancel queued work and wait up to ``timeout`` seconds for running work.

        Work still running afterwards is abandoned on its daemon thread.

        Returns:
            True if nothing is left running
        """
        self.shutdown(wait=False, cancel_futures=True)
        _, not_done = wait(self.in_flight(), timeout=timeout)
        return not not_done
