import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class AdmissionGate:
    """Bounds how many fetches may be in flight at once.

    A task holds a slot only around its network round-trip and parse, not
    around its whole recursive subtree, so the limit caps active fetches
    rather than active tasks.
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError(f"admission limit must be positive, got {limit}")
        self.limit = int(limit)
        self._slots = threading.BoundedSemaphore(self.limit)
        self._count_lock = threading.Lock()
        self._in_flight = 0

    @contextmanager
    def admit(self) -> Iterator[None]:
        self._slots.acquire()
        with self._count_lock:
            self._in_flight += 1
        try:
            yield
        finally:
            with self._count_lock:
                self._in_flight -= 1
            self._slots.release()

    @property
    def in_flight(self) -> int:
        with self._count_lock:
            return self._in_flight


class OutstandingCounter:
    """Counts unfinished crawl tasks; waiters wake when it drops to zero.

    The discoverer calls `add()` before launching a task and the task calls
    `done()` once its own fan-out is finished.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._value = 0

    def add(self, n: int = 1) -> None:
        with self._cond:
            if self._value + n < 0:
                raise ValueError("outstanding counter cannot go negative")
            self._value += n
            if self._value == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    @property
    def value(self) -> int:
        with self._cond:
            return self._value

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the counter is zero. Returns False if `timeout` elapsed first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._value == 0, timeout=timeout)
