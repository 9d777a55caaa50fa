from __future__ import annotations

import threading
from collections import Counter
from contextlib import contextmanager
from typing import Callable, Hashable, Iterator, NamedTuple, Optional, Set


class CrawlSnapshot(NamedTuple):
    """Point-in-time copy of the shared crawl sets."""
    visited_urls: frozenset
    domains: frozenset


class CrawlState:
    """Shared mutable state of one crawl, guarded by a single exclusive lock.

    The visited set is the dedup point: a URL is recorded when it is first
    discovered, not when it is fetched, so at most one task is ever launched
    per distinct URL. Both sets only grow.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()
        self._domains: Set[str] = set()
        self._outcomes: Counter = Counter()

    def record_if_new(self, url: str, host: str, on_recorded: Optional[Callable[[str], None]] = None) -> bool:
        """Atomically record `url` and its host if `url` was not seen before.

        `on_recorded(url)` runs while the lock is still held, so the decision
        to launch follow-up work cannot race with another discoverer.
        Returns True only for the first caller.
        """
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            self._domains.add(host)
            if on_recorded is not None:
                on_recorded(url)
            return True

    @contextmanager
    def frozen(self) -> Iterator[CrawlSnapshot]:
        """Hold the lock for the whole block and yield a snapshot of both sets.

        Writers use this so the dump they produce is consistent and no task
        records anything while the file is being written.
        """
        with self._lock:
            yield CrawlSnapshot(frozenset(self._visited), frozenset(self._domains))

    def snapshot(self) -> CrawlSnapshot:
        with self.frozen() as snap:
            return snap

    def count_outcome(self, outcome: Hashable) -> None:
        with self._lock:
            self._outcomes[outcome] += 1

    def outcome_count(self, outcome: Hashable) -> int:
        with self._lock:
            return self._outcomes[outcome]

    @property
    def visited_count(self) -> int:
        with self._lock:
            return len(self._visited)

    @property
    def domain_count(self) -> int:
        with self._lock:
            return len(self._domains)
