"""Crawl result data model."""
from typing import NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Lets callers log what a finished crawl touched without re-reading the
    dump files.
    """
    urls_visited: int
    """Number of distinct URLs recorded as visited (seed included)"""

    domains_found: int
    """Number of distinct hosts in the domain set, blocklisted ones included"""

    pages_fetched: int
    """Number of tasks that fetched and parsed their page"""

    failures: int
    """Number of tasks abandoned on a fetch or parse failure"""

    blocked: int
    """Number of tasks skipped because their host is blocklisted"""

    completed: bool
    """False if the caller's wait timed out before the crawl drained"""
