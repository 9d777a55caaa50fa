import enum
import logging
import threading
from typing import Callable, Optional
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from linkscout.domain.blocklist import Blocklist
from linkscout.domain.crawl_result import CrawlResult
from linkscout.domain.crawl_state import CrawlState
from linkscout.exceptions import BadStatusError, HtmlParseError, HttpFetchError, InvalidSeedError
from linkscout.services.concurrency import AdmissionGate, OutstandingCounter
from linkscout.services.domain_report_writer import DOMAIN_LIST_FILE, SNAPSHOT_DOMAINS_FILE, DomainReportWriter
from linkscout.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)


class TaskOutcome(enum.Enum):
    BLOCKED = "blocked"
    FETCH_FAILED = "fetch_failed"
    PARSE_FAILED = "parse_failed"
    ERRORED = "errored"
    COMPLETED = "completed"


def _host(parts: SplitResult) -> str:
    # netloc minus any userinfo; the port stays part of the host
    return parts.netloc.rpartition("@")[2]


def _start_thread(target: Callable[[str], None], url: str) -> None:
    threading.Thread(target=target, args=(url,), name=f"linkscout:{url}", daemon=True).start()


class LinkCollector:
    """Recursively collects links starting from a seed URL.

    Each newly discovered URL gets its own task (a daemon thread by
    default). Fan-out is unbounded; the admission gate only limits how many
    tasks are fetching at the same moment. A collector runs one crawl: build
    a new one per seed.
    """

    def __init__(
        self,
        *,
        fetcher,
        blocklist: Blocklist,
        report_writer: DomainReportWriter,
        max_concurrent: int,
        link_extractor: Optional[LinkExtractor] = None,
        spawn: Optional[Callable[[Callable[[str], None], str], None]] = None,
        snapshot_every_page: bool = True,
    ):
        self.fetcher = fetcher
        self.blocklist = blocklist
        self.report_writer = report_writer
        self.link_extractor = link_extractor or LinkExtractor()
        self.snapshot_every_page = snapshot_every_page
        self.gate = AdmissionGate(max_concurrent)
        self.outstanding = OutstandingCounter()
        self.state = CrawlState()
        self._spawn = spawn or _start_thread

    def collect(self, seed_url: str, timeout: Optional[float] = None) -> CrawlResult:
        """Crawl everything reachable from `seed_url` and write the final domain dump.

        Blocks until every task has finished (or `timeout` elapses).
        """
        try:
            parts = urlsplit(seed_url)
        except ValueError as e:
            raise InvalidSeedError(seed_url, str(e)) from e
        host = _host(parts)
        if not parts.scheme or not host:
            raise InvalidSeedError(seed_url)

        if self.blocklist.contains(host):
            logger.info("Host %s found in blocklist, skipping", host)
        else:
            seed = urlunsplit(parts)
            if self.state.record_if_new(seed, host, on_recorded=self._reserve):
                self._start(seed)

        completed = self.outstanding.wait(timeout)
        if not completed:
            logger.warning("Crawl from %s still has %d tasks outstanding after %ss", seed_url, self.outstanding.value, timeout)
        self.report_writer.save_domain_list(self.state, DOMAIN_LIST_FILE)

        failures = sum(
            self.state.outcome_count(o)
            for o in (TaskOutcome.FETCH_FAILED, TaskOutcome.PARSE_FAILED, TaskOutcome.ERRORED)
        )
        result = CrawlResult(
            urls_visited=self.state.visited_count,
            domains_found=self.state.domain_count,
            pages_fetched=self.state.outcome_count(TaskOutcome.COMPLETED),
            failures=failures,
            blocked=self.state.outcome_count(TaskOutcome.BLOCKED),
            completed=completed,
        )
        logger.info("Crawl from %s finished: %s", seed_url, result)
        return result

    def _reserve(self, url: str) -> None:
        # Runs under the crawl-state lock, right after `url` was recorded.
        self.outstanding.add()

    def _start(self, url: str) -> None:
        # Called outside the lock, so `spawn` may also run the task inline.
        try:
            self._spawn(self.collect_links, url)
        except RuntimeError:
            logger.exception("Could not start task for %s", url)
            self.outstanding.done()

    def collect_links(self, url: str) -> None:
        """Task body for one recorded URL. Always releases its outstanding count."""
        outcome = TaskOutcome.ERRORED
        try:
            outcome = self._collect(url)
        except Exception:
            logger.exception("Unexpected error while collecting links from %s", url)
        finally:
            self.state.count_outcome(outcome)
            self.outstanding.done()

    def _collect(self, url: str) -> TaskOutcome:
        host = _host(urlsplit(url))
        if self.blocklist.contains(host):
            logger.info("Host %s found in blocklist, skipping", host)
            return TaskOutcome.BLOCKED

        with self.gate.admit():
            try:
                body = self.fetcher.fetch(url)
            except (HttpFetchError, BadStatusError) as e:
                logger.warning("Fetch failed for %s: %s", url, e)
                return TaskOutcome.FETCH_FAILED
            try:
                document = self.link_extractor.parse(body, url)
            except HtmlParseError as e:
                logger.warning("Parse failed for %s: %s", url, e)
                return TaskOutcome.PARSE_FAILED

        spawned = 0
        for link in self.link_extractor.extract(document):
            if self.add_link(link, url):
                spawned += 1
        logger.info("Fetched %s -> %d new links", url, spawned)

        if self.snapshot_every_page:
            self.report_writer.save_visited_links(self.state, host)
            self.report_writer.save_domain_list(self.state, SNAPSHOT_DOMAINS_FILE)
        return TaskOutcome.COMPLETED

    def add_link(self, link: str, base_url: str) -> bool:
        """Resolve `link` against `base_url` and launch a task if it is new.

        Returns True if this call recorded the URL and spawned its task.
        """
        try:
            parts = urlsplit(link.strip())
        except ValueError:
            logger.debug("Skipping (unparseable) %r on %s", link, base_url)
            return False

        host = _host(parts)
        if host and self.blocklist.contains(host):
            logger.debug("Skipping (blocklisted) %s", link)
            return False

        if not host or not parts.scheme:
            try:
                parts = urlsplit(urljoin(base_url, link.strip()))
            except ValueError:
                logger.debug("Skipping (unresolvable) %r on %s", link, base_url)
                return False
            host = _host(parts)
            if not host:
                logger.debug("Skipping (no host) %s", link)
                return False

        url = urlunsplit(parts)
        if not self.state.record_if_new(url, host, on_recorded=self._reserve):
            logger.debug("Skipping (visited) %s", url)
            return False
        self._start(url)
        return True
