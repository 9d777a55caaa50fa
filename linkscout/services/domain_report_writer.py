import json
import logging
import os
import re
from typing import Iterable, Optional

from linkscout.config import DEFAULT_DENYLIST_KEYWORDS
from linkscout.domain.blocklist import Blocklist
from linkscout.domain.crawl_state import CrawlState

logger = logging.getLogger(__name__)

SNAPSHOT_DOMAINS_FILE = "visited_domains.txt"
DOMAIN_LIST_FILE = "visited_domains.json"
BAD_DOMAINS_FILE = "bad_domains.txt"
EXEMPT_SUBSTRING = "downloads"

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')


class DomainReportWriter:
    """Writes crawl state to the output directory.

    Every write snapshots the whole shared state while holding the crawl
    lock, so a dump never mixes two moments of the crawl.
    """

    def __init__(self, blocklist: Blocklist, denylist_keywords: Optional[Iterable[str]] = None, output_dir: str = "."):
        self.blocklist = blocklist
        self.denylist_keywords = tuple(denylist_keywords if denylist_keywords is not None else DEFAULT_DENYLIST_KEYWORDS)
        self.output_dir = output_dir

    def _path(self, filename: str) -> str:
        return os.path.join(self.output_dir, filename)

    def is_bad_domain(self, domain: str) -> bool:
        if EXEMPT_SUBSTRING in domain:
            return False
        return any(keyword in domain for keyword in self.denylist_keywords)

    def visited_links_filename(self, host: str) -> str:
        return _UNSAFE_FILENAME_CHARS.sub("_", host) + ".txt"

    def save_visited_links(self, state: CrawlState, host: str) -> Optional[str]:
        """Dump every visited URL, one per line, to `<host>.txt`.

        Returns the path written, or None if the write failed.
        """
        path = self._path(self.visited_links_filename(host))
        with state.frozen() as snap:
            try:
                with open(path, "w", encoding="utf-8") as f:
                    for link in snap.visited_urls:
                        f.write(link + "\n")
            except OSError as e:
                logger.error("Error writing visited links to %s: %s", path, e)
                return None
        logger.info("Visited links saved to %s", path)
        return path

    def save_domain_list(self, state: CrawlState, filename: str = DOMAIN_LIST_FILE) -> Optional[str]:
        """Dump non-blocklisted domains as JSON and flagged ones to bad_domains.txt.

        Returns the domain-list path, or None if either write failed.
        """
        path = self._path(filename)
        bad_path = self._path(BAD_DOMAINS_FILE)
        with state.frozen() as snap:
            domains = sorted(d for d in snap.domains if not self.blocklist.contains(d))
            bad_domains = sorted(d for d in snap.domains if self.is_bad_domain(d))
            try:
                with open(path, "w", encoding="utf-8") as f:
                    json.dump(domains, f, indent=2)
            except OSError as e:
                logger.error("Error writing domain list to %s: %s", path, e)
                return None
            try:
                with open(bad_path, "w", encoding="utf-8") as f:
                    f.write("\n".join(bad_domains))
            except OSError as e:
                logger.error("Error writing bad domains to %s: %s", bad_path, e)
                return None
        logger.info("Visited domains saved to %s (%d domains, %d flagged)", path, len(domains), len(bad_domains))
        return path
