"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from linkscout import config as env
from linkscout.domain.blocklist import Blocklist
from linkscout.services.domain_report_writer import DomainReportWriter
from linkscout.services.fetcher import PageFetcher
from linkscout.services.http_service import HttpService
from linkscout.services.link_collector import LinkCollector
from linkscout.services.link_extractor import LinkExtractor


# Environment variables used by the container (read via `linkscout.config` helpers).
#
# USER_AGENT (str, default: "LinkScout/0.1")
#   User-Agent header for every outbound fetch.
#
# HTTP_TIMEOUT (float seconds | optional)
#   Per-request timeout. Unset means no timeout is passed to `requests`.
#
# LINKSCOUT_MAX_CONCURRENT (int, default: 5)
#   How many fetches may be in flight at once. Discovery tasks are not capped.
#
# LINKSCOUT_BLOCKLIST_FILE (str, default: "cleaned_hosts.txt")
#   Newline-separated host list, usually produced by `run.py clean-hosts`.
#
# LINKSCOUT_OUTPUT_DIR (str, default: ".")
#   Directory receiving `<host>.txt`, the domain dumps and `bad_domains.txt`.
#
# LINKSCOUT_DENYLIST_KEYWORDS (comma list, default: see `config.DEFAULT_DENYLIST_KEYWORDS`)
#   Substrings that flag a domain for `bad_domains.txt`.
#
# LINKSCOUT_SNAPSHOT_EVERY_PAGE (bool, default: true)
#   Rewrite the visited-links and domain dumps after every fetched page.
ENV = {
    "user_agent": env.USER_AGENT,
    "http_timeout": env.HTTP_TIMEOUT,
    "max_concurrent": env.MAX_CONCURRENT,
    "blocklist_file": env.BLOCKLIST_FILE,
    "output_dir": env.OUTPUT_DIR,
    "denylist_keywords": env.denylist_keywords(),
    "snapshot_every_page": env.snapshot_every_page(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for LinkScout."""

    config = providers.Configuration(default=ENV)

    # One pooled session shared by every fetch in the process.
    http_session = providers.Singleton(
        requests.Session
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.user_agent.as_(str),
        http_client=http_session.provided.get,
        timeout=config.http_timeout,
    )

    page_fetcher = providers.Singleton(
        PageFetcher,
        http_service=http_service,
    )

    link_extractor = providers.Singleton(
        LinkExtractor
    )

    blocklist = providers.Singleton(
        Blocklist.from_file,
        config.blocklist_file,
    )

    report_writer = providers.Singleton(
        DomainReportWriter,
        blocklist=blocklist,
        denylist_keywords=config.denylist_keywords,
        output_dir=config.output_dir,
    )

    # One collector per crawl: each owns its own state, gate and counter.
    link_collector = providers.Factory(
        LinkCollector,
        fetcher=page_fetcher,
        blocklist=blocklist,
        report_writer=report_writer,
        max_concurrent=config.max_concurrent.as_(int),
        link_extractor=link_extractor,
        snapshot_every_page=config.snapshot_every_page.as_(bool),
    )
