"""Domain objects for LinkScout - explicit re-exports to satisfy linters."""
from .blocklist import Blocklist as Blocklist
from .config import CrawlSettings as CrawlSettings
from .crawl_result import CrawlResult as CrawlResult
from .crawl_state import CrawlSnapshot as CrawlSnapshot
from .crawl_state import CrawlState as CrawlState
from .http_response import HttpResponse as HttpResponse

__all__ = ["Blocklist", "CrawlSettings", "CrawlResult", "CrawlSnapshot", "CrawlState", "HttpResponse"]
