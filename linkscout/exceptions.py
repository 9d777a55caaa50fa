"""Custom exceptions for LinkScout services."""


class LinkScoutError(Exception):
    """Base class for errors raised by LinkScout."""


class HttpFetchError(LinkScoutError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class BadStatusError(LinkScoutError):
    """Raised when a fetch completes with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Received status code {status_code} for {url}")


class HtmlParseError(LinkScoutError):
    """Raised when a fetched body cannot be parsed as HTML."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Error parsing HTML from {url}: {original}")


class InvalidSeedError(LinkScoutError):
    """Raised when the start URL cannot be parsed or carries no host."""

    def __init__(self, url: str, reason: str = "is not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Start URL '{url}' {reason}")
