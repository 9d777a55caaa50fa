import requests
from typing import Callable, Optional

from linkscout.domain.http_response import HttpResponse
from linkscout.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests can
    pass a Mock and no request ever leaves the process. Redirects follow the
    client's defaults. `timeout=None` leaves the client's own behaviour alone.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: Optional[float] = None):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Issue one GET and return status code, body text and Content-Type."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct)
