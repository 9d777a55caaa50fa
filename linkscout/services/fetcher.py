from __future__ import annotations

from typing import Protocol

from linkscout.domain.http_response import HttpResponse
from linkscout.exceptions import BadStatusError


class Fetcher(Protocol):
    """Fetch a URL and return its body.

    Implementations raise `HttpFetchError` on transport failure and
    `BadStatusError` for anything but a 200. Nothing is retried.
    """

    def fetch(self, url: str) -> str: ...


class PageFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> str:
        response: HttpResponse = self._http_service.fetch(url)
        if response.status_code != 200:
            raise BadStatusError(url, response.status_code)
        return response.text
