from unittest.mock import Mock

import pytest

from linkscout.domain.http_response import HttpResponse
from linkscout.exceptions import BadStatusError, HttpFetchError
from linkscout.services.fetcher import PageFetcher


def test_ok_response_returns_body():
    http_service = Mock()
    http_service.fetch.return_value = HttpResponse(200, "<html></html>")
    assert PageFetcher(http_service).fetch("https://a.test/") == "<html></html>"


@pytest.mark.parametrize("status", [201, 204, 301, 404, 500])
def test_non_200_status_raises(status):
    http_service = Mock()
    http_service.fetch.return_value = HttpResponse(status, "body")
    with pytest.raises(BadStatusError) as excinfo:
        PageFetcher(http_service).fetch("https://a.test/")
    assert excinfo.value.status_code == status


def test_transport_errors_propagate():
    http_service = Mock()
    http_service.fetch.side_effect = HttpFetchError("https://a.test/", OSError("boom"))
    with pytest.raises(HttpFetchError):
        PageFetcher(http_service).fetch("https://a.test/")
