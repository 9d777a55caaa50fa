from linkscout.services.http_service import HttpService
from linkscout.exceptions import HttpFetchError
from unittest.mock import Mock
import pytest
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'


def test_fetch_sends_user_agent_and_no_timeout_by_default():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    http.fetch('http://example.com')
    mock_http_client.assert_called_once_with(
        'http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=None
    )


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.ConnectionError("refused")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(HttpFetchError) as excinfo:
        http.fetch('http://example.com')
    assert "http://example.com" in str(excinfo.value)
    assert isinstance(excinfo.value.original, requests.exceptions.ConnectionError)


def test_fetch_content_type_from_headers():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = '<html>test</html>'
    mock_http_client.return_value.headers = {'Content-Type': 'text/html; charset=utf-8'}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type == 'text/html; charset=utf-8'


def test_fetch_bubbles_unexpected_exceptions():
    """Non-requests exceptions are bugs and must not be disguised as fetch errors."""
    mock_http_client = Mock()
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.text = 'test'
    mock_response.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    mock_http_client.return_value = mock_response
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(RuntimeError, match="Real bug"):
        http.fetch('http://example.com')
